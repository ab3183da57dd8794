"""Comment tree construction.

Turns the flat comment list of a post into a forest of CommentNode.

Algorithm:
1. Create a node for every comment and index it by id
2. Walk the comments in input order again and attach each node to its
   parent, or make it a root when it has no parent or its parent is not
   in the batch (orphan)

Both passes are linear. Sibling order and root order follow the input
order, so the forest reads oldest-first when the store lists comments by
creation time.
"""

from collections.abc import Iterable, Sequence

import logfire

from forum.domain.model.comment import Comment, CommentNode
from forum.domain.value import CommentId


def build_comment_tree(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the reply forest for a flat list of comments.

    A comment whose parent is missing from the list is promoted to a root
    instead of being dropped. A comment that is its own parent, or any
    other parent loop inside the batch, is broken at the member listed
    first, which becomes a root. Every comment appears exactly once.

    Args:
        comments: Comments of one post, in display order

    Returns:
        Root nodes, each with its replies attached recursively
    """
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode.from_comment(comment) for comment in comments
    }
    loop_roots = _find_loop_roots(comments, nodes)

    roots: list[CommentNode] = []
    orphans = 0
    for comment in comments:
        node = nodes[comment.id]
        parent_id = comment.parent_id

        if parent_id is None or comment.id in loop_roots:
            roots.append(node)
        elif parent_id in nodes:
            nodes[parent_id].children.append(node)
        else:
            orphans += 1
            roots.append(node)

    if orphans or loop_roots:
        logfire.debug(
            "Promoted comments to roots",
            orphans=orphans,
            loops=len(loop_roots),
        )
    return roots


def _find_loop_roots(
    comments: Sequence[Comment], nodes: dict[CommentId, CommentNode]
) -> set[CommentId]:
    """Find the comments that must become roots to break parent loops.

    Follows parent pointers from every comment. Each id is settled once,
    so the walk stays linear overall.
    """
    position = {comment.id: index for index, comment in enumerate(comments)}
    settled: set[CommentId] = set()
    loop_roots: set[CommentId] = set()

    for comment in comments:
        path: list[CommentId] = []
        on_path: set[CommentId] = set()
        current = comment.id

        while current not in settled and current not in on_path:
            path.append(current)
            on_path.add(current)
            parent_id = nodes[current].parent_id
            if parent_id is None or parent_id not in nodes:
                break
            current = parent_id
        else:
            if current in on_path:
                loop = path[path.index(current) :]
                loop_roots.add(min(loop, key=position.__getitem__))

        settled.update(path)

    return loop_roots


def count_all_children(node: CommentNode) -> int:
    """Count every reply below a node, not counting the node itself."""
    return sum(1 + count_all_children(child) for child in node.children)


def count_comments(roots: Iterable[CommentNode]) -> int:
    """Count every comment in a forest."""
    return sum(1 + count_all_children(root) for root in roots)
