"""Unit tests for comment tree construction and counting."""

from uuid import uuid4

from forum.domain.model import CommentNode
from forum.domain.service import build_comment_tree, count_all_children, count_comments
from forum.domain.value import CommentId, PostId
from tests.conftest import make_comment


def _ids(nodes: list[CommentNode]) -> list[CommentId]:
    return [node.id for node in nodes]


def _walk(nodes: list[CommentNode]):
    for node in nodes:
        yield node
        yield from _walk(node.children)


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_list_builds_empty_forest(self):
        """No comments means no roots and a total of zero."""
        roots = build_comment_tree([])

        assert roots == []
        assert count_comments(roots) == 0

    def test_nested_chain_with_orphan(self):
        """A -> B -> C nest, D with a missing parent becomes a root."""
        # Arrange
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent_id=a.id, minutes=1)
        c = make_comment(post_id, parent_id=b.id, minutes=2)
        d = make_comment(post_id, parent_id=CommentId(uuid4()), minutes=3)

        # Act
        roots = build_comment_tree([a, b, c, d])

        # Assert
        assert _ids(roots) == [a.id, d.id]
        assert _ids(roots[0].children) == [b.id]
        assert _ids(roots[0].children[0].children) == [c.id]
        assert roots[1].children == []
        assert count_comments(roots) == 4

    def test_siblings_keep_input_order(self):
        """Replies and roots appear in the order they were listed."""
        post_id = PostId(uuid4())
        root = make_comment(post_id, minutes=0)
        first = make_comment(post_id, parent_id=root.id, minutes=1)
        other_root = make_comment(post_id, minutes=2)
        second = make_comment(post_id, parent_id=root.id, minutes=3)
        third = make_comment(post_id, parent_id=root.id, minutes=4)

        roots = build_comment_tree([root, first, other_root, second, third])

        assert _ids(roots) == [root.id, other_root.id]
        assert _ids(roots[0].children) == [first.id, second.id, third.id]

    def test_reply_listed_before_parent_is_still_attached(self):
        """Attachment does not depend on the parent coming first."""
        post_id = PostId(uuid4())
        parent = make_comment(post_id, minutes=5)
        reply = make_comment(post_id, parent_id=parent.id, minutes=0)

        roots = build_comment_tree([reply, parent])

        assert _ids(roots) == [parent.id]
        assert _ids(roots[0].children) == [reply.id]

    def test_every_comment_appears_exactly_once(self):
        """The forest holds one node per input comment."""
        post_id = PostId(uuid4())
        comments = [make_comment(post_id, minutes=0)]
        for i in range(1, 30):
            parent = comments[(i * 7) % len(comments)] if i % 4 else None
            comments.append(
                make_comment(
                    post_id,
                    parent_id=parent.id if parent else None,
                    minutes=i,
                )
            )

        roots = build_comment_tree(comments)

        seen = _ids(list(_walk(roots)))
        assert len(seen) == len(comments)
        assert set(seen) == {c.id for c in comments}
        assert count_comments(roots) == len(comments)

    def test_reply_is_child_of_its_parent(self):
        """Each resolvable reply sits in its parent's children."""
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent_id=a.id, minutes=1)
        c = make_comment(post_id, parent_id=a.id, minutes=2)
        d = make_comment(post_id, parent_id=c.id, minutes=3)
        comments = [a, b, c, d]

        roots = build_comment_tree(comments)
        nodes = {node.id: node for node in _walk(roots)}

        for comment in comments:
            if comment.parent_id is not None:
                assert comment.id in _ids(nodes[comment.parent_id].children)

    def test_self_reference_becomes_root(self):
        """A comment naming itself as parent is treated as top-level."""
        post_id = PostId(uuid4())
        own_id = CommentId(uuid4())
        looped = make_comment(post_id, parent_id=own_id, comment_id=own_id)
        reply = make_comment(post_id, parent_id=own_id, minutes=1)

        roots = build_comment_tree([looped, reply])

        assert _ids(roots) == [own_id]
        assert _ids(roots[0].children) == [reply.id]
        assert count_comments(roots) == 2

    def test_parent_loop_is_broken_at_first_listed_member(self):
        """A -> B -> A keeps both comments, with A promoted to root."""
        post_id = PostId(uuid4())
        a_id = CommentId(uuid4())
        b_id = CommentId(uuid4())
        a = make_comment(post_id, parent_id=b_id, comment_id=a_id, minutes=0)
        b = make_comment(post_id, parent_id=a_id, comment_id=b_id, minutes=1)
        tail = make_comment(post_id, parent_id=b_id, minutes=2)

        roots = build_comment_tree([a, b, tail])

        assert _ids(roots) == [a_id]
        assert _ids(roots[0].children) == [b_id]
        assert _ids(roots[0].children[0].children) == [tail.id]
        assert count_comments(roots) == 3

    def test_rebuilding_same_list_gives_equal_forest(self):
        """Two builds from the same list are structurally equal."""
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent_id=a.id, minutes=1)
        c = make_comment(post_id, minutes=2)

        first = build_comment_tree([a, b, c])
        second = build_comment_tree([a, b, c])

        assert first == second
        assert first[0] is not second[0]

    def test_nodes_carry_comment_fields(self):
        """Nodes keep the content, author and timestamps of their comment."""
        post_id = PostId(uuid4())
        comment = make_comment(post_id, content="Hello there")

        (node,) = build_comment_tree([comment])

        assert node.content == "Hello there"
        assert node.author_id == comment.author_id
        assert node.created_at == comment.created_at
        assert node.post_id == post_id


class TestCountAllChildren:
    """Tests for count_all_children."""

    def test_leaf_has_no_children(self):
        post_id = PostId(uuid4())
        (node,) = build_comment_tree([make_comment(post_id)])

        assert count_all_children(node) == 0

    def test_direct_childless_replies_are_counted_once_each(self):
        """A root with k childless replies counts exactly k."""
        post_id = PostId(uuid4())
        root = make_comment(post_id)
        replies = [
            make_comment(post_id, parent_id=root.id, minutes=i) for i in range(1, 6)
        ]

        (node,) = build_comment_tree([root, *replies])

        assert count_all_children(node) == 5

    def test_counts_all_descendants(self):
        """Grandchildren count as well as children."""
        post_id = PostId(uuid4())
        a = make_comment(post_id, minutes=0)
        b = make_comment(post_id, parent_id=a.id, minutes=1)
        c = make_comment(post_id, parent_id=b.id, minutes=2)
        d = make_comment(post_id, parent_id=a.id, minutes=3)

        (root,) = build_comment_tree([a, b, c, d])

        assert count_all_children(root) == 3
        assert count_all_children(root.children[0]) == 1
