"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.repository import CommentRepository
from forum.domain.service import CommentService
from forum.domain.value import CommentId, PostId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment has no parent and is saved."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        author_id = UserId(uuid4())

        # Act
        result = await comment_service.create_comment(
            content="First!",
            post_id=post_id,
            author_id=author_id,
        )

        # Assert
        assert result.parent_id is None
        assert result.content == "First!"
        assert result.post_id == post_id
        assert result.author_id == author_id
        assert await comment_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Reply keeps a reference to its parent."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.save(make_comment(post_id))

        result = await comment_service.create_comment(
            content="A reply",
            post_id=post_id,
            author_id=UserId(uuid4()),
            parent_id=parent.id,
        )

        assert result.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_create_reply_with_missing_parent_raises_error(self, unit_env):
        """Replying to a comment that doesn't exist is rejected."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValueError, match="Parent comment not found"):
            await comment_service.create_comment(
                content="Reply",
                post_id=PostId(uuid4()),
                author_id=UserId(uuid4()),
                parent_id=CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_create_reply_to_comment_on_other_post_raises_error(
        self, unit_env
    ):
        """A reply must stay on the parent's post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(PostId(uuid4())))

        with pytest.raises(ValueError, match="does not belong to this post"):
            await comment_service.create_comment(
                content="Reply",
                post_id=PostId(uuid4()),
                author_id=UserId(uuid4()),
                parent_id=parent.id,
            )


class TestGetComments:
    """Tests for listing comments and building the tree."""

    @pytest.mark.asyncio
    async def test_comments_listed_oldest_first(self, unit_env):
        """Comments come back by creation time, only for the given post."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        later = await comment_repo.save(make_comment(post_id, minutes=10))
        earlier = await comment_repo.save(make_comment(post_id, minutes=1))
        await comment_repo.save(make_comment(PostId(uuid4())))

        comments = await comment_service.get_comments_for_post(post_id)

        assert [c.id for c in comments] == [earlier.id, later.id]

    @pytest.mark.asyncio
    async def test_get_comment_tree_nests_replies(self, unit_env):
        """The tree nests replies under their parents."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.save(make_comment(post_id, minutes=0))
        reply = await comment_repo.save(
            make_comment(post_id, parent_id=root.id, minutes=1)
        )

        roots = await comment_service.get_comment_tree(post_id)

        assert [r.id for r in roots] == [root.id]
        assert [c.id for c in roots[0].children] == [reply.id]

    @pytest.mark.asyncio
    async def test_get_comment_tree_for_post_without_comments(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comment_tree(PostId(uuid4())) == []


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """The author's delete removes the comment."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author_id = UserId(uuid4())
        comment = await comment_repo.save(
            make_comment(PostId(uuid4()), author_id=author_id)
        )

        await comment_service.delete_comment(comment.id, author_id)

        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Someone else's delete is refused and the comment stays."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(PostId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, UserId(uuid4()))

        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_does_not_cascade_to_replies(self, unit_env):
        """Replies of a deleted comment resurface as roots."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        author_id = UserId(uuid4())
        parent = await comment_repo.save(
            make_comment(post_id, author_id=author_id, minutes=0)
        )
        reply = await comment_repo.save(
            make_comment(post_id, parent_id=parent.id, minutes=1)
        )

        await comment_service.delete_comment(parent.id, author_id)
        roots = await comment_service.get_comment_tree(post_id)

        assert [r.id for r in roots] == [reply.id]


class TestGetCommentDepth:
    """Tests for get_comment_depth method."""

    @pytest.mark.asyncio
    async def test_depth_counts_ancestors(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        chain = [await comment_repo.save(make_comment(post_id, minutes=0))]
        for i in range(1, 4):
            chain.append(
                await comment_repo.save(
                    make_comment(post_id, parent_id=chain[-1].id, minutes=i)
                )
            )

        depths = [await comment_service.get_comment_depth(c.id) for c in chain]

        assert depths == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_missing_parent_ends_the_walk(self, unit_env):
        """An orphan counts as a root, like in the built tree."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        orphan = await comment_repo.save(
            make_comment(post_id, parent_id=CommentId(uuid4()))
        )
        reply = await comment_repo.save(
            make_comment(post_id, parent_id=orphan.id, minutes=1)
        )

        assert await comment_service.get_comment_depth(orphan.id) == 0
        assert await comment_service.get_comment_depth(reply.id) == 1

    @pytest.mark.asyncio
    async def test_parent_loop_terminates(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        a_id = CommentId(uuid4())
        b_id = CommentId(uuid4())
        await comment_repo.save(make_comment(post_id, parent_id=b_id, comment_id=a_id))
        await comment_repo.save(make_comment(post_id, parent_id=a_id, comment_id=b_id))

        assert await comment_service.get_comment_depth(a_id) == 1

    @pytest.mark.asyncio
    async def test_unknown_comment_has_depth_zero(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comment_depth(CommentId(uuid4())) == 0
