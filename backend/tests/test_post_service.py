import pytest

from community_api.core.exceptions import (
    CommentNotFoundError,
    CommunityNotFoundError,
    PostNotFoundError,
    UnauthorizedError,
)
from community_api.features.post.commands import (
    CommentCreateCommand,
    CommentModifyCommand,
    PostCreateCommand,
    PostUpdateCommand,
)
from community_api.features.post.entity import PostType
from tests.conftest import ADMIN_ID, USER_ID, OTHER_USER_ID, UNKNOWN_USER_ID


def _create_post(svc, community_id, title="Hello", registrant=USER_ID):
    return svc.create_post(
        PostCreateCommand(
            title=title,
            content="content of " + title,
            post_type=PostType.GENERAL,
            community_id=community_id,
            registrant=registrant,
        )
    )


def _comment(svc, post_id, content="nice", registrant=USER_ID):
    return svc.create_comment(CommentCreateCommand(post_id=post_id, content=content, registrant=registrant))


class TestPosts:

    def test_create_and_get(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)

        found = post_service.get_post(post.id)
        assert found.title == "Hello"
        assert found.registrant == USER_ID
        assert found.comments == ()

    def test_create_requires_valid_user(self, post_service, open_community):
        with pytest.raises(UnauthorizedError):
            _create_post(post_service, open_community.id, registrant=UNKNOWN_USER_ID)

        assert post_service.get_posts_by_community(open_community.id) == []

    def test_create_in_missing_community(self, post_service):
        with pytest.raises(CommunityNotFoundError):
            _create_post(post_service, 404)

    def test_posts_listed_newest_first(self, post_service, open_community):
        first = _create_post(post_service, open_community.id, "first")
        second = _create_post(post_service, open_community.id, "second")
        third = _create_post(post_service, open_community.id, "third")

        listed = post_service.get_posts_by_community(open_community.id)

        assert [p.id for p in listed] == [third.id, second.id, first.id]

    def test_posts_of_unknown_community_is_empty(self, post_service):
        assert post_service.get_posts_by_community(404) == []

    def test_update_keeps_missing_fields(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)

        updated = post_service.update_post(
            PostUpdateCommand(id=post.id, modifier=OTHER_USER_ID, post_type=PostType.NOTICE)
        )

        assert updated.post_type == PostType.NOTICE
        assert updated.title == post.title
        assert updated.content == post.content
        assert updated.modifier == OTHER_USER_ID
        assert updated.registrant == USER_ID

    def test_update_missing_post(self, post_service):
        with pytest.raises(PostNotFoundError):
            post_service.update_post(PostUpdateCommand(id=404, modifier=USER_ID, title="x"))

    def test_delete_post_removes_comments(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)
        comment = _comment(post_service, post.id)

        post_service.delete_post(post.id, USER_ID)

        with pytest.raises(PostNotFoundError):
            post_service.get_post(post.id)
        with pytest.raises(CommentNotFoundError):
            post_service.delete_comment(comment.id, USER_ID)

    def test_delete_requires_valid_user(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)

        with pytest.raises(UnauthorizedError):
            post_service.delete_post(post.id, None)

        assert post_service.get_post(post.id).id == post.id


class TestComments:

    def test_comments_oldest_first_in_post_detail(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)
        c1 = _comment(post_service, post.id, "one")
        c2 = _comment(post_service, post.id, "two", registrant=ADMIN_ID)

        detail = post_service.get_post(post.id)

        assert [c.id for c in detail.comments] == [c1.id, c2.id]
        assert [c.id for c in post_service.get_comments_by_post(post.id)] == [c1.id, c2.id]

    def test_comment_on_missing_post(self, post_service):
        with pytest.raises(PostNotFoundError):
            _comment(post_service, 404)

    def test_comments_of_missing_post(self, post_service):
        with pytest.raises(PostNotFoundError):
            post_service.get_comments_by_post(404)

    def test_comment_requires_valid_user(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)

        with pytest.raises(UnauthorizedError):
            _comment(post_service, post.id, registrant=UNKNOWN_USER_ID)

        assert post_service.get_comments_by_post(post.id) == []

    def test_modify_comment(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)
        comment = _comment(post_service, post.id)

        modified = post_service.modify_comment(
            CommentModifyCommand(id=comment.id, content="edited", modifier=OTHER_USER_ID)
        )

        assert modified.content == "edited"
        assert modified.modifier == OTHER_USER_ID
        assert modified.registrant == USER_ID
        assert post_service.get_comments_by_post(post.id)[0].content == "edited"

    def test_modify_missing_comment(self, post_service):
        with pytest.raises(CommentNotFoundError):
            post_service.modify_comment(CommentModifyCommand(id=404, content="x", modifier=USER_ID))

    def test_delete_comment(self, post_service, open_community):
        post = _create_post(post_service, open_community.id)
        c1 = _comment(post_service, post.id, "one")
        c2 = _comment(post_service, post.id, "two")

        post_service.delete_comment(c1.id, USER_ID)

        assert [c.id for c in post_service.get_comments_by_post(post.id)] == [c2.id]

    def test_delete_community_cascades_to_posts_and_comments(
        self, post_service, community_service, open_community
    ):
        post = _create_post(post_service, open_community.id)
        comment = _comment(post_service, post.id)

        community_service.delete_community(open_community.id, ADMIN_ID)

        with pytest.raises(PostNotFoundError):
            post_service.get_post(post.id)
        with pytest.raises(CommentNotFoundError):
            post_service.modify_comment(CommentModifyCommand(id=comment.id, content="x", modifier=USER_ID))
