"""
Domain entity rules: construction stamps, whitelisted updates, secret check.
"""
from dataclasses import replace

from community_api.features.community import entity as community_entity
from community_api.features.community.commands import CommunityModifyCommand, MemberJoinCommand
from community_api.features.community.entity import Community, CommunityType, Member
from community_api.features.post import entity as post_entity
from community_api.features.post.commands import (
    PostCreateCommand,
    PostUpdateCommand,
    CommentCreateCommand,
    CommentModifyCommand,
)
from community_api.features.post.entity import Post, PostType, Comment
from tests.conftest import make_register_command


class TestCommunityEntity:

    def test_create_starts_with_zero_members_and_creator_as_modifier(self, monkeypatch):
        monkeypatch.setattr(community_entity, "now_millis", lambda: 1_000)

        c = Community.create(make_register_command(registrant=7))

        assert c.member_count == 0
        assert c.registered_time == 1_000
        assert c.modified_time == 1_000
        assert c.registrant == 7
        assert c.modifier == 7
        assert c.id is None

    def test_modify_overlays_only_provided_fields(self, monkeypatch):
        monkeypatch.setattr(community_entity, "now_millis", lambda: 1_000)
        original = replace(
            Community.create(make_register_command(secret_number="s3", allow_self_join=False)),
            id=5,
            member_count=4,
        )

        monkeypatch.setattr(community_entity, "now_millis", lambda: 2_000)
        modified = original.modify(CommunityModifyCommand(id=5, modifier=9, name="Renamed"))

        assert modified.name == "Renamed"
        assert modified.description == original.description
        assert modified.type == original.type
        assert modified.thumbnail == original.thumbnail
        assert modified.modified_time == 2_000
        assert modified.modifier == 9

    def test_modify_never_touches_invariant_fields(self):
        original = replace(
            Community.create(make_register_command(secret_number="s3", allow_self_join=False)),
            id=5,
            member_count=4,
        )

        modified = original.modify(
            CommunityModifyCommand(
                id=5,
                modifier=9,
                type=CommunityType.CLUB,
                thumbnail="t",
                name="n",
                description="d",
            )
        )

        assert modified.registrant == original.registrant
        assert modified.secret_number == "s3"
        assert modified.manager_id == original.manager_id
        assert modified.manager_name == original.manager_name
        assert modified.manager_email == original.manager_email
        assert modified.member_count == 4
        assert modified.allow_self_join is False
        assert modified.registered_time == original.registered_time

    def test_accepts_secret(self):
        closed = Community.create(make_register_command(allow_self_join=False, secret_number="123"))
        open_ = Community.create(make_register_command(allow_self_join=True))

        assert closed.accepts_secret("123")
        assert not closed.accepts_secret("000")
        assert not closed.accepts_secret(None)
        assert open_.accepts_secret(None)

    def test_closed_community_without_secret_rejects_everything(self):
        closed = Community.create(make_register_command(allow_self_join=False, secret_number=None))

        assert not closed.accepts_secret(None)
        assert not closed.accepts_secret("")


class TestMemberEntity:

    def test_create_from_join_command(self, monkeypatch):
        monkeypatch.setattr(community_entity, "now_millis", lambda: 42)

        m = Member.create(MemberJoinCommand(community_id=1, user_id=2, registrant=2, secret_number="x"))

        assert (m.community_id, m.user_id, m.registrant, m.joined_time) == (1, 2, 2, 42)


class TestPostEntity:

    def _post(self):
        return Post.create(
            PostCreateCommand(
                title="Hello",
                content="first post",
                post_type=PostType.GENERAL,
                community_id=1,
                registrant=2,
            )
        )

    def test_create_stamps_registrant_as_modifier(self, monkeypatch):
        monkeypatch.setattr(post_entity, "now_millis", lambda: 500)

        p = self._post()

        assert p.registered_time == p.modified_time == 500
        assert p.modifier == p.registrant == 2
        assert p.comments == ()

    def test_update_keeps_missing_fields(self, monkeypatch):
        p = replace(self._post(), id=3)
        monkeypatch.setattr(post_entity, "now_millis", lambda: 900)

        updated = p.update(PostUpdateCommand(id=3, modifier=4, post_type=PostType.NOTICE))

        assert updated.post_type == PostType.NOTICE
        assert updated.title == "Hello"
        assert updated.content == "first post"
        assert updated.modified_time == 900
        assert updated.modifier == 4
        assert updated.registrant == 2
        assert updated.community_id == 1


class TestCommentEntity:

    def test_update_content_changes_only_content_and_stamp(self, monkeypatch):
        monkeypatch.setattr(post_entity, "now_millis", lambda: 10)
        c = Comment.create(CommentCreateCommand(post_id=1, content="hi", registrant=2))

        monkeypatch.setattr(post_entity, "now_millis", lambda: 20)
        updated = c.update_content(CommentModifyCommand(id=1, content="edited", modifier=3))

        assert updated.content == "edited"
        assert updated.modified_time == 20
        assert updated.modifier == 3
        assert updated.registered_time == 10
        assert updated.registrant == 2
        assert updated.post_id == 1
