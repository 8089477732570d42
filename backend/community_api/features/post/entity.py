from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from community_api.common.clock import now_millis
from .commands import PostCreateCommand, PostUpdateCommand, CommentCreateCommand, CommentModifyCommand


class PostType(str, Enum):
    NOTICE = "NOTICE"
    GENERAL = "GENERAL"
    QUESTION = "QUESTION"
    SHARE = "SHARE"


@dataclass(frozen=True)
class Comment:
    content: str
    post_id: int
    registered_time: int
    registrant: int
    modified_time: Optional[int] = None
    modifier: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def create(cls, cmd: CommentCreateCommand) -> "Comment":
        now = now_millis()
        return cls(
            content=cmd.content,
            post_id=cmd.post_id,
            registered_time=now,
            registrant=cmd.registrant,
            modified_time=now,
            modifier=cmd.registrant,
        )

    def update_content(self, cmd: CommentModifyCommand) -> "Comment":
        return replace(self, content=cmd.content, modified_time=now_millis(), modifier=cmd.modifier)


@dataclass(frozen=True)
class Post:
    title: str
    content: str
    post_type: PostType
    community_id: int
    registered_time: int
    registrant: int
    modified_time: Optional[int] = None
    modifier: Optional[int] = None
    id: Optional[int] = None
    comments: tuple[Comment, ...] = ()

    @classmethod
    def create(cls, cmd: PostCreateCommand) -> "Post":
        now = now_millis()
        return cls(
            title=cmd.title,
            content=cmd.content,
            post_type=cmd.post_type,
            community_id=cmd.community_id,
            registered_time=now,
            registrant=cmd.registrant,
            modified_time=now,
            modifier=cmd.registrant,
        )

    def update(self, cmd: PostUpdateCommand) -> "Post":
        # 수정 가능 필드: title / content / post_type
        changes = {}
        if cmd.title is not None:
            changes["title"] = cmd.title
        if cmd.content is not None:
            changes["content"] = cmd.content
        if cmd.post_type is not None:
            changes["post_type"] = cmd.post_type

        return replace(self, modified_time=now_millis(), modifier=cmd.modifier, **changes)

    def with_comments(self, comments: list[Comment]) -> "Post":
        return replace(self, comments=tuple(comments))
