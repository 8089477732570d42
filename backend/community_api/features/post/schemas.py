from typing import Optional, List
from pydantic import BaseModel, Field

from community_api.common.schemas.base import ORMBase, NotBlankStr
from .entity import PostType


class PostCreateRequest(BaseModel):
    title: NotBlankStr = Field(max_length=255)
    content: NotBlankStr
    post_type: PostType
    community_id: int
    registrant: int


# None = 변경 없음
class PostUpdateRequest(BaseModel):
    title: Optional[NotBlankStr] = Field(default=None, max_length=255)
    content: Optional[NotBlankStr] = None
    post_type: Optional[PostType] = None
    modifier: int


class CommentCreateRequest(BaseModel):
    content: NotBlankStr
    registrant: int


class CommentModifyRequest(BaseModel):
    content: NotBlankStr
    modifier: int


class CommentRead(ORMBase):
    id: int
    content: str
    post_id: int
    registered_time: int
    registrant: int
    modified_time: Optional[int] = None
    modifier: Optional[int] = None


class PostRead(ORMBase):
    id: int
    title: str
    content: str
    post_type: PostType
    community_id: int
    registered_time: int
    registrant: int
    modified_time: Optional[int] = None
    modifier: Optional[int] = None


# 단건 조회 시 댓글 포함
class PostDetailRead(PostRead):
    comments: List[CommentRead] = Field(default_factory=list)
