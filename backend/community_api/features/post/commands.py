from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .entity import PostType


@dataclass(frozen=True)
class PostCreateCommand:
    title: str
    content: str
    post_type: "PostType"
    community_id: int
    registrant: Optional[int]


@dataclass(frozen=True)
class PostUpdateCommand:
    id: int
    modifier: Optional[int]
    title: Optional[str] = None
    content: Optional[str] = None
    post_type: Optional["PostType"] = None


@dataclass(frozen=True)
class CommentCreateCommand:
    post_id: int
    content: str
    registrant: Optional[int]


@dataclass(frozen=True)
class CommentModifyCommand:
    id: int
    content: str
    modifier: Optional[int]
