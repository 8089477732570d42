from typing import Optional
from pydantic import BaseModel, Field

from community_api.common.schemas.base import ORMBase, NotBlankStr
from .entity import CommunityType


# 커뮤니티 등록
class CommunityRegisterRequest(BaseModel):
    type: CommunityType
    thumbnail: Optional[str] = None
    name: NotBlankStr = Field(max_length=100)
    description: Optional[str] = None
    manager_id: NotBlankStr
    manager_name: NotBlankStr
    manager_email: NotBlankStr
    registrant: int
    allow_self_join: bool = False
    secret_number: Optional[str] = None


# 커뮤니티 수정 (None = 변경 없음)
class CommunityModifyRequest(BaseModel):
    type: Optional[CommunityType] = None
    thumbnail: Optional[str] = None
    name: Optional[NotBlankStr] = Field(default=None, max_length=100)
    description: Optional[str] = None
    modifier: int


class MemberJoinRequest(BaseModel):
    user_id: int
    registrant: int
    secret_number: Optional[str] = None


# secret_number는 응답에 포함하지 않음
class CommunityRead(ORMBase):
    id: int
    type: CommunityType
    thumbnail: Optional[str] = None
    name: str
    description: Optional[str] = None
    manager_id: str
    manager_name: str
    manager_email: str
    member_count: int
    registered_time: int
    registrant: int
    modified_time: Optional[int] = None
    modifier: Optional[int] = None
    allow_self_join: bool


class MemberRead(ORMBase):
    id: int
    community_id: int
    user_id: int
    joined_time: int
    registrant: Optional[int] = None
