from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .entity import CommunityType

# router -> service 전달용 command 객체


@dataclass(frozen=True)
class CommunityRegisterCommand:
    type: "CommunityType"
    name: str
    manager_id: str
    manager_name: str
    manager_email: str
    registrant: Optional[int]
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    secret_number: Optional[str] = None
    allow_self_join: bool = False


@dataclass(frozen=True)
class CommunityModifyCommand:
    id: int
    modifier: Optional[int]
    type: Optional["CommunityType"] = None
    thumbnail: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class MemberJoinCommand:
    community_id: int
    user_id: int
    registrant: Optional[int] = None
    secret_number: Optional[str] = None


@dataclass(frozen=True)
class MemberLeaveCommand:
    community_id: int
    user_id: int
