from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from community_api.common.clock import now_millis
from .commands import CommunityRegisterCommand, CommunityModifyCommand, MemberJoinCommand


class CommunityType(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    STUDY = "STUDY"
    CLUB = "CLUB"
    COURSE = "COURSE"


@dataclass(frozen=True)
class Member:
    community_id: int
    user_id: int
    joined_time: int
    registrant: Optional[int] = None
    id: Optional[int] = None

    @classmethod
    def create(cls, cmd: MemberJoinCommand) -> "Member":
        return cls(
            community_id=cmd.community_id,
            user_id=cmd.user_id,
            joined_time=now_millis(),
            registrant=cmd.registrant,
        )


@dataclass(frozen=True)
class Community:
    """
    커뮤니티 도메인 객체 (저장 방식과 무관).
    - member_count는 join/leave로만 변경
    - secret_number는 allow_self_join=False일 때 가입 암호
    """
    type: CommunityType
    name: str
    manager_id: str
    manager_name: str
    manager_email: str
    registered_time: int
    registrant: int
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    member_count: int = 0
    modified_time: Optional[int] = None
    modifier: Optional[int] = None
    secret_number: Optional[str] = None
    allow_self_join: bool = False
    id: Optional[int] = None

    @classmethod
    def create(cls, cmd: CommunityRegisterCommand) -> "Community":
        now = now_millis()
        return cls(
            type=cmd.type,
            thumbnail=cmd.thumbnail,
            name=cmd.name,
            description=cmd.description,
            manager_id=cmd.manager_id,
            manager_name=cmd.manager_name,
            manager_email=cmd.manager_email,
            member_count=0,
            registered_time=now,
            registrant=cmd.registrant,
            modified_time=now,
            modifier=cmd.registrant,
            secret_number=cmd.secret_number,
            allow_self_join=cmd.allow_self_join,
        )

    def modify(self, cmd: CommunityModifyCommand) -> "Community":
        # 수정 가능 필드: type / thumbnail / name / description (None = 기존값 유지)
        changes = {}
        if cmd.type is not None:
            changes["type"] = cmd.type
        if cmd.thumbnail is not None:
            changes["thumbnail"] = cmd.thumbnail
        if cmd.name is not None:
            changes["name"] = cmd.name
        if cmd.description is not None:
            changes["description"] = cmd.description

        return replace(self, modified_time=now_millis(), modifier=cmd.modifier, **changes)

    def accepts_secret(self, secret_number: Optional[str]) -> bool:
        if self.allow_self_join:
            return True
        return secret_number is not None and secret_number == self.secret_number
