import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from community_api.clients.user_client import UserClient
from community_api.core.database import transaction
from community_api.core.exceptions import (
    InvalidSecretError,
    MembershipConflictError,
    NotAMemberError,
)
from .commands import (
    CommunityRegisterCommand,
    CommunityModifyCommand,
    MemberJoinCommand,
    MemberLeaveCommand,
)
from .entity import Community, Member
from .store import CommunityStore, MemberStore

logger = structlog.get_logger()


class CommunityService:
    """Community + Member aggregate. 쓰기 작업은 transaction 하나로 처리."""

    def __init__(
        self,
        db: Session,
        community_store: CommunityStore,
        member_store: MemberStore,
        user_client: UserClient,
    ):
        self.db = db
        self.community_store = community_store
        self.member_store = member_store
        self.user_client = user_client

    # 등록
    def register_community(self, cmd: CommunityRegisterCommand) -> Community:
        with transaction(self.db):
            self.user_client.validate_admin_user(cmd.registrant)
            saved = self.community_store.save(Community.create(cmd))

        logger.info("Community registered", community_id=saved.id, registrant=cmd.registrant)
        return saved

    # 수정
    def modify_community(self, cmd: CommunityModifyCommand) -> Community:
        with transaction(self.db):
            self.user_client.validate_admin_user(cmd.modifier)
            existing = self.community_store.find_by_id(cmd.id)
            saved = self.community_store.update(existing.modify(cmd))

        logger.info("Community modified", community_id=saved.id, modifier=cmd.modifier)
        return saved

    # 삭제
    def delete_community(self, community_id: int, user_id: int | None) -> None:
        with transaction(self.db):
            self.user_client.validate_admin_user(user_id)
            self.community_store.delete_by_id(community_id)

        logger.info("Community deleted", community_id=community_id, user_id=user_id)

    # 조회
    def get_community(self, community_id: int) -> Community:
        return self.community_store.find_by_id(community_id)

    def get_all_communities(self) -> list[Community]:
        return self.community_store.find_all()

    def get_members(self, community_id: int) -> list[Member]:
        self.community_store.find_by_id(community_id)  # 없으면 NotFound
        return self.member_store.find_by_community_id(community_id)

    # 가입: member row + member_count + 1
    def join_member(self, cmd: MemberJoinCommand) -> Member:
        with transaction(self.db):
            community = self.community_store.find_by_id(cmd.community_id)

            if self.member_store.exists_by_user_and_community(cmd.user_id, cmd.community_id):
                raise MembershipConflictError()

            if not community.accepts_secret(cmd.secret_number):
                raise InvalidSecretError()

            try:
                member = self.member_store.save(Member.create(cmd))
            except IntegrityError:
                # 동시 가입 -> unique(community_id, user_id) 충돌
                raise MembershipConflictError()

            self.community_store.increment_member_count(cmd.community_id)

        logger.info("Member joined", community_id=cmd.community_id, user_id=cmd.user_id)
        return member

    # 탈퇴: member row 삭제 + member_count - 1 (0 하한)
    def leave_member(self, cmd: MemberLeaveCommand) -> None:
        with transaction(self.db):
            if not self.member_store.exists_by_user_and_community(cmd.user_id, cmd.community_id):
                raise NotAMemberError()

            # 동시 탈퇴 -> 먼저 지운 요청만 count 감소
            if self.member_store.delete_by_user_and_community(cmd.user_id, cmd.community_id) == 0:
                raise NotAMemberError()
            self.community_store.decrement_member_count(cmd.community_id)

        logger.info("Member left", community_id=cmd.community_id, user_id=cmd.user_id)

    def check_membership(self, community_id: int, user_id: int) -> bool:
        return self.member_store.exists_by_user_and_community(user_id, community_id)
