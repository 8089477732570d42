from sqlalchemy import select, delete, update, case
from sqlalchemy.orm import Session

from community_api.core.exceptions import CommunityNotFoundError
from community_api.models import CommunityRecord, MemberRecord
from .entity import Community, CommunityType, Member


def _to_community(r: CommunityRecord) -> Community:
    return Community(
        id=r.id,
        type=CommunityType[r.type],
        thumbnail=r.thumbnail,
        name=r.name,
        description=r.description,
        manager_id=r.manager_id,
        manager_name=r.manager_name,
        manager_email=r.manager_email,
        member_count=r.member_count or 0,
        registered_time=r.registered_time,
        registrant=r.registrant,
        modified_time=r.modified_time,
        modifier=r.modifier,
        secret_number=r.secret_number,
        allow_self_join=bool(r.allow_self_join),
    )


def _to_member(r: MemberRecord) -> Member:
    return Member(
        id=r.id,
        community_id=r.community_id,
        user_id=r.user_id,
        joined_time=r.joined_time,
        registrant=r.registrant,
    )


class CommunityStore:

    def __init__(self, db: Session):
        self.db = db

    def _get(self, community_id: int) -> CommunityRecord:
        r = self.db.get(CommunityRecord, community_id)
        if r is None:
            raise CommunityNotFoundError(community_id)
        return r

    def save(self, community: Community) -> Community:
        r = CommunityRecord(
            type=community.type.name,
            thumbnail=community.thumbnail,
            name=community.name,
            description=community.description,
            manager_id=community.manager_id,
            manager_name=community.manager_name,
            manager_email=community.manager_email,
            member_count=community.member_count,
            registered_time=community.registered_time,
            registrant=community.registrant,
            modified_time=community.modified_time,
            modifier=community.modifier,
            secret_number=community.secret_number,
            allow_self_join=community.allow_self_join,
        )
        self.db.add(r)
        self.db.flush()  # commit 전에 PK 확보
        return _to_community(r)

    def find_by_id(self, community_id: int) -> Community:
        return _to_community(self._get(community_id))

    def find_all(self) -> list[Community]:
        rows = self.db.execute(
            select(CommunityRecord).order_by(CommunityRecord.id.asc())
        ).scalars().all()
        return [_to_community(r) for r in rows]

    def exists_by_id(self, community_id: int) -> bool:
        found = self.db.execute(
            select(CommunityRecord.id).where(CommunityRecord.id == community_id)
        ).scalar_one_or_none()
        return found is not None

    def update(self, community: Community) -> Community:
        # 수정 가능한 컬럼만 반영 (manager / secret / registrant / member_count 제외)
        r = self._get(community.id)
        r.type = community.type.name
        r.thumbnail = community.thumbnail
        r.name = community.name
        r.description = community.description
        r.modified_time = community.modified_time
        r.modifier = community.modifier
        self.db.flush()
        return _to_community(r)

    def delete_by_id(self, community_id: int) -> None:
        r = self._get(community_id)
        self.db.delete(r)
        self.db.flush()

    def increment_member_count(self, community_id: int) -> None:
        self._apply_member_count(community_id, CommunityRecord.member_count + 1)

    def decrement_member_count(self, community_id: int) -> None:
        # 0 미만으로 내려가지 않음
        self._apply_member_count(
            community_id,
            case(
                (CommunityRecord.member_count > 0, CommunityRecord.member_count - 1),
                else_=0,
            ),
        )

    def _apply_member_count(self, community_id: int, expr) -> None:
        # read-modify-write 대신 DB 한 줄 UPDATE
        r = self._get(community_id)
        self.db.execute(
            update(CommunityRecord)
            .where(CommunityRecord.id == community_id)
            .values(member_count=expr)
            .execution_options(synchronize_session=False)
        )
        self.db.expire(r, ["member_count"])


class MemberStore:

    def __init__(self, db: Session):
        self.db = db

    def save(self, member: Member) -> Member:
        r = MemberRecord(
            community_id=member.community_id,
            user_id=member.user_id,
            joined_time=member.joined_time,
            registrant=member.registrant,
        )
        self.db.add(r)
        self.db.flush()
        return _to_member(r)

    def exists_by_user_and_community(self, user_id: int, community_id: int) -> bool:
        found = self.db.execute(
            select(MemberRecord.id).where(
                MemberRecord.community_id == community_id,
                MemberRecord.user_id == user_id,
            )
        ).scalar_one_or_none()
        return found is not None

    def delete_by_user_and_community(self, user_id: int, community_id: int) -> int:
        result = self.db.execute(
            delete(MemberRecord).where(
                MemberRecord.community_id == community_id,
                MemberRecord.user_id == user_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def find_by_community_id(self, community_id: int) -> list[Member]:
        rows = self.db.execute(
            select(MemberRecord)
            .where(MemberRecord.community_id == community_id)
            .order_by(MemberRecord.joined_time.asc(), MemberRecord.id.asc())
        ).scalars().all()
        return [_to_member(r) for r in rows]
