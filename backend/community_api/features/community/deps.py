from fastapi import Depends
from sqlalchemy.orm import Session

from community_api.clients.user_client import UserClient, get_user_client
from community_api.core.database import get_db
from .service import CommunityService
from .store import CommunityStore, MemberStore


# 요청마다 store / client 주입해서 service 생성
def get_community_service(
    db: Session = Depends(get_db),
    user_client: UserClient = Depends(get_user_client),
) -> CommunityService:
    return CommunityService(
        db=db,
        community_store=CommunityStore(db),
        member_store=MemberStore(db),
        user_client=user_client,
    )
