from fastapi import Depends
from sqlalchemy.orm import Session

from community_api.clients.user_client import UserClient, get_user_client
from community_api.core.database import get_db
from .service import PostService
from .store import PostStore, CommentStore


def get_post_service(
    db: Session = Depends(get_db),
    user_client: UserClient = Depends(get_user_client),
) -> PostService:
    return PostService(
        db=db,
        post_store=PostStore(db),
        comment_store=CommentStore(db),
        user_client=user_client,
    )
