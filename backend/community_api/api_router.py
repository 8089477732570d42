from fastapi import APIRouter

from community_api.core.config import API_PREFIX
from .features.community.router import router as community_router
from .features.post.router import router as post_router

# router 전체 관리
api_router = APIRouter(prefix=API_PREFIX)

api_router.include_router(community_router)
api_router.include_router(post_router)
