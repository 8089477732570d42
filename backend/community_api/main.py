from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Response
from starlette.middleware.base import BaseHTTPMiddleware
from fastapi.middleware.cors import CORSMiddleware

from community_api.core.config import CORS_ORIGINS, DB_AUTO_CREATE
from community_api.core.database import engine, init_db
from community_api.core.exception_handlers import register_exception_handlers
from community_api.core.logging import configure_logging
from .api_router import api_router

configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 개발 단계에서만 사용 (이미 DB에 테이블 있으면 불필요)
    if DB_AUTO_CREATE:
        init_db(engine)
        logger.info("Database tables ensured")
    logger.info("Community backend started", cors_origins=CORS_ORIGINS)
    yield


app = FastAPI(title="Community API", lifespan=lifespan)


class ForceUTF8Middleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        ct = response.headers.get("content-type", "")
        # JSON 응답에 charset이 없으면 강제로 붙임
        if ct.startswith("application/json") and "charset=" not in ct:
            response.headers["content-type"] = "application/json; charset=utf-8"
        return response


app.add_middleware(ForceUTF8Middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)


app.include_router(api_router)
