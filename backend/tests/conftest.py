"""
Shared fixtures: in-memory SQLite engine, session, fake user service client,
services and a TestClient with the DB / user-client dependencies overridden.
"""
import os
from unittest.mock import MagicMock

# app import 전에 테스트 환경 설정
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "warning")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from community_api.clients.user_client import UserClient, get_user_client
from community_api.core.database import get_db, init_db
from community_api.features.community.commands import CommunityRegisterCommand
from community_api.features.community.entity import CommunityType
from community_api.features.community.service import CommunityService
from community_api.features.community.store import CommunityStore, MemberStore
from community_api.features.post.service import PostService
from community_api.features.post.store import PostStore, CommentStore
from community_api.main import app

ADMIN_ID = 1
USER_ID = 2
OTHER_USER_ID = 3
UNKNOWN_USER_ID = 99


class FakeUserClient(UserClient):
    """User service stand-in: answers from fixed id sets instead of HTTP."""

    def __init__(self, users=(ADMIN_ID, USER_ID, OTHER_USER_ID), admins=(ADMIN_ID,)):
        super().__init__(base_url="http://user-service.test", session=MagicMock())
        self.users = set(users)
        self.admins = set(admins)

    def check_user_exists(self, user_id: int) -> bool:
        return user_id in self.users

    def check_user_is_admin(self, user_id: int) -> bool:
        return user_id in self.admins


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user_client():
    return FakeUserClient()


@pytest.fixture
def community_service(db, user_client):
    return CommunityService(
        db=db,
        community_store=CommunityStore(db),
        member_store=MemberStore(db),
        user_client=user_client,
    )


@pytest.fixture
def post_service(db, user_client):
    return PostService(
        db=db,
        post_store=PostStore(db),
        comment_store=CommentStore(db),
        user_client=user_client,
    )


@pytest.fixture
def client(session_factory, user_client):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_user_client] = lambda: user_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_register_command(**overrides) -> CommunityRegisterCommand:
    data = dict(
        type=CommunityType.STUDY,
        name="Python Study",
        description="weekly python study",
        thumbnail="https://img.example.com/python.png",
        manager_id="mgr-1",
        manager_name="Kim",
        manager_email="kim@example.com",
        registrant=ADMIN_ID,
        allow_self_join=True,
        secret_number=None,
    )
    data.update(overrides)
    return CommunityRegisterCommand(**data)


@pytest.fixture
def open_community(community_service):
    return community_service.register_community(make_register_command())


@pytest.fixture
def secret_community(community_service):
    return community_service.register_community(
        make_register_command(name="Secret Club", allow_self_join=False, secret_number="123")
    )
