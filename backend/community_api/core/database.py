from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from community_api.core.config import DATABASE_URL


class Base(DeclarativeBase):
    pass


engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """쓰기 작업 단위. 성공=commit / 실패=rollback 후 예외 재전파."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db(bind: Engine) -> None:
    # 모델 등록 후 create_all
    from community_api import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
