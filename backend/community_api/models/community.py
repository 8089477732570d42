from sqlalchemy import (
    Column, Integer, BigInteger, String, Text, Boolean,
    ForeignKey, UniqueConstraint, Index
)
from sqlalchemy.orm import relationship

from community_api.core.database import Base


class CommunityRecord(Base):
    __tablename__ = "community"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(20), nullable=False)  # CommunityType.name
    thumbnail = Column(String(500), nullable=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    manager_id = Column(String(100), nullable=False)
    manager_name = Column(String(100), nullable=False)
    manager_email = Column(String(255), nullable=False)
    member_count = Column(BigInteger, nullable=False, default=0, server_default="0")
    registered_time = Column(BigInteger, nullable=False)
    registrant = Column(Integer, nullable=False)
    modified_time = Column(BigInteger, nullable=True)
    modifier = Column(Integer, nullable=True)
    secret_number = Column(String(50), nullable=True)
    allow_self_join = Column(Boolean, nullable=False, default=False)

    # 관계
    members = relationship("MemberRecord", back_populates="community", cascade="all, delete-orphan", passive_deletes=True)
    posts = relationship("PostRecord", back_populates="community", cascade="all, delete-orphan", passive_deletes=True)


class MemberRecord(Base):
    __tablename__ = "community_member"

    id = Column(Integer, primary_key=True, autoincrement=True)
    community_id = Column(Integer, ForeignKey("community.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    user_id = Column(Integer, nullable=False)
    joined_time = Column(BigInteger, nullable=False)
    registrant = Column(Integer, nullable=True)

    community = relationship("CommunityRecord", back_populates="members")

    __table_args__ = (
        UniqueConstraint("community_id", "user_id", name="uq_community_user"),
        Index("idx_member_user_id", "user_id"),
    )
