from sqlalchemy import (
    Column, Integer, BigInteger, String, Text,
    ForeignKey, Index
)
from sqlalchemy.orm import relationship

from community_api.core.database import Base


class PostRecord(Base):
    __tablename__ = "post"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    post_type = Column(String(20), nullable=False)  # PostType.name
    community_id = Column(Integer, ForeignKey("community.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    registered_time = Column(BigInteger, nullable=False)
    registrant = Column(Integer, nullable=False)
    modified_time = Column(BigInteger, nullable=True)
    modifier = Column(Integer, nullable=True)

    community = relationship("CommunityRecord", back_populates="posts")
    comments = relationship("CommentRecord", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        Index("idx_post_community_time", "community_id", "registered_time"),
    )


class CommentRecord(Base):
    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    post_id = Column(Integer, ForeignKey("post.id", ondelete="CASCADE", onupdate="CASCADE"), nullable=False)
    registered_time = Column(BigInteger, nullable=False)
    registrant = Column(Integer, nullable=False)
    modified_time = Column(BigInteger, nullable=True)
    modifier = Column(Integer, nullable=True)

    post = relationship("PostRecord", back_populates="comments")

    __table_args__ = (
        Index("idx_comment_post_time", "post_id", "registered_time"),
    )
