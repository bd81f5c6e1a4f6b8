"""
SQLAlchemy ORM model for the 'topics' table.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Index, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class TopicORM(Base):
    """
    A discussion topic posted by a user.

    Attributes:
        id (int): Primary key, auto-incrementing. Also the insertion order.
        user_id (int): Owner of the topic. Never changes after creation.
        title (str): Topic headline.
        body (str): Topic text.
        created_at (datetime): Creation timestamp.
    """
    __tablename__ = "topics"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, comment="Owner of the topic.")
    title = Column(Text, nullable=False)
    body = Column(Text, nullable=False, default="")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    owner = relationship("UserORM", back_populates="topics")
    comments = relationship("CommentORM", back_populates="topic", cascade="all, delete-orphan")
    likes = relationship("LikeORM", back_populates="topic", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_topics_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<TopicORM(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
