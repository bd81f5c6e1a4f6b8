"""
SQLAlchemy ORM model for the 'likes' table.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Index, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class LikeORM(Base):
    """
    A user's like on a topic. A user can like a given topic at most once.
    """
    __tablename__ = "likes"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    topic_id = Column(BigInteger, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, comment="User who liked the topic.")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    topic = relationship("TopicORM", back_populates="likes")

    __table_args__ = (
        UniqueConstraint("topic_id", "user_id", name="uq_likes_topic_user"),
        Index("idx_likes_topic_created", "topic_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<LikeORM(id={self.id}, topic_id={self.topic_id}, user_id={self.user_id})>"
