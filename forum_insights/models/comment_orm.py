"""
SQLAlchemy ORM model for the 'comments' table.
"""

from sqlalchemy import BigInteger, Column, ForeignKey, Index, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class CommentORM(Base):
    """
    A comment left on a topic.

    ``user_id`` is the comment author. It plays no part in insights scoping;
    comments are attributed to whoever owns ``topic_id``.
    """
    __tablename__ = "comments"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    topic_id = Column(BigInteger, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, comment="Author of the comment.")
    body = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    topic = relationship("TopicORM", back_populates="comments")

    __table_args__ = (
        Index("idx_comments_topic_created", "topic_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<CommentORM(id={self.id}, topic_id={self.topic_id}, user_id={self.user_id})>"
