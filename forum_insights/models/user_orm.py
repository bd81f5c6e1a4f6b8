"""
SQLAlchemy ORM model for the 'users' table.
"""

from sqlalchemy import BigInteger, Column, Text, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class UserORM(Base):
    """
    A forum member. Only the identity is read by the insights service.

    Attributes:
        id (int): Primary key.
        name (str): Display name.
        email (str): Unique login e-mail.
        created_at (datetime): Registration timestamp.
    """
    __tablename__ = "users"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    topics = relationship("TopicORM", back_populates="owner")

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        return f"<UserORM(id={self.id}, name='{self.name}')>"
