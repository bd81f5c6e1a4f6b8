"""
Models package for the Forum Insights service.

This package contains SQLAlchemy ORM models and Pydantic DTOs.
"""

# Ensure all ORM models are registered with the Base metadata when this package is imported.
from . import base
from . import user_orm
from . import topic_orm
from . import comment_orm
from . import like_orm

from .base import Base
from .user_orm import UserORM
from .topic_orm import TopicORM
from .comment_orm import CommentORM
from .like_orm import LikeORM

from .dtos import (
    ActivityItem,
    DailyBucket,
    InsightsSnapshot,
    InsightsTotals,
    TopicRecord,
    TopicSummary,
)

__all__ = [
    # Base
    "Base",
    # ORMs
    "UserORM",
    "TopicORM",
    "CommentORM",
    "LikeORM",
    # DTOs
    "ActivityItem",
    "DailyBucket",
    "InsightsSnapshot",
    "InsightsTotals",
    "TopicRecord",
    "TopicSummary",
]
