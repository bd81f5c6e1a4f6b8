"""
Scoped, read-only queries over topics, comments and likes.

Every query takes a ``TopicOwnerScope`` so the ownership rule is explicit at
each call site. Database errors surface as ``DataAccessFailure``.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forum_insights.core.exceptions import DataAccessFailure
from forum_insights.core.scoping import TopicOwnerScope
from forum_insights.models import CommentORM, LikeORM, TopicORM, UserORM
from forum_insights.models.dtos import TopicRecord

logger = logging.getLogger(__name__)


class ForumRepository:
    """
    Read access to the forum tables for a single request.

    The repository does not own the session; the caller (normally the
    ``get_db_session`` dependency) opens and closes it.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _execute(self, operation: str, stmt):
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Database error during {operation}: {e}", exc_info=True)
            raise DataAccessFailure(operation, e) from e

    async def user_exists(self, user_id: int) -> bool:
        result = await self._execute(
            "user_exists", select(UserORM.id).where(UserORM.id == user_id)
        )
        return result.scalar_one_or_none() is not None

    async def list_owned_topics(self, scope: TopicOwnerScope) -> List[TopicRecord]:
        """
        Fetch all topics owned by the scope's user, full history.

        Each record carries the comment and like counts of that single topic.
        Rows are returned in insertion order (ascending id).
        """
        comment_count = (
            select(func.count(CommentORM.id))
            .where(CommentORM.topic_id == TopicORM.id)
            .correlate(TopicORM)
            .scalar_subquery()
        )
        like_count = (
            select(func.count(LikeORM.id))
            .where(LikeORM.topic_id == TopicORM.id)
            .correlate(TopicORM)
            .scalar_subquery()
        )
        stmt = (
            select(
                TopicORM.id,
                TopicORM.user_id,
                TopicORM.title,
                TopicORM.created_at,
                comment_count.label("comment_count"),
                like_count.label("like_count"),
            )
            .where(scope.topic_clause())
            .order_by(TopicORM.id.asc())
        )
        result = await self._execute("list_owned_topics", stmt)
        return [
            TopicRecord(
                id=row.id,
                user_id=row.user_id,
                title=row.title,
                created_at=row.created_at,
                comment_count=row.comment_count or 0,
                like_count=row.like_count or 0,
            )
            for row in result.all()
        ]

    async def count_comments(self, scope: TopicOwnerScope, since: Optional[datetime] = None) -> int:
        """Count comments left on the scope's topics, optionally since ``since`` (inclusive)."""
        stmt = select(func.count(CommentORM.id)).where(scope.via_topic(CommentORM.topic_id))
        if since is not None:
            stmt = stmt.where(CommentORM.created_at >= since)
        result = await self._execute("count_comments", stmt)
        return int(result.scalar_one() or 0)

    async def count_likes(self, scope: TopicOwnerScope, since: Optional[datetime] = None) -> int:
        """Count likes on the scope's topics, optionally since ``since`` (inclusive)."""
        stmt = select(func.count(LikeORM.id)).where(scope.via_topic(LikeORM.topic_id))
        if since is not None:
            stmt = stmt.where(LikeORM.created_at >= since)
        result = await self._execute("count_likes", stmt)
        return int(result.scalar_one() or 0)

    async def topic_timestamps(self, scope: TopicOwnerScope, since: datetime) -> List[datetime]:
        stmt = (
            select(TopicORM.created_at)
            .where(scope.topic_clause())
            .where(TopicORM.created_at >= since)
        )
        result = await self._execute("topic_timestamps", stmt)
        return list(result.scalars().all())

    async def like_timestamps(self, scope: TopicOwnerScope, since: datetime) -> List[datetime]:
        stmt = (
            select(LikeORM.created_at)
            .where(scope.via_topic(LikeORM.topic_id))
            .where(LikeORM.created_at >= since)
        )
        result = await self._execute("like_timestamps", stmt)
        return list(result.scalars().all())
