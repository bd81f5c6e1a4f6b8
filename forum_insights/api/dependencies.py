"""
FastAPI dependencies shared by the insights endpoints.

``get_current_user_id`` stands in for the session layer: the authenticated
user id arrives in the ``X-User-Id`` header set by the upstream gateway.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from forum_insights.core.clock import Clock, SystemClock
from forum_insights.core.exceptions import DataAccessFailure
from forum_insights.core.insights_service import InsightsService
from forum_insights.core.repository import ForumRepository
from forum_insights.utils.db_session import get_db_session

logger = logging.getLogger(__name__)


async def get_forum_repository(session: AsyncSession = Depends(get_db_session)) -> ForumRepository:
    """Get a repository bound to the request's session."""
    return ForumRepository(session)


def get_clock() -> Clock:
    return SystemClock()


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None),
    repository: ForumRepository = Depends(get_forum_repository),
) -> int:
    """
    Resolve the requesting user.

    Raises:
        HTTPException: 401 if the header is missing or malformed, 404 if the
            user does not exist, 503 if the lookup itself fails.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        user_id = int(x_user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid user identity")

    try:
        exists = await repository.user_exists(user_id)
    except DataAccessFailure as e:
        logger.error(f"Error resolving user {user_id}: {e}")
        raise HTTPException(status_code=503, detail=f"Insights unavailable: {e}")

    if not exists:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user_id


async def get_insights_service(
    repository: ForumRepository = Depends(get_forum_repository),
    clock: Clock = Depends(get_clock),
) -> InsightsService:
    """Get insights service instance."""
    return InsightsService(repository=repository, clock=clock)
