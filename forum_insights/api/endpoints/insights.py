"""
Insights API endpoints.

Exposes the owner-scoped engagement snapshot for the authenticated user.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from forum_insights.api.dependencies import get_current_user_id, get_insights_service
from forum_insights.core.exceptions import DataAccessFailure
from forum_insights.core.insights_service import InsightsService
from forum_insights.models.dtos import InsightsSnapshot

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=InsightsSnapshot)
async def get_insights(
    user_id: int = Depends(get_current_user_id),
    service: InsightsService = Depends(get_insights_service),
) -> InsightsSnapshot:
    """
    Retrieve the insights snapshot for the requesting user.

    Args:
        user_id: Resolved identity of the requesting user
        service: Insights service instance

    Returns:
        InsightsSnapshot: Totals, per-topic summaries (newest first) and the
        14-day daily activity series (oldest first)

    Raises:
        HTTPException: 503 if the underlying data could not be read
    """
    try:
        snapshot = await service.get_insights_snapshot(user_id)
    except DataAccessFailure as e:
        logger.error(f"Error building insights for user {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=503, detail=f"Insights unavailable: {e}")

    logger.info(
        f"Served insights for user {user_id}: {snapshot.totals.total_topics} topics, "
        f"{len(snapshot.daily)} days"
    )
    return snapshot
