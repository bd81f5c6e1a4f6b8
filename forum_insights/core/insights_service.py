"""
Insights Service for the Forum Insights application.

Builds the owner-scoped engagement snapshot: headline totals and averages,
per-topic summaries and a gap-filled daily series for the last 14 days.
"""
import logging
from datetime import datetime, timezone, tzinfo
from typing import Optional

from forum_insights.config.settings import settings
from forum_insights.core.aggregator import build_topic_summaries, summarize_totals
from forum_insights.core.assembler import assemble_snapshot
from forum_insights.core.calendar_normalizer import (
    bucket_by_day,
    build_daily_series,
    compute_window,
)
from forum_insights.core.clock import Clock, SystemClock
from forum_insights.core.repository import ForumRepository
from forum_insights.core.scoping import TopicOwnerScope
from forum_insights.models.dtos import InsightsSnapshot

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class InsightsService:
    """
    Computes insights snapshots for one request.

    All reads go through ``repository``; everything after the reads is pure
    in-memory work. A failed read propagates as ``DataAccessFailure`` and no
    snapshot is produced.
    """

    def __init__(
        self,
        repository: ForumRepository,
        clock: Optional[Clock] = None,
        reporting_tz: Optional[tzinfo] = None,
    ):
        """
        Args:
            repository: Scoped read access to topics, comments and likes.
            clock: Source of the current moment. Defaults to the system clock.
            reporting_tz: Zone used to cut calendar days. Defaults to
                ``settings.REPORTING_TIMEZONE``.
        """
        self._repository = repository
        self._clock = clock or SystemClock()
        self._reporting_tz = reporting_tz or settings.reporting_tzinfo

    async def get_insights_snapshot(self, user_id: int) -> InsightsSnapshot:
        """
        Build the insights snapshot for ``user_id``.

        Args:
            user_id: Resolved identity of the requesting user.

        Returns:
            InsightsSnapshot: Totals, topics newest first, and exactly 14
            daily buckets in ascending date order.

        Raises:
            DataAccessFailure: If any underlying read fails.
        """
        now = self._clock.now()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        assert now >= EPOCH, f"Clock returned a moment before the epoch: {now.isoformat()}"

        window = compute_window(now, self._reporting_tz)
        scope = TopicOwnerScope(owner_id=user_id)
        logger.info(
            f"Building insights for user {user_id}, window {window.start_date} .. {window.end_date}"
        )

        topics = await self._repository.list_owned_topics(scope)
        total_comments = await self._repository.count_comments(scope)
        total_likes = await self._repository.count_likes(scope)
        topic_times = await self._repository.topic_timestamps(scope, window.start)
        like_times = await self._repository.like_timestamps(scope, window.start)

        totals = summarize_totals(len(topics), total_comments, total_likes)
        summaries = build_topic_summaries(topics, now)
        daily = build_daily_series(
            window,
            bucket_by_day(topic_times, self._reporting_tz),
            bucket_by_day(like_times, self._reporting_tz),
        )

        logger.debug(
            f"Insights for user {user_id}: {totals.total_topics} topics, "
            f"{totals.total_comments} comments, {totals.total_likes} likes"
        )
        return assemble_snapshot(totals, summaries, daily)
