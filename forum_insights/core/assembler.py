"""
Composition of aggregated parts into an ``InsightsSnapshot``.
"""
from typing import Sequence, Tuple

from forum_insights.models.dtos import (
    ActivityItem,
    DailyBucket,
    InsightsSnapshot,
    InsightsTotals,
    TopicSummary,
)


def build_activity(totals: InsightsTotals) -> Tuple[ActivityItem, ...]:
    """The "at a glance" items shown above the topics table."""
    return (
        ActivityItem(label="Total topics", value=str(totals.total_topics)),
        ActivityItem(label="Total comments", value=str(totals.total_comments)),
        ActivityItem(label="Total likes", value=str(totals.total_likes)),
        ActivityItem(
            label="Avg. engagement / topic",
            value=f"{totals.avg_comments_per_topic} comments • {totals.avg_likes_per_topic} likes",
        ),
    )


def assemble_snapshot(
    totals: InsightsTotals,
    topics: Sequence[TopicSummary],
    daily: Sequence[DailyBucket],
) -> InsightsSnapshot:
    return InsightsSnapshot(
        totals=totals,
        topics=tuple(topics),
        daily=tuple(daily),
        activity=build_activity(totals),
    )
