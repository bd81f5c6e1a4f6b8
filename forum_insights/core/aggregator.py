"""
Aggregation of scoped counts into totals, averages and per-topic summaries.
"""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

from forum_insights.core.age_label import humanize_age
from forum_insights.models.dtos import InsightsTotals, TopicRecord, TopicSummary

_ONE_DECIMAL = Decimal("0.1")


def average_per_topic(total: int, topic_count: int) -> float:
    """
    ``total / topic_count`` rounded to one decimal place, halves rounded up
    (2.25 -> 2.3). Zero topics give 0.0.
    """
    if topic_count == 0:
        return 0.0
    quotient = Decimal(total) / Decimal(topic_count)
    return float(quotient.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def summarize_totals(total_topics: int, total_comments: int, total_likes: int) -> InsightsTotals:
    return InsightsTotals(
        total_topics=total_topics,
        total_comments=total_comments,
        total_likes=total_likes,
        avg_comments_per_topic=average_per_topic(total_comments, total_topics),
        avg_likes_per_topic=average_per_topic(total_likes, total_topics),
    )


def _sort_key(topic: TopicRecord) -> datetime:
    created_at = topic.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at


def build_topic_summaries(topics: Iterable[TopicRecord], now: datetime) -> List[TopicSummary]:
    """
    Summaries newest first. The sort is stable, so topics created at the same
    instant keep the order they were given in.
    """
    ordered = sorted(topics, key=_sort_key, reverse=True)
    return [
        TopicSummary(
            id=topic.id,
            title=topic.title,
            comment_count=topic.comment_count,
            like_count=topic.like_count,
            created_age_label=humanize_age(topic.created_at, now),
        )
        for topic in ordered
    ]
