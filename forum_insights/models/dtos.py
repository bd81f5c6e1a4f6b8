"""
Pydantic Data Transfer Objects (DTOs) for the Forum Insights service.

Repository results are handed to the aggregation stages as DTOs, and the
insights snapshot returned by the API is built entirely from frozen DTOs.
"""

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, Field


class TopicRecord(BaseModel):
    """
    An owned topic as read by the repository, with its own engagement counts.
    """
    id: int
    user_id: int
    title: str
    created_at: datetime
    comment_count: int = 0
    like_count: int = 0

    model_config = {"from_attributes": True, "frozen": True}


class TopicSummary(BaseModel):
    """
    One row of the insights topics table.
    """
    id: int
    title: str
    comment_count: int
    like_count: int
    created_age_label: str

    model_config = {"frozen": True}


class DailyBucket(BaseModel):
    """
    Aggregated activity for one calendar day of the reporting window.
    """
    date: str = Field(..., description="Calendar day as YYYY-MM-DD.")
    topic_count: int = 0
    like_count: int = 0

    model_config = {"frozen": True}


class InsightsTotals(BaseModel):
    """
    Headline totals and per-topic averages, all-time.
    """
    total_topics: int
    total_comments: int
    total_likes: int
    avg_comments_per_topic: float
    avg_likes_per_topic: float

    model_config = {"frozen": True}


class ActivityItem(BaseModel):
    """
    A label/value pair for the "at a glance" panel.
    """
    label: str
    value: str

    model_config = {"frozen": True}


class InsightsSnapshot(BaseModel):
    """
    The complete analytics result for one request.

    Sequences are tuples so the snapshot cannot be changed after construction.
    """
    totals: InsightsTotals
    topics: Tuple[TopicSummary, ...]
    daily: Tuple[DailyBucket, ...]
    activity: Tuple[ActivityItem, ...]

    model_config = {"frozen": True}
