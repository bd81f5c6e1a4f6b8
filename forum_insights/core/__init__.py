"""
Core components for the Forum Insights service.
"""

from .exceptions import DataAccessFailure, ForumInsightsError
from .clock import Clock, FixedClock, SystemClock
from .scoping import TopicOwnerScope
from .repository import ForumRepository
from .insights_service import InsightsService

__all__ = [
    "Clock",
    "DataAccessFailure",
    "FixedClock",
    "ForumInsightsError",
    "ForumRepository",
    "InsightsService",
    "SystemClock",
    "TopicOwnerScope",
]
