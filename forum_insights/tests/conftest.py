import pytest
from datetime import datetime, timezone

from forum_insights.core.clock import FixedClock
from forum_insights.tests.stubs.in_memory_repository import InMemoryForumRepository, OTHER_ID, OWNER_ID

# 2026-10-19 15:30 UTC, a Monday.
NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    return NOW


@pytest.fixture
def fixed_clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def repository() -> InMemoryForumRepository:
    """Empty forum with two registered users."""
    return InMemoryForumRepository(users=[OWNER_ID, OTHER_ID])
