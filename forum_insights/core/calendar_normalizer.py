"""
Calendar normalization for the daily activity series.

Sparse ``{"YYYY-MM-DD": count}`` mappings are expanded into one bucket per
calendar day of a fixed window ending today, with missing days reported as
zero. Days are cut in the reporting timezone; enumeration is done on plain
``date`` objects so DST changes cannot skip or repeat a day.
"""
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Dict, Iterable, Iterator, List, Mapping

from forum_insights.models.dtos import DailyBucket

WINDOW_DAYS = 14


@dataclass(frozen=True)
class ReportingWindow:
    """
    Inclusive range of calendar days covered by the daily series.

    Attributes:
        start_date (date): First day of the window (today - 13 days).
        end_date (date): Last day of the window (today).
        zone (tzinfo): Zone in which the days are cut.
    """
    start_date: date
    end_date: date
    zone: tzinfo

    @property
    def start(self) -> datetime:
        """Local midnight starting ``start_date``; the inclusive lower bound for queries."""
        return datetime.combine(self.start_date, time.min, tzinfo=self.zone)

    @property
    def end(self) -> datetime:
        """Local midnight starting ``end_date``."""
        return datetime.combine(self.end_date, time.min, tzinfo=self.zone)

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1


def _as_aware(moment: datetime) -> datetime:
    # Naive timestamps come from drivers that drop the offset; they are UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def local_date(moment: datetime, tz: tzinfo) -> date:
    """Calendar day of ``moment`` as seen in ``tz``."""
    return _as_aware(moment).astimezone(tz).date()


def compute_window(now: datetime, tz: tzinfo, days: int = WINDOW_DAYS) -> ReportingWindow:
    """Window of ``days`` calendar days ending on the local date of ``now``."""
    end_date = local_date(now, tz)
    start_date = end_date - timedelta(days=days - 1)
    return ReportingWindow(start_date=start_date, end_date=end_date, zone=tz)


def bucket_by_day(timestamps: Iterable[datetime], tz: tzinfo) -> Dict[str, int]:
    """Group timestamps by local calendar day, keyed by ISO date string."""
    return dict(Counter(local_date(ts, tz).isoformat() for ts in timestamps))


def iter_window_dates(window: ReportingWindow) -> Iterator[date]:
    for offset in range(window.days):
        yield window.start_date + timedelta(days=offset)


def build_daily_series(
    window: ReportingWindow,
    topics_by_day: Mapping[str, int],
    likes_by_day: Mapping[str, int],
) -> List[DailyBucket]:
    """
    Expand sparse per-day counts into one bucket per day of ``window``.

    Args:
        window: The reporting window to cover.
        topics_by_day: Sparse topic counts keyed by ISO date.
        likes_by_day: Sparse like counts keyed by ISO date.

    Returns:
        List[DailyBucket]: Exactly ``window.days`` buckets in ascending date
        order. Keys outside the window are ignored.
    """
    series = []
    for day in iter_window_dates(window):
        key = day.isoformat()
        series.append(
            DailyBucket(
                date=key,
                topic_count=int(topics_by_day.get(key, 0)),
                like_count=int(likes_by_day.get(key, 0)),
            )
        )
    return series
