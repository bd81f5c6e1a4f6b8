"""
Human readable relative ages ("3 days ago", "2 weeks from now").
"""
from datetime import datetime, timezone

from dateutil.relativedelta import relativedelta


def _to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def humanize_age(created_at: datetime, now: datetime) -> str:
    """
    Describe the distance between ``created_at`` and ``now`` in the largest
    non-zero unit.
    """
    created_at = _to_utc(created_at)
    now = _to_utc(now)
    future = created_at > now
    earlier, later = (now, created_at) if future else (created_at, now)
    delta = relativedelta(later, earlier)

    units = (
        ("year", delta.years),
        ("month", delta.months),
        ("week", delta.weeks),
        ("day", delta.days),
        ("hour", delta.hours),
        ("minute", delta.minutes),
        ("second", delta.seconds),
    )
    for unit, amount in units:
        if amount:
            suffix = "from now" if future else "ago"
            plural = "" if amount == 1 else "s"
            return f"{amount} {unit}{plural} {suffix}"
    return "just now"
