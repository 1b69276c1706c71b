"""Reading streaks computed from read timestamps."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Set
from zoneinfo import ZoneInfo


def reading_days(read_at: Iterable[datetime], tz: ZoneInfo) -> Set[date]:
    days: Set[date] = set()
    for moment in read_at:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=tz)
        days.add(moment.astimezone(tz).date())
    return days


def current_streak(days: Set[date], today: date) -> int:
    """Consecutive reading days ending today (0 if nothing was read today)."""

    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(days: Set[date]) -> int:
    if not days:
        return 0
    ordered = sorted(days)
    longest = current = 1
    for previous, day in zip(ordered, ordered[1:]):
        if (day - previous).days == 1:
            current += 1
        else:
            longest = max(longest, current)
            current = 1
    return max(longest, current)


__all__ = ["current_streak", "longest_streak", "reading_days"]
