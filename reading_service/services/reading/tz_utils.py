from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

FALLBACK_TZ = "UTC"


def resolve_timezone(user_tz: str | None, default_tz: str | None) -> ZoneInfo:
    """Pick the timezone to use for daily calculations."""
    candidates = [user_tz, default_tz, FALLBACK_TZ]
    for tz_name in candidates:
        if not tz_name:
            continue
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            continue
    # ultimate fallback
    return ZoneInfo(FALLBACK_TZ)


def now_in_tz(tz: ZoneInfo) -> datetime:
    return datetime.now(tz)


def today_in_tz(tz: ZoneInfo, from_dt: datetime | None = None) -> date:
    base = from_dt.astimezone(tz) if from_dt else now_in_tz(tz)
    return base.date()

