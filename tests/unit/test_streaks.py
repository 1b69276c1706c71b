from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from reading_service.services.reading.streaks import current_streak, longest_streak, reading_days


def test_reading_days_use_local_calendar() -> None:
    riyadh = ZoneInfo("Asia/Riyadh")
    # 22:30 UTC is already the next day in Riyadh (UTC+3)
    moments = [datetime(2024, 3, 10, 22, 30, tzinfo=timezone.utc)]

    assert reading_days(moments, riyadh) == {date(2024, 3, 11)}


def test_current_streak_ends_today() -> None:
    days = {date(2024, 3, 9), date(2024, 3, 10), date(2024, 3, 11)}

    assert current_streak(days, date(2024, 3, 11)) == 3
    assert current_streak(days, date(2024, 3, 12)) == 0


def test_longest_streak() -> None:
    days = {
        date(2024, 1, 1),
        date(2024, 1, 2),
        date(2024, 1, 5),
        date(2024, 1, 6),
        date(2024, 1, 7),
    }

    assert longest_streak(days) == 3
    assert longest_streak(set()) == 0
    assert longest_streak({date(2024, 1, 1)}) == 1
