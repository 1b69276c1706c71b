"""Daily verse selection driven by a per-user cursor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Awaitable, Optional, Sequence

from ...models.reading_models import DailyVerseRecord, VerseRecord
from .coordinates import CoordinateMapper, VersePosition
from .errors import PersistenceFailure
from .logging import log_daily_advanced, log_marked, log_persistence_failed
from .store import PositionStore
from .tz_utils import resolve_timezone, today_in_tz

_SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True, slots=True)
class DailySelection:
    user_id: str
    record: DailyVerseRecord
    position: VersePosition
    verse: Optional[VerseRecord] = None

    @property
    def is_read(self) -> bool:
        return self.record.isRead


class DailySelectionPolicy:
    """Serve one verse per calendar day and advance only when it is read.

    Today's selection is pinned in a per-day record, so repeated fetches and
    concurrent devices see the same verse until it is marked read.
    """

    def __init__(
        self,
        store: PositionStore,
        *,
        mapper: Optional[CoordinateMapper] = None,
        corpus: Optional[Sequence[VerseRecord]] = None,
        timezone_name: str = "UTC",
        record_ttl_days: int = 30,
        mark_in_read_set: bool = True,
    ) -> None:
        self.store = store
        self.mapper = mapper or CoordinateMapper()
        self.corpus = corpus
        self.timezone = resolve_timezone(timezone_name, None)
        self.record_ttl_days = record_ttl_days
        self.mark_in_read_set = mark_in_read_set

    def today(self) -> date:
        return today_in_tz(self.timezone)

    @property
    def _record_ttl_seconds(self) -> Optional[int]:
        return self.record_ttl_days * _SECONDS_PER_DAY if self.record_ttl_days > 0 else None

    async def _call(self, user_id: str, operation: str, awaitable: Awaitable[Any]) -> Any:
        try:
            return await awaitable
        except Exception as exc:
            log_persistence_failed(user_id, operation, exc)
            raise PersistenceFailure(
                "Daily verse storage is unavailable",
                user_id=user_id,
                detail={"operation": operation, "error": str(exc)},
            ) from exc

    def _selection(self, user_id: str, record: DailyVerseRecord) -> DailySelection:
        position = self.mapper.verse_position(record.verseIndex)
        verse = None
        if self.corpus is not None and position.global_index < len(self.corpus):
            verse = self.corpus[position.global_index]
        return DailySelection(user_id=user_id, record=record, position=position, verse=verse)

    async def todays_verse(self, user_id: str, *, today: Optional[date] = None) -> DailySelection:
        day = today or self.today()
        record = await self._call(user_id, "load_daily_record", self.store.load_daily_record(user_id, day))
        if record is not None:
            return self._selection(user_id, record)

        cursor = await self._call(user_id, "load_daily_cursor", self.store.load_daily_cursor(user_id))
        index = self.mapper.clamp(cursor, operation="daily_cursor")
        record = DailyVerseRecord(date=day, verseIndex=index, verseId=self.mapper.verse_id(index))
        await self._call(
            user_id,
            "save_daily_record",
            self.store.save_daily_record(user_id, record, self._record_ttl_seconds),
        )
        return self._selection(user_id, record)

    async def mark_read(self, user_id: str, *, today: Optional[date] = None) -> DailySelection:
        """Mark today's verse read and move the cursor to the following verse.

        The cursor saturates at the last verse. Marking twice on the same day
        changes nothing.
        """

        day = today or self.today()
        selection = await self.todays_verse(user_id, today=day)
        if selection.is_read:
            return selection

        claimed = await self._call(
            user_id,
            "claim_daily_read",
            self.store.claim_daily_read(user_id, day, self._record_ttl_seconds),
        )
        if not claimed:
            # another request owns today's transition
            return await self.todays_verse(user_id, today=day)

        read_at = datetime.now(timezone.utc)
        record = selection.record.model_copy(update={"isRead": True, "readAt": read_at})
        await self._call(
            user_id,
            "save_daily_record",
            self.store.save_daily_record(user_id, record, self._record_ttl_seconds),
        )

        upper_bound = self.mapper.total_verses - 1
        advanced = await self._call(
            user_id,
            "advance_daily_cursor",
            self.store.advance_daily_cursor(user_id, upper_bound),
        )
        log_daily_advanced(user_id, record.verseIndex, advanced)

        if self.mark_in_read_set:
            newly_marked = await self._call(
                user_id,
                "mark_read",
                self.store.mark_read(user_id, record.verseId, read_at),
            )
            if newly_marked:
                log_marked(user_id, record.verseId, "daily")

        return self._selection(user_id, record)


__all__ = ["DailySelection", "DailySelectionPolicy"]
