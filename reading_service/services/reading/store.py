"""Position store contract and an in-memory implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Protocol, Set, Tuple, runtime_checkable

from ...models.reading_models import DailyVerseRecord, ReadingPosition


@runtime_checkable
class PositionStore(Protocol):
    """Per-user persistence used by the navigation controller and daily policy.

    Position, read set and daily cursor are independent records; no call
    writes more than one of them atomically except ``reset_all``.
    """

    async def load_position(self, user_id: str) -> int: ...

    async def save_position(self, user_id: str, position: ReadingPosition) -> None: ...

    async def load_read_set(self, user_id: str) -> Set[str]: ...

    async def mark_read(self, user_id: str, verse_id: str, read_at: datetime) -> bool: ...

    async def load_read_history(self, user_id: str, limit: int = 30) -> List[datetime]: ...

    async def reset_all(self, user_id: str) -> None: ...

    async def load_daily_cursor(self, user_id: str) -> int: ...

    async def advance_daily_cursor(self, user_id: str, upper_bound: int) -> int: ...

    async def claim_daily_read(self, user_id: str, day: date, ttl_seconds: Optional[int] = None) -> bool: ...

    async def load_daily_record(self, user_id: str, day: date) -> Optional[DailyVerseRecord]: ...

    async def save_daily_record(
        self, user_id: str, record: DailyVerseRecord, ttl_seconds: Optional[int] = None
    ) -> None: ...


@dataclass
class InMemoryPositionStore:
    """Process-local store, used by tests and when Redis is not configured."""

    positions: Dict[str, ReadingPosition] = field(default_factory=dict)
    read_sets: Dict[str, Set[str]] = field(default_factory=dict)
    read_history: Dict[str, List[datetime]] = field(default_factory=dict)
    daily_cursors: Dict[str, int] = field(default_factory=dict)
    daily_records: Dict[Tuple[str, date], DailyVerseRecord] = field(default_factory=dict)
    daily_claims: Set[Tuple[str, date]] = field(default_factory=set)

    async def load_position(self, user_id: str) -> int:
        stored = self.positions.get(user_id)
        return stored.currentVerseIndex if stored else 0

    async def save_position(self, user_id: str, position: ReadingPosition) -> None:
        self.positions[user_id] = position.model_copy()

    async def load_read_set(self, user_id: str) -> Set[str]:
        return set(self.read_sets.get(user_id, set()))

    async def mark_read(self, user_id: str, verse_id: str, read_at: datetime) -> bool:
        read = self.read_sets.setdefault(user_id, set())
        if verse_id in read:
            return False
        read.add(verse_id)
        self.read_history.setdefault(user_id, []).append(read_at)
        return True

    async def load_read_history(self, user_id: str, limit: int = 30) -> List[datetime]:
        history = sorted(self.read_history.get(user_id, []), reverse=True)
        return history[:limit] if limit > 0 else history

    async def reset_all(self, user_id: str) -> None:
        self.positions[user_id] = ReadingPosition(userId=user_id)
        self.read_sets.pop(user_id, None)
        self.read_history.pop(user_id, None)

    async def load_daily_cursor(self, user_id: str) -> int:
        return self.daily_cursors.get(user_id, 0)

    async def advance_daily_cursor(self, user_id: str, upper_bound: int) -> int:
        current = self.daily_cursors.get(user_id, 0)
        advanced = min(current + 1, max(upper_bound, 0))
        self.daily_cursors[user_id] = advanced
        return advanced

    async def claim_daily_read(self, user_id: str, day: date, ttl_seconds: Optional[int] = None) -> bool:
        key = (user_id, day)
        if key in self.daily_claims:
            return False
        self.daily_claims.add(key)
        return True

    async def load_daily_record(self, user_id: str, day: date) -> Optional[DailyVerseRecord]:
        record = self.daily_records.get((user_id, day))
        return record.model_copy() if record else None

    async def save_daily_record(
        self, user_id: str, record: DailyVerseRecord, ttl_seconds: Optional[int] = None
    ) -> None:
        self.daily_records[(user_id, record.date)] = record.model_copy()


__all__ = ["InMemoryPositionStore", "PositionStore"]
