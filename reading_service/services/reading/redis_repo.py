"""Redis repository for per-user reading state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Set

from pydantic import ValidationError

from ...models.reading_models import DailyVerseRecord, ReadingPosition


@dataclass(slots=True)
class RedisKeys:
    """Namespace helpers for reading-related Redis keys."""

    position_prefix: str = "reading:pos"
    read_set_prefix: str = "reading:read"
    history_prefix: str = "reading:history"
    daily_cursor_prefix: str = "reading:daily:cursor"
    daily_record_prefix: str = "reading:daily"
    daily_claim_prefix: str = "reading:daily:claim"

    def position(self, user_id: str) -> str:
        return f"{self.position_prefix}:{user_id}"

    def read_set(self, user_id: str) -> str:
        return f"{self.read_set_prefix}:{user_id}"

    def history(self, user_id: str) -> str:
        return f"{self.history_prefix}:{user_id}"

    def daily_cursor(self, user_id: str) -> str:
        return f"{self.daily_cursor_prefix}:{user_id}"

    def daily_record(self, user_id: str, day: date) -> str:
        return f"{self.daily_record_prefix}:{user_id}:{day.isoformat()}"

    def daily_claim(self, user_id: str, day: date) -> str:
        return f"{self.daily_claim_prefix}:{user_id}:{day.isoformat()}"


class RedisPositionStore:
    """``PositionStore`` backed by ``redis.asyncio``.

    The position is a JSON document, the read set a Redis set, the read history
    a sorted set scored by epoch seconds and the daily cursor a plain integer.
    """

    def __init__(self, redis_client: Any, *, keys: Optional[RedisKeys] = None) -> None:
        self._redis = redis_client
        self._keys = keys or RedisKeys()

    @staticmethod
    def _ensure_positive_ttl(ttl_seconds: int | None) -> Optional[int]:
        if ttl_seconds is None:
            return None
        if ttl_seconds <= 0:
            return None
        return int(ttl_seconds)

    @staticmethod
    def _decode(value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    @staticmethod
    def _to_int(value: Any, default: int = 0) -> int:
        try:
            return int(value) if value is not None else default
        except (TypeError, ValueError):
            return default

    async def load_position(self, user_id: str) -> int:
        """Return the stored global position, 0 when absent or unreadable."""

        raw = self._decode(await self._redis.get(self._keys.position(user_id)))
        if raw is None:
            return 0
        try:
            return ReadingPosition.model_validate_json(raw).currentVerseIndex
        except ValidationError:
            return 0

    async def save_position(self, user_id: str, position: ReadingPosition) -> None:
        await self._redis.set(self._keys.position(user_id), position.model_dump_json())

    async def load_read_set(self, user_id: str) -> Set[str]:
        members = await self._redis.smembers(self._keys.read_set(user_id))
        return {self._decode(member) or "" for member in members or ()}

    async def mark_read(self, user_id: str, verse_id: str, read_at: datetime) -> bool:
        """Add ``verse_id`` to the read set; record the event only when new."""

        added = await self._redis.sadd(self._keys.read_set(user_id), verse_id)
        if not added:
            return False
        if read_at.tzinfo is None:
            read_at = read_at.replace(tzinfo=timezone.utc)
        await self._redis.zadd(self._keys.history(user_id), {verse_id: read_at.timestamp()})
        return True

    async def load_read_history(self, user_id: str, limit: int = 30) -> List[datetime]:
        end = limit - 1 if limit > 0 else -1
        items = await self._redis.zrevrange(self._keys.history(user_id), 0, end, withscores=True)
        return [datetime.fromtimestamp(float(score), tz=timezone.utc) for _, score in items]

    async def reset_all(self, user_id: str) -> None:
        """Reset the position to the first verse and drop read set and history."""

        pipe = self._redis.pipeline()
        pipe.set(self._keys.position(user_id), ReadingPosition(userId=user_id).model_dump_json())
        pipe.delete(self._keys.read_set(user_id))
        pipe.delete(self._keys.history(user_id))
        await pipe.execute()

    async def load_daily_cursor(self, user_id: str) -> int:
        value = await self._redis.get(self._keys.daily_cursor(user_id))
        return max(self._to_int(self._decode(value)), 0)

    async def advance_daily_cursor(self, user_id: str, upper_bound: int) -> int:
        """Advance the daily cursor by one, saturating at ``upper_bound``."""

        key = self._keys.daily_cursor(user_id)
        bound = max(upper_bound, 0)
        advanced = int(await self._redis.incr(key))
        if advanced > bound:
            await self._redis.set(key, bound)
            advanced = bound
        return advanced

    async def claim_daily_read(self, user_id: str, day: date, ttl_seconds: Optional[int] = None) -> bool:
        """Claim the read transition for ``day`` using SET NX; False when already claimed."""

        kwargs: dict[str, Any] = {"nx": True}
        ttl = self._ensure_positive_ttl(ttl_seconds)
        if ttl:
            kwargs["ex"] = ttl
        result = await self._redis.set(self._keys.daily_claim(user_id, day), "1", **kwargs)
        return bool(result)

    async def load_daily_record(self, user_id: str, day: date) -> Optional[DailyVerseRecord]:
        raw = self._decode(await self._redis.get(self._keys.daily_record(user_id, day)))
        if raw is None:
            return None
        try:
            return DailyVerseRecord.model_validate_json(raw)
        except ValidationError:
            return None

    async def save_daily_record(
        self, user_id: str, record: DailyVerseRecord, ttl_seconds: Optional[int] = None
    ) -> None:
        key = self._keys.daily_record(user_id, record.date)
        ttl = self._ensure_positive_ttl(ttl_seconds)
        if ttl:
            await self._redis.set(key, record.model_dump_json(), ex=ttl)
        else:
            await self._redis.set(key, record.model_dump_json())


__all__ = ["RedisKeys", "RedisPositionStore"]
