"""Per-user navigation over the ordered verse sequence."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from time import perf_counter
from typing import Any, Awaitable, Callable, Optional, Sequence, Set

from ...models.reading_models import ReadingPosition, VerseRecord
from .coordinates import CoordinateMapper, VersePosition
from .errors import CorpusInvalid, InvalidJumpTarget, PersistenceFailure
from .logging import (
    log_marked,
    log_moved,
    log_partial_corpus,
    log_persisted,
    log_persistence_failed,
    log_position_out_of_range,
    log_rejected,
    log_reset,
)
from .progress import ProgressCalculator, ProgressSnapshot
from .store import PositionStore

PersistenceErrorCallback = Callable[[str, BaseException], Any]


class NavigationController:
    """Moves one user through the corpus with write-behind persistence.

    The in-memory index changes inside the call; the durable write runs as a
    background task. While that task (plus ``settle_delay``) is pending the
    controller is navigating and further moves are ignored.
    """

    def __init__(
        self,
        user_id: str,
        corpus: Sequence[VerseRecord],
        store: PositionStore,
        *,
        mapper: Optional[CoordinateMapper] = None,
        settle_delay: float = 0.0,
        on_persistence_error: Optional[PersistenceErrorCallback] = None,
    ) -> None:
        self.mapper = mapper or CoordinateMapper()
        self.progress = ProgressCalculator(self.mapper)
        total = self.mapper.total_verses
        if not corpus:
            raise CorpusInvalid("Corpus is empty", user_id=user_id, detail={"loaded": 0, "total": total})
        if len(corpus) > total:
            raise CorpusInvalid(
                f"Corpus holds {len(corpus)} verses, more than the {total} in the reference index",
                user_id=user_id,
                detail={"loaded": len(corpus), "total": total},
            )

        self.user_id = user_id
        self.corpus = corpus
        self.store = store
        self.settle_delay = max(settle_delay, 0.0)
        self.loaded_sequence_length = len(corpus)
        self.current_index = 0
        self.navigation_in_flight = False
        self.last_persistence_error: Optional[BaseException] = None

        self._on_persistence_error = on_persistence_error
        self._read_set: Set[str] = set()
        self._pending: Set[asyncio.Task] = set()

        if self.loaded_sequence_length < total:
            log_partial_corpus(user_id, self.loaded_sequence_length, total)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    async def load(self) -> None:
        """Restore the stored position and read set for this user."""

        try:
            stored_index = await self.store.load_position(self.user_id)
            read_set = await self.store.load_read_set(self.user_id)
        except Exception as exc:
            log_persistence_failed(self.user_id, "load", exc)
            raise PersistenceFailure(
                "Failed to load reading state",
                user_id=self.user_id,
                detail={"operation": "load", "error": str(exc)},
            ) from exc

        if not 0 <= stored_index < self.loaded_sequence_length:
            log_position_out_of_range(self.user_id, stored_index, self.loaded_sequence_length)
            stored_index = 0

        self.current_index = stored_index
        self._read_set = set(read_set)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------
    async def next(self) -> bool:
        if not self.can_go_next():
            log_rejected(self.user_id, "next", "boundary", self.current_index)
            return False
        return self._commit("next", self.current_index + 1)

    async def previous(self) -> bool:
        if not self.can_go_previous():
            log_rejected(self.user_id, "previous", "boundary", self.current_index)
            return False
        return self._commit("previous", self.current_index - 1)

    async def jump_to(self, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < self.loaded_sequence_length:
            log_rejected(self.user_id, "jump", "out_of_range", self.current_index)
            raise InvalidJumpTarget(
                f"Jump target {index!r} is outside 0..{self.loaded_sequence_length - 1}",
                user_id=self.user_id,
                verse_index=index if isinstance(index, int) else None,
                detail={"loaded": self.loaded_sequence_length},
            )
        return self._commit("jump", index)

    def _commit(self, direction: str, target: int) -> bool:
        if self.navigation_in_flight:
            log_rejected(self.user_id, direction, "in_flight", self.current_index)
            return False

        previous = self.current_index
        self.current_index = target
        self.navigation_in_flight = True
        log_moved(self.user_id, direction, previous, target)

        record = self.reading_position()
        self._schedule(
            "save_position",
            lambda: self.store.save_position(self.user_id, record),
            releases_navigation=True,
        )
        return True

    async def reset(self) -> bool:
        """Return to the first verse and forget every read verse.

        The in-memory reset is applied even when the store call fails; the
        failure is then raised as ``PersistenceFailure``.
        """

        if self.navigation_in_flight:
            log_rejected(self.user_id, "reset", "in_flight", self.current_index)
            return False

        self.navigation_in_flight = True
        try:
            # pending mark_read writes must land before the store is wiped
            await self.wait_idle()
            self.current_index = 0
            self._read_set.clear()
            log_reset(self.user_id)

            started = perf_counter()
            try:
                await self.store.reset_all(self.user_id)
            except Exception as exc:
                self.last_persistence_error = exc
                log_persistence_failed(self.user_id, "reset_all", exc)
                raise PersistenceFailure(
                    "Failed to reset reading progress",
                    user_id=self.user_id,
                    verse_index=0,
                    detail={"operation": "reset_all", "error": str(exc)},
                ) from exc
            log_persisted(self.user_id, "reset_all", (perf_counter() - started) * 1000)
        finally:
            self.navigation_in_flight = False
        return True

    async def mark_current_as_read(self) -> bool:
        verse_id = self.current_verse_id()
        if verse_id in self._read_set:
            return False

        self._read_set.add(verse_id)
        log_marked(self.user_id, verse_id, "navigation", self.read_count)
        read_at = datetime.now(timezone.utc)
        self._schedule("mark_read", lambda: self.store.mark_read(self.user_id, verse_id, read_at))
        return True

    def remember_read(self, verse_id: str) -> None:
        """Record a verse marked read elsewhere (e.g. the daily verse)."""

        self._read_set.add(verse_id)

    # ------------------------------------------------------------------
    # Write-behind
    # ------------------------------------------------------------------
    def _schedule(
        self,
        operation: str,
        factory: Callable[[], Awaitable[Any]],
        *,
        releases_navigation: bool = False,
    ) -> asyncio.Task:
        task = asyncio.create_task(self._persist(operation, factory, releases_navigation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _persist(
        self,
        operation: str,
        factory: Callable[[], Awaitable[Any]],
        releases_navigation: bool,
    ) -> None:
        started = perf_counter()
        try:
            await factory()
        except Exception as exc:
            # write-behind: the in-memory state is kept as is
            self.last_persistence_error = exc
            log_persistence_failed(self.user_id, operation, exc)
            if self._on_persistence_error is not None:
                self._on_persistence_error(operation, exc)
        else:
            log_persisted(self.user_id, operation, (perf_counter() - started) * 1000)
        finally:
            if releases_navigation:
                await self._settle()

    async def _settle(self) -> None:
        try:
            if self.settle_delay:
                await asyncio.sleep(self.settle_delay)
        finally:
            self.navigation_in_flight = False

    async def wait_idle(self) -> None:
        """Wait until every scheduled write has finished."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def idle(self) -> bool:
        return not self._pending and not self.navigation_in_flight

    @property
    def read_count(self) -> int:
        return len(self._read_set)

    def current_verse(self) -> VerseRecord:
        return self.corpus[self.current_index]

    def current_verse_id(self) -> str:
        return self.current_verse_position().verse_id

    def current_verse_position(self) -> VersePosition:
        return self.mapper.verse_position(self.current_index)

    def current_progress(self) -> ProgressSnapshot:
        return self.progress.snapshot(self.current_index, self.read_count)

    def can_go_next(self) -> bool:
        return self.current_index < self.loaded_sequence_length - 1

    def can_go_previous(self) -> bool:
        return self.current_index > 0

    def is_first(self) -> bool:
        return self.current_index == 0

    def is_last(self) -> bool:
        return self.current_index == self.loaded_sequence_length - 1

    def is_read(self, verse_id: Optional[str] = None) -> bool:
        return (verse_id or self.current_verse_id()) in self._read_set

    def reading_position(self) -> ReadingPosition:
        position = self.current_verse_position()
        return ReadingPosition(
            userId=self.user_id,
            currentVerseIndex=self.current_index,
            currentPart=position.part_number,
            currentChapter=position.chapter_number,
            currentChapterName=position.chapter_name,
            currentChapterNameAr=position.chapter_name_ar,
            lastReadAt=datetime.now(timezone.utc),
            progressPercentage=self.progress.overall_percentage(self.current_index),
        )


__all__ = ["NavigationController", "PersistenceErrorCallback"]
