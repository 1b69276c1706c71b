"""Thin facade over the per-user reading collaborators."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from typing import Any, Dict, Optional, Sequence

from ...models.reading_models import (
    DailyVerseResponse,
    NavigationFlags,
    PartVersesResponse,
    ProgressModel,
    ProgressSummaryResponse,
    ReadingStateResponse,
    VersePositionModel,
    VerseRecord,
)
from .config_schema import ReadingConfig, load_reading_config
from .coordinates import CoordinateMapper, VersePosition
from .daily import DailySelection, DailySelectionPolicy
from .errors import PersistenceFailure, ResetNotConfirmed
from .navigator import NavigationController
from .progress import ProgressSnapshot
from .store import PositionStore
from .streaks import current_streak, longest_streak, reading_days
from .tz_utils import today_in_tz


def position_model(position: VersePosition) -> VersePositionModel:
    return VersePositionModel(
        globalIndex=position.global_index,
        chapterNumber=position.chapter_number,
        verseNumber=position.verse_number,
        partNumber=position.part_number,
        chapterName=position.chapter_name,
        chapterNameAr=position.chapter_name_ar,
        verseId=position.verse_id,
    )


def progress_model(snapshot: ProgressSnapshot) -> ProgressModel:
    return ProgressModel(
        overallPercentage=snapshot.overall_percentage,
        partPercentage=snapshot.part_percentage,
        chapterPercentage=snapshot.chapter_percentage,
        readVerses=snapshot.read_verses,
        totalVerses=snapshot.total_verses,
    )


class ReadingService:
    """Facade entry point that keeps one navigation controller per user."""

    def __init__(
        self,
        store: PositionStore,
        corpus: Sequence[VerseRecord],
        config: ReadingConfig | Dict[str, Any] | None = None,
        *,
        mapper: Optional[CoordinateMapper] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger("reading_service.reading.facade")
        self._store = store
        self._corpus = corpus
        self._mapper = mapper or CoordinateMapper()
        self._config = config if isinstance(config, ReadingConfig) else load_reading_config(config)
        self._controllers: "OrderedDict[str, NavigationController]" = OrderedDict()
        self._controllers_lock = asyncio.Lock()
        self._daily = self._build_daily_policy()

    @property
    def config(self) -> ReadingConfig:
        return self._config

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    def update_config(self, config: ReadingConfig | Dict[str, Any]) -> None:
        """Apply a new reading configuration at runtime."""

        self._config = config if isinstance(config, ReadingConfig) else load_reading_config(config)
        self._daily = self._build_daily_policy()
        for controller in self._controllers.values():
            controller.settle_delay = self._settle_delay
        self._logger.info(
            "reading.facade.config_updated",
            extra={
                "settle_delay_ms": self._config.navigation.settle_delay_ms,
                "timezone": self._config.daily.timezone,
            },
        )

    @property
    def _settle_delay(self) -> float:
        return self._config.navigation.settle_delay_ms / 1000

    def _build_daily_policy(self) -> DailySelectionPolicy:
        daily = self._config.daily
        return DailySelectionPolicy(
            self._store,
            mapper=self._mapper,
            corpus=self._corpus,
            timezone_name=daily.timezone,
            record_ttl_days=daily.record_ttl_days,
            mark_in_read_set=daily.mark_in_read_set,
        )

    # ------------------------------------------------------------------
    # Controllers
    # ------------------------------------------------------------------
    async def controller(self, user_id: str) -> NavigationController:
        """Return the loaded controller for ``user_id``, creating it on first use."""

        cached = self._controllers.get(user_id)
        if cached is not None:
            self._controllers.move_to_end(user_id)
            return cached

        async with self._controllers_lock:
            cached = self._controllers.get(user_id)
            if cached is not None:
                return cached
            controller = NavigationController(
                user_id,
                self._corpus,
                self._store,
                mapper=self._mapper,
                settle_delay=self._settle_delay,
            )
            await controller.load()
            self._controllers[user_id] = controller
            self._evict_idle()
            return controller

    def _evict_idle(self) -> None:
        limit = self._config.navigation.max_cached_controllers
        if len(self._controllers) <= limit:
            return
        for user_id in list(self._controllers):
            if len(self._controllers) <= limit:
                break
            # controllers with pending writes keep their tasks alive
            if self._controllers[user_id].idle:
                self._controllers.pop(user_id)

    def _state(self, controller: NavigationController, committed: Optional[bool] = None) -> ReadingStateResponse:
        position = controller.current_verse_position()
        return ReadingStateResponse(
            userId=controller.user_id,
            verse=controller.current_verse(),
            position=position_model(position),
            navigation=NavigationFlags(
                canGoNext=controller.can_go_next(),
                canGoPrevious=controller.can_go_previous(),
                isFirst=controller.is_first(),
                isLast=controller.is_last(),
            ),
            progress=progress_model(controller.current_progress()),
            isRead=controller.is_read(position.verse_id),
            loadedVerses=controller.loaded_sequence_length,
            committed=committed,
        )

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    async def get_state(self, user_id: str) -> ReadingStateResponse:
        return self._state(await self.controller(user_id))

    async def next(self, user_id: str) -> ReadingStateResponse:
        controller = await self.controller(user_id)
        committed = await controller.next()
        return self._state(controller, committed)

    async def previous(self, user_id: str) -> ReadingStateResponse:
        controller = await self.controller(user_id)
        committed = await controller.previous()
        return self._state(controller, committed)

    async def jump(self, user_id: str, index: int) -> ReadingStateResponse:
        controller = await self.controller(user_id)
        committed = await controller.jump_to(index)
        return self._state(controller, committed)

    async def reset(self, user_id: str, *, confirm: bool) -> ReadingStateResponse:
        if not confirm:
            raise ResetNotConfirmed("Reset requires explicit confirmation", user_id=user_id)
        controller = await self.controller(user_id)
        committed = await controller.reset()
        return self._state(controller, committed)

    async def mark_read(self, user_id: str) -> ReadingStateResponse:
        controller = await self.controller(user_id)
        committed = await controller.mark_current_as_read()
        return self._state(controller, committed)

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------
    async def get_progress_summary(self, user_id: str) -> ProgressSummaryResponse:
        controller = await self.controller(user_id)
        limit = self._config.persistence.history_limit
        try:
            history = await self._store.load_read_history(user_id, limit)
        except Exception as exc:
            raise PersistenceFailure(
                "Failed to load reading history",
                user_id=user_id,
                detail={"operation": "load_read_history", "error": str(exc)},
            ) from exc

        tz = self._daily.timezone
        days = reading_days(history, tz)
        return ProgressSummaryResponse(
            userId=user_id,
            readVerses=controller.read_count,
            totalVerses=self._mapper.total_verses,
            currentStreak=current_streak(days, today_in_tz(tz)),
            longestStreak=longest_streak(days),
            lastReadDate=max(history) if history else None,
            currentVerseIndex=controller.current_index,
            progress=progress_model(controller.current_progress()),
        )

    # ------------------------------------------------------------------
    # Daily verse
    # ------------------------------------------------------------------
    def _daily_response(self, selection: DailySelection) -> DailyVerseResponse:
        return DailyVerseResponse(
            userId=selection.user_id,
            date=selection.record.date,
            verse=selection.verse,
            position=position_model(selection.position),
            isRead=selection.record.isRead,
            readAt=selection.record.readAt,
        )

    async def get_daily_verse(self, user_id: str) -> DailyVerseResponse:
        return self._daily_response(await self._daily.todays_verse(user_id))

    async def mark_daily_read(self, user_id: str) -> DailyVerseResponse:
        selection = await self._daily.mark_read(user_id)
        cached = self._controllers.get(user_id)
        if cached is not None and self._config.daily.mark_in_read_set:
            cached.remember_read(selection.record.verseId)
        return self._daily_response(selection)

    # ------------------------------------------------------------------
    # Reference lookups
    # ------------------------------------------------------------------
    def verses_in_part(self, number: int) -> Optional[PartVersesResponse]:
        part = self._mapper.index.part(number)
        if part is None:
            return None
        return PartVersesResponse(
            partNumber=part.number,
            name=part.name,
            nameAr=part.name_ar,
            totalVerses=part.total_verses,
            verses=[position_model(position) for position in self._mapper.verses_in_part(number)],
        )

    async def shutdown(self) -> None:
        """Wait for every pending write-behind task."""

        controllers = list(self._controllers.values())
        await asyncio.gather(*(controller.wait_idle() for controller in controllers))
        self._logger.info("reading.facade.shutdown", extra={"controllers": len(controllers)})


__all__ = ["ReadingService", "position_model", "progress_model"]
