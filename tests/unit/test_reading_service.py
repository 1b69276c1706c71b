from datetime import datetime, timedelta, timezone

import pytest

from reading_service.services.reading.config_schema import ReadingConfig
from reading_service.services.reading.errors import PersistenceFailure, ResetNotConfirmed
from reading_service.services.reading.service import ReadingService
from reading_service.services.reading.store import InMemoryPositionStore


@pytest.fixture
def service(store, full_corpus, mapper) -> ReadingService:
    return ReadingService(store, full_corpus, {"daily": {"timezone": "UTC"}}, mapper=mapper)


@pytest.mark.anyio
async def test_state_starts_at_first_verse(service: ReadingService) -> None:
    state = await service.get_state("u")

    assert state.userId == "u"
    assert state.position.verseId == "1:1"
    assert state.navigation.isFirst is True
    assert state.navigation.canGoPrevious is False
    assert state.progress.overallPercentage == 0.0
    assert state.loadedVerses == 6236
    assert state.committed is None


@pytest.mark.anyio
async def test_controller_is_cached_per_user(service: ReadingService) -> None:
    first = await service.controller("u")
    second = await service.controller("u")
    other = await service.controller("v")

    assert first is second
    assert other is not first


@pytest.mark.anyio
async def test_navigation_round_trip(service: ReadingService) -> None:
    moved = await service.next("u")
    assert moved.committed is True
    assert moved.position.verseId == "1:2"
    await service.shutdown()

    back = await service.previous("u")
    assert back.committed is True
    assert back.position.verseId == "1:1"
    await service.shutdown()

    jumped = await service.jump("u", 6235)
    assert jumped.position.verseId == "114:6"
    assert jumped.position.partNumber == 30
    assert jumped.navigation.isLast is True
    assert jumped.navigation.canGoNext is False


@pytest.mark.anyio
async def test_reset_requires_confirmation(service: ReadingService) -> None:
    with pytest.raises(ResetNotConfirmed):
        await service.reset("u", confirm=False)

    await service.jump("u", 10)
    await service.shutdown()
    state = await service.reset("u", confirm=True)

    assert state.committed is True
    assert state.position.globalIndex == 0


@pytest.mark.anyio
async def test_mark_read_and_progress_summary(service: ReadingService, store: InMemoryPositionStore) -> None:
    state = await service.mark_read("u")
    assert state.committed is True
    assert state.isRead is True
    await service.shutdown()

    today = datetime.now(timezone.utc)
    store.read_history["u"] = [today - timedelta(days=2), today - timedelta(days=1), today]

    summary = await service.get_progress_summary("u")

    assert summary.readVerses == 1
    assert summary.totalVerses == 6236
    assert summary.currentStreak == 3
    assert summary.longestStreak == 3
    assert summary.lastReadDate == today


@pytest.mark.anyio
async def test_daily_read_updates_cached_controller(service: ReadingService, store: InMemoryPositionStore) -> None:
    await service.get_state("u")

    daily = await service.get_daily_verse("u")
    assert daily.position.verseId == "1:1"
    assert daily.isRead is False

    marked = await service.mark_daily_read("u")
    assert marked.isRead is True
    assert store.daily_cursors["u"] == 1

    state = await service.get_state("u")
    assert state.isRead is True
    assert state.progress.readVerses == 1


@pytest.mark.anyio
async def test_progress_summary_wraps_store_errors(full_corpus, mapper) -> None:
    class BrokenHistoryStore(InMemoryPositionStore):
        async def load_read_history(self, user_id, limit=30):
            raise ConnectionError("store offline")

    service = ReadingService(BrokenHistoryStore(), full_corpus, mapper=mapper)

    with pytest.raises(PersistenceFailure):
        await service.get_progress_summary("u")


def test_verses_in_part(service: ReadingService) -> None:
    part = service.verses_in_part(1)

    assert part is not None
    assert part.totalVerses == 148
    assert len(part.verses) == 148
    assert part.verses[-1].verseId == "2:141"
    assert service.verses_in_part(0) is None


@pytest.mark.anyio
async def test_update_config_changes_settle_delay(service: ReadingService) -> None:
    controller = await service.controller("u")

    service.update_config(ReadingConfig.model_validate({"navigation": {"settle_delay_ms": 250}}))

    assert controller.settle_delay == pytest.approx(0.25)
    assert service.config.navigation.settle_delay_ms == 250


@pytest.mark.anyio
async def test_idle_controllers_are_evicted(store, full_corpus, mapper) -> None:
    service = ReadingService(
        store, full_corpus, {"navigation": {"max_cached_controllers": 2}}, mapper=mapper
    )

    first = await service.controller("a")
    await service.controller("b")
    await service.controller("c")

    assert await service.controller("a") is not first
