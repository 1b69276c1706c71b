import logging
from datetime import datetime

import pytest
from prometheus_client import CollectorRegistry

from reading_service.models.reading_models import ReadingPosition
from reading_service.services.reading.errors import (
    CorpusInvalid,
    InvalidJumpTarget,
    PersistenceFailure,
)
from reading_service.services.reading.navigator import NavigationController
from reading_service.services.reading.store import InMemoryPositionStore


class FailingStore(InMemoryPositionStore):
    """In-memory store whose writes can be switched off."""

    fail_saves: bool = True
    fail_reset: bool = False

    async def save_position(self, user_id: str, position: ReadingPosition) -> None:
        if self.fail_saves:
            raise ConnectionError("store offline")
        await super().save_position(user_id, position)

    async def reset_all(self, user_id: str) -> None:
        if self.fail_reset:
            raise ConnectionError("store offline")
        await super().reset_all(user_id)


async def _controller(corpus, store, **kwargs) -> NavigationController:
    controller = NavigationController("user-1", corpus, store, **kwargs)
    await controller.load()
    return controller


@pytest.mark.anyio
async def test_load_defaults_to_first_verse(full_corpus, store) -> None:
    controller = await _controller(full_corpus, store)

    assert controller.current_index == 0
    assert controller.is_first()
    assert not controller.can_go_previous()
    assert controller.current_verse().verseId == "1:1"


@pytest.mark.anyio
async def test_load_restores_stored_position_and_read_set(full_corpus, store) -> None:
    await store.save_position("user-1", ReadingPosition(userId="user-1", currentVerseIndex=42))
    await store.mark_read("user-1", "1:1", datetime.now())

    controller = await _controller(full_corpus, store)

    assert controller.current_index == 42
    assert controller.read_count == 1
    assert controller.is_read("1:1")


@pytest.mark.anyio
async def test_stored_position_past_loaded_corpus_restarts_at_first_verse(full_corpus, store, caplog) -> None:
    await store.save_position("user-1", ReadingPosition(userId="user-1", currentVerseIndex=100))

    with caplog.at_level(logging.WARNING, logger="reading_service.reading"):
        controller = await _controller(full_corpus[:50], store)

    assert controller.current_index == 0
    warnings = [r for r in caplog.records if r.getMessage() == "reading.navigation.position_out_of_range"]
    assert warnings and warnings[0].name == "reading_service.reading"
    assert warnings[0].stored_index == 100


@pytest.mark.anyio
async def test_previous_at_first_verse_is_a_noop(full_corpus, store, reading_metrics_registry: CollectorRegistry) -> None:
    controller = await _controller(full_corpus, store)

    assert await controller.previous() is False
    assert controller.current_index == 0
    assert reading_metrics_registry.get_sample_value(
        "reading_navigation_rejected_total", {"direction": "previous", "reason": "boundary"}
    ) == pytest.approx(1)


@pytest.mark.anyio
async def test_next_persists_position_write_behind(full_corpus, store) -> None:
    controller = await _controller(full_corpus, store)

    assert await controller.next() is True
    assert controller.current_index == 1
    await controller.wait_idle()

    saved = store.positions["user-1"]
    assert saved.currentVerseIndex == 1
    assert saved.currentChapter == 1
    assert saved.currentPart == 1


@pytest.mark.anyio
async def test_requests_while_navigating_are_ignored(full_corpus, store, reading_metrics_registry: CollectorRegistry) -> None:
    controller = await _controller(full_corpus, store)

    assert await controller.next() is True
    assert controller.navigation_in_flight is True
    assert await controller.next() is False
    assert await controller.jump_to(300) is False
    assert await controller.reset() is False
    assert controller.current_index == 1

    await controller.wait_idle()
    assert controller.navigation_in_flight is False
    assert await controller.next() is True
    assert controller.current_index == 2
    assert reading_metrics_registry.get_sample_value(
        "reading_navigation_rejected_total", {"direction": "next", "reason": "in_flight"}
    ) == pytest.approx(1)


@pytest.mark.anyio
async def test_settle_delay_extends_navigation(full_corpus, store) -> None:
    controller = await _controller(full_corpus, store, settle_delay=0.02)

    await controller.next()
    await controller.wait_idle()

    assert controller.navigation_in_flight is False
    assert store.positions["user-1"].currentVerseIndex == 1


@pytest.mark.anyio
async def test_jump_to_last_verse(full_corpus, store) -> None:
    controller = await _controller(full_corpus, store)

    assert await controller.jump_to(6235) is True
    position = controller.current_verse_position()

    assert (position.chapter_number, position.verse_number) == (114, 6)
    assert position.part_number == 30
    assert controller.is_last()
    assert not controller.can_go_next()

    await controller.wait_idle()
    assert await controller.next() is False
    assert controller.current_index == 6235


@pytest.mark.anyio
@pytest.mark.parametrize("target", [-1, 6236, True, "5"])
async def test_jump_rejects_invalid_targets(full_corpus, store, target) -> None:
    controller = await _controller(full_corpus, store)

    with pytest.raises(InvalidJumpTarget) as excinfo:
        await controller.jump_to(target)

    assert excinfo.value.status == 400
    assert controller.current_index == 0


@pytest.mark.anyio
async def test_invalid_jump_raises_even_while_navigating(full_corpus, store) -> None:
    controller = await _controller(full_corpus, store)
    await controller.next()

    with pytest.raises(InvalidJumpTarget):
        await controller.jump_to(7000)


@pytest.mark.anyio
async def test_mark_current_as_read_is_idempotent(full_corpus, store) -> None:
    controller = await _controller(full_corpus, store)

    assert await controller.mark_current_as_read() is True
    assert await controller.mark_current_as_read() is False
    await controller.wait_idle()

    assert controller.read_count == 1
    assert controller.is_read()
    assert store.read_sets["user-1"] == {"1:1"}
    assert len(store.read_history["user-1"]) == 1


@pytest.mark.anyio
async def test_reset_after_reading(full_corpus, store, reading_metrics_registry: CollectorRegistry) -> None:
    controller = await _controller(full_corpus, store)

    await controller.jump_to(500)
    await controller.wait_idle()
    for _ in range(3):
        await controller.mark_current_as_read()
        await controller.next()
        await controller.wait_idle()
    assert controller.read_count == 3
    assert controller.current_index == 503

    assert await controller.reset() is True

    assert controller.current_index == 0
    assert controller.read_count == 0
    assert controller.current_progress().overall_percentage == 0.0
    assert store.positions["user-1"].currentVerseIndex == 0
    assert "user-1" not in store.read_sets
    assert reading_metrics_registry.get_sample_value("reading_resets_total") == pytest.approx(1)


@pytest.mark.anyio
async def test_persistence_failure_keeps_in_memory_move(full_corpus, reading_metrics_registry: CollectorRegistry) -> None:
    store = FailingStore()
    seen = []
    controller = await _controller(
        full_corpus, store, on_persistence_error=lambda operation, error: seen.append((operation, error))
    )

    assert await controller.next() is True
    await controller.wait_idle()

    assert controller.current_index == 1
    assert controller.navigation_in_flight is False
    assert isinstance(controller.last_persistence_error, ConnectionError)
    assert seen and seen[0][0] == "save_position"
    assert "user-1" not in store.positions
    assert reading_metrics_registry.get_sample_value(
        "reading_persistence_failures_total", {"operation": "save_position"}
    ) == pytest.approx(1)


@pytest.mark.anyio
async def test_reset_failure_is_raised_after_in_memory_reset(full_corpus) -> None:
    store = FailingStore()
    store.fail_saves = False
    store.fail_reset = True
    controller = await _controller(full_corpus, store)
    await controller.jump_to(10)
    await controller.wait_idle()

    with pytest.raises(PersistenceFailure) as excinfo:
        await controller.reset()

    assert excinfo.value.detail["operation"] == "reset_all"
    assert controller.current_index == 0
    assert controller.navigation_in_flight is False


@pytest.mark.anyio
async def test_partial_corpus_bounds_navigation(full_corpus, store, reading_metrics_registry: CollectorRegistry) -> None:
    await store.save_position("user-1", ReadingPosition(userId="user-1", currentVerseIndex=500))

    controller = await _controller(full_corpus[:100], store)

    assert controller.loaded_sequence_length == 100
    assert controller.current_index == 0
    assert reading_metrics_registry.get_sample_value("reading_partial_corpus_total") == pytest.approx(1)

    await controller.jump_to(99)
    assert controller.is_last()
    with pytest.raises(InvalidJumpTarget):
        await controller.jump_to(100)


def test_corpus_longer_than_index_is_rejected(full_corpus, store) -> None:
    oversized = list(full_corpus) + [full_corpus[-1]]

    with pytest.raises(CorpusInvalid):
        NavigationController("user-1", oversized, store)


def test_empty_corpus_is_rejected(store) -> None:
    with pytest.raises(CorpusInvalid):
        NavigationController("user-1", [], store)
