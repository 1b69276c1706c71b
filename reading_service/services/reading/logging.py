"""Structured logging helpers for the reading engine."""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping, Optional, Sequence

from .metrics import (
    record_clamped,
    record_daily_advanced,
    record_marked,
    record_move,
    record_partial_corpus,
    record_persisted,
    record_persistence_failure,
    record_rejected,
    record_reset,
)

_LOGGER = logging.getLogger("reading_service.reading")


def _emit(level: int, event: str, *, extra: Optional[Mapping[str, Any]] = None) -> None:
    payload: MutableMapping[str, Any] = {"event": event, "source": "reading"}
    if extra:
        payload.update(extra)
    _LOGGER.log(level, event, extra=payload)


def log_moved(user_id: str, direction: str, from_index: int, to_index: int) -> None:
    record_move(direction=direction)
    _emit(
        logging.DEBUG,
        "reading.navigation.moved",
        extra={
            "user_id": user_id,
            "direction": direction,
            "from_index": from_index,
            "to_index": to_index,
        },
    )


def log_rejected(user_id: str, direction: str, reason: str, index: int) -> None:
    record_rejected(direction=direction, reason=reason)
    _emit(
        logging.DEBUG,
        "reading.navigation.rejected",
        extra={"user_id": user_id, "direction": direction, "reason": reason, "index": index},
    )


def log_clamped(operation: str, requested: Any, resolved: Any) -> None:
    record_clamped(operation=operation)
    _emit(
        logging.WARNING,
        "reading.coordinates.clamped",
        extra={"operation": operation, "requested": requested, "resolved": resolved},
    )


def log_partial_corpus(user_id: str, loaded: int, total: int) -> None:
    record_partial_corpus()
    _emit(
        logging.WARNING,
        "reading.corpus.partial",
        extra={"user_id": user_id, "loaded": loaded, "total": total},
    )


def log_corpus_normalized(loaded: int, duplicates: int, invalid: int, truncated: int) -> None:
    _emit(
        logging.INFO,
        "reading.corpus.normalized",
        extra={
            "loaded": loaded,
            "duplicates_removed": duplicates,
            "invalid_removed": invalid,
            "truncated": truncated,
        },
    )


def log_corpus_issues(issues: Sequence[str]) -> None:
    _emit(logging.WARNING, "reading.corpus.issues", extra={"issues": list(issues)})


def log_position_out_of_range(user_id: str, stored_index: int, loaded: int) -> None:
    _emit(
        logging.WARNING,
        "reading.navigation.position_out_of_range",
        extra={"user_id": user_id, "stored_index": stored_index, "loaded": loaded},
    )


def log_persisted(user_id: str, operation: str, duration_ms: float) -> None:
    record_persisted(operation=operation, duration_ms=duration_ms)
    _emit(
        logging.DEBUG,
        "reading.persistence.saved",
        extra={"user_id": user_id, "operation": operation, "duration_ms": duration_ms},
    )


def log_persistence_failed(user_id: str, operation: str, error: BaseException) -> None:
    record_persistence_failure(operation=operation)
    _emit(
        logging.ERROR,
        "reading.persistence.failed",
        extra={"user_id": user_id, "operation": operation, "error": str(error)},
    )


def log_marked(user_id: str, verse_id: str, source: str, read_count: Optional[int] = None) -> None:
    record_marked(source=source)
    _emit(
        logging.INFO,
        "reading.verse.marked",
        extra={"user_id": user_id, "verse_id": verse_id, "source": source, "read_count": read_count},
    )


def log_daily_advanced(user_id: str, from_index: int, to_index: int) -> None:
    record_daily_advanced()
    _emit(
        logging.INFO,
        "reading.daily.advanced",
        extra={"user_id": user_id, "from_index": from_index, "to_index": to_index},
    )


def log_reset(user_id: str) -> None:
    record_reset()
    _emit(logging.INFO, "reading.progress.reset", extra={"user_id": user_id})


def log_config_applied(source: str, config: Any) -> None:
    _emit(
        logging.INFO,
        "reading.config.applied",
        extra={
            "config_source": source,
            "settle_delay_ms": config.navigation.settle_delay_ms,
            "timezone": config.daily.timezone,
            "record_ttl_days": config.daily.record_ttl_days,
            "level_runtime": config.logging.level_runtime,
        },
    )


def log_config_rejected(source: str, errors: Sequence[Any]) -> None:
    _emit(
        logging.ERROR,
        "reading.config.rejected",
        extra={"config_source": source, "errors": list(errors)},
    )
