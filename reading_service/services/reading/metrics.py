"""Prometheus-backed metrics for the reading engine."""

from __future__ import annotations

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram


class ReadingMetrics:
    """Container for reading-domain Prometheus metrics."""

    def __init__(self, *, registry: CollectorRegistry | None = None) -> None:
        kwargs = {"registry": registry} if registry is not None else {}

        # Navigation -------------------------------------------------------------
        self.navigation_moves = Counter(
            "reading_navigation_moves_total",
            "Committed navigation moves.",
            ["direction"],
            **kwargs,
        )
        self.navigation_rejected = Counter(
            "reading_navigation_rejected_total",
            "Navigation requests that did not commit a move.",
            ["direction", "reason"],
            **kwargs,
        )

        # Coordinates --------------------------------------------------------------
        self.coordinate_clamped = Counter(
            "reading_coordinate_clamped_total",
            "Coordinate lookups that fell back to a clamped or default value.",
            ["operation"],
            **kwargs,
        )
        self.partial_corpus = Counter(
            "reading_partial_corpus_total",
            "Controllers created over a corpus shorter than the reference index.",
            **kwargs,
        )

        # Persistence --------------------------------------------------------------
        self.persistence_duration = Histogram(
            "reading_persistence_duration_seconds",
            "Latency of position store writes.",
            ["operation"],
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2),
            **kwargs,
        )
        self.persistence_failures = Counter(
            "reading_persistence_failures_total",
            "Position store writes that raised.",
            ["operation"],
            **kwargs,
        )

        # Reading ------------------------------------------------------------------
        self.verses_marked = Counter(
            "reading_verses_marked_total",
            "Verses newly added to a read set.",
            ["source"],
            **kwargs,
        )
        self.daily_advanced = Counter(
            "reading_daily_cursor_advanced_total",
            "Daily cursor advancements.",
            **kwargs,
        )
        self.resets = Counter(
            "reading_resets_total",
            "Explicit full resets of reading progress.",
            **kwargs,
        )

    # --------------------------------------------------------------------- API -
    def record_move(self, *, direction: str) -> None:
        self.navigation_moves.labels(direction=direction).inc()

    def record_rejected(self, *, direction: str, reason: str) -> None:
        self.navigation_rejected.labels(direction=direction, reason=reason).inc()

    def record_clamped(self, *, operation: str) -> None:
        self.coordinate_clamped.labels(operation=operation).inc()

    def record_partial_corpus(self) -> None:
        self.partial_corpus.inc()

    def record_persisted(self, *, operation: str, duration_ms: float) -> None:
        self.persistence_duration.labels(operation=operation).observe(max(duration_ms, 0.0) / 1000.0)

    def record_persistence_failure(self, *, operation: str) -> None:
        self.persistence_failures.labels(operation=operation).inc()

    def record_marked(self, *, source: str) -> None:
        self.verses_marked.labels(source=source).inc()

    def record_daily_advanced(self) -> None:
        self.daily_advanced.inc()

    def record_reset(self) -> None:
        self.resets.inc()


_default_metrics: Optional[ReadingMetrics] = ReadingMetrics()
_metrics: Optional[ReadingMetrics] = _default_metrics


def set_metrics(metrics: Optional[ReadingMetrics]) -> None:
    """Override the global metrics collector (primarily for tests)."""

    global _metrics
    _metrics = metrics


def reset_metrics() -> None:
    """Reset the global metrics collector to the default instance."""

    global _metrics
    _metrics = _default_metrics


def get_metrics() -> Optional[ReadingMetrics]:
    """Return the current metrics collector, if metrics are enabled."""

    return _metrics


def record_move(*, direction: str) -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_move(direction=direction)


def record_rejected(*, direction: str, reason: str) -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_rejected(direction=direction, reason=reason)


def record_clamped(*, operation: str) -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_clamped(operation=operation)


def record_partial_corpus() -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_partial_corpus()


def record_persisted(*, operation: str, duration_ms: float) -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_persisted(operation=operation, duration_ms=duration_ms)


def record_persistence_failure(*, operation: str) -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_persistence_failure(operation=operation)


def record_marked(*, source: str) -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_marked(source=source)


def record_daily_advanced() -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_daily_advanced()


def record_reset() -> None:
    metrics = get_metrics()
    if metrics is not None:
        metrics.record_reset()


__all__ = [
    "ReadingMetrics",
    "CollectorRegistry",
    "get_metrics",
    "record_clamped",
    "record_daily_advanced",
    "record_marked",
    "record_move",
    "record_partial_corpus",
    "record_persisted",
    "record_persistence_failure",
    "record_rejected",
    "record_reset",
    "reset_metrics",
    "set_metrics",
]
