"""Completion percentages derived from a global position."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .coordinates import CoordinateMapper


def _clamp_percentage(value: float) -> float:
    return max(0.0, min(100.0, value))


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


@dataclass(frozen=True, slots=True)
class ProgressSnapshot:
    overall_percentage: float
    part_percentage: float
    chapter_percentage: float
    read_verses: int
    total_verses: int


class ProgressCalculator:
    def __init__(self, mapper: Optional[CoordinateMapper] = None) -> None:
        self.mapper = mapper or CoordinateMapper()

    @property
    def total_verses(self) -> int:
        return self.mapper.total_verses

    def overall_percentage(self, global_index: int) -> float:
        value = global_index / self.total_verses * 100
        return _round_half_up(_clamp_percentage(value), 2)

    def chapter_percentage(self, chapter: int, verse: int) -> float:
        info = self.mapper.index.chapter(chapter)
        if info is None:
            return 0.0
        value = (verse - 1) / info.verse_count * 100
        return _round_half_up(_clamp_percentage(value))

    def part_percentage(self, part: int, global_index: int) -> float:
        info = self.mapper.index.part(part)
        bounds = self.mapper.part_range(part)
        if info is None or bounds is None:
            return 0.0
        start, _ = bounds
        value = (global_index - start) / info.total_verses * 100
        return _round_half_up(_clamp_percentage(value), 2)

    def snapshot(self, global_index: int, read_count: int = 0) -> ProgressSnapshot:
        position = self.mapper.verse_position(global_index)
        return ProgressSnapshot(
            overall_percentage=self.overall_percentage(position.global_index),
            part_percentage=self.part_percentage(position.part_number, position.global_index),
            chapter_percentage=self.chapter_percentage(position.chapter_number, position.verse_number),
            read_verses=max(read_count, 0),
            total_verses=self.total_verses,
        )


__all__ = ["ProgressCalculator", "ProgressSnapshot"]
