"""Conversions between global positions and chapter/verse coordinates."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .logging import log_clamped
from .reference_index import ReferenceIndex, default_reference_index

_VERSE_ID_RE = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")


@dataclass(frozen=True, slots=True)
class VersePosition:
    global_index: int
    chapter_number: int
    verse_number: int
    part_number: int
    chapter_name: str
    chapter_name_ar: str

    @property
    def verse_id(self) -> str:
        return f"{self.chapter_number}:{self.verse_number}"


class CoordinateMapper:
    """Pure coordinate math over a validated ``ReferenceIndex``.

    Out-of-range global positions are clamped into the corpus instead of
    raising; every clamp is logged and counted so a partially loaded dataset
    shows up in ``reading_coordinate_clamped_total``.
    """

    def __init__(self, index: Optional[ReferenceIndex] = None) -> None:
        self.index = index or default_reference_index()

    @property
    def total_verses(self) -> int:
        return self.index.total_verses

    def global_index(self, chapter: int, verse: int) -> int:
        info = self.index.chapter(chapter)
        if info is None:
            raise ValueError(f"Unknown chapter {chapter}")
        if not 1 <= verse <= info.verse_count:
            raise ValueError(f"Verse {verse} is outside chapter {chapter} (1..{info.verse_count})")
        return self.index.chapter_offsets[chapter - 1] + verse - 1

    def clamp(self, position: int, *, operation: str = "from_global_index") -> int:
        """Saturate ``position`` into ``[0, total_verses)``."""

        last = self.total_verses - 1
        if position > last:
            log_clamped(operation, position, last)
            return last
        if position < 0:
            log_clamped(operation, position, 0)
            return 0
        return position

    def from_global_index(self, position: int) -> Tuple[int, int]:
        position = self.clamp(position)
        chapter = self.index.chapter_for_offset(position)
        verse = position - self.index.chapter_offsets[chapter - 1] + 1
        return chapter, verse

    def part_for_chapter_verse(self, chapter: int, verse: int) -> int:
        try:
            position = self.global_index(chapter, verse)
        except ValueError:
            log_clamped("part_lookup", f"{chapter}:{verse}", 1)
            return 1
        return self.part_for_global_index(position)

    def part_for_global_index(self, position: int) -> int:
        for number, (start, end) in enumerate(self.index.part_ranges, start=1):
            if start <= position <= end:
                return number
        log_clamped("part_lookup", position, 1)
        return 1

    def verse_position(self, global_index: int) -> VersePosition:
        chapter, verse = self.from_global_index(global_index)
        info = self.index.chapter(chapter)
        return VersePosition(
            global_index=self.global_index(chapter, verse),
            chapter_number=chapter,
            verse_number=verse,
            part_number=self.part_for_chapter_verse(chapter, verse),
            chapter_name=info.name if info else "",
            chapter_name_ar=info.name_ar if info else "",
        )

    def part_range(self, part: int) -> Optional[Tuple[int, int]]:
        return self.index.part_range(part)

    def verses_in_part(self, part: int) -> List[VersePosition]:
        bounds = self.index.part_range(part)
        if bounds is None:
            return []
        start, end = bounds
        return [self.verse_position(i) for i in range(start, end + 1)]

    # ------------------------------------------------------------- identifiers -
    def verse_id(self, global_index: int) -> str:
        chapter, verse = self.from_global_index(global_index)
        return f"{chapter}:{verse}"

    def parse_verse_id(self, verse_id: str) -> int:
        """Return the global index for a ``"<chapter>:<verse>"`` identifier."""

        match = _VERSE_ID_RE.match(verse_id or "")
        if not match:
            raise ValueError(f"Malformed verse id {verse_id!r}")
        return self.global_index(int(match.group(1)), int(match.group(2)))


__all__ = ["CoordinateMapper", "VersePosition"]
