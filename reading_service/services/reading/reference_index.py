"""Static catalog of structural parts and chapters."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ...data.quran import QURAN_CHAPTERS, QURAN_PARTS, TOTAL_VERSES
from .errors import ReferenceIndexInvalid


@dataclass(frozen=True, slots=True)
class StructuralPart:
    number: int
    name: str
    name_ar: str
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int
    total_verses: int


@dataclass(frozen=True, slots=True)
class ChapterInfo:
    number: int
    name: str
    name_ar: str
    verse_count: int
    parts: Tuple[int, ...]


class ReferenceIndex:
    """Validated lookup tables for parts and chapters.

    ``chapter_offsets[i]`` is the global index of the first verse of chapter
    ``i + 1``; the list has one trailing entry equal to ``total_verses`` so
    every chapter's range is ``[offsets[i], offsets[i + 1])``.
    """

    def __init__(
        self,
        parts: Sequence[StructuralPart],
        chapters: Sequence[ChapterInfo],
        total_verses: int,
    ) -> None:
        self._parts: Tuple[StructuralPart, ...] = tuple(parts)
        self._chapters: Tuple[ChapterInfo, ...] = tuple(chapters)
        self.total_verses = int(total_verses)

        offsets: List[int] = [0]
        for chapter in self._chapters:
            offsets.append(offsets[-1] + chapter.verse_count)
        self._chapter_offsets: Tuple[int, ...] = tuple(offsets)

        self.validate()

        self._part_ranges: Tuple[Tuple[int, int], ...] = tuple(
            (
                self._offset_of(part.start_chapter, part.start_verse),
                self._offset_of(part.end_chapter, part.end_verse),
            )
            for part in self._parts
        )

    # ------------------------------------------------------------------ lookup -
    @property
    def parts(self) -> Tuple[StructuralPart, ...]:
        return self._parts

    @property
    def chapters(self) -> Tuple[ChapterInfo, ...]:
        return self._chapters

    @property
    def chapter_offsets(self) -> Tuple[int, ...]:
        return self._chapter_offsets

    @property
    def part_ranges(self) -> Tuple[Tuple[int, int], ...]:
        return self._part_ranges

    def chapter(self, number: int) -> Optional[ChapterInfo]:
        if 1 <= number <= len(self._chapters):
            return self._chapters[number - 1]
        return None

    def part(self, number: int) -> Optional[StructuralPart]:
        if 1 <= number <= len(self._parts):
            return self._parts[number - 1]
        return None

    def part_range(self, number: int) -> Optional[Tuple[int, int]]:
        if 1 <= number <= len(self._part_ranges):
            return self._part_ranges[number - 1]
        return None

    def chapter_for_offset(self, position: int) -> int:
        """Return the chapter ordinal whose range contains ``position``.

        ``position`` must already be inside ``[0, total_verses)``.
        """

        return bisect_right(self._chapter_offsets, position)

    # -------------------------------------------------------------- validation -
    def _offset_of(self, chapter: int, verse: int) -> int:
        return self._chapter_offsets[chapter - 1] + verse - 1

    def _fail(self, message: str, **detail: Any) -> None:
        raise ReferenceIndexInvalid(message, detail=detail)

    def validate(self) -> None:
        """Check the tables against each other; raise ``ReferenceIndexInvalid``."""

        if not self._chapters:
            self._fail("Reference index has no chapters")
        if not self._parts:
            self._fail("Reference index has no parts")

        for expected, chapter in enumerate(self._chapters, start=1):
            if chapter.number != expected:
                self._fail("Chapters are not contiguous", expected=expected, found=chapter.number)
            if chapter.verse_count <= 0:
                self._fail("Chapter has no verses", chapter=chapter.number)

        declared_total = self._chapter_offsets[-1]
        if declared_total != self.total_verses:
            self._fail(
                "Chapter verse counts do not sum to the corpus total",
                chapters_total=declared_total,
                total_verses=self.total_verses,
            )

        previous_end: Optional[int] = None
        for expected, part in enumerate(self._parts, start=1):
            if part.number != expected:
                self._fail("Parts are not contiguous", expected=expected, found=part.number)
            for chapter_no, verse_no in (
                (part.start_chapter, part.start_verse),
                (part.end_chapter, part.end_verse),
            ):
                chapter = self.chapter(chapter_no)
                if chapter is None or not 1 <= verse_no <= chapter.verse_count:
                    self._fail(
                        "Part boundary points outside the chapter table",
                        part=part.number,
                        chapter=chapter_no,
                        verse=verse_no,
                    )
            start = self._offset_of(part.start_chapter, part.start_verse)
            end = self._offset_of(part.end_chapter, part.end_verse)
            if end < start:
                self._fail("Part ends before it starts", part=part.number)
            expected_start = 0 if previous_end is None else previous_end + 1
            if start != expected_start:
                self._fail(
                    "Part boundaries leave a gap or overlap",
                    part=part.number,
                    start=start,
                    expected_start=expected_start,
                )
            if end - start + 1 != part.total_verses:
                self._fail(
                    "Part verse total does not match its boundaries",
                    part=part.number,
                    declared=part.total_verses,
                    span=end - start + 1,
                )
            previous_end = end

        if previous_end != self.total_verses - 1:
            self._fail("Parts do not cover the whole corpus", last_index=previous_end)

        for chapter in self._chapters:
            first = self._chapter_offsets[chapter.number - 1]
            last = self._chapter_offsets[chapter.number] - 1
            spanned = tuple(
                part.number
                for part in self._parts
                if self._offset_of(part.start_chapter, part.start_verse) <= last
                and self._offset_of(part.end_chapter, part.end_verse) >= first
            )
            if spanned != tuple(chapter.parts):
                self._fail(
                    "Chapter part list does not match part boundaries",
                    chapter=chapter.number,
                    declared=list(chapter.parts),
                    computed=list(spanned),
                )

    # ------------------------------------------------------------ construction -
    @classmethod
    def from_tables(
        cls,
        parts: Iterable[Mapping[str, Any]],
        chapters: Iterable[Mapping[str, Any]],
        total_verses: int,
    ) -> "ReferenceIndex":
        """Build an index from raw table rows (see ``data.quran``)."""

        try:
            part_rows = [
                StructuralPart(
                    number=int(row["number"]),
                    name=str(row["name"]),
                    name_ar=str(row.get("name_ar", "")),
                    start_chapter=int(row["start"][0]),
                    start_verse=int(row["start"][1]),
                    end_chapter=int(row["end"][0]),
                    end_verse=int(row["end"][1]),
                    total_verses=int(row["total_verses"]),
                )
                for row in parts
            ]
            chapter_rows = [
                ChapterInfo(
                    number=int(row["number"]),
                    name=str(row["name"]),
                    name_ar=str(row.get("name_ar", "")),
                    verse_count=int(row["verses"]),
                    parts=tuple(int(p) for p in row["parts"]),
                )
                for row in chapters
            ]
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ReferenceIndexInvalid(
                "Malformed reference table row",
                detail={"error": str(exc)},
            ) from exc
        return cls(part_rows, chapter_rows, total_verses)

    def describe(self) -> Dict[str, int]:
        return {
            "parts": len(self._parts),
            "chapters": len(self._chapters),
            "total_verses": self.total_verses,
        }


@lru_cache(maxsize=1)
def default_reference_index() -> ReferenceIndex:
    """Return the validated Quran reference index (built once)."""

    return ReferenceIndex.from_tables(QURAN_PARTS, QURAN_CHAPTERS, TOTAL_VERSES)


__all__ = [
    "ChapterInfo",
    "ReferenceIndex",
    "StructuralPart",
    "default_reference_index",
]
