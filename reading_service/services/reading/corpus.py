"""Loading and normalising the ordered verse sequence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ...models.reading_models import VerseRecord
from .logging import log_corpus_issues, log_corpus_normalized
from .reference_index import ReferenceIndex, default_reference_index


@dataclass(slots=True)
class CorpusReport:
    records: List[VerseRecord]
    duplicates_removed: int = 0
    invalid_removed: int = 0
    missing: int = 0
    truncated: int = 0
    issues: List[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return self.missing == 0 and not self.issues


def _first_int(row: Mapping[str, Any], *names: str) -> Optional[int]:
    for name in names:
        value = row.get(name)
        if value is None or isinstance(value, bool):
            continue
        try:
            number = int(value)
        except (TypeError, ValueError):
            continue
        if number > 0:
            return number
    return None


def _to_record(row: Mapping[str, Any]) -> Optional[VerseRecord]:
    chapter = _first_int(row, "chapterNumber", "surahNumber", "chapter", "surah")
    verse = _first_int(row, "verseNumber", "ayah", "verse")
    if chapter is None or verse is None:
        return None
    return VerseRecord(
        verseId=str(row.get("verseId") or row.get("id") or f"{chapter}:{verse}"),
        chapterNumber=chapter,
        verseNumber=verse,
        text=row.get("text") or row.get("arabic"),
        translation=row.get("translation"),
    )


def normalize_corpus(
    rows: Iterable[Mapping[str, Any] | VerseRecord],
    *,
    index: Optional[ReferenceIndex] = None,
) -> CorpusReport:
    """Deduplicate, drop unknown coordinates and sort into reading order."""

    index = index or default_reference_index()
    seen: Dict[tuple, VerseRecord] = {}
    duplicates = 0
    invalid = 0

    for row in rows:
        record = row if isinstance(row, VerseRecord) else _to_record(row)
        if record is None:
            invalid += 1
            continue
        info = index.chapter(record.chapterNumber)
        if info is None or record.verseNumber > info.verse_count:
            invalid += 1
            continue
        key = (record.chapterNumber, record.verseNumber)
        if key in seen:
            duplicates += 1
            continue
        seen[key] = record

    records = sorted(seen.values(), key=lambda r: (r.chapterNumber, r.verseNumber))
    issues = validate_sequence(records, index)
    # positions map to coordinates by index, so nothing past a gap is servable
    contiguous = contiguous_length(records, index)
    report = CorpusReport(
        records=records[:contiguous],
        duplicates_removed=duplicates,
        invalid_removed=invalid,
        missing=index.total_verses - contiguous,
        truncated=len(records) - contiguous,
        issues=issues,
    )

    if duplicates or invalid or report.truncated:
        log_corpus_normalized(contiguous, duplicates, invalid, report.truncated)
    if issues:
        log_corpus_issues(issues)
    return report


def contiguous_length(records: Sequence[VerseRecord], index: ReferenceIndex) -> int:
    """Number of leading records whose position matches their global index."""

    offsets = index.chapter_offsets
    for position, record in enumerate(records):
        if offsets[record.chapterNumber - 1] + record.verseNumber - 1 != position:
            return position
    return len(records)


def validate_sequence(records: Sequence[VerseRecord], index: ReferenceIndex) -> List[str]:
    """Return human-readable problems with the order of ``records``."""

    issues: List[str] = []
    if not records:
        return ["corpus is empty"]

    first = records[0]
    if (first.chapterNumber, first.verseNumber) != (1, 1):
        issues.append(f"first verse is {first.chapterNumber}:{first.verseNumber}, expected 1:1")

    offsets = index.chapter_offsets
    previous = -1
    for position, record in enumerate(records):
        global_index = offsets[record.chapterNumber - 1] + record.verseNumber - 1
        if global_index <= previous:
            issues.append(f"verse {record.chapterNumber}:{record.verseNumber} at {position} is out of order")
        elif global_index != position:
            # positional lookups would no longer match coordinates past a gap
            issues.append(f"gap before {record.chapterNumber}:{record.verseNumber} (position {position})")
            break
        previous = global_index
    return issues


def skeleton_corpus(index: Optional[ReferenceIndex] = None) -> List[VerseRecord]:
    """Identifier-only records for every verse in the index."""

    index = index or default_reference_index()
    return [
        VerseRecord(verseId=f"{chapter.number}:{verse}", chapterNumber=chapter.number, verseNumber=verse)
        for chapter in index.chapters
        for verse in range(1, chapter.verse_count + 1)
    ]


def load_corpus_file(path: str | Path, *, index: Optional[ReferenceIndex] = None) -> CorpusReport:
    """Read a JSON array of verse objects and normalise it."""

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(raw, dict):
        raw = raw.get("verses", [])
    if not isinstance(raw, list):
        raise ValueError(f"Corpus file {path} must contain a JSON array of verses")
    return normalize_corpus((row for row in raw if isinstance(row, dict)), index=index)


__all__ = [
    "CorpusReport",
    "contiguous_length",
    "load_corpus_file",
    "normalize_corpus",
    "skeleton_corpus",
    "validate_sequence",
]
