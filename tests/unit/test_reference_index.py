import copy

import pytest

from reading_service.data.quran import QURAN_CHAPTERS, QURAN_PARTS, TOTAL_VERSES
from reading_service.services.reading.errors import ReferenceIndexInvalid
from reading_service.services.reading.reference_index import (
    ReferenceIndex,
    default_reference_index,
)


def _tables():
    return copy.deepcopy(QURAN_PARTS), copy.deepcopy(QURAN_CHAPTERS)


def test_default_index_is_consistent() -> None:
    index = default_reference_index()

    assert index.total_verses == TOTAL_VERSES == 6236
    assert len(index.chapters) == 114
    assert len(index.parts) == 30
    assert index.chapter_offsets[0] == 0
    assert index.chapter_offsets[-1] == TOTAL_VERSES
    assert sum(part.total_verses for part in index.parts) == TOTAL_VERSES


def test_part_ranges_are_contiguous_and_cover_corpus() -> None:
    index = default_reference_index()

    ranges = index.part_ranges
    assert ranges[0][0] == 0
    assert ranges[-1][1] == TOTAL_VERSES - 1
    for (_, previous_end), (start, _) in zip(ranges, ranges[1:]):
        assert start == previous_end + 1


def test_known_part_boundaries() -> None:
    index = default_reference_index()

    # part 2 opens at 2:142, part 30 at 78:1
    assert index.part_range(2)[0] == index.chapter_offsets[1] + 141
    assert index.part_range(30)[0] == index.chapter_offsets[77]
    assert index.part(30).total_verses == 564


def test_chapter_for_offset_at_chapter_edges() -> None:
    index = default_reference_index()

    assert index.chapter_for_offset(0) == 1
    assert index.chapter_for_offset(6) == 1
    assert index.chapter_for_offset(7) == 2
    assert index.chapter_for_offset(TOTAL_VERSES - 1) == 114


def test_unknown_lookups_return_none() -> None:
    index = default_reference_index()

    assert index.chapter(0) is None
    assert index.chapter(115) is None
    assert index.part(31) is None
    assert index.part_range(0) is None


def test_wrong_total_is_rejected() -> None:
    parts, chapters = _tables()

    with pytest.raises(ReferenceIndexInvalid) as excinfo:
        ReferenceIndex.from_tables(parts, chapters, TOTAL_VERSES + 1)

    assert excinfo.value.code == "reading.reference_invalid"
    assert excinfo.value.detail["total_verses"] == TOTAL_VERSES + 1


def test_part_gap_is_rejected() -> None:
    parts, chapters = _tables()
    parts[1]["start"] = (2, 143)

    with pytest.raises(ReferenceIndexInvalid) as excinfo:
        ReferenceIndex.from_tables(parts, chapters, TOTAL_VERSES)

    assert excinfo.value.detail["part"] == 2


def test_declared_part_total_must_match_span() -> None:
    parts, chapters = _tables()
    parts[4]["total_verses"] += 1

    with pytest.raises(ReferenceIndexInvalid, match="does not match its boundaries"):
        ReferenceIndex.from_tables(parts, chapters, TOTAL_VERSES)


def test_chapter_part_list_must_match_boundaries() -> None:
    parts, chapters = _tables()
    chapters[0]["parts"] = (1, 2)

    with pytest.raises(ReferenceIndexInvalid, match="Chapter part list"):
        ReferenceIndex.from_tables(parts, chapters, TOTAL_VERSES)


def test_boundary_outside_chapter_is_rejected() -> None:
    parts, chapters = _tables()
    parts[0]["end"] = (2, 400)

    with pytest.raises(ReferenceIndexInvalid, match="outside the chapter table"):
        ReferenceIndex.from_tables(parts, chapters, TOTAL_VERSES)


def test_malformed_rows_are_rejected() -> None:
    parts, chapters = _tables()
    del chapters[3]["verses"]

    with pytest.raises(ReferenceIndexInvalid, match="Malformed"):
        ReferenceIndex.from_tables(parts, chapters, TOTAL_VERSES)
