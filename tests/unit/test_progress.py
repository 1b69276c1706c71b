import pytest

from reading_service.services.reading.progress import ProgressCalculator


@pytest.fixture
def calculator(mapper) -> ProgressCalculator:
    return ProgressCalculator(mapper)


def test_overall_percentage_bounds(calculator: ProgressCalculator) -> None:
    assert calculator.overall_percentage(0) == 0.0
    assert calculator.overall_percentage(6235) == pytest.approx(99.98)
    assert calculator.overall_percentage(10_000) == 100.0
    assert calculator.overall_percentage(-5) == 0.0


def test_overall_percentage_is_rounded_to_two_places(calculator: ProgressCalculator) -> None:
    # 500 / 6236 * 100 = 8.0179...
    assert calculator.overall_percentage(500) == 8.02


def test_chapter_percentage(calculator: ProgressCalculator) -> None:
    assert calculator.chapter_percentage(1, 1) == 0.0
    assert calculator.chapter_percentage(1, 7) == 86.0
    assert calculator.chapter_percentage(115, 1) == 0.0


def test_part_percentage_stays_within_bounds(calculator: ProgressCalculator, mapper) -> None:
    for part in mapper.index.parts:
        start, end = mapper.part_range(part.number)
        assert calculator.part_percentage(part.number, start) == 0.0
        assert 0.0 <= calculator.part_percentage(part.number, end) < 100.0
        # positions outside the part clamp instead of overflowing
        assert calculator.part_percentage(part.number, end + 1000) == 100.0
        assert calculator.part_percentage(part.number, start - 1000) == 0.0


def test_snapshot_for_every_position_is_bounded(calculator: ProgressCalculator) -> None:
    for position in range(0, calculator.total_verses, 97):
        snapshot = calculator.snapshot(position, read_count=3)
        for value in (snapshot.overall_percentage, snapshot.part_percentage, snapshot.chapter_percentage):
            assert 0.0 <= value <= 100.0
        assert snapshot.read_verses == 3
        assert snapshot.total_verses == 6236


def test_chapter_percentage_rounds_halves_up(calculator: ProgressCalculator) -> None:
    # chapter 99 has 8 verses: 1 / 8 = 12.5%
    assert calculator.chapter_percentage(99, 2) == 13.0
    # chapter 75 has 40 verses: 1 / 40 = 2.5%
    assert calculator.chapter_percentage(75, 2) == 3.0
    assert calculator.chapter_percentage(75, 4) == 8.0
