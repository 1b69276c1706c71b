"""
Pytest configuration and shared fixtures for reading_service tests.
"""
from typing import List

import pytest
from prometheus_client import CollectorRegistry

from reading_service.models.reading_models import VerseRecord
from reading_service.services.reading import metrics as reading_metrics
from reading_service.services.reading.coordinates import CoordinateMapper
from reading_service.services.reading.corpus import skeleton_corpus
from reading_service.services.reading.store import InMemoryPositionStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def reading_metrics_registry():
    """Route reading metrics into a private registry for the test."""
    registry = CollectorRegistry()
    metrics_obj = reading_metrics.ReadingMetrics(registry=registry)
    original = reading_metrics.get_metrics()
    reading_metrics.set_metrics(metrics_obj)
    try:
        yield registry
    finally:
        reading_metrics.set_metrics(original)


@pytest.fixture(scope="session")
def mapper() -> CoordinateMapper:
    return CoordinateMapper()


@pytest.fixture(scope="session")
def full_corpus(mapper: CoordinateMapper) -> List[VerseRecord]:
    return skeleton_corpus(mapper.index)


@pytest.fixture
def store() -> InMemoryPositionStore:
    return InMemoryPositionStore()
