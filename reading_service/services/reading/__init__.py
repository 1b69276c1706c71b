"""Modular verse reading engine package."""

from .config_loader import fetch_reading_config, parse_reading_config, register_reading_config_listener
from .config_schema import ReadingConfig, load_reading_config
from .coordinates import CoordinateMapper, VersePosition
from .corpus import CorpusReport, load_corpus_file, normalize_corpus, skeleton_corpus
from .daily import DailySelection, DailySelectionPolicy
from .errors import (
    CorpusInvalid,
    InvalidJumpTarget,
    PersistenceFailure,
    ReadingConfigInvalid,
    ReadingError,
    ReferenceIndexInvalid,
    ResetNotConfirmed,
)
from .navigator import NavigationController
from .progress import ProgressCalculator, ProgressSnapshot
from .redis_repo import RedisKeys, RedisPositionStore
from .reference_index import ReferenceIndex, default_reference_index
from .service import ReadingService
from .store import InMemoryPositionStore, PositionStore

__all__ = [
    "CoordinateMapper",
    "CorpusInvalid",
    "CorpusReport",
    "DailySelection",
    "DailySelectionPolicy",
    "InMemoryPositionStore",
    "InvalidJumpTarget",
    "NavigationController",
    "PersistenceFailure",
    "PositionStore",
    "ProgressCalculator",
    "ProgressSnapshot",
    "ReadingConfig",
    "ReadingConfigInvalid",
    "ReadingError",
    "ReadingService",
    "RedisKeys",
    "RedisPositionStore",
    "ReferenceIndex",
    "ReferenceIndexInvalid",
    "ResetNotConfirmed",
    "VersePosition",
    "default_reference_index",
    "fetch_reading_config",
    "load_corpus_file",
    "load_reading_config",
    "normalize_corpus",
    "parse_reading_config",
    "register_reading_config_listener",
    "skeleton_corpus",
]
