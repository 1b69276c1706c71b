""" Typed errors for the reading engine. """

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Dict, Optional, Tuple


@dataclass(eq=False)
class ReadingError(Exception):
    """Base class for all reading-domain errors."""

    message: str
    user_id: Optional[str] = None
    verse_index: Optional[int] = None
    detail: Dict[str, Any] = field(default_factory=dict)
    code: str = "reading_error"
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:  # pragma: no cover - simple passthrough
        return self.message


@dataclass(eq=False)
class ReferenceIndexInvalid(ReadingError):
    code: str = "reading.reference_invalid"
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR


@dataclass(eq=False)
class CorpusInvalid(ReadingError):
    code: str = "reading.corpus_invalid"
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR


@dataclass(eq=False)
class InvalidJumpTarget(ReadingError):
    code: str = "reading.jump_invalid"
    status: HTTPStatus = HTTPStatus.BAD_REQUEST


@dataclass(eq=False)
class ResetNotConfirmed(ReadingError):
    code: str = "reading.reset_unconfirmed"
    status: HTTPStatus = HTTPStatus.BAD_REQUEST


@dataclass(eq=False)
class PersistenceFailure(ReadingError):
    code: str = "reading.persistence_failed"
    status: HTTPStatus = HTTPStatus.SERVICE_UNAVAILABLE


@dataclass(eq=False)
class ReadingConfigInvalid(ReadingError):
    code: str = "reading.config_invalid"
    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR


def to_http_payload(error: ReadingError) -> Tuple[int, Dict[str, Any]]:
    """Convert a reading error into an HTTP payload tuple."""

    status_code = int(error.status)
    body: Dict[str, Any] = {
        "error": {
            "code": error.code,
            "message": error.message,
            "user_id": error.user_id,
            "verse_index": error.verse_index,
            "detail": error.detail or None,
        }
    }
    return status_code, body
