"""Reading configuration as served by ``ConfigService``.

The ``reading`` section is validated once at startup and again on every
hot-reload message; both paths go through :func:`parse_reading_config`.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError

from ..config_service import ConfigService
from .config_schema import ReadingConfig, load_reading_config
from .errors import ReadingConfigInvalid
from .logging import log_config_applied, log_config_rejected

READING_SECTION = "reading"

ReadingConfigCallback = Callable[[ReadingConfig], Awaitable[None]]


def parse_reading_config(raw: Optional[Any], *, source: str) -> ReadingConfig:
    """Validate ``raw``; an invalid payload is logged and raised as ``ReadingConfigInvalid``."""

    try:
        config = load_reading_config(raw)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        log_config_rejected(source, errors)
        raise ReadingConfigInvalid(
            f"Invalid reading configuration ({source})",
            detail={"errors": errors, "type": "validation_error", "source": source},
        ) from exc
    log_config_applied(source, config)
    return config


async def fetch_reading_config(config_service: ConfigService) -> ReadingConfig:
    raw_config = await config_service.get_config_section(READING_SECTION, default=None)
    return parse_reading_config(raw_config, source="startup")


async def register_reading_config_listener(
    config_service: ConfigService, callback: ReadingConfigCallback
) -> None:
    """Forward validated hot-reloads of the reading section to ``callback``.

    An invalid update raises before ``callback`` runs, so the running
    configuration stays in place.
    """

    async def _on_update(section_data):
        await callback(parse_reading_config(section_data, source="update"))

    await config_service.register_listener(READING_SECTION, _on_update)


__all__ = [
    "READING_SECTION",
    "ReadingConfigCallback",
    "fetch_reading_config",
    "parse_reading_config",
    "register_reading_config_listener",
]
