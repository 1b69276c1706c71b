"""Typed configuration for the reading domain."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class NavigationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    settle_delay_ms: int = Field(default=0, ge=0, le=5000)
    max_cached_controllers: PositiveInt = Field(default=1024)


class DailyConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    timezone: str = Field(default="UTC")
    record_ttl_days: int = Field(default=30, ge=0)
    mark_in_read_set: bool = Field(default=True)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("timezone cannot be empty")
        return value.strip()


class PersistenceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    history_limit: PositiveInt = Field(default=365)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level_runtime: str = Field(default="INFO")

    @field_validator("level_runtime")
    @classmethod
    def validate_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}")
        return normalized


class ReadingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
    daily: DailyConfig = Field(default_factory=DailyConfig)
    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_reading_config(raw: Mapping[str, Any] | None) -> ReadingConfig:
    """Load ``ReadingConfig`` from a raw mapping safely."""

    data = raw or {}
    return ReadingConfig.model_validate(data)


__all__ = [
    "ReadingConfig",
    "NavigationConfig",
    "DailyConfig",
    "PersistenceConfig",
    "LoggingConfig",
    "load_reading_config",
]
