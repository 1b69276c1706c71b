import asyncio
import logging

import pytest
from pydantic import ValidationError

from reading_service.services.reading.config_loader import (
    fetch_reading_config,
    parse_reading_config,
    register_reading_config_listener,
)
from reading_service.services.reading.config_schema import ReadingConfig, load_reading_config
from reading_service.services.reading.errors import ReadingConfigInvalid


class FakeConfigService:
    def __init__(self, payload):
        self._payload = payload
        self.registered_section = None
        self.callback = None

    async def get_config_section(self, section: str, default=None):
        assert section == "reading"
        return self._payload if self._payload is not None else default

    async def register_listener(self, section: str, callback):
        self.registered_section = section
        self.callback = callback


def test_fetch_reading_config_defaults():
    service = FakeConfigService(payload=None)

    config = asyncio.run(fetch_reading_config(service))

    assert isinstance(config, ReadingConfig)
    assert config.navigation.settle_delay_ms == 0
    assert config.daily.timezone == "UTC"
    assert config.daily.record_ttl_days == 30
    assert config.logging.level_runtime == "INFO"


def test_fetch_reading_config_overrides():
    service = FakeConfigService(
        payload={
            "navigation": {"settle_delay_ms": 300},
            "daily": {"timezone": " Asia/Riyadh ", "record_ttl_days": 2},
            "logging": {"level_runtime": "debug"},
        }
    )

    config = asyncio.run(fetch_reading_config(service))

    assert config.navigation.settle_delay_ms == 300
    assert config.daily.timezone == "Asia/Riyadh"
    assert config.daily.record_ttl_days == 2
    assert config.logging.level_runtime == "DEBUG"


def test_fetch_reading_config_invalid_payload():
    service = FakeConfigService(payload={"navigation": {"settle_delay_ms": -1}})

    with pytest.raises(ReadingConfigInvalid) as excinfo:
        asyncio.run(fetch_reading_config(service))

    assert excinfo.value.code == "reading.config_invalid"
    assert excinfo.value.detail["type"] == "validation_error"


def test_unknown_keys_are_rejected():
    with pytest.raises(ValidationError):
        load_reading_config({"navigation": {"debounce": 300}})


def test_register_reading_config_listener_validates_updates():
    service = FakeConfigService(payload=None)
    received = []

    async def _callback(config: ReadingConfig) -> None:
        received.append(config)

    asyncio.run(register_reading_config_listener(service, _callback))

    assert service.registered_section == "reading"
    assert service.callback is not None

    asyncio.run(service.callback({"daily": {"record_ttl_days": 7}}))
    assert received and received[0].daily.record_ttl_days == 7

    with pytest.raises(ReadingConfigInvalid):
        asyncio.run(service.callback({"logging": {"level_runtime": "LOUD"}}))


def test_parse_reading_config_logs_rejection(caplog):
    with caplog.at_level(logging.INFO, logger="reading_service.reading"):
        with pytest.raises(ReadingConfigInvalid) as excinfo:
            parse_reading_config({"daily": {"record_ttl_days": -3}}, source="update")

    assert excinfo.value.detail["source"] == "update"
    rejected = [record for record in caplog.records if record.getMessage() == "reading.config.rejected"]
    assert rejected and rejected[0].config_source == "update"


def test_parse_reading_config_logs_applied_values(caplog):
    with caplog.at_level(logging.INFO, logger="reading_service.reading"):
        config = parse_reading_config({"navigation": {"settle_delay_ms": 120}}, source="startup")

    assert config.navigation.settle_delay_ms == 120
    applied = [record for record in caplog.records if record.getMessage() == "reading.config.applied"]
    assert applied and applied[0].settle_delay_ms == 120
