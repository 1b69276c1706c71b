import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import redis.asyncio as redis

logger = logging.getLogger(__name__)

ConfigListener = Callable[[Dict[str, Any]], Awaitable[None]]


class ConfigService:
    """
    Configuration service with hot-reload functionality.

    The full configuration document lives as JSON under ``config_key``.
    Section updates are written back to that document and broadcast over
    Redis pub/sub so every process refreshes its cache.
    """

    def __init__(
        self,
        redis_client: redis.Redis,
        config_key: str = "reading:config",
        config_channel: str = "reading_config_channel",
        defaults: Optional[Dict[str, Any]] = None,
    ):
        self.redis_client = redis_client
        self.config_key = config_key
        self.config_channel = config_channel
        self._defaults: Dict[str, Any] = dict(defaults or {})
        self._config_cache: Dict[str, Any] = {}
        self._loaded = False
        self._listeners: Dict[str, ConfigListener] = {}
        self._pubsub = None
        self._listen_task: Optional[asyncio.Task] = None

    async def get_config_section(self, section: str, default: Any = None) -> Any:
        """
        Get a configuration section.

        Args:
            section: Section name (e.g., "reading")
            default: Default value if section not found

        Returns:
            Configuration section data or default
        """
        if not self._loaded:
            await self._load_config()

        return self._config_cache.get(section, default)

    async def update_config_section(self, section: str, data: Dict[str, Any]) -> bool:
        """
        Update a configuration section and broadcast changes.

        Returns:
            True if update was successful
        """
        try:
            if not self._loaded:
                await self._load_config()
            self._config_cache[section] = data
            await self.redis_client.set(
                self.config_key, json.dumps(self._config_cache, ensure_ascii=False)
            )

            message = {
                "type": "config_update",
                "section": section,
                "data": data,
            }
            await self.redis_client.publish(
                self.config_channel,
                json.dumps(message, ensure_ascii=False),
            )

            logger.info("Configuration section updated", extra={
                "section": section,
                "keys": list(data.keys()) if isinstance(data, dict) else None,
            })
            return True

        except redis.RedisError as e:
            logger.error("Failed to update configuration section", extra={
                "section": section,
                "error": str(e),
            })
            return False

    async def register_listener(self, section: str, callback: ConfigListener) -> None:
        """Register a callback for configuration changes in a specific section."""
        self._listeners[section] = callback
        logger.debug("Configuration listener registered", extra={"section": section})

    async def start_listening(self) -> None:
        """Start listening for configuration updates via Redis pub/sub."""
        if self._listen_task:
            return

        try:
            self._pubsub = self.redis_client.pubsub()
            await self._pubsub.subscribe(self.config_channel)

            self._listen_task = asyncio.create_task(self._listen_for_updates())

            logger.info("Configuration service started listening", extra={
                "channel": self.config_channel,
            })

        except redis.RedisError as e:
            logger.error("Failed to start configuration listener", extra={
                "error": str(e),
            })

    async def stop_listening(self) -> None:
        """Stop listening for configuration updates."""
        if self._listen_task:
            self._listen_task.cancel()
            try:
                await self._listen_task
            except asyncio.CancelledError:
                pass
            self._listen_task = None

        if self._pubsub:
            await self._pubsub.unsubscribe(self.config_channel)
            await self._pubsub.aclose()
            self._pubsub = None

        logger.info("Configuration service stopped listening")

    async def _load_config(self) -> None:
        """Load the configuration document from Redis, falling back to defaults."""
        self._config_cache = dict(self._defaults)
        try:
            raw = await self.redis_client.get(self.config_key)
        except redis.RedisError as e:
            logger.error("Failed to load configuration", extra={"error": str(e)})
            self._loaded = True
            return

        if raw is not None:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8", errors="replace")
            try:
                stored = json.loads(raw)
            except json.JSONDecodeError as e:
                logger.warning("Stored configuration is not valid JSON", extra={"error": str(e)})
                stored = None
            if isinstance(stored, dict):
                self._config_cache.update(stored)
            elif stored is not None:
                logger.warning("Stored configuration is not an object, using defaults")

        self._loaded = True
        logger.info("Configuration loaded", extra={"sections": list(self._config_cache.keys())})

    async def _notify(self, section: str, section_data: Any) -> None:
        callback = self._listeners.get(section)
        if callback is None:
            return
        try:
            await callback(section_data)
        except Exception as e:
            # a broken listener must not stop the pub/sub loop
            logger.error("Configuration listener failed", extra={
                "section": section,
                "error": str(e),
            })

    async def _listen_for_updates(self) -> None:
        """Listen for configuration updates via Redis pub/sub."""
        try:
            async for message in self._pubsub.listen():
                if message["type"] != "message":
                    continue

                raw_data = message["data"]
                if isinstance(raw_data, bytes):
                    raw_data = raw_data.decode("utf-8", errors="replace")

                try:
                    data = json.loads(raw_data)
                except json.JSONDecodeError as e:
                    if raw_data == "config_updated":
                        logger.info("Config update notification received, reloading configuration")
                        await self.reload_config()
                    else:
                        logger.warning("Invalid JSON in config update message", extra={
                            "error": str(e),
                        })
                    continue

                if not isinstance(data, dict) or data.get("type") != "config_update":
                    continue
                section = data.get("section")
                section_data = data.get("data")
                if section and section_data is not None:
                    self._config_cache[section] = section_data
                    await self._notify(section, section_data)
                    logger.info("Configuration updated from pub/sub", extra={
                        "section": section,
                    })

        except asyncio.CancelledError:
            logger.debug("Configuration listener cancelled")
            raise
        except redis.RedisError as e:
            logger.error("Configuration listener error", extra={
                "error": str(e),
            })

    async def reload_config(self) -> bool:
        """
        Force reload configuration from Redis.

        Returns:
            True if reload was successful
        """
        await self._load_config()

        for section in list(self._listeners):
            section_data = self._config_cache.get(section)
            if section_data is not None:
                await self._notify(section, section_data)

        logger.info("Configuration reloaded successfully")
        return True

    def get_cached_config(self) -> Dict[str, Any]:
        """Get the current cached configuration."""
        return self._config_cache.copy()
