from contextlib import asynccontextmanager
import logging
from typing import List

import redis.asyncio as redis
from fastapi import FastAPI

from .settings import Settings
from .logging_config import apply_runtime_level, setup_logging
from ..models.reading_models import VerseRecord
from ..services.config_service import ConfigService
from ..services.reading import (
    CoordinateMapper,
    CorpusInvalid,
    InMemoryPositionStore,
    ReadingConfig,
    ReadingService,
    RedisPositionStore,
    default_reference_index,
    fetch_reading_config,
    load_corpus_file,
    load_reading_config,
    register_reading_config_listener,
    skeleton_corpus,
)

logger = logging.getLogger(__name__)


def load_corpus(settings: Settings, mapper: CoordinateMapper) -> List[VerseRecord]:
    """Load the configured corpus, or identifier-only records for the whole index."""
    if not settings.CORPUS_PATH:
        logger.info("No corpus file configured, serving verse identifiers only")
        return skeleton_corpus(mapper.index)

    report = load_corpus_file(settings.CORPUS_PATH, index=mapper.index)
    logger.info("Corpus loaded", extra={
        "path": settings.CORPUS_PATH,
        "loaded": len(report.records),
        "missing": report.missing,
        "duplicates_removed": report.duplicates_removed,
        "invalid_removed": report.invalid_removed,
        "truncated": report.truncated,
    })
    if report.issues:
        logger.error("Corpus sequence problems detected", extra={"issues": report.issues})
    if not report.records:
        raise CorpusInvalid(
            f"Corpus file {settings.CORPUS_PATH} has no servable verses",
            detail={"issues": report.issues},
        )
    return report.records


async def connect_redis(settings: Settings):
    if not settings.REDIS_URL:
        logger.warning("REDIS_URL is empty, reading state will be kept in memory")
        return None
    client = redis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
    )
    try:
        await client.ping()
    except redis.RedisError as e:
        logger.error("Could not connect to Redis, reading state will be kept in memory", extra={"error": str(e)})
        await client.aclose()
        return None
    logger.info("Successfully connected to Redis.")
    return client


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load settings and configure logging
    settings = Settings()
    setup_logging(settings)
    app.state.settings = settings

    # An inconsistent reference index is fatal: ReferenceIndexInvalid propagates
    index = default_reference_index()
    mapper = CoordinateMapper(index)
    logger.info("Reference index validated", extra=index.describe())

    corpus = load_corpus(settings, mapper)

    app.state.redis_client = await connect_redis(settings)
    app.state.config_service = None
    timezone_defaults = {"daily": {"timezone": settings.READING_TIMEZONE}}

    if app.state.redis_client is not None:
        store = RedisPositionStore(app.state.redis_client)
        app.state.config_service = ConfigService(
            redis_client=app.state.redis_client,
            config_key=settings.CONFIG_KEY,
            config_channel=settings.CONFIG_CHANNEL,
            defaults={"reading": timezone_defaults},
        )
        await app.state.config_service.start_listening()
        initial_config = await fetch_reading_config(app.state.config_service)
    else:
        store = InMemoryPositionStore()
        initial_config = load_reading_config(timezone_defaults)

    apply_runtime_level(initial_config.logging.level_runtime)
    app.state.reading_service = ReadingService(store, corpus, initial_config, mapper=mapper)

    async def _on_reading_config_update(new_config: ReadingConfig):
        app.state.reading_service.update_config(new_config)
        apply_runtime_level(new_config.logging.level_runtime)

    if app.state.config_service is not None:
        await register_reading_config_listener(app.state.config_service, _on_reading_config_update)

    logger.info("Reading service started", extra={
        "loaded_verses": len(corpus),
        "store": type(store).__name__,
    })

    yield

    logger.info("Shutdown sequence initiated.")
    await app.state.reading_service.shutdown()

    if app.state.config_service is not None:
        await app.state.config_service.stop_listening()
    if app.state.redis_client is not None:
        await app.state.redis_client.aclose()
    logger.info("Clients closed. Shutdown complete.")
