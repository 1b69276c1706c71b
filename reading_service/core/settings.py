from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # Empty REDIS_URL keeps everything in process memory
    REDIS_URL: Optional[str] = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT: float = 5.0
    CONFIG_KEY: str = "reading:config"
    CONFIG_CHANNEL: str = "reading_config_channel"

    CORPUS_PATH: Optional[str] = None
    READING_TIMEZONE: str = "UTC"

    CORS_ORIGINS: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
