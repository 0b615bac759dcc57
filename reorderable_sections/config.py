"""Configuration management for reorderable section lists.

All configuration values can be overridden via environment variables or .env file.

Environment Variables:
    LOG_LEVEL: Logging level (default: INFO)
    LOG_FORMAT: Logging format, "text" or "json" (default: text)
    ENVIRONMENT: Environment name (default: development)
    DEBUG: Enable debug mode (default: false)
    MAX_LISTS: Maximum number of lists held by the in-memory registry (default: 100)
    API_HOST: Bind address for the HTTP API (default: 127.0.0.1)
    API_PORT: Port for the HTTP API (default: 8005)
"""

import json
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for reorderable section lists.

    Defaults are provided for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "text"

    # Environment configuration
    environment: str = "development"
    debug: bool = False

    # Registry configuration
    max_lists: int = 100

    # HTTP API
    api_host: str = "127.0.0.1"
    api_port: int = 8005

    def get_log_level(self) -> int:
        """Get the numeric logging level, falling back to INFO for unknown names."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    def is_json_logging(self) -> bool:
        """Check if log records should be emitted as JSON."""
        return self.log_format.lower() == "json"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure root logging from settings.

    Only entry points call this; library modules just obtain a module logger.

    Args:
        settings: Settings to apply. If None, uses get_settings().
    """
    if settings is None:
        settings = get_settings()

    handler = logging.StreamHandler()
    if settings.is_json_logging():
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logging.basicConfig(level=settings.get_log_level(), handlers=[handler], force=True)
