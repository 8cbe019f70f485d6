"""Application configuration using Pydantic Settings.

Settings are read from environment variables prefixed with ``OTHELLO_`` (ex. ``OTHELLO_DATABASE_URL``).
A cached instance is available through get_settings().
"""

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Attributes:
        database_url: SQLAlchemy connection URL used to persist games.
        database_echo: Let SQLAlchemy log every statement.
        log_level: Level of the application loggers.
        random_seed: Seed for the random source (starting color, easy computer moves). None means unseeded.
    """

    model_config = SettingsConfigDict(
        env_prefix="OTHELLO_",
        extra="ignore",
    )

    database_url: str = "sqlite:///othello.db"
    database_echo: bool = False
    log_level: LogLevel = "INFO"
    random_seed: Optional[int] = None


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger("src")
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
