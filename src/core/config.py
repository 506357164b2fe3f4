"""
Application settings.

Read once from environment variables. The defaults keep everything in process memory:
the database is an in-memory SQLite instance that disappears with the process.
CHESS_DATABASE_URL is the one way out of that: pointing it at a file-backed database
(e.g. sqlite:///games.db) keeps games beyond the process. Nothing in the project sets it.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

IN_MEMORY_DATABASE_URL = "sqlite:///:memory:"


@dataclass(frozen=True)
class Settings:
    database_url: str = IN_MEMORY_DATABASE_URL
    database_echo: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.environ.get("CHESS_DATABASE_URL", IN_MEMORY_DATABASE_URL),
            database_echo=os.environ.get("CHESS_DB_ECHO", "").lower()
            in ("1", "true", "yes"),
            log_level=os.environ.get("CHESS_LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(settings: Settings | None = None) -> None:
    """Set up the root logger with the configured level.

    Call once from whatever process hosts the service. Library modules only create their own loggers.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
