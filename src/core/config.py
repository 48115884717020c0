"""Application settings. Read once from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DATABASE_URL = "sqlite:///./chess_games.db"
TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Environment variables:
    * CHESS_DATABASE_URL: SQLAlchemy url of the database storing the game sessions
    * CHESS_DATABASE_ECHO: log all SQL statements
    * CHESS_LOG_LEVEL: level for the `src` logger
    """
    return Settings(
        database_url=os.environ.get("CHESS_DATABASE_URL", DEFAULT_DATABASE_URL),
        database_echo=os.environ.get("CHESS_DATABASE_ECHO", "").lower() in TRUTHY,
        log_level=os.environ.get("CHESS_LOG_LEVEL", "INFO").upper(),
    )
