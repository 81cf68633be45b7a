"""Runtime configuration, read from the environment (and a .env file if present)."""

import os
from dataclasses import dataclass
from typing import Self

from dotenv import load_dotenv

load_dotenv()


def _get_env_bool(key: str, default: bool) -> bool:
    val = os.getenv(key)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    database_url: str
    database_echo: bool
    log_level: str
    log_format: str

    @classmethod
    def from_env(cls) -> Self:
        """The one place the environment variables and their defaults are read."""
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./battleship.db"),
            database_echo=_get_env_bool("DATABASE_ECHO", False),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "text"),
        )


CONFIG = Config.from_env()


def reload_from_env() -> Config:
    """Reload environment variables from .env and rebuild CONFIG."""
    load_dotenv(override=True)
    global CONFIG
    CONFIG = Config.from_env()
    return CONFIG
