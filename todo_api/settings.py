from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .repositories.todo_repository import IdStrategy

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    id_strategy: IdStrategy
    docs_enabled: bool
    docs_url: str
    openapi_url: str


def _env_flag(name: str, default: bool) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _env_port() -> int:
    raw_value = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid PORT value '%s'; defaulting to %s", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT


def load_settings() -> Settings:
    """Read settings from the environment without caching."""
    raw_strategy = os.getenv("TODO_ID_STRATEGY", IdStrategy.COUNTER.value).strip().lower()
    try:
        id_strategy = IdStrategy(raw_strategy)
    except ValueError as exc:
        choices = ", ".join(strategy.value for strategy in IdStrategy)
        raise ValueError(f"TODO_ID_STRATEGY must be one of: {choices}; got '{raw_strategy}'") from exc

    return Settings(
        host=os.getenv("TODO_API_HOST", "0.0.0.0"),
        port=_env_port(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        id_strategy=id_strategy,
        docs_enabled=_env_flag("TODO_API_DOCS_ENABLED", True),
        docs_url=os.getenv("TODO_API_DOCS_URL", "/swagger/index.html"),
        openapi_url=os.getenv("TODO_API_OPENAPI_URL", "/swagger/doc.json"),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
