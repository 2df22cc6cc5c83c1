"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path


logger = logging.getLogger(__name__)

DB_PATH_ENV = "FIXTUREOPS_DB_PATH"
STRICT_ENV = "FIXTUREOPS_STRICT"

DEFAULT_DB_PATH = Path.home() / ".fixtureops" / "fixtureops.sqlite"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("Invalid flag for %s: %s; using default %s", name, raw, default)
    return default


def env_db_path() -> str | None:
    raw = os.getenv(DB_PATH_ENV)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def strict_mode() -> bool:
    return env_flag(STRICT_ENV, default=False)
