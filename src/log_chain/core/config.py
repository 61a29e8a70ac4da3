"""Environment-driven defaults."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_ERROR_LOG = "errors.log"
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_error_log(path: str | Path | None = None) -> Path:
    """Return the error sink path: explicit value, then LOG_CHAIN_ERROR_LOG, then default."""
    if path is not None:
        if str(path).strip() == "":
            raise ValueError("error log path must not be empty")
        return Path(path)

    env = os.getenv("LOG_CHAIN_ERROR_LOG")
    if env is None or env.strip() == "":
        return Path(DEFAULT_ERROR_LOG)
    return Path(env)


def resolve_log_level(level: str | None = None) -> int:
    """Return a logging level from an explicit name or LOG_CHAIN_LOG_LEVEL."""
    name = level or os.getenv("LOG_CHAIN_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    value = logging.getLevelName(name.strip().upper())
    if not isinstance(value, int):
        raise ValueError(
            f"LOG_CHAIN_LOG_LEVEL must be a logging level name (e.g. DEBUG, INFO), got {name!r}"
        )
    return value
