from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Logging
    log_level: str = "INFO"

    # Debug
    debug_log_queries: bool = False


def get_settings() -> Settings:
    log_level = os.getenv("DOCSTORE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    debug_log_queries = _env_bool("DOCSTORE_DEBUG_LOG_QUERIES", False)

    return Settings(
        log_level=log_level,
        debug_log_queries=debug_log_queries,
    )
