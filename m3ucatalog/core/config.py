# m3ucatalog/core/config.py
import json
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# ─── 1) Locate the JSON file ──────────────────────────────────────────────────
# Lives next to this module:  m3ucatalog/core/config.json

BASE_DIR    = Path(__file__).parent           # .../m3ucatalog/core
CONFIG_PATH = BASE_DIR / "config.json"


if not CONFIG_PATH.exists():
    raise FileNotFoundError(f"Cannot find config.json at {CONFIG_PATH!r}")

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


# ─── 2) Validated settings model ─────────────────────────────────────────────
class Settings(BaseModel):
    # Catalog
    uncategorized_label: str = Field(
        "Uncategorized",
        min_length=1,
        description="Node name used for entries without a group-title",
    )

    # Logging
    log_level: str = Field("INFO", description="Root level for m3ucatalog loggers")

    # API
    app_title: str = "M3U Catalog API"
    debug: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = str(v or "INFO").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level


# ─── 3) Cached loader for settings ───────────────────────────────────────────
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and return the Settings instance from config.json, cached in-memory.
    Calling get_settings again returns the same object without re-reading disk.
    """
    with CONFIG_PATH.open(encoding="utf-8") as f:
        data = json.load(f)
    return Settings(**data)


def reload_settings() -> None:
    """
    Clear the cached Settings so that next get_settings() re-reads config.json.
    """
    get_settings.cache_clear()

