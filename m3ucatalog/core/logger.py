# m3ucatalog/core/logger.py

import sys
import logging
from typing import Optional

# ─── Custom Formatter ────────────────────────────────────────────────────────
class CategoryFormatter(logging.Formatter):
    def format(self, record):
        if not hasattr(record, "category"):
            record.category = record.name.upper()
        return super().format(record)

# shared formatter for console output
formatter = CategoryFormatter(
    fmt="%(asctime)s %(levelname)-8s [%(category)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

# ─── Public API ───────────────────────────────────────────────────────────────
def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return a stdout logger for ``name``; repeated calls reuse its handlers."""
    if level is None:
        from m3ucatalog.core.config import get_settings
        level = logging.getLevelName(get_settings().log_level)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    # Prevent duplicate logging by disabling propagation
    logger.propagate = False

    # Console → stdout
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    return logger
