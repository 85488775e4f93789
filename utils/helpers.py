"""
Helpers & Utilities
===================
Shared utility functions used across the application.
"""

import logging
import sys
from typing import Union

from config.settings import settings


# ── Logging ───────────────────────────────────────────────
def setup_logger(name: str = "greenbit", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Create and configure a logger with console output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)s %(name)s — %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


logger = setup_logger(level=settings.LOG_LEVEL.upper())


# ── Display Formatting ────────────────────────────────────
def format_kg(value: float, decimals: int = 0) -> str:
    """Render a kg CO2e figure for display, e.g. ``12300 kg``."""
    return f"{value:.{decimals}f} kg"
