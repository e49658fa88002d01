"""
Logging configuration for the premium table converter.
Provides centralized logging setup.
"""

import logging
import sys
from .config import LOG_DIR, LOG_LEVEL, LOG_FORMAT

# Log file path
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "kempo.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # File handler - detailed logs
    file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    # Console handler - INFO and above
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def log_table_stats(table, logger: logging.Logger, name: str = "PremiumTable"):
    """Log statistics about a parsed premium table."""
    if not table.fee:
        logger.warning(f"{name}: Empty table")
        return

    logger.info(
        f"{name}: area={table.area}, "
        f"effective_date={table.effective_date}, "
        f"ranks {table.ranks[0]} to {table.ranks[-1]}, "
        f"pension ranks: {table.fee[0].pension_rank} to {table.fee[-1].pension_rank}"
    )

    incomplete = [entry.rank for entry in table.fee if not entry.has_pension]
    if incomplete:
        logger.warning(f"{name}: ranks without pension figures: {incomplete}")
