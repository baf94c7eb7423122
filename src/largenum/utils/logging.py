"""Logging utilities - loguru setup."""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> None:
    """Configure loguru for console and file logging.

    Args:
        log_dir: Directory for log files (optional)
        level: Minimum level for both sinks
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level:<7}</level> | {message}",
        level=level,
        colorize=True,
    )

    if log_dir is not None:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        logger.add(
            Path(log_dir) / "largenum.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {message}",
            level=level,
            enqueue=True,
        )
