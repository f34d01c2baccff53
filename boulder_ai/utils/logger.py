"""
Logging utilities
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None):
    """
    Setup logger with console output and an optional daily log file.

    The console sink writes to stderr so that stdout stays reserved for
    game commands.

    Args:
        level: Logging level
        log_dir: Directory to save log files, None to disable file output
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path / "boulder_ai_{time:YYYY-MM-DD}.log"),
            rotation="00:00",  # Rotate at midnight
            retention="7 days",
            level=level,
            encoding="utf-8",
            format=FILE_FORMAT,
        )
        logger.info(f"Log initialized, saving to: {log_path}")

    return logger
