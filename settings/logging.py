"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Log to stderr and, optionally, to a size-rotated JSON-lines file.

    The file sink keeps DEBUG records (repository searches, cache hits) for later
    inspection regardless of the console level.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "census_resolver.jsonl",
            level="DEBUG",
            serialize=True,
            rotation="10 MB",
            retention=5,
        )
        logger.debug("Logging to {}", log_dir)

    return logger
