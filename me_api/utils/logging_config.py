"""Rotating file + console logging setup."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def resolve_level(level: int | str) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(log_dir: str = "logs", level: int | str = logging.INFO) -> logging.Logger:
    """Configure service logging with rotating file and console output."""
    level = resolve_level(level)
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("me_api")
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates on re-init
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Rotating file handler: 5MB per file, keep 3 backups
    file_handler = RotatingFileHandler(
        log_path / "me_api.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
