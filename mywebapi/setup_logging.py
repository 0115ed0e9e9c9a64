"""Configure loguru logging for the application."""

import sys
from pathlib import Path

from loguru import logger


def setup_logging(level: str, log_file: Path | str) -> None:
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(
        log_file,
        rotation="1 MB",
        retention=3,
        encoding="utf-8",
        level="DEBUG",
    )
