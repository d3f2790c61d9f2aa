"""Loguru sinks for the CLI and the trigger surface."""

import os
import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[job]}</cyan> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[job]} | {name}:{line} | {message}"


def setup_logging(level: str | None = None, to_file: bool = True):
    """Replace loguru's default sink with a console sink and a daily ingestion log file.

    `level` falls back to AGORA_LOG_LEVEL. Records carry an `extra[job]` field,
    bound by the job runner; outside a job it reads "-".
    """
    level = level or LOG_LEVEL
    logger.remove()
    logger.configure(extra={"job": "-"})
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    # serverless hosts have a read-only filesystem outside /tmp
    if to_file and os.access(LOG_DIR.parent.resolve(), os.W_OK):
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "ingestion_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )
        logger.debug("File log under {}", LOG_DIR)

    return logger
