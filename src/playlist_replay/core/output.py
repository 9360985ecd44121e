"""
Logging setup using Loguru.

Stdout carries only the formatted playlist, so every sink here writes to a
file or to stderr.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"
CONSOLE_FORMAT = "{level}: {message}"


def setup_loguru(
    log_file: Optional[Path],
    level: str = "WARNING",
    rotation: str = "10 MB",
    retention: int = 5,
    console_output: bool = False,
) -> None:
    """
    Configure loguru sinks for a run.

    Args:
        log_file: Path to log file (None for no file sink)
        level: Minimum level for all sinks (DEBUG, INFO, WARNING, ERROR)
        rotation: Loguru rotation condition for the file sink
        retention: Number of rotated files to keep
        console_output: Whether to also log to stderr
    """
    # Remove default handler (it writes everything to stderr at DEBUG)
    logger.remove()

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                log_file,
                rotation=rotation,
                retention=retention,
                level=level,
                format=LOG_FORMAT,
                encoding="utf-8",
                enqueue=False,  # Synchronous writes
            )
        except OSError as e:
            # No usable log directory: keep going with stderr only
            console_output = True
            log_file = None
            print(f"Warning: cannot write log file ({e}), logging to stderr", file=sys.stderr)

    if console_output:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    logger.debug(f"Loguru initialized: {log_file or '(no file)'} (level={level})")


def log(message: str, level: str = "info") -> None:
    """
    Log a user-facing status message and echo it to stderr.

    Args:
        message: Message text
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)
    print(message, file=sys.stderr)
