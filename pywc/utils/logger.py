"""
Logging utilities for pywc.
"""
import sys
from pathlib import Path
from typing import Optional
from loguru import logger as loguru_logger


def setup_logger(
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "10 days",
    format_string: Optional[str] = None
):
    """
    Setup logger with console and optional file output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        rotation: Log rotation size/time
        retention: Log retention period
        format_string: Custom format string

    Returns:
        Configured logger
    """
    # Remove default handler
    loguru_logger.remove()

    # Default format
    if format_string is None:
        format_string = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )

    # Console handler, colored only on a terminal
    loguru_logger.add(
        sys.stderr,
        format=format_string,
        level=log_level.upper(),
        colorize=None
    )

    # File handler (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        loguru_logger.add(
            log_file,
            format=format_string,
            level=log_level.upper(),
            rotation=rotation,
            retention=retention,
            compression="zip"
        )

    return loguru_logger


def get_logger(name: str = "pywc"):
    """
    Get logger instance.

    Args:
        name: Logger name

    Returns:
        Logger bound to `name`
    """
    return loguru_logger.bind(name=name)


# Every record carries a name, even from code that logs through loguru directly
loguru_logger.configure(extra={"name": "pywc"})

# Default logger instance
logger = setup_logger()
