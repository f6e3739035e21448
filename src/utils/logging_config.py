"""Central logging configuration.

Usage:
    from utils.logging_config import configure_logging
    configure_logging(json_logs=False, level="INFO")

Idempotent: safe to call multiple times.
"""
from __future__ import annotations
import os
import sys

from loguru import logger

_CONFIGURED = False

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name} | {message}"


def configure_logging(json_logs: bool = False, level: str = "INFO") -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    logger.remove()
    # Console sink
    logger.add(sys.stdout, level=level.upper(), format=_FORMAT, serialize=json_logs)

    # Optional rotating file sink controlled by env PFAMCC_LOG_FILE
    log_file = os.getenv('PFAMCC_LOG_FILE')
    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        logger.add(
            log_file,
            level=level.upper(),
            format=_FORMAT,
            serialize=json_logs,
            rotation="5 MB",
            retention=3,
        )
    _CONFIGURED = True


def reset_logging() -> None:
    """Allow configure_logging to run again (used by tests)."""
    global _CONFIGURED
    _CONFIGURED = False
