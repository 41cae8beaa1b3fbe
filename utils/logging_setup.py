#!/usr/bin/env python3
"""
Centralized logging configuration for the nightly release pruner.
Provides idempotent logging setup with controlled verbosity levels.
"""

import logging
import os

from utils.redact import RedactingFormatter

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def _level_from_env(name: str, default: str) -> str:
    """Read a level name from the environment, ignoring unknown names"""
    level = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


def configure_logging() -> None:
    """
    Configure root logging with idempotent behavior.
    Call this once at process start in main entry points.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR) - default INFO
        HTTP_LOG_LEVEL: Level for HTTP libraries (default WARNING)
    """
    root = logging.getLogger()

    # Idempotent - only configure once
    if getattr(root, "_configured", False):
        return

    level = _level_from_env("LOG_LEVEL", "INFO")

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

    # Tokens must never reach the CI log
    for handler in root.handlers:
        handler.setFormatter(RedactingFormatter(logging.Formatter(LOG_FORMAT)))

    # Quiet down noisy HTTP libraries
    http_log_level = _level_from_env("HTTP_LOG_LEVEL", "WARNING")
    for logger_name in ("urllib3", "requests", "charset_normalizer"):
        logging.getLogger(logger_name).setLevel(http_log_level)

    root._configured = True

    if level == "DEBUG":
        root.debug(f"🔧 Logging configured: level={level}, http_level={http_log_level}")

