"""
Centralized logging configuration.

Provides bootstrap_logging() so that every entry point (tasks, tests,
build scripts) configures logging the same way.
"""

import logging
import os
import sys
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
LOG_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _resolve_log_level() -> str:
    """
    Read LOG_LEVEL from the environment.

    Falls back to INFO when the variable is unset or not a valid level name.
    """
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        return 'INFO'
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging for the application.

    Applies the LOG_LEVEL environment variable to the root logger and
    installs a stderr handler if none is configured yet.

    Args:
        name: Optional name of the logger announcing the configuration
    """
    level = getattr(logging, _resolve_log_level())
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)

    if name:
        logging.getLogger(name).debug(f"Logging configured for {name} at {logging.getLevelName(level)}")
    else:
        logging.debug(f"Logging configured for root logger at {logging.getLevelName(level)}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name, ensuring logging is bootstrapped.

    Bootstraps only when the root logger has no handlers yet, so levels set
    by an earlier configuration (e.g. a task's --debug) are left alone.

    Args:
        name: Name for the logger

    Returns:
        Configured logger instance
    """
    if not logging.getLogger().handlers:
        bootstrap_logging()
    return logging.getLogger(name)
