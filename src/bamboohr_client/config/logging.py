"""
Centralized logging configuration.

Provides bootstrap_logging for entry points (the invoke tasks, the pytest
plugin) so the library logs consistently. Library modules themselves only
call logging.getLogger(__name__).
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for logging.ini in the current working directory, then config/.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    for candidate in (Path('logging.ini'), Path('config') / 'logging.ini'):
        if candidate.exists():
            return candidate
    return None


def _resolve_log_level() -> str:
    """Read LOG_LEVEL, falling back to INFO when unset or invalid."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        log_level = 'INFO'
    os.environ['LOG_LEVEL'] = log_level
    return log_level


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration.

    Loads logging.ini with logging.config.fileConfig() when one is found,
    otherwise falls back to basicConfig. LOG_LEVEL always wins over the
    level in the file.

    Args:
        name: Optional logger name to report the bootstrap on
    """
    level = getattr(logging, _resolve_log_level())
    config_path = _find_logging_config()

    if config_path is None:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, stream=sys.stderr)
    else:
        try:
            logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
        except Exception as e:
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            logging.basicConfig(level=level, format=DEFAULT_FORMAT, stream=sys.stderr)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)
    logging.getLogger('bamboohr_client').setLevel(level)

    logging.getLogger(name).debug(f"Logging configured from {config_path or 'defaults'}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name, ensuring logging is bootstrapped.

    Args:
        name: Name for the logger

    Returns:
        Configured logger instance
    """
    bootstrap_logging(name)
    return logging.getLogger(name)
