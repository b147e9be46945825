"""
Centralized logging configuration.

bootstrap_logging() is called by every entry point (console script, invoke
tasks, test conftest) so logging is configured the same way everywhere, using
Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

_VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

_PACKAGED_CONFIG = Path(__file__).resolve().parent.parent.parent / 'logging.ini'


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    A logging.ini in the current working directory wins over the one shipped
    with the package.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config

    if _PACKAGED_CONFIG.exists():
        return _PACKAGED_CONFIG

    return None


def _setup_environment_variables():
    """
    Set up environment variables for logging configuration.

    Sets LOG_LEVEL to WARNING if not already set, ensuring the INI file has a valid value.
    """
    if 'LOG_LEVEL' not in os.environ:
        os.environ['LOG_LEVEL'] = 'WARNING'

    log_level = os.environ['LOG_LEVEL'].strip().upper()
    if log_level not in _VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using WARNING", file=sys.stderr)
        os.environ['LOG_LEVEL'] = 'WARNING'


def _basic_config():
    logging.basicConfig(
        level=logging.WARNING,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr
    )


def bootstrap_logging(name: Optional[str] = None) -> None:
    """
    Bootstrap logging configuration for the application.

    This function:
    1. Sets up LOG_LEVEL for INI file substitution
    2. Loads logging configuration from logging.ini using logging.config.fileConfig()
    3. Applies the LOG_LEVEL environment variable override after loading

    Args:
        name: Optional name for the logger (defaults to root logger)
    """
    _setup_environment_variables()

    config_path = _find_logging_config()

    if config_path is None:
        _basic_config()
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            defaults={'LOG_LEVEL': os.environ['LOG_LEVEL'].strip().upper()},
            disable_existing_loggers=False
        )
    except Exception as e:
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        _basic_config()
        return

    env_level = os.environ['LOG_LEVEL'].strip().upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, env_level))
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, env_level))
    logging.getLogger('mobile_buildtools').setLevel(getattr(logging, env_level))

    if name:
        logging.getLogger(name).debug(f"Logging configured for {name} from {config_path}")
    else:
        logging.debug(f"Logging configured for root logger from {config_path}")

