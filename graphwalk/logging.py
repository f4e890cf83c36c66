"""Centralized logging configuration for graphwalk.

All package loggers hang off the ``graphwalk`` root logger. Its handler writes
to stderr so that result documents printed to stdout stay parseable. The
initial level can be taken from the ``GRAPHWALK_LOG_LEVEL`` environment
variable; the CLI overrides it through :func:`level_from_flags`.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "graphwalk"
LOG_LEVEL_ENV = "GRAPHWALK_LOG_LEVEL"

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``GRAPHWALK_LOG_LEVEL``, or ``default``.

    Unknown level names fall back to ``default``.
    """
    env_level = os.getenv(LOG_LEVEL_ENV)
    if not env_level:
        return default
    value = logging.getLevelName(env_level.strip().upper())
    return value if isinstance(value, int) else default


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose``/``--quiet`` switches to a log level.

    ``--verbose`` wins over ``--quiet``. With neither switch the environment
    level applies, defaulting to INFO.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return level_from_env(logging.INFO)


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root graphwalk logger with a single handler.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level. Defaults to ``GRAPHWALK_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level_from_env() if level is None else level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # stdout is reserved for result documents
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees engine records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the graphwalk root configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance with level NOTSET so the root level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all graphwalk loggers and their handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
