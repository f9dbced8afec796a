import logging
import os
import sys
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "mapops"
DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV_VAR = "MAPOPS_LOG_LEVEL"

# Map string log levels to logging constants
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the specified name.

    Loggers under the ``mapops`` namespace inherit the package handler
    installed by :func:`configure_logging`.

    Args:
        name: The name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def resolve_level(level: Optional[str] = None) -> int:
    """Translate a level name into a logging constant.

    Falls back to ``MAPOPS_LOG_LEVEL`` and then to WARNING.

    Args:
        level: Level name such as "debug" or "INFO"

    Returns:
        Logging level constant
    """
    name = level or os.environ.get(LOG_LEVEL_ENV_VAR)
    if not name:
        return DEFAULT_LOG_LEVEL
    return LOG_LEVELS.get(name.strip().lower(), DEFAULT_LOG_LEVEL)


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: Optional[str] = None,
) -> None:
    """Configure the mapops package logger.

    Only the ``mapops`` logger is touched; the root logger belongs to the
    host application.

    Args:
        verbose: Whether to enable verbose mode (shows all debug logs)
        quiet: Whether to enable quiet mode (only shows errors)
        level: Explicit level name, used when neither flag is set
    """
    if quiet:
        package_level = logging.ERROR
    elif verbose:
        package_level = logging.DEBUG
    else:
        package_level = resolve_level(level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(package_level)

    # Clear existing handlers to avoid duplicate logs
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(DEFAULT_FORMAT)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    # Don't propagate to root logger to avoid duplicate logging
    package_logger.propagate = False


def get_logging_status() -> Dict[str, Any]:
    """Get the current logging status of all mapops modules.

    Returns:
        Dictionary with logging status information
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    modules = {}
    for name in logging.root.manager.loggerDict:
        if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
            continue
        logger = logging.getLogger(name)
        modules[name] = {
            "level": logging.getLevelName(logger.getEffectiveLevel()),
            "propagate": logger.propagate,
            "has_handlers": bool(logger.handlers),
        }

    return {
        "package_level": logging.getLevelName(package_logger.level),
        "modules": modules,
    }
