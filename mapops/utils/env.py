"""Environment variable utilities for mapops.

Settings are read from ``MAPOPS_*`` environment variables. A ``.env``
file next to a ``mapops.yml`` project file can provide them too;
:func:`mapops.config.load_config` loads it before reading the overrides.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from mapops.logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "MAPOPS_"
PROJECT_FILES = ("mapops.yml", "mapops.yaml")


def find_project_root(start_path: Optional[str] = None) -> Optional[Path]:
    """Find the nearest directory holding a mapops config file.

    Args:
    ----
        start_path: Path to start searching from (defaults to current directory)

    Returns:
    -------
        Path to the project root, or None if not found
    """
    if start_path is None:
        start_path = os.getcwd()

    current = Path(start_path).resolve()

    for parent in [current, *current.parents]:
        for name in PROJECT_FILES:
            if (parent / name).is_file():
                logger.debug(f"Found mapops project root at: {parent}")
                return parent

    logger.debug("No mapops project root found")
    return None


def load_dotenv_file(project_root: Path) -> bool:
    """Load .env file from the project root if it exists.

    Variables already present in the environment are not overridden.

    Args:
    ----
        project_root: Path to the project root directory

    Returns:
    -------
        True if .env file was loaded, False otherwise
    """
    env_file = project_root / ".env"

    if not env_file.exists():
        logger.debug(f"No .env file found at: {env_file}")
        return False

    loaded = load_dotenv(env_file, override=False)
    if loaded:
        logger.debug(f"Loaded environment variables from: {env_file}")
    else:
        logger.debug(f"No variables loaded from .env file: {env_file}")
    return loaded


def setup_environment(start_path: Optional[str] = None) -> bool:
    """Load the .env file of the enclosing mapops project.

    Args:
    ----
        start_path: Path to start searching from (defaults to current directory)

    Returns:
    -------
        True if .env file was found and loaded, False otherwise
    """
    project_root = find_project_root(start_path)

    if project_root is None:
        logger.debug("No mapops project found, skipping .env file loading")
        return False

    return load_dotenv_file(project_root)


def get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable with optional default.

    Args:
    ----
        name: Environment variable name
        default: Default value if variable is not set

    Returns:
    -------
        Environment variable value or default
    """
    return os.environ.get(name, default)


def list_env_vars(prefix: Optional[str] = ENV_PREFIX) -> dict:
    """List environment variables, optionally filtered by prefix.

    Args:
    ----
        prefix: Prefix to filter variables; None lists everything

    Returns:
    -------
        Dictionary of environment variables
    """
    if prefix:
        return {k: v for k, v in os.environ.items() if k.startswith(prefix)}
    return dict(os.environ)
