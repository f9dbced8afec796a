"""Configuration for mapops.

Settings come from three layers, later ones winning: dataclass defaults,
an optional YAML file and ``MAPOPS_*`` environment variables.
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from mapops.exceptions import ConfigurationError
from mapops.logging import LOG_LEVELS, configure_logging, get_logger
from mapops.utils.env import get_env_var, load_dotenv_file, setup_environment

logger = get_logger(__name__)

CONFIG_PATH_ENV_VAR = "MAPOPS_CONFIG"
CONFIG_SECTION = "mapops"

UNIQUE_KEY_ALGORITHMS = ("integer concatenation",)
COLLISION_POLICIES = ("overwrite", "keep_first", "error")

ENV_VARS = {
    "log_level": "MAPOPS_LOG_LEVEL",
    "random_seed": "MAPOPS_RANDOM_SEED",
    "unique_key_algorithm": "MAPOPS_UNIQUE_KEY_ALGORITHM",
    "collision_policy": "MAPOPS_COLLISION_POLICY",
}


@dataclass(frozen=True)
class MapOpsConfig:
    """Library-wide defaults."""

    log_level: str = "WARNING"
    random_seed: Optional[int] = None
    unique_key_algorithm: str = "integer concatenation"
    collision_policy: str = "overwrite"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MapOpsConfig":
        """Create a config from a mapping, ignoring unknown keys.

        Raises:
            ConfigurationError: If a value is invalid
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown mapops config key '{key}'")
        config = cls(**{k: v for k, v in data.items() if k in known})
        config.validate()
        return config

    def validate(self) -> None:
        """Check every field, raising ConfigurationError on the first bad one."""
        if str(self.log_level).lower() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level!r}",
                context={"allowed": sorted(LOG_LEVELS)},
            )
        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ConfigurationError(
                f"random_seed must be an integer, got {self.random_seed!r}"
            )
        if self.unique_key_algorithm not in UNIQUE_KEY_ALGORITHMS:
            raise ConfigurationError(
                f"Invalid unique key algorithm: {self.unique_key_algorithm!r}",
                context={"allowed": list(UNIQUE_KEY_ALGORITHMS)},
            )
        if self.collision_policy not in COLLISION_POLICIES:
            raise ConfigurationError(
                f"Invalid collision policy: {self.collision_policy!r}",
                context={"allowed": list(COLLISION_POLICIES)},
            )


def _read_config_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid YAML in config '{path}': {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config '{path}' must contain a mapping")

    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{CONFIG_SECTION}' in '{path}' must be a mapping"
        )
    logger.debug(f"Loaded mapops config from '{path}'")
    return section


def _read_env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field_name, env_var in ENV_VARS.items():
        value = get_env_var(env_var)
        if value is None or value == "":
            continue
        if field_name == "random_seed":
            try:
                overrides[field_name] = int(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"{env_var} must be an integer, got {value!r}"
                ) from e
        else:
            overrides[field_name] = value
    return overrides


def load_config(path: Optional[str] = None) -> MapOpsConfig:
    """Build a config from defaults, a YAML file and the environment.

    A ``.env`` file is loaded first, from the config file's directory when
    a path is given and from the enclosing mapops project otherwise.
    Variables already set in the environment take precedence over it.

    Args:
        path: YAML file to read; falls back to ``MAPOPS_CONFIG``

    Returns:
        Validated MapOpsConfig

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    if path:
        load_dotenv_file(Path(path).resolve().parent)
    else:
        setup_environment()
        path = get_env_var(CONFIG_PATH_ENV_VAR)

    config = MapOpsConfig.from_dict(_read_config_file(path)) if path else MapOpsConfig()

    overrides = _read_env_overrides()
    if overrides:
        logger.debug(f"Applying environment overrides: {sorted(overrides)}")
        config = replace(config, **overrides)
        config.validate()

    return config


_config: Optional[MapOpsConfig] = None


def get_config() -> MapOpsConfig:
    """Return the process-wide config, loading it on first use.

    Loading also applies the configured log level to the package logger.
    """
    global _config
    if _config is None:
        _config = load_config()
        configure_logging(level=_config.log_level)
    return _config


def reset_config() -> None:
    """Forget the cached config and reseed the default random source."""
    global _config
    _config = None

    from mapops.sampling import seed_default_random

    seed_default_random(get_config().random_seed)
