"""Utility modules for mapops."""

from .env import get_env_var, list_env_vars, setup_environment
from .strings import replace_substr, starts_with

__all__ = [
    "setup_environment",
    "get_env_var",
    "list_env_vars",
    "starts_with",
    "replace_substr",
]
