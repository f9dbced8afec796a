"""Exceptions raised by mapops.

A flat hierarchy rooted at :class:`MapOpsError`. Each subclass also
derives from the builtin exception callers would naturally catch for the
same failure, so ``except LookupError`` keeps working around
``get_random_key`` and ``except ValueError`` around bad option strings.
"""

from typing import Any, Dict, List, Optional


class MapOpsError(Exception):
    """Base exception for all mapops errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        suggested_actions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.context = context or {}
        self.suggested_actions = suggested_actions or []

    def __str__(self) -> str:
        """String representation including context."""
        base_message = self.message

        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            base_message += f" (Context: {context_str})"

        if self.suggested_actions:
            actions_str = "; ".join(self.suggested_actions)
            base_message += f" (Suggested actions: {actions_str})"

        return base_message


class EmptyMapError(MapOpsError, LookupError):
    """An operation that needs at least one entry was given an empty map."""

    def __init__(self, operation: str):
        super().__init__(
            f"{operation} requires a non-empty mapping",
            context={"operation": operation},
            suggested_actions=["Check that the mapping is non-empty before calling"],
        )
        self.operation = operation


class InvalidOptionError(MapOpsError, ValueError):
    """An unknown mode, algorithm or policy name was supplied."""

    def __init__(self, option: str, value: Any, allowed: List[str]):
        super().__init__(
            f"Invalid {option}: {value!r}",
            context={"option": option, "allowed": allowed},
            suggested_actions=[f"Use one of: {', '.join(allowed)}"],
        )
        self.option = option
        self.value = value
        self.allowed = allowed


class KeyCollisionError(MapOpsError, KeyError):
    """Two distinct keys were rewritten to the same key."""

    def __init__(self, new_key: Any, first_key: Any, second_key: Any):
        super().__init__(
            f"Keys {first_key!r} and {second_key!r} both become {new_key!r}",
            context={"new_key": new_key},
        )
        self.new_key = new_key
        self.first_key = first_key
        self.second_key = second_key


class ConfigurationError(MapOpsError):
    """The mapops configuration could not be loaded or is invalid."""
