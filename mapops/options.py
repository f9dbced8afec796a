"""Option enums accepted by the mapops operations.

Every operation that takes one of these also accepts the member's string
value, so ``add_maps(a, b, "values")`` and
``add_maps(a, b, AddTarget.VALUES)`` are equivalent.
"""

from enum import Enum
from typing import Type, TypeVar, Union

from mapops.exceptions import InvalidOptionError

E = TypeVar("E", bound=Enum)


class AddTarget(Enum):
    """Where ``add_maps`` applies ``+`` for shared keys."""

    KEYS = "keys"
    VALUES = "values"
    KEYS_AND_VALUES = "keys and values"


class UniqueKeyAlgorithm(Enum):
    """How ``create_unique_key_string`` derives a fresh key."""

    INTEGER_CONCATENATION = "integer concatenation"


class KeyCollisionPolicy(Enum):
    """What ``erase_string_from_keys`` does when rewritten keys collide."""

    OVERWRITE = "overwrite"  # later entry wins
    KEEP_FIRST = "keep_first"
    ERROR = "error"


def coerce_option(enum_cls: Type[E], value: Union[E, str], option: str) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Raises:
        InvalidOptionError: If ``value`` names no member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidOptionError(
            option, value, [member.value for member in enum_cls]
        ) from None
