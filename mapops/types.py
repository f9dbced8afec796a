"""Type variables and protocols shared by the mapops operations."""

from typing import Any, Hashable, TypeVar

from typing_extensions import Protocol

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SupportsAdd(Protocol):
    """A type that defines ``+``."""

    def __add__(self, other: Any) -> Any: ...


A = TypeVar("A", bound=SupportsAdd)


class SupportsLessThanZero(Protocol):
    """A type that can be ordered against the integer zero."""

    def __lt__(self, other: Any) -> bool: ...


class SupportsRandrange(Protocol):
    """The part of :class:`random.Random` used for random selection."""

    def randrange(self, stop: int) -> int: ...
