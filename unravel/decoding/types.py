"""
Type definitions for unravel decoding.

Provides a minimal Result type (Ok/Err), the UNDEFINED sentinel, the reserved
location slots and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class Undefined(Enum):
    """
    Sentinel for an absent value.

    JSON-like data distinguishes "key exists with null" from "key not found".
    ``None`` stands for the former, ``UNDEFINED`` for the latter. Records pass
    ``UNDEFINED`` to the decoder of a field missing from the input.
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = Undefined.UNDEFINED


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def chain(self, fn: Callable[[T], Result[Any, U]]) -> Result[Any, U]:
        return fn(self.value)

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], U]) -> Err[U]:
        return Err(fn(self.error))

    def chain(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def unwrap_or(self, default: U) -> U:
        return default


class Slot(Enum):
    """Reserved location keys for the structural slots of a dictionary."""

    ENTRY = "<entry>"
    KEY = "<key>"

    def __str__(self) -> str:
        return self.value


# Type aliases
Result = Union[Err[E], Ok[T]]
LocationKey = Union[str, int, Slot]
Location = tuple[LocationKey, ...]
