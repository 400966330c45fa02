"""
Report model for unravel decoding.

A report is either a single leaf error, or a mapping from location keys to
child reports. Decoders never build an empty mapping: on success there is no
report at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from ..context import is_capturing_given
from .types import UNDEFINED, Err, LocationKey


class ErrorKind(str, Enum):
    UNEXPECTED_TYPE = "unexpected-type"
    UNEXPECTED_PROTOTYPE = "unexpected-prototype"
    PROP_MISSING = "prop-missing"
    PROP_UNKNOWN = "prop-unknown"
    NONE_VALID = "none-valid"
    NEVER = "never"
    INVALID = "invalid"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DecodeError:
    """
    Leaf error descriptor.

    ``attempts`` is only set for ``none-valid`` errors and holds the report of
    every alternative that was tried. ``message`` is free text attached by
    refinements.
    """

    kind: ErrorKind
    given: Any = UNDEFINED
    attempts: Optional[Children] = None
    message: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ReportChild:
    """A child report together with the input found at its location."""

    report: DecodeReport
    given: Any = UNDEFINED


@dataclass(frozen=True, slots=True)
class Leaf:
    error: DecodeError

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True, slots=True)
class Children:
    """Reports of failing children, keyed by their location key."""

    entries: Mapping[LocationKey, ReportChild]

    def __post_init__(self):
        if not self.entries:
            raise ValueError("A Children report must contain at least one entry")

    def __getitem__(self, key: LocationKey) -> ReportChild:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


DecodeReport = Union[Leaf, Children]


def captured(given: Any) -> Any:
    """Return ``given`` if the current context records inputs, else UNDEFINED."""
    return given if is_capturing_given() else UNDEFINED


def leaf(
    kind: ErrorKind,
    given: Any = UNDEFINED,
    *,
    attempts: Optional[Children] = None,
    message: Optional[str] = None,
) -> Leaf:
    return Leaf(DecodeError(kind, captured(given), attempts, message))


def child(report: DecodeReport, given: Any = UNDEFINED) -> ReportChild:
    return ReportChild(report, captured(given))


def fail(report: DecodeReport) -> Err[DecodeReport]:
    return Err(report)
