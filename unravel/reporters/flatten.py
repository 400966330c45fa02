"""
Flattening of nested decode reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..decoding.report import Children, DecodeError, DecodeReport, Leaf
from ..decoding.types import UNDEFINED, Location

FlattenedReport = dict[Location, "FlatEntry"]


@dataclass(frozen=True, slots=True)
class FlatEntry:
    """A single leaf failure together with the input found at its location."""

    error: DecodeError
    given: Any = UNDEFINED

    @property
    def kind(self) -> str:
        return str(self.error.kind)


def flatten(report: DecodeReport) -> FlattenedReport:
    """
    Flatten a report tree into a mapping of absolute locations to leaf errors.

    A leaf report becomes a single entry at the root location ``()``. For a
    children report, every child is flattened and its locations are prefixed
    with the child's key.

    Examples:
        flatten(Leaf(DecodeError(ErrorKind.NEVER)))
        # {(): FlatEntry(DecodeError(kind=ErrorKind.NEVER))}

        report = record({"users": dictionary(record({"role": string}))}).decode(
            {"users": {"bob": {"role": 1}}}
        ).error
        list(flatten(report))
        # [("users", "bob", "role")]
    """
    if isinstance(report, Leaf):
        return {(): FlatEntry(report.error, report.error.given)}

    if not isinstance(report, Children):
        raise TypeError(
            f"flatten() expects a decode report, got {type(report).__name__}"
        )

    flattened: FlattenedReport = {}
    for key, report_child in report.entries.items():
        for location, entry in flatten(report_child.report).items():
            if location == () and entry.given is UNDEFINED:
                entry = FlatEntry(entry.error, report_child.given)
            flattened[(key, *location)] = entry

    return flattened
