"""
Plain text rendering of decode reports.
"""

from __future__ import annotations

from ..decoding.report import DecodeReport
from ..decoding.types import Location
from .flatten import FlatEntry, FlattenedReport, flatten


def location_as_string(location: Location) -> str:
    return ".".join(str(key) for key in location)


def _format_entry(location: Location, entry: FlatEntry) -> str:
    line = f"Error at {location_as_string(location)}: {entry.kind}"
    if entry.error.message:
        line += f" ({entry.error.message})"
    return line


def format_flattened(report: FlattenedReport) -> str:
    """
    Render a flattened report, one line per failure.

    Examples:
        Error at : unexpected-type
        Error at users.bob.role: unexpected-type
        Error at age: invalid (Must be >= 0)
    """
    return "\n".join(
        _format_entry(location, entry) for location, entry in report.items()
    )


def format_report(report: DecodeReport) -> str:
    """Flatten and render a report."""
    return format_flattened(flatten(report))
