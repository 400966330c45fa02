"""
Exceptions raised by unravel.

Decoding itself never raises: failures are returned as ``Err`` reports. These
exceptions cover invalid schema definitions and the opt-in raising helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .decoding.report import DecodeReport


class UnravelError(Exception):
    """Base exception for unravel."""


class SchemaError(UnravelError, TypeError):
    """Raised when a schema definition itself is invalid."""


class DecodeFailure(UnravelError, ValueError):
    """Raised by the raising helpers when an input does not decode."""

    def __init__(self, report: DecodeReport):
        # Import here to avoid circular dependency
        from .reporters.text import format_report

        self.report = report
        super().__init__(f"Decoding failed:\n{format_report(report)}")
