from .flatten import FlatEntry, FlattenedReport, flatten
from .text import format_flattened, format_report, location_as_string

__all__ = [
    "FlatEntry",
    "FlattenedReport",
    "flatten",
    "format_flattened",
    "format_report",
    "location_as_string",
]
