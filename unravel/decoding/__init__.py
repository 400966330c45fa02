"""
Unravel Decoding - Decoder combinators with location-aware reports.

Usage:
    from unravel.decoding import record, dictionary, optional, string, number

    User = record({
        "name": string,
        "email": optional(string),
        "scores": dictionary(number),
    })

    result = User.decode(data)
    if result.is_err():
        print(format_report(result.error))
"""

from .combinators import (
    DictionaryDecoder,
    LazyDecoder,
    RecordDecoder,
    RefinedDecoder,
    UnionDecoder,
    VariantDecoder,
    dictionary,
    lazy,
    maybe,
    optional,
    partial,
    record,
    refine,
    union,
    variant,
)
from .core import (
    CompoundDecoder,
    Decoder,
    LiteralDecoder,
    MappedDecoder,
    PrimitiveDecoder,
    WrappingDecoder,
    boolean,
    literal,
    never,
    number,
    string,
    undef,
    unit,
    unknown,
)
from .report import Children, DecodeError, DecodeReport, ErrorKind, Leaf, ReportChild
from .schema import decode_or_raise, to_decoder, to_pydantic, validate
from .types import UNDEFINED, Err, Location, LocationKey, Ok, Result, Slot

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "UNDEFINED",
    # Locations
    "Location",
    "LocationKey",
    "Slot",
    # Reports
    "ErrorKind",
    "DecodeError",
    "DecodeReport",
    "Leaf",
    "Children",
    "ReportChild",
    # Interfaces
    "Decoder",
    "CompoundDecoder",
    "WrappingDecoder",
    # Primitives
    "PrimitiveDecoder",
    "LiteralDecoder",
    "MappedDecoder",
    "unknown",
    "never",
    "unit",
    "undef",
    "string",
    "number",
    "boolean",
    "literal",
    # Compound
    "UnionDecoder",
    "RecordDecoder",
    "DictionaryDecoder",
    "VariantDecoder",
    "LazyDecoder",
    "RefinedDecoder",
    "union",
    "optional",
    "maybe",
    "record",
    "partial",
    "dictionary",
    "variant",
    "lazy",
    "refine",
    # Schema
    "to_decoder",
    "validate",
    "decode_or_raise",
    "to_pydantic",
]
