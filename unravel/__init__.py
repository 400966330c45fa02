import logging

from .context import decoding_context, is_capturing_given
from .decoding import (
    UNDEFINED,
    Children,
    CompoundDecoder,
    DecodeError,
    DecodeReport,
    Decoder,
    Err,
    ErrorKind,
    Leaf,
    Ok,
    ReportChild,
    Slot,
    WrappingDecoder,
    boolean,
    decode_or_raise,
    dictionary,
    lazy,
    literal,
    maybe,
    never,
    number,
    optional,
    partial,
    record,
    refine,
    string,
    to_decoder,
    to_pydantic,
    undef,
    union,
    unit,
    unknown,
    validate,
    variant,
)
from .entity import entity, from_factory
from .errors import DecodeFailure, SchemaError, UnravelError
from .reporters import flatten, format_flattened, format_report
from .traversing import locate, resolve_path, traverse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Ok",
    "Err",
    "UNDEFINED",
    "Slot",
    "ErrorKind",
    "DecodeError",
    "DecodeReport",
    "Leaf",
    "Children",
    "ReportChild",
    "Decoder",
    "CompoundDecoder",
    "WrappingDecoder",
    "unknown",
    "never",
    "unit",
    "undef",
    "string",
    "number",
    "boolean",
    "literal",
    "union",
    "optional",
    "maybe",
    "record",
    "partial",
    "dictionary",
    "variant",
    "lazy",
    "refine",
    "entity",
    "from_factory",
    "to_decoder",
    "validate",
    "decode_or_raise",
    "to_pydantic",
    "traverse",
    "locate",
    "resolve_path",
    "flatten",
    "format_flattened",
    "format_report",
    "decoding_context",
    "is_capturing_given",
    "UnravelError",
    "SchemaError",
    "DecodeFailure",
]
