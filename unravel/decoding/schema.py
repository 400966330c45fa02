"""
Schema operations for unravel decoding.

Provides to_decoder(), validate(), decode_or_raise() and to_pydantic().
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Literal as TypingLiteral
from typing import Optional as TypingOptional
from typing import Union as TypingUnion

from pydantic import create_model

from ..errors import DecodeFailure, SchemaError
from .combinators import (
    DictionaryDecoder,
    RecordDecoder,
    RefinedDecoder,
    UnionDecoder,
    record,
    union,
)
from .core import (
    Decoder,
    LiteralDecoder,
    PrimitiveDecoder,
    boolean,
    number,
    string,
    undef,
    unit,
)
from .report import DecodeReport
from .types import UNDEFINED, Err, Result

logger = logging.getLogger(__name__)

_TYPE_DECODERS: dict[type, Decoder[Any]] = {
    str: string,
    int: number,
    float: number,
    bool: boolean,
    type(None): unit,
}


def to_decoder(v: Any) -> Decoder[Any]:
    """
    Coerce a plain Python schema to a decoder.

    Conversion rules:
        Decoder -> pass through
        str | int | float | bool | NoneType -> matching primitive decoder
        dict -> record with recursive conversion
        tuple -> union of the converted items, in order
        str / int / float / bool / None value -> literal
    """
    if isinstance(v, Decoder):
        return v

    if isinstance(v, type):
        if v in _TYPE_DECODERS:
            return _TYPE_DECODERS[v]
        raise SchemaError(f"No decoder for type {v.__name__}")

    if isinstance(v, dict):
        return record({k: to_decoder(val) for k, val in v.items()})

    if isinstance(v, tuple):
        return union([to_decoder(item) for item in v])

    if v is None or v is UNDEFINED or isinstance(v, (str, int, float, bool)):
        return LiteralDecoder(v)

    raise SchemaError(f"Cannot convert {type(v).__name__} to decoder")


def validate(data: Any, schema: Any) -> Result[DecodeReport, Any]:
    """
    Decode data against a plain schema.

    Args:
        data: The value to decode
        schema: Decoder or plain schema definition (see ``to_decoder``)

    Returns:
        Ok(value) if decoding succeeds
        Err(report) if decoding fails

    Usage:
        schema = {
            "name": str,
            "role": ("admin", "user"),
            "age": int,
        }
        result = validate({"name": "Alice", "role": "admin", "age": 30}, schema)
    """
    return to_decoder(schema).decode(data)


def decode_or_raise(decoder: Decoder[Any], data: Any) -> Any:
    """
    Decode data, raising DecodeFailure with a formatted report on failure.
    """
    result = decoder.decode(data)
    if isinstance(result, Err):
        logger.debug("Raising on failed decode with %r", type(decoder).__name__)
        raise DecodeFailure(result.error)
    return result.value


def to_pydantic(name: str, schema: Any) -> type:
    """
    Compile a record schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Record decoder or plain dict schema

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", record({
            "name": string,
            "email": optional(string),
        }))
        user = User(name="Alice")
    """
    decoder = to_decoder(schema)
    if not isinstance(decoder, RecordDecoder):
        raise SchemaError("Schema must be a record")

    fields: dict[str, Any] = {}

    for key, field_decoder in decoder.fields.items():
        field_type = _extract_pydantic_type(field_decoder, f"{name}_{key}")
        if field_decoder.is_valid(UNDEFINED):
            fields[key] = (TypingOptional[field_type], None)
        else:
            fields[key] = (field_type, ...)

    return create_model(name, **fields)


def _extract_pydantic_type(decoder: Decoder[Any], name: str) -> Any:
    """Extract the Pydantic field type of a decoder."""
    match decoder:
        case PrimitiveDecoder(name="string"):
            return str
        case PrimitiveDecoder(name="number"):
            return TypingUnion[int, float]
        case PrimitiveDecoder(name="boolean"):
            return bool
        case PrimitiveDecoder(name="unit"):
            return type(None)
        case LiteralDecoder(value=value) if value is not UNDEFINED:
            return TypingLiteral[value]
        case RecordDecoder():
            return to_pydantic(name, decoder)
        case DictionaryDecoder(entry=entry):
            return dict[str, _extract_pydantic_type(entry, name)]  # type: ignore[misc]
        case UnionDecoder(alternatives=alternatives):
            types = tuple(
                _extract_pydantic_type(alt, f"{name}_{index}")
                for index, alt in enumerate(alternatives)
                if alt is not undef
            )
            return TypingUnion[types] if types else Any
        case RefinedDecoder(decoder=inner):
            return _extract_pydantic_type(inner, name)

    return Any
