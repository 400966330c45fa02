"""
Compound decoders for unravel decoding.

Provides union, record, dictionary and variant decoders, along with the lazy
and refine wrappers. Every compound decoder collects the reports of all its
failing children in one pass instead of stopping at the first failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from ..errors import SchemaError
from .core import CompoundDecoder, Decoder, WrappingDecoder, string, undef, unit
from .report import Children, DecodeReport, ErrorKind, ReportChild, child, fail, leaf
from .types import UNDEFINED, Err, LocationKey, Ok, Result, Slot

logger = logging.getLogger(__name__)


def _ensure_decoder(value: Any, where: str) -> Decoder[Any]:
    if not isinstance(value, Decoder):
        raise SchemaError(f"{where} expects a decoder, got {type(value).__name__}")
    return value


#
# Unions
#


@dataclass(frozen=True, slots=True)
class UnionDecoder(CompoundDecoder[Any]):
    """Decoder trying each alternative in order, keeping the first success."""

    alternatives: tuple[Decoder[Any], ...]

    @property
    def children(self) -> dict[LocationKey, Decoder[Any]]:
        return dict(enumerate(self.alternatives))

    def decode(self, input: Any) -> Result[DecodeReport, Any]:
        attempts: dict[LocationKey, ReportChild] = {}

        for index, alternative in enumerate(self.alternatives):
            result = alternative.decode(input)
            if isinstance(result, Ok):
                return result
            attempts[index] = child(result.error)

        return fail(leaf(ErrorKind.NONE_VALID, input, attempts=Children(attempts)))


def union(alternatives: Sequence[Decoder[Any]]) -> UnionDecoder:
    """
    Create a decoder accepting any of the given alternatives.

    Alternatives are tried in declaration order and the first success wins,
    so put the preferred decoder first.

    Usage:
        union([unit, string])
        union([literal("on"), literal("off")])
    """
    alternatives = tuple(_ensure_decoder(alt, "union()") for alt in alternatives)
    if not alternatives:
        raise SchemaError("union() requires at least one alternative")
    return UnionDecoder(alternatives)


# Note: `decoder` must be the first alternative, so that its result is preferred
# in case both alternatives match
def optional(decoder: Decoder[Any]) -> UnionDecoder:
    """Accept a value of ``decoder`` or an absent value (UNDEFINED)."""
    return union([decoder, undef])


def maybe(decoder: Decoder[Any]) -> UnionDecoder:
    """Accept a value of ``decoder`` or None."""
    return union([decoder, unit])


#
# Records
#


@dataclass(frozen=True, slots=True, eq=False)
class RecordDecoder(CompoundDecoder[dict[str, Any]]):
    """
    Decoder for dicts with an exact, closed set of fields.

    Missing fields are tried against their decoder with UNDEFINED and are only
    reported when that fails. Fields not in the schema are always reported.
    """

    fields: Mapping[str, Decoder[Any]]

    @property
    def children(self) -> dict[LocationKey, Decoder[Any]]:
        return dict(self.fields)

    def decode(self, input: Any) -> Result[DecodeReport, dict[str, Any]]:
        if not isinstance(input, Mapping):
            return fail(leaf(ErrorKind.UNEXPECTED_TYPE, input))

        # We construct a new dict for the result, so only accept plain dicts
        if type(input) is not dict:
            return fail(leaf(ErrorKind.UNEXPECTED_PROTOTYPE, input))

        entries: dict[LocationKey, ReportChild] = {}
        instance: dict[str, Any] = {}

        for key, decoder in self.fields.items():
            if key not in input:
                if isinstance(decoder.decode(UNDEFINED), Err):
                    entries[key] = child(leaf(ErrorKind.PROP_MISSING))
                continue

            value = input[key]
            result = decoder.decode(value)
            if isinstance(result, Err):
                entries[key] = child(result.error, value)
            else:
                instance[key] = result.value

        for key, value in input.items():
            if key not in self.fields:
                entries[key] = child(leaf(ErrorKind.PROP_UNKNOWN, value), value)

        if entries:
            return fail(Children(entries))
        return Ok(instance)


def record(fields: Mapping[str, Decoder[Any]]) -> RecordDecoder:
    """
    Create a decoder for a dict with exactly the given fields.

    Usage:
        record({
            "name": string,
            "email": optional(string),
            "score": number,
        })
    """
    checked: dict[str, Decoder[Any]] = {}
    for key, decoder in fields.items():
        if not isinstance(key, str):
            raise SchemaError(f"record() field names must be str, got {key!r}")
        checked[key] = _ensure_decoder(decoder, f"record() field '{key}'")
    return RecordDecoder(checked)


def partial(rec: RecordDecoder) -> RecordDecoder:
    """
    Make every field of a record optional.

    Fields which are already optional are kept as they are. Nothing is decoded
    here, so lazy fields are not resolved.
    """
    if not isinstance(rec, RecordDecoder):
        raise SchemaError(f"partial() expects a record, given {rec!r}")

    return RecordDecoder(
        {
            key: decoder if _is_optional(decoder) else optional(decoder)
            for key, decoder in rec.fields.items()
        }
    )


def _is_optional(decoder: Decoder[Any]) -> bool:
    if decoder is undef:
        return True
    return isinstance(decoder, UnionDecoder) and any(
        alternative is undef for alternative in decoder.alternatives
    )


#
# Dictionaries
#


@dataclass(frozen=True, slots=True)
class DictionaryDecoder(CompoundDecoder[dict[Any, Any]]):
    """Decoder for open-ended mappings with a single entry type."""

    entry: Decoder[Any]
    key: Decoder[Any] = string

    @property
    def children(self) -> dict[LocationKey, Decoder[Any]]:
        return {Slot.KEY: self.key, Slot.ENTRY: self.entry}

    def decode(self, input: Any) -> Result[DecodeReport, dict[Any, Any]]:
        if not isinstance(input, Mapping):
            return fail(leaf(ErrorKind.UNEXPECTED_TYPE, input))

        entries: dict[LocationKey, ReportChild] = {}
        instance: dict[Any, Any] = {}

        for key, value in input.items():
            key_result = self.key.decode(key)
            entry_result = self.entry.decode(value)

            if isinstance(key_result, Err):
                slot_entries = {Slot.KEY: child(key_result.error, key)}
                if isinstance(entry_result, Err):
                    slot_entries[Slot.ENTRY] = child(entry_result.error, value)
                entries[key] = child(Children(slot_entries), value)
            elif isinstance(entry_result, Err):
                entries[key] = child(entry_result.error, value)
            else:
                instance[key_result.value] = entry_result.value

        if entries:
            return fail(Children(entries))
        return Ok(instance)


def dictionary(
    entry: Decoder[Any], key: Optional[Decoder[Any]] = None
) -> DictionaryDecoder:
    """
    Create a decoder for a mapping of arbitrary keys to values of one type.

    Args:
        entry: Decoder applied to every value
        key: Decoder applied to every key (defaults to ``string``)

    Usage:
        dictionary(number)
        dictionary(record({"role": string}))
    """
    entry = _ensure_decoder(entry, "dictionary()")
    if key is None:
        return DictionaryDecoder(entry)
    return DictionaryDecoder(entry, _ensure_decoder(key, "dictionary() key"))


#
# Variants
#


@dataclass(frozen=True, slots=True, eq=False)
class VariantDecoder(CompoundDecoder[dict[str, Any]]):
    """Like a union, but wraps the decoded value as ``{tag: value}``."""

    alternatives: Mapping[str, Decoder[Any]]

    @property
    def children(self) -> dict[LocationKey, Decoder[Any]]:
        return dict(self.alternatives)

    def decode(self, input: Any) -> Result[DecodeReport, dict[str, Any]]:
        attempts: dict[LocationKey, ReportChild] = {}

        for tag, alternative in self.alternatives.items():
            result = alternative.decode(input)
            if isinstance(result, Ok):
                return Ok({tag: result.value})
            attempts[tag] = child(result.error)

        return fail(leaf(ErrorKind.NONE_VALID, input, attempts=Children(attempts)))


def variant(alternatives: Mapping[str, Decoder[Any]]) -> VariantDecoder:
    """
    Create a tagged union, keeping the tag of the matching alternative.

    Usage:
        shape = variant({"circle": record({"r": number}), "label": string})
        shape.decode("hi")  # Ok({"label": "hi"})
    """
    checked = {
        tag: _ensure_decoder(decoder, f"variant() alternative '{tag}'")
        for tag, decoder in alternatives.items()
    }
    if not checked:
        raise SchemaError("variant() requires at least one alternative")
    return VariantDecoder(checked)


#
# Wrappers
#


@dataclass(frozen=True, slots=True, eq=False)
class LazyDecoder(WrappingDecoder[Any]):
    """
    Decoder resolved on first use.

    Breaks the definition cycle of recursive and mutually recursive schemas.
    The supplier is called once; a concurrent first use may call it twice,
    which is harmless as suppliers only look up existing decoders.
    """

    supplier: Callable[[], Decoder[Any]]
    _resolved: Optional[Decoder[Any]] = field(default=None, init=False, repr=False)

    @property
    def inner(self) -> Decoder[Any]:
        if self._resolved is None:
            resolved = self.supplier()
            if not isinstance(resolved, Decoder):
                raise SchemaError(
                    "lazy() supplier must return a decoder, "
                    f"got {type(resolved).__name__}"
                )
            logger.debug("Resolved lazy decoder to %r", type(resolved).__name__)
            object.__setattr__(self, "_resolved", resolved)
            return resolved
        return self._resolved

    def decode(self, input: Any) -> Result[DecodeReport, Any]:
        return self.inner.decode(input)


def lazy(supplier: Callable[[], Decoder[Any]]) -> LazyDecoder:
    """
    Defer building a decoder until it is first used.

    Usage:
        Tree = record({
            "value": number,
            "children": dictionary(lazy(lambda: Tree)),
        })
    """
    if not callable(supplier):
        raise SchemaError("lazy() expects a zero-argument callable")
    return LazyDecoder(supplier)


@dataclass(frozen=True, slots=True)
class RefinedDecoder(WrappingDecoder[Any]):
    decoder: Decoder[Any]
    predicate: Callable[[Any], bool]
    message: Optional[str] = None

    @property
    def inner(self) -> Decoder[Any]:
        return self.decoder

    def decode(self, input: Any) -> Result[DecodeReport, Any]:
        result = self.decoder.decode(input)
        if isinstance(result, Err):
            return result

        try:
            passed = self.predicate(result.value)
        except Exception as e:
            message = f"Validation error: {e}"
            return fail(leaf(ErrorKind.INVALID, input, message=message))

        if not passed:
            return fail(leaf(ErrorKind.INVALID, input, message=self.message))
        return result


def refine(
    decoder: Decoder[Any],
    predicate: Callable[[Any], bool],
    message: Optional[str] = None,
) -> RefinedDecoder:
    """
    Add a check on the decoded value.

    Usage:
        refine(number, lambda x: x >= 0, "Must be >= 0")
        refine(string, str.isalpha, "Must be alphabetic")
    """
    return RefinedDecoder(_ensure_decoder(decoder, "refine()"), predicate, message)
