"""
Core decoder classes for unravel decoding.

Provides the Decoder interfaces and the primitive decoders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from ..errors import SchemaError
from .report import DecodeReport, ErrorKind, fail, leaf
from .types import UNDEFINED, LocationKey, Ok, Result

A = TypeVar("A")
B = TypeVar("B")

CheckFn = Callable[[Any], bool]


class Decoder(ABC, Generic[A]):
    """
    Schema-bound decoding capability.

    Turns an untyped input into ``Ok(value)`` or ``Err(report)``. Decoders are
    immutable and can be reused across any number of ``decode`` calls.
    """

    __slots__ = ()

    @abstractmethod
    def decode(self, input: Any) -> Result[DecodeReport, A]:
        raise NotImplementedError

    def __call__(self, input: Any) -> Result[DecodeReport, A]:
        return self.decode(input)

    def is_valid(self, input: Any) -> bool:
        """Check whether ``input`` decodes, discarding the value and report."""
        return self.decode(input).is_ok()

    def map(self, fn: Callable[[A], B]) -> Decoder[B]:
        """
        Decode, then transform the decoded value.

        Usage:
            point = record({"x": number, "y": number}).map(lambda p: (p["x"], p["y"]))
        """
        return MappedDecoder(self, fn)


class CompoundDecoder(Decoder[A]):
    """Decoder composed of child decoders, introspectable by location key."""

    __slots__ = ()

    @property
    @abstractmethod
    def children(self) -> dict[LocationKey, Decoder[Any]]:
        raise NotImplementedError


class WrappingDecoder(Decoder[A]):
    """Decoder delegating to a single other decoder at the same location."""

    __slots__ = ()

    @property
    @abstractmethod
    def inner(self) -> Decoder[Any]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class MappedDecoder(WrappingDecoder[B]):
    decoder: Decoder[Any]
    fn: Callable[[Any], B]

    @property
    def inner(self) -> Decoder[Any]:
        return self.decoder

    def decode(self, input: Any) -> Result[DecodeReport, B]:
        return self.decoder.decode(input).map(self.fn)


@dataclass(frozen=True, slots=True, repr=False)
class PrimitiveDecoder(Decoder[A]):
    """
    Decoder wrapping a single predicate.

    Succeeds with the input unchanged when ``check`` passes, otherwise fails
    with a leaf error of ``kind``.
    """

    name: str
    check: CheckFn
    kind: ErrorKind = ErrorKind.UNEXPECTED_TYPE

    def decode(self, input: Any) -> Result[DecodeReport, A]:
        if not self.check(input):
            return fail(leaf(self.kind, input))
        return Ok(input)

    def __repr__(self) -> str:
        return self.name


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


unknown = PrimitiveDecoder("unknown", lambda _: True)
never = PrimitiveDecoder("never", lambda _: False, ErrorKind.NEVER)
unit = PrimitiveDecoder("unit", lambda x: x is None)
undef = PrimitiveDecoder("undef", lambda x: x is UNDEFINED)
string = PrimitiveDecoder("string", lambda x: isinstance(x, str))
number = PrimitiveDecoder("number", _is_number)
boolean = PrimitiveDecoder("boolean", lambda x: isinstance(x, bool))


_LITERAL_KINDS: tuple[CheckFn, ...] = (
    lambda x: isinstance(x, bool),
    _is_number,
    lambda x: isinstance(x, str),
    lambda x: x is None,
    lambda x: x is UNDEFINED,
)


@dataclass(frozen=True, slots=True)
class LiteralDecoder(Decoder[A]):
    """
    Decoder accepting exactly one scalar value.

    Values of a different kind never match, so ``literal(1)`` rejects ``True``.
    Equality follows ``==``, so ``literal(math.nan)`` matches nothing.
    """

    value: A

    def __post_init__(self):
        if not any(is_kind(self.value) for is_kind in _LITERAL_KINDS):
            raise SchemaError(
                f"Cannot build a literal from {type(self.value).__name__}; "
                "expected str, int, float, bool, None or UNDEFINED"
            )

    def decode(self, input: Any) -> Result[DecodeReport, A]:
        for is_kind in _LITERAL_KINDS:
            if is_kind(self.value):
                if is_kind(input) and input == self.value:
                    return Ok(self.value)
                break
        return fail(leaf(ErrorKind.UNEXPECTED_TYPE, input))


def literal(value: A) -> LiteralDecoder[A]:
    """
    Create a decoder for a single literal value.

    Usage:
        literal("admin")
        union([literal("admin"), literal("user")])
    """
    return LiteralDecoder(value)
