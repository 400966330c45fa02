"""
Entity wrappers: decode structurally, then build a domain object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from .decoding.core import Decoder, WrappingDecoder
from .decoding.report import DecodeReport, ErrorKind, fail, leaf
from .decoding.types import Err, Ok, Result

_E = TypeVar("_E")


@dataclass(frozen=True, slots=True)
class EntityDecoder(WrappingDecoder[_E]):
    """
    Decoder producing instances of an entity class.

    Inputs that already are instances of the class are accepted as they are.
    Decoded dicts are passed to the class as keyword arguments, any other
    decoded value is passed as the single positional argument.
    """

    schema: Decoder[Any]
    cls: type[_E]

    @property
    def inner(self) -> Decoder[Any]:
        return self.schema

    def decode(self, input: Any) -> Result[DecodeReport, _E]:
        if isinstance(input, self.cls):
            return Ok(input)

        result = self.schema.decode(input)
        if isinstance(result, Err):
            return result

        try:
            return Ok(self._construct(result.value))
        except (TypeError, ValueError) as e:
            message = f"Cannot construct {self.cls.__name__}: {e}"
            return fail(leaf(ErrorKind.INVALID, input, message=message))

    def _construct(self, value: Any) -> _E:
        if isinstance(value, dict):
            return self.cls(**value)
        return self.cls(value)  # type: ignore[call-arg]


def entity(schema: Decoder[Any], cls: type[_E]) -> EntityDecoder[_E]:
    """
    Wrap a schema so that decoding yields instances of ``cls``.

    Usage:
        @dataclass
        class User:
            name: str
            score: float

            def format_name(self):
                return f"name: {self.name}"

        UserD = entity(record({"name": string, "score": number}), User)
        UserD.decode({"name": "John", "score": 42})  # Ok(User(name="John", score=42))

    Pydantic models built with ``to_pydantic`` work as entity classes too. If
    the class rejects a decoded value with a TypeError or ValueError (pydantic's
    ValidationError included), the result is an ``invalid`` report.
    """
    return EntityDecoder(schema, cls)


def from_factory(schema: Decoder[Any], factory: Callable[[Any], _E]) -> Decoder[_E]:
    """Build entities with an arbitrary factory function, i.e. ``schema.map``."""
    return schema.map(factory)
