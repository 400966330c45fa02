"""
Static traversal of decoder trees.

Walks the ``children`` of compound decoders without any input value, e.g. to
document a schema or to resolve structural references within it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Sequence

from .decoding.core import CompoundDecoder, Decoder, WrappingDecoder
from .decoding.types import Err, Location, LocationKey, Ok, Result, Slot

logger = logging.getLogger(__name__)

PARENT_STEP = ".."

__all__ = [
    "Location",
    "LocationKey",
    "PARENT_STEP",
    "Slot",
    "locate",
    "resolve_path",
    "traverse",
    "unwrap",
]


def unwrap(decoder: Decoder[Any]) -> Decoder[Any]:
    """Follow wrapping decoders (lazy, map, refine) to the decoder they wrap."""
    seen: set[int] = set()
    while isinstance(decoder, WrappingDecoder):
        if id(decoder) in seen:
            raise RecursionError("Wrapping decoders form a cycle")
        seen.add(id(decoder))
        decoder = decoder.inner
    return decoder


def traverse(decoder: Decoder[Any]) -> Iterator[tuple[Location, Decoder[Any]]]:
    """
    Walk a decoder tree depth-first, yielding ``(location, decoder)`` pairs.

    The root is yielded first at location ``()``. Wrapping decoders are seen
    through, so the yielded decoders are never lazy or mapped. A decoder that
    already appears among its own ancestors is yielded but not descended into,
    which keeps recursive schemas finite.

    Examples:
        schema = record({"users": dictionary(record({"role": string}))})
        [location for location, _ in traverse(schema)]
        # [(), ("users",), ("users", Slot.KEY), ("users", Slot.ENTRY),
        #  ("users", Slot.ENTRY, "role")]
    """
    yield from _traverse(unwrap(decoder), (), ())


def _traverse(
    decoder: Decoder[Any], location: Location, ancestors: tuple[int, ...]
) -> Iterator[tuple[Location, Decoder[Any]]]:
    yield location, decoder

    if not isinstance(decoder, CompoundDecoder):
        return

    if id(decoder) in ancestors:
        logger.debug("Not descending into recursive decoder at %r", location)
        return

    for key, child in decoder.children.items():
        yield from _traverse(
            unwrap(child), (*location, key), (*ancestors, id(decoder))
        )


def locate(
    decoder: Decoder[Any], location: Sequence[LocationKey]
) -> Optional[Decoder[Any]]:
    """
    Find the decoder at a static location, or None if there is no such location.

    Wrapping decoders are seen through at every step.
    """
    current = unwrap(decoder)
    for key in location:
        if not isinstance(current, CompoundDecoder):
            return None
        children = current.children
        if key not in children:
            return None
        current = unwrap(children[key])
    return current


def resolve_path(
    location: Sequence[LocationKey], path: Sequence[Any]
) -> Result[str, Location]:
    """
    Resolve a relative path against an absolute location.

    Each ``".."`` step moves to the parent; any other step descends.

    Returns:
        Ok(location) with the absolute location
        Err(message) when the path steps above the root
    """
    resolved: list[LocationKey] = list(location)
    for step in path:
        if step == PARENT_STEP:
            if not resolved:
                return Err("Cannot take parent step of root")
            resolved.pop()
        else:
            resolved.append(step)
    return Ok(tuple(resolved))
