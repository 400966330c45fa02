"""
Tests for report flattening and text formatting.
"""

import pytest

from unravel import (
    UNDEFINED,
    Children,
    DecodeError,
    ErrorKind,
    Leaf,
    ReportChild,
    dictionary,
    flatten,
    format_flattened,
    format_report,
    number,
    record,
    refine,
    string,
    union,
    unit,
)
from unravel.reporters import FlatEntry


class TestFlatten:
    def test_leaf_is_single_root_entry(self):
        error = DecodeError(ErrorKind.UNEXPECTED_TYPE)
        assert flatten(Leaf(error)) == {(): FlatEntry(error)}

    def test_rejects_non_reports(self):
        with pytest.raises(TypeError):
            flatten({"a": DecodeError(ErrorKind.NEVER)})

    def test_flat_children(self):
        missing = DecodeError(ErrorKind.PROP_MISSING)
        unknown = DecodeError(ErrorKind.PROP_UNKNOWN)
        report = Children(
            {
                "a": ReportChild(Leaf(missing)),
                "b": ReportChild(Leaf(unknown), given=1),
            }
        )
        assert flatten(report) == {
            ("a",): FlatEntry(missing),
            ("b",): FlatEntry(unknown, 1),
        }

    def test_record_of_dict_of_record(self):
        schema = record({"users": dictionary(record({"role": string}))})
        report = schema.decode({"users": {"bob": {"role": 1}}}).error

        flat = flatten(report)

        assert list(flat) == [("users", "bob", "role")]
        entry = flat[("users", "bob", "role")]
        assert entry.kind == "unexpected-type"
        assert entry.given == 1

    def test_similar_errors_at_different_locations_are_kept(self):
        schema = record({"a": record({"x": number}), "b": record({"x": number})})
        report = schema.decode({"a": {"x": "1"}, "b": {"x": "1"}}).error

        flat = flatten(report)

        assert set(flat) == {("a", "x"), ("b", "x")}

    def test_union_failure_is_a_leaf(self):
        report = union([unit, string]).decode(42).error
        flat = flatten(report)
        assert list(flat) == [()]
        assert flat[()].kind == "none-valid"

    def test_given_is_filled_from_parent_entry(self):
        error = DecodeError(ErrorKind.UNEXPECTED_TYPE)
        report = Children({"a": ReportChild(Leaf(error), given="x")})
        assert flatten(report)[("a",)].given == "x"
        assert flatten(Leaf(error))[()].given is UNDEFINED


class TestFormat:
    def test_root_location_is_empty(self):
        report = string.decode(42).error
        assert format_report(report) == "Error at : unexpected-type"

    def test_one_line_per_failure(self):
        schema = record({"name": string, "score": number})
        report = schema.decode({"name": 1, "extra": True}).error
        assert format_report(report).splitlines() == [
            "Error at name: unexpected-type",
            "Error at score: prop-missing",
            "Error at extra: prop-unknown",
        ]

    def test_dotted_nested_location(self):
        schema = record({"users": dictionary(record({"role": string}))})
        report = schema.decode({"users": {"bob": {"role": 1}}}).error
        assert format_report(report) == "Error at users.bob.role: unexpected-type"

    def test_refine_message(self):
        schema = record({"age": refine(number, lambda x: x >= 0, "Must be >= 0")})
        report = schema.decode({"age": -1}).error
        assert format_report(report) == "Error at age: invalid (Must be >= 0)"

    def test_format_flattened(self):
        flat = {
            (): FlatEntry(DecodeError(ErrorKind.NEVER)),
            ("a", 0): FlatEntry(DecodeError(ErrorKind.NONE_VALID)),
        }
        assert format_flattened(flat) == "Error at : never\nError at a.0: none-valid"
