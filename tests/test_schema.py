"""
Tests for schema sugar, raising helpers, configuration and Pydantic interop.
"""

import pytest
from pydantic import ValidationError

from unravel import (
    UNDEFINED,
    DecodeFailure,
    Err,
    ErrorKind,
    Ok,
    SchemaError,
    boolean,
    decode_or_raise,
    decoding_context,
    dictionary,
    flatten,
    is_capturing_given,
    literal,
    maybe,
    number,
    optional,
    record,
    string,
    to_decoder,
    to_pydantic,
    union,
    unit,
    validate,
)
from unravel.decoding import LiteralDecoder, RecordDecoder, UnionDecoder


class TestToDecoder:
    def test_types(self):
        assert to_decoder(str) is string
        assert to_decoder(int) is number
        assert to_decoder(float) is number
        assert to_decoder(bool) is boolean
        assert to_decoder(type(None)) is unit

    def test_decoder_passes_through(self):
        decoder = maybe(string)
        assert to_decoder(decoder) is decoder

    def test_dict_becomes_record(self):
        decoder = to_decoder({"name": str, "tags": {"main": str}})
        assert isinstance(decoder, RecordDecoder)
        assert isinstance(decoder.fields["tags"], RecordDecoder)

    def test_values_become_literals(self):
        decoder = to_decoder("admin")
        assert isinstance(decoder, LiteralDecoder)
        assert decoder.value == "admin"

    def test_tuple_becomes_union(self):
        decoder = to_decoder(("admin", "user", None))
        assert isinstance(decoder, UnionDecoder)
        assert decoder.decode("user") == Ok("user")
        assert decoder.decode(None) == Ok(None)
        assert isinstance(decoder.decode("root"), Err)

    @pytest.mark.parametrize("value", [list, [str], object(), set()])
    def test_unconvertible(self, value):
        with pytest.raises(SchemaError):
            to_decoder(value)


class TestValidate:
    schema = {
        "name": str,
        "role": ("admin", "user"),
        "age": int,
        "email": optional(string),
    }

    def test_valid(self):
        result = validate({"name": "Alice", "role": "admin", "age": 30}, self.schema)
        assert result == Ok({"name": "Alice", "role": "admin", "age": 30})

    def test_invalid(self):
        result = validate({"name": "Alice", "role": "root", "age": 30}, self.schema)
        assert isinstance(result, Err)
        assert flatten(result.error)[("role",)].kind == "none-valid"


class TestDecodeOrRaise:
    def test_returns_value(self):
        assert decode_or_raise(dictionary(number), {"a": 1}) == {"a": 1}

    def test_raises_with_formatted_report(self):
        decoder = record({"name": string})
        with pytest.raises(DecodeFailure) as excinfo:
            decode_or_raise(decoder, {"name": 1})

        assert "Error at name: unexpected-type" in str(excinfo.value)
        assert excinfo.value.report["name"].given == 1

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode_or_raise(string, 1)


class TestDecodingContext:
    def test_default_captures_given(self):
        assert is_capturing_given()

    def test_given_is_not_captured(self):
        decoder = record({"token": string})

        with decoding_context(capture_given=False):
            assert not is_capturing_given()
            result = decoder.decode({"token": 12345})

        assert is_capturing_given()
        entry = result.error["token"]
        assert entry.given is UNDEFINED
        assert entry.report.error.given is UNDEFINED
        assert flatten(result.error)[("token",)].given is UNDEFINED

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with decoding_context(capture_given=False):
                raise RuntimeError("boom")
        assert is_capturing_given()


class TestToPydantic:
    def test_simple_model(self):
        User = to_pydantic("User", record({"name": string, "age": number}))
        user = User(name="Alice", age=30)
        assert user.name == "Alice"
        assert user.age == 30

    def test_optional_fields(self):
        User = to_pydantic("User", record({"name": string, "email": optional(string)}))
        user = User(name="Alice")
        assert user.email is None

    def test_pydantic_validation(self):
        User = to_pydantic("User", {"name": str})
        with pytest.raises(ValidationError):
            User()

    def test_literals_and_nested_records(self):
        Account = to_pydantic(
            "Account",
            record(
                {
                    "role": union([literal("admin"), literal("user")]),
                    "owner": record({"name": string}),
                    "scores": dictionary(number),
                }
            ),
        )
        account = Account(role="admin", owner={"name": "Bob"}, scores={"a": 1})
        assert account.owner.name == "Bob"
        assert account.scores == {"a": 1}
        with pytest.raises(ValidationError):
            Account(role="root", owner={"name": "Bob"}, scores={})

    def test_requires_record(self):
        with pytest.raises(SchemaError):
            to_pydantic("Scores", dictionary(number))


def test_error_kinds_are_strings():
    assert ErrorKind.PROP_MISSING == "prop-missing"
    assert str(ErrorKind.NONE_VALID) == "none-valid"
