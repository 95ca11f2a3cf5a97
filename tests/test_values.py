"""Tests for the tagged heterogeneous value container."""

import msgspec
import pytest

from typing_bench import (
    BoolValue,
    FloatValue,
    IntValue,
    StrValue,
    UnsupportedValueKind,
    convert_value,
    decode_value,
    encode_value,
    unwrap_value,
    wrap_value,
)


@pytest.mark.parametrize(
    "value, expected_cls",
    [
        (0, IntValue),
        (-1, IntValue),
        (3.14, FloatValue),
        ("", StrValue),
        (True, BoolValue),
        (False, BoolValue),
    ],
)
def test_round_trip_preserves_kind_and_value(value, expected_cls):
    """Encoding then decoding yields the same kind and an equal value."""
    decoded = decode_value(encode_value(value))

    assert isinstance(decoded, expected_cls)
    assert unwrap_value(decoded) == value
    assert type(unwrap_value(decoded)) is type(value)


def test_encoding_carries_explicit_kind_tag():
    assert encode_value(0) == b'{"kind":"int","value":0}'
    assert encode_value(True) == b'{"kind":"bool","value":true}'


def test_numeric_looking_string_stays_a_string():
    """A str that parses as a number must not be reinterpreted on decode."""
    decoded = decode_value(encode_value("42"))

    assert decoded == StrValue("42")
    assert unwrap_value(decoded) == "42"


def test_bool_is_not_wrapped_as_int():
    assert wrap_value(True) == BoolValue(True)
    assert wrap_value(1) == IntValue(1)


def test_wrap_value_passes_tagged_values_through():
    value = FloatValue(2.5)
    assert wrap_value(value) is value


@pytest.mark.parametrize("value", [None, [1, 2], {"a": 1}, b"bytes", 1 + 2j])
def test_wrap_value_rejects_other_types(value):
    with pytest.raises(UnsupportedValueKind):
        wrap_value(value)


@pytest.mark.parametrize(
    "data, kind",
    [
        (b"null", "null"),
        (b"[1, 2, 3]", "array"),
        (b'{"value": 1}', "object"),
        (b'{"kind": "int", "value": {"nested": 1}}', "object"),
        (b'{"kind": "int", "value": null}', "null"),
        (b'{"kind": "int", "value": true}', "bool"),
        (b'{"kind": "list", "value": [1]}', "list"),
        (b'{"kind": [1], "value": 1}', "array"),
        (b'{"kind": {"a": 1}, "value": 1}', "object"),
        (b'{"kind": 5, "value": 1}', "int"),
    ],
)
def test_decode_rejects_unsupported_kinds(data, kind):
    """Anything but the four tagged scalars fails with UnsupportedValueKind."""
    with pytest.raises(UnsupportedValueKind) as exc_info:
        decode_value(data)

    assert exc_info.value.kind == kind
    assert isinstance(exc_info.value.original_error, msgspec.ValidationError)
    assert "kind" in exc_info.value.context


def test_decode_malformed_json_is_a_decode_error():
    with pytest.raises(msgspec.DecodeError):
        decode_value(b'{"kind": ')


def test_convert_value_from_builtins():
    assert convert_value({"kind": "str", "value": "x"}) == StrValue("x")
    assert convert_value({"kind": "float", "value": 1.5}) == FloatValue(1.5)


@pytest.mark.parametrize(
    "obj",
    [
        None,
        {"kind": "dict", "value": {}},
        [True],
        {"kind": ["x"], "value": 1},
        {"kind": {"a": 1}, "value": 1},
    ],
)
def test_convert_value_rejects_unsupported_kinds(obj):
    with pytest.raises(UnsupportedValueKind):
        convert_value(obj)


def test_error_message_includes_context():
    with pytest.raises(UnsupportedValueKind) as exc_info:
        decode_value(b"null")

    message = str(exc_info.value)
    assert "Unsupported value kind: null" in message
    assert "context:" in message


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_floats_are_rejected_before_encoding(value):
    """JSON cannot carry NaN or infinities, so they never become a FloatValue."""
    with pytest.raises(UnsupportedValueKind) as exc_info:
        encode_value(value)

    assert exc_info.value.kind.startswith("non-finite float")

    with pytest.raises(UnsupportedValueKind):
        wrap_value(FloatValue(value))


@pytest.mark.parametrize("value", [0.0, -0.5, 1e308])
def test_finite_float_extremes_round_trip(value):
    assert unwrap_value(decode_value(encode_value(value))) == value
