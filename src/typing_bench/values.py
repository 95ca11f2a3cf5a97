"""Encoding and decoding of heterogeneous scalar values."""

from __future__ import annotations

import logging
import math
from typing import Any

import msgspec

from .exceptions import UnsupportedValueKind
from .models import BoolValue, DynamicValue, FloatValue, IntValue, StrValue

logger = logging.getLogger(__name__)

_VARIANTS = (IntValue, FloatValue, StrValue, BoolValue)
_SUPPORTED_TAGS = frozenset({"int", "float", "str", "bool"})

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder(DynamicValue)


def _kind_name(obj: Any) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, dict):
        return "object"
    if isinstance(obj, list):
        return "array"
    return type(obj).__name__


def _observed_kind(obj: Any) -> str:
    """Best-effort name of what was actually found, for error messages."""
    if isinstance(obj, dict) and "kind" in obj:
        tag = obj["kind"]
        if not isinstance(tag, str):
            return _kind_name(tag)
        if tag in _SUPPORTED_TAGS and "value" in obj:
            return _kind_name(obj["value"])
        return tag
    return _kind_name(obj)


def wrap_value(value: Any) -> DynamicValue:
    """
    Wrap a Python scalar in its tagged variant.

    ``bool`` is tested before ``int`` since it is an ``int`` subclass.
    NaN and infinities are rejected because JSON has no encoding for them.

    Raises:
        UnsupportedValueKind: If ``value`` is not an int, float, str or bool,
            or is a non-finite float.
    """
    scalar = value.value if isinstance(value, FloatValue) else value
    if isinstance(scalar, float) and not math.isfinite(scalar):
        raise UnsupportedValueKind(kind=f"non-finite float ({scalar})")
    if isinstance(value, _VARIANTS):
        return value
    if isinstance(value, bool):
        return BoolValue(value)
    if isinstance(value, int):
        return IntValue(value)
    if isinstance(value, float):
        return FloatValue(value)
    if isinstance(value, str):
        return StrValue(value)
    raise UnsupportedValueKind(kind=_kind_name(value))


def unwrap_value(value: DynamicValue) -> int | float | str | bool:
    """Return the plain Python scalar held by a tagged value."""
    return value.value


def encode_value(value: Any) -> bytes:
    """
    Encode a scalar or tagged value to JSON.

    Example:
        >>> encode_value(0)
        b'{"kind":"int","value":0}'
    """
    return _encoder.encode(wrap_value(value))


def decode_value(data: bytes | str) -> DynamicValue:
    """
    Decode JSON produced by ``encode_value``.

    Raises:
        UnsupportedValueKind: If the document is not one of the four tagged
            scalar kinds (null, arrays, untagged or nested objects, unknown
            tags, or a value that does not match its tag).
        msgspec.DecodeError: If ``data`` is not valid JSON.
    """
    try:
        return _decoder.decode(data)
    except msgspec.ValidationError as e:
        kind = _observed_kind(msgspec.json.decode(data))
        logger.debug(f"Rejected dynamic value of kind {kind}: {e}")
        raise UnsupportedValueKind(kind=kind, original_error=e) from e


def convert_value(obj: Any) -> DynamicValue:
    """
    Build a tagged value from already-parsed builtins, e.g. ``{"kind": "str", "value": "x"}``.

    Raises:
        UnsupportedValueKind: Under the same conditions as ``decode_value``.
    """
    try:
        return msgspec.convert(obj, DynamicValue)
    except msgspec.ValidationError as e:
        kind = _observed_kind(obj)
        logger.debug(f"Rejected dynamic value of kind {kind}: {e}")
        raise UnsupportedValueKind(kind=kind, original_error=e) from e
