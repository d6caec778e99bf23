"""Decoders from parsed JSON values to typed attributes.

A decoder is any callable that takes a parsed JSON value and returns a result
or raises DecodeError. The attribute decoders read one field of a JSON object
and tag it with its declared type; whole-object decoding is built by listing
attribute decoders with `typed_record`.
"""
from __future__ import annotations

import json
from logging import getLogger
from typing import Any, Callable, List, TypeVar

from .errors import DecodeError
from .values import (
    Attr,
    AttrBool,
    AttrFloat,
    AttrInt,
    AttrList,
    AttrRecord,
    AttrString,
    TypedRecord,
)

logger = getLogger(__name__)

T = TypeVar('T')
Decoder = Callable[[Any], T]


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise DecodeError('a STRING', value)


def int_(value: Any) -> int:
    # bool is a subclass of int in Python but never a JSON number.
    if isinstance(value, bool):
        raise DecodeError('an INT', value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise DecodeError('an INT', value)


def float_(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError('a FLOAT', value)
    try:
        return float(value)
    except OverflowError:
        raise DecodeError('a FLOAT', value) from None


def bool_(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise DecodeError('a BOOL', value)


def field(name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the value stored under `name` in a JSON object."""

    def decode(value: Any) -> T:
        if not isinstance(value, dict):
            raise DecodeError('an OBJECT', value)
        if name not in value:
            raise DecodeError(f'an OBJECT with a field named `{name}`', value)
        try:
            return decoder(value[name])
        except DecodeError as exc:
            raise exc.within(name) from None

    return decode


def list_of(decoder: Decoder[T]) -> Decoder[List[T]]:
    """Decode a JSON array whose every element conforms to `decoder`."""

    def decode(value: Any) -> List[T]:
        if not isinstance(value, list):
            raise DecodeError('a LIST', value)
        items: List[T] = []
        for index, item in enumerate(value):
            try:
                items.append(decoder(item))
            except DecodeError as exc:
                raise exc.within(index) from None
        return items

    return decode


# ---------------------------------------------------------------------------
# Attribute decoders
# ---------------------------------------------------------------------------

def _scalar_attr(name: str, decoder: Decoder[Any], variant) -> Decoder[Attr]:
    read = field(name, decoder)

    def decode(value: Any) -> Attr:
        return Attr(name, variant(read(value)))

    return decode


def _list_attr(name: str, decoder: Decoder[Any], variant) -> Decoder[Attr]:
    read = field(name, list_of(decoder))

    def decode(value: Any) -> Attr:
        return Attr(name, AttrList([variant(item) for item in read(value)]))

    return decode


def string_attr(name: str) -> Decoder[Attr]:
    return _scalar_attr(name, string, AttrString)


def int_attr(name: str) -> Decoder[Attr]:
    return _scalar_attr(name, int_, AttrInt)


def float_attr(name: str) -> Decoder[Attr]:
    return _scalar_attr(name, float_, AttrFloat)


def bool_attr(name: str) -> Decoder[Attr]:
    return _scalar_attr(name, bool_, AttrBool)


def string_list_attr(name: str) -> Decoder[Attr]:
    return _list_attr(name, string, AttrString)


def int_list_attr(name: str) -> Decoder[Attr]:
    return _list_attr(name, int_, AttrInt)


def float_list_attr(name: str) -> Decoder[Attr]:
    return _list_attr(name, float_, AttrFloat)


def bool_list_attr(name: str) -> Decoder[Attr]:
    return _list_attr(name, bool_, AttrBool)


def record_attr(name: str, decoder: Decoder[TypedRecord]) -> Decoder[Attr]:
    """Decode field `name` with a nested record decoder into a Record attr."""
    read = field(name, decoder)

    def decode(value: Any) -> Attr:
        return Attr(name, AttrRecord(read(value)))

    return decode


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------

def typed_record(*attr_decoders: Decoder[Attr]) -> Decoder[TypedRecord]:
    """Apply each attribute decoder to the same object, keeping declared order."""

    def decode(value: Any) -> TypedRecord:
        return tuple(decoder(value) for decoder in attr_decoders)

    return decode


def records_of(decoder: Decoder[TypedRecord]) -> Decoder[List[TypedRecord]]:
    return list_of(decoder)


def decode_value(decoder: Decoder[T], value: Any) -> T:
    try:
        return decoder(value)
    except DecodeError as exc:
        logger.debug("Decode failed: %s", exc)
        raise


def decode_string(decoder: Decoder[T], text: str) -> T:
    """Parse JSON text, then run `decoder` over the parsed value."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Invalid JSON input: %s", exc)
        expected = f'valid JSON ({exc.msg} at line {exc.lineno} column {exc.colno})'
        raise DecodeError(expected, exc.doc[exc.pos:exc.pos + 20]) from exc
    return decode_value(decoder, value)
