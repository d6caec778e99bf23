from __future__ import annotations

from typing import Optional, Sequence

from .paths import split_path
from .values import (
    Attr,
    AttrBool,
    AttrFloat,
    AttrInt,
    AttrList,
    AttrRecord,
    AttrString,
    AttrValue,
)


def find_attr(key: str, record: Sequence[Attr]) -> Optional[Attr]:
    """Return the first attribute named `key`, in insertion order."""
    for attr in record:
        if attr.key == key:
            return attr
    return None


def get_attr_by_key(path: str, record: Sequence[Attr]) -> Optional[Attr]:
    """Resolve a dot-notation path against a record.

    Each segment but the last must name a Record-valued attribute; descending
    into anything else is a miss. The returned Attr carries the leaf key only,
    e.g. 'address.city' resolves to ('city', AttrString('Montreal')).
    """
    keys = split_path(path)
    if not keys:
        return None

    current = record
    for key in keys[:-1]:
        attr = find_attr(key, current)
        if attr is None or not isinstance(attr.value, AttrRecord):
            return None
        current = attr.value.attrs

    return find_attr(keys[-1], current)


def attr_value_to_string(value: AttrValue) -> str:
    """Render any value as a display string.

    Records drop their keys and lists drop their structure; both are joined
    with a single space. Distinct values can render the same ('5' and 5).
    """
    if isinstance(value, AttrString):
        return value.value
    if isinstance(value, AttrBool):
        return 'true' if value.value else 'false'
    if isinstance(value, AttrInt):
        return str(value.value)
    if isinstance(value, AttrFloat):
        return str(value.value)
    if isinstance(value, AttrRecord):
        return ' '.join(attr_value_to_string(attr.value) for attr in value.attrs)
    if isinstance(value, AttrList):
        return ' '.join(attr_value_to_string(item) for item in value.items)
    raise TypeError(f"Not an attribute value: {value!r}")


def attr_to_string(attr: Optional[Attr]) -> Optional[str]:
    if attr is None:
        return None
    return attr_value_to_string(attr.value)


def resolve_to_string(path: str, record: Sequence[Attr], default: str = '') -> str:
    """Resolve and render `path`, falling back to `default` on a miss."""
    rendered = attr_to_string(get_attr_by_key(path, record))
    return default if rendered is None else rendered
