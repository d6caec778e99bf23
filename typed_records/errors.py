from __future__ import annotations

import json
from typing import Any, Sequence, Tuple, Union

PathElement = Union[str, int]


class TypedRecordsError(Exception):
    """Base class for errors raised by typed_records."""


def format_json_path(path: Sequence[PathElement]) -> str:
    out = 'json'
    for element in path:
        if isinstance(element, int):
            out += f'[{element}]'
        else:
            out += f'.{element}'
    return out


def describe_json_value(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


class DecodeError(TypedRecordsError, ValueError):
    """A JSON value did not match the shape a decoder expected."""

    def __init__(self, expected: str, actual: Any, path: Sequence[PathElement] = ()):
        self.expected = expected
        self.actual = actual
        self.path: Tuple[PathElement, ...] = tuple(path)
        super().__init__(self.describe())

    def describe(self) -> str:
        return (
            f"Expecting {self.expected} at {format_json_path(self.path)} "
            f"but instead got: {describe_json_value(self.actual)}"
        )

    def within(self, element: PathElement) -> 'DecodeError':
        """Return a copy of this error nested one level under `element`."""
        return DecodeError(self.expected, self.actual, (element,) + self.path)
