from __future__ import annotations

from enum import Enum
from logging import getLogger
from typing import Iterable, List, Sequence, Tuple, Union

from .accessors import resolve_to_string
from .values import TypedRecord

logger = getLogger(__name__)


class SortOrder(str, Enum):
    ASC = 'asc'
    DSC = 'dsc'


# Tokens accepted without a warning. Only 'asc' sorts ascending.
_KNOWN_ORDER_TOKENS = {'asc', 'dsc', 'desc'}


def is_ascending(order: Union[str, SortOrder]) -> bool:
    """Exactly 'asc' is ascending; any other token, typos included, is descending."""
    token = order.value if isinstance(order, SortOrder) else order
    if token not in _KNOWN_ORDER_TOKENS:
        logger.warning("Unrecognized sort order %r; sorting descending", token)
    return token == SortOrder.ASC.value


def sorted_by(
    key_and_order: Tuple[str, Union[str, SortOrder]],
    records: Iterable[TypedRecord],
) -> List[TypedRecord]:
    """Stable sort of records by the rendered value of a dot-path key.

    Records where the key does not resolve compare as ''. Comparison is plain
    codepoint order on the rendered strings, so 10 sorts before 9.
    """
    key, order = key_and_order
    return sorted(
        records,
        key=lambda record: resolve_to_string(key, record),
        reverse=not is_ascending(order),
    )


def record_matches(keys: Sequence[str], query: str, record: TypedRecord) -> bool:
    needle = query.casefold()
    return any(needle in resolve_to_string(key, record).casefold() for key in keys)


def filtered_by(
    keys: Sequence[str],
    query: str,
    records: Iterable[TypedRecord],
) -> List[TypedRecord]:
    """Keep records where any of `keys` renders to a string containing `query`.

    Matching is case-insensitive. No keys means no matches.
    """
    keys = list(keys or [])
    if not keys:
        return []
    return [record for record in records if record_matches(keys, query or '', record)]
