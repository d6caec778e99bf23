from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .accessors import resolve_to_string
from .values import TypedRecord


def flatten_record(record: TypedRecord, keys: Sequence[str]) -> Dict[str, str]:
    return {key: resolve_to_string(key, record) for key in keys}


def flatten_records_for_display(
    records: Iterable[TypedRecord],
    keys: Sequence[str],
    limit: Optional[int] = None,
) -> List[Dict[str, str]]:
    """Render each record into a row of display strings keyed by path.

    Paths that do not resolve on a record render as ''.
    """
    if not keys:
        return []

    rows: List[Dict[str, str]] = []
    for record in records:
        if limit is not None and len(rows) >= max(1, int(limit)):
            break
        rows.append(flatten_record(record, keys))
    return rows


def rows_to_table(rows: List[Dict[str, str]], keys: Sequence[str]) -> List[List[str]]:
    return [[row.get(key, '') for key in keys] for row in rows]
