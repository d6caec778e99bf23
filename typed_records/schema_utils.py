from __future__ import annotations

from typing import Iterable, List, Sequence, Set

from .paths import PATH_SEPARATOR
from .values import Attr, AttrRecord, TypedRecord


def iter_leaf_paths(record: Sequence[Attr], parent_key: str = '', sep: str = PATH_SEPARATOR):
    """Yield the dot-path of every non-record attribute, in attribute order."""
    for attr in record:
        current_key = f"{parent_key}{sep}{attr.key}" if parent_key else attr.key
        if isinstance(attr.value, AttrRecord):
            yield from iter_leaf_paths(attr.value.attrs, current_key, sep)
        else:
            yield current_key


def extract_all_keys(records: Iterable[TypedRecord]) -> List[str]:
    """Recursively find all leaf paths across a collection of records."""
    keys: Set[str] = set()
    for record in records:
        keys.update(iter_leaf_paths(record))
    return sorted(keys)


def build_key_choices(records: Iterable[TypedRecord], sample_size: int = 50) -> List[str]:
    """Leaf paths in first-seen order, for dropdowns."""
    seen: List[str] = []
    remaining = max(0, int(sample_size))
    for record in records:
        if remaining <= 0:
            break
        for key in iter_leaf_paths(record):
            if key not in seen:
                seen.append(key)
        remaining -= 1
    return seen


def top_level_keys(records: Iterable[TypedRecord]) -> List[str]:
    """Top-level attribute keys in first-seen order."""
    seen: List[str] = []
    for record in records:
        for attr in record:
            if attr.key not in seen:
                seen.append(attr.key)
    return seen
