from __future__ import annotations

from typing import List

PATH_SEPARATOR = '.'


def split_path(path: str) -> List[str]:
    """Split a dot path into its segments.

    There is no escaping: a key containing '.' can never be addressed.
    An empty path yields no segments.
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    if path == '':
        return []
    return path.split(PATH_SEPARATOR)
