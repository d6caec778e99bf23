from __future__ import annotations

from logging import getLogger
from typing import Any, List, Optional, Sequence

import gradio as gr

from .decoders import Decoder
from .flattening import flatten_records_for_display, rows_to_table
from .io_utils import load_records
from .records import SortOrder, filtered_by, sorted_by
from .schema_utils import build_key_choices, extract_all_keys, top_level_keys
from .users import users_decoder
from .values import TypedRecord

logger = getLogger(__name__)

DEFAULT_PREVIEW_LIMIT = 50


def build_table(
    records: Sequence[TypedRecord],
    limit: int = DEFAULT_PREVIEW_LIMIT,
    columns: Optional[Sequence[str]] = None,
):
    if columns is None:
        columns = top_level_keys(records)
    rows = flatten_records_for_display(records, columns, limit=limit)
    return {"headers": columns, "data": rows_to_table(rows, columns)}


def compute_record_count_text(shown: Sequence[Any], total: Sequence[Any]) -> str:
    if total is None:
        return ""
    if len(shown) == len(total):
        return f"Records: {len(total)}"
    return f"Records: {len(shown)} of {len(total)}"


def prepare_records_payload(file_obj, decoder: Decoder[List[TypedRecord]] = users_decoder):
    empty = gr.update(choices=[], value=None)
    if file_obj is None:
        return None, [], empty, "No file uploaded."

    try:
        records = load_records(file_obj, decoder)
    except (ValueError, OSError) as e:
        logger.info("Rejected upload: %s", e)
        return None, [], empty, f"Error decoding JSON: {str(e)}"

    keys = build_key_choices(records)
    default_key = keys[0] if keys else None
    message = f"Successfully loaded {len(records)} records with {len(keys)} attribute paths."
    return records, keys, gr.update(choices=keys, value=default_key), message


def load_records_with_preview(file_obj, limit: int = DEFAULT_PREVIEW_LIMIT):
    records, keys, sort_dropdown, message = prepare_records_payload(file_obj)
    if records is None:
        return None, sort_dropdown, gr.update(choices=[], value=[]), message, None, ""

    filter_dropdown = gr.update(choices=extract_all_keys(records), value=[])
    count_text = compute_record_count_text(records, records)
    return records, sort_dropdown, filter_dropdown, message, build_table(records, limit), count_text


def apply_view(
    records: Optional[List[TypedRecord]],
    sort_key: Optional[str],
    order: str,
    filter_keys: Optional[Sequence[str]],
    query: Optional[str],
    limit: int = DEFAULT_PREVIEW_LIMIT,
):
    """Filter then sort the loaded records and render them as a table.

    An empty query shows every record; a query with no filter keys shows none.
    """
    if records is None:
        return None, ""

    if isinstance(filter_keys, str):
        filter_keys = [filter_keys]
    filter_keys = list(filter_keys or [])

    view = list(records)
    if query:
        view = filtered_by(filter_keys, query, view)
    if sort_key:
        view = sorted_by((sort_key, order or SortOrder.ASC.value), view)

    return build_table(view, limit, top_level_keys(records)), compute_record_count_text(view, records)
