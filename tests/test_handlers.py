"""Tests for the UI event handlers."""

import json

from typed_records.handlers import (
    apply_view,
    build_table,
    compute_record_count_text,
    load_records_with_preview,
)


def test_load_with_preview(fixtures_dir):
    records, sort_dropdown, filter_dropdown, message, table, count = load_records_with_preview(
        str(fixtures_dir / "users.json")
    )
    assert len(records) == 3
    assert sort_dropdown["value"] == "id"
    assert "address.city" in filter_dropdown["choices"]
    assert message.startswith("Successfully loaded 3 records")
    assert table["headers"][0] == "id"
    assert table["data"][0][1] == "Ahmad"
    assert count == "Records: 3"


def test_load_no_file():
    records, _, _, message, table, count = load_records_with_preview(None)
    assert records is None
    assert message == "No file uploaded."
    assert table is None


def test_load_bad_document(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('[{"id": "one"}]', encoding="utf-8")
    records, _, _, message, _, _ = load_records_with_preview(str(path))
    assert records is None
    assert message.startswith("Error decoding JSON")
    assert "json[0].id" in message


def test_apply_view_sort_and_filter(fixtures_dir):
    records = load_records_with_preview(str(fixtures_dir / "users.json"))[0]
    table, count = apply_view(records, "id", "dsc", ["name"], "a")
    assert [row[0] for row in table["data"]] == ["7", "5"]
    assert count == "Records: 2 of 3"


def test_apply_view_no_query_shows_all(fixtures_dir):
    records = load_records_with_preview(str(fixtures_dir / "users.json"))[0]
    table, count = apply_view(records, "address.city", "asc", [], "")
    assert [row[1] for row in table["data"]] == ["Bob", "Ahmad", "Alice"]
    assert count == "Records: 3"


def test_apply_view_query_without_keys(fixtures_dir):
    records = load_records_with_preview(str(fixtures_dir / "users.json"))[0]
    table, count = apply_view(records, None, "asc", [], "a")
    assert table["data"] == []
    assert table["headers"][0] == "id"
    assert count == "Records: 0 of 3"


def test_apply_view_nothing_loaded():
    assert apply_view(None, "id", "asc", [], "") == (None, "")


def test_build_table_limit(fixtures_dir):
    records = load_records_with_preview(str(fixtures_dir / "users.json"))[0]
    assert len(build_table(records, limit=1)["data"]) == 1


def test_count_text():
    assert compute_record_count_text([1], [1, 2]) == "Records: 1 of 2"


def test_load_out_of_range_float(tmp_path):
    doc = [{
        "id": 1, "name": "x", "age": 1, "height": int("1" + "0" * 400), "active": True,
        "tags": [], "scores": [], "address": {"street": "", "city": "", "country": ""},
    }]
    path = tmp_path / "huge.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    records, _, _, message, _, _ = load_records_with_preview(str(path))
    assert records is None
    assert "json[0].height" in message


def test_filter_choices_are_sorted_leaf_paths(fixtures_dir):
    _, _, filter_dropdown, _, _, _ = load_records_with_preview(str(fixtures_dir / "users.json"))
    assert filter_dropdown["choices"] == sorted(filter_dropdown["choices"])
    assert "address.city" in filter_dropdown["choices"]
