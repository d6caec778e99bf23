"""Tests for dot-path splitting."""

from typed_records.paths import split_path


def test_split_single():
    assert split_path("name") == ["name"]


def test_split_nested():
    assert split_path("address.city") == ["address", "city"]


def test_split_empty():
    assert split_path("") == []
    assert split_path(None) == []


def test_split_keeps_empty_segments():
    assert split_path("a..b") == ["a", "", "b"]
