"""Tests for the sample user documents."""

import json

import pytest

from typed_records.accessors import get_attr_by_key
from typed_records.decoders import decode_string, decode_value
from typed_records.errors import DecodeError
from typed_records.users import user_decoder, users_decoder
from typed_records.values import (
    Attr,
    AttrBool,
    AttrFloat,
    AttrInt,
    AttrList,
    AttrRecord,
    AttrString,
)


@pytest.fixture
def user_json(fixtures_dir):
    return (fixtures_dir / "user.json").read_text(encoding="utf-8")


def test_decode_user_fidelity(user_json):
    record = decode_string(user_decoder, user_json)
    assert record == (
        Attr("id", AttrInt(1)),
        Attr("name", AttrString("Ahmad")),
        Attr("age", AttrInt(24)),
        Attr("height", AttrFloat(1.78)),
        Attr("active", AttrBool(True)),
        Attr("tags", AttrList([AttrString("admin"), AttrString("editor")])),
        Attr("scores", AttrList([AttrInt(12), AttrInt(7), AttrInt(30)])),
        Attr("address", AttrRecord([
            Attr("street", AttrString("123 Rue Sherbrooke")),
            Attr("city", AttrString("Montreal")),
            Attr("country", AttrString("Canada")),
        ])),
    )


def test_decode_user_declared_order(user_json):
    record = decode_string(user_decoder, user_json)
    assert [attr.key for attr in record] == [
        "id", "name", "age", "height", "active", "tags", "scores", "address",
    ]


def test_decoded_age_is_int(user_json):
    record = decode_string(user_decoder, user_json)
    age = get_attr_by_key("age", record)
    assert isinstance(age.value, AttrInt)
    assert get_attr_by_key("address.city", record) == Attr("city", AttrString("Montreal"))


def test_decode_users(fixtures_dir):
    text = (fixtures_dir / "users.json").read_text(encoding="utf-8")
    records = decode_string(users_decoder, text)
    assert len(records) == 3
    assert get_attr_by_key("tags", records[2]) == Attr("tags", AttrList([]))


def test_decode_user_wrong_type(user_json):
    data = json.loads(user_json)
    data["age"] = "24"
    with pytest.raises(DecodeError) as exc_info:
        decode_value(user_decoder, data)
    assert exc_info.value.path == ("age",)


def test_decode_user_bad_nested(user_json):
    data = json.loads(user_json)
    del data["address"]["city"]
    with pytest.raises(DecodeError) as exc_info:
        decode_value(user_decoder, data)
    assert exc_info.value.path == ("address",)
