from pathlib import Path

import pytest

from typed_records.values import (
    Attr,
    AttrBool,
    AttrFloat,
    AttrInt,
    AttrList,
    AttrRecord,
    AttrString,
)

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture
def user_record():
    return (
        Attr("id", AttrInt(1)),
        Attr("name", AttrString("Ahmad")),
        Attr("age", AttrInt(24)),
        Attr("height", AttrFloat(1.78)),
        Attr("active", AttrBool(True)),
        Attr("tags", AttrList([AttrString("admin"), AttrString("editor")])),
        Attr("address", AttrRecord([
            Attr("street", AttrString("123 Rue Sherbrooke")),
            Attr("city", AttrString("Montreal")),
            Attr("country", AttrString("Canada")),
        ])),
    )
