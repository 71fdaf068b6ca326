import json

import pytest

from level2_schema import Option, PropertyTemplate, PropertyType, Schema
from level3_conversion import RowConversionError, convert_row


@pytest.fixture
def schema():
    return Schema(
        title_column="Name",
        properties=[
            PropertyTemplate("p-done", "Done", PropertyType.CHECKBOX),
            PropertyTemplate(
                "p-grade",
                "Grade",
                PropertyType.SELECT,
                (Option("o-a", "A", "propColorGray"), Option("o-b", "B", "propColorBrown")),
            ),
            PropertyTemplate(
                "p-tags",
                "Tags",
                PropertyType.MULTI_SELECT,
                (Option("o-x", "x", "propColorOrange"), Option("o-y", "y", "propColorYellow")),
            ),
            PropertyTemplate("p-due", "Due", PropertyType.DATE),
            PropertyTemplate("p-link", "Link", PropertyType.URL),
            PropertyTemplate("p-notes", "Notes", PropertyType.TEXT),
        ],
    )


def test_checkbox_values(schema):
    assert convert_row(schema, {"Name": "a", "Done": "Yes"}) == {"p-done": "true"}
    assert convert_row(schema, {"Name": "a", "Done": "No"}) == {"p-done": "false"}


def test_checkbox_other_value_dropped(schema):
    assert convert_row(schema, {"Name": "a", "Done": "Maybe"}) == {}


def test_select_resolves_option_id(schema):
    assert convert_row(schema, {"Name": "a", "Grade": "B"}) == {"p-grade": "o-b"}


def test_select_unknown_value_dropped(schema):
    assert convert_row(schema, {"Name": "a", "Grade": "C"}) == {}


def test_multi_select_keeps_positions_for_unknown_tokens(schema):
    result = convert_row(schema, {"Name": "a", "Tags": "y, z, x"})

    assert result == {"p-tags": ["o-y", "", "o-x"]}


def test_date_encoded_as_from_timestamp(schema):
    result = convert_row(schema, {"Name": "a", "Due": "2021-01-01"})

    assert result == {"p-due": '{"from":1609459200000}'}
    assert json.loads(result["p-due"]) == {"from": 1609459200000}


def test_unparseable_date_kept_raw(schema):
    assert convert_row(schema, {"Name": "a", "Due": "someday"}) == {"p-due": "someday"}


def test_verbatim_types_and_link_fixup(schema):
    row = {
        "Name": "a",
        "Link": "https://example.com/x",
        "Notes": "https://www.notion.soMeeting-notes",
    }
    assert convert_row(schema, row) == {
        "p-link": "https://example.com/x",
        "p-notes": "Meeting-notes",
    }


def test_empty_cells_and_title_skipped(schema):
    row = {"Name": "Alpha", "Done": "", "Notes": None}

    assert convert_row(schema, row) == {}


def test_unknown_column_skipped(schema):
    assert convert_row(schema, {"Name": "a", "Extra": "value"}) == {}


def test_row_without_columns_rejected(schema):
    with pytest.raises(RowConversionError):
        convert_row(schema, {})


@pytest.mark.parametrize(
    "value,expected",
    [
        ("3000-01-01", 32503680000000),
        ("1600-05-01", -11665641600000),
    ],
)
def test_date_outside_nanosecond_range(schema, value, expected):
    result = convert_row(schema, {"Name": "a", "Due": value})

    assert json.loads(result["p-due"]) == {"from": expected}


@pytest.mark.parametrize("value", ["May", "Tuesday", "now"])
def test_word_only_date_kept_raw(schema, value):
    assert convert_row(schema, {"Name": "a", "Due": value}) == {"p-due": value}
