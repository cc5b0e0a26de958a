"""Tests for record helpers."""

from datetime import date, datetime, timezone

import pytest

from shot_card.records import (
    EPOCH,
    filter_records,
    first_present,
    linked_id,
    parse_start_time,
    sort_by_start_time,
)


def test_first_present_uses_priority_order():
    record = {"name": "lower", "Name": "Upper"}

    assert first_present(record, ("Name", "name")) == "Upper"
    assert first_present(record, ("Missing", "name")) == "lower"


def test_first_present_skips_empty_values_and_defaults():
    record = {"Name": "", "name": None}

    assert first_present(record, ("Name", "name"), "fallback") == "fallback"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("recA", "recA"),
        (["recA", "recB"], "recA"),
        ([], None),
        ("", None),
        (None, None),
        (7, "7"),
        ([7], "7"),
        (True, None),
    ],
)
def test_linked_id(value, expected):
    assert linked_id(value) == expected


def test_filter_records_passes_through_empty_input():
    assert filter_records(None) is None
    empty: list = []
    assert filter_records(empty) is empty


@pytest.mark.parametrize("field", ["Barista", "barista", "Made by", "made by"])
def test_filter_records_excludes_every_field_spelling(field):
    records = [{"id": "a", field: "MATT McCrary"}, {"id": "b", field: "Patrick"}]

    result = filter_records(records)

    assert [r["id"] for r in result] == ["b"]


def test_filter_records_excludes_surname_only_match():
    records = [{"id": "a", "Barista": "Someone McCrary"}]

    assert filter_records(records) == []


def test_filter_records_keeps_partial_name_match():
    records = [{"id": "a", "Barista": "Matt Damon"}, {"id": "b", "Barista": "McCracken"}]

    result = filter_records(records)

    assert [r["id"] for r in result] == ["a", "b"]


def test_filter_records_keeps_missing_barista():
    records = [{"id": "a"}, {"id": "b", "Barista": None}]

    assert len(filter_records(records)) == 2


def test_filter_records_joins_linked_barista_lists():
    records = [{"id": "a", "Made by": ["Patrick", "Matt McCrary"]}]

    assert filter_records(records) == []


def test_filter_records_uses_custom_exclusions():
    records = [{"id": "a", "Barista": "Patrick"}, {"id": "b", "Barista": "Matt McCrary"}]

    result = filter_records(records, excluded=("patrick",))

    assert [r["id"] for r in result] == ["b"]


def test_parse_start_time_formats():
    assert parse_start_time("2024-01-03T10:15:00.000Z") == datetime(2024, 1, 3, 10, 15, tzinfo=timezone.utc)
    assert parse_start_time("2024-01-03") == datetime(2024, 1, 3, tzinfo=timezone.utc)
    assert parse_start_time(date(2024, 1, 3)) == datetime(2024, 1, 3, tzinfo=timezone.utc)
    assert parse_start_time(1704240000000) == datetime(2024, 1, 3, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "not a date", object()])
def test_parse_start_time_defaults_to_epoch(value):
    assert parse_start_time(value) == EPOCH


def test_sort_by_start_time_newest_first():
    records = [
        {"id": "t1", "Start time": "2024-01-03"},
        {"id": "t3", "Start time": "2024-01-01"},
        {"id": "t2", "Start time": "2024-01-02"},
    ]

    result = sort_by_start_time(records)

    assert [r["id"] for r in result] == ["t1", "t2", "t3"]
    assert [r["id"] for r in records] == ["t1", "t3", "t2"]


def test_sort_by_start_time_puts_missing_times_last():
    records = [
        {"id": "none"},
        {"id": "bad", "Start time": "yesterday"},
        {"id": "old", "Start time": "2001-01-01"},
        {"id": "new", "Start time": "2024-06-01T08:00:00Z"},
    ]

    result = sort_by_start_time(records)

    assert [r["id"] for r in result[:2]] == ["new", "old"]
    assert {r["id"] for r in result[2:]} == {"none", "bad"}
