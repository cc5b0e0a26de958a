"""Tests for the in-memory record source."""

import asyncio
import json

import pytest

from shot_card.exceptions import RecordSourceError
from shot_card.sources import StaticRecordSource


def test_fetch_records_returns_copies():
    source = StaticRecordSource({"Shots": [{"id": "s1", "Coffee Bag": ["B1"]}]})

    records = asyncio.run(source.fetch_records("Shots"))
    records[0]["Coffee Bag"].append("B2")

    assert asyncio.run(source.fetch_records("Shots")) == [{"id": "s1", "Coffee Bag": ["B1"]}]
    assert asyncio.run(source.fetch_records("Roasters")) == []


def test_from_json_file(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps({"Roasters": [{"id": "R1", "Name": "Onyx"}]}), encoding="utf-8")

    source = StaticRecordSource.from_json_file(path)

    assert asyncio.run(source.fetch_records("Roasters")) == [{"id": "R1", "Name": "Onyx"}]


@pytest.mark.parametrize("content", ["not json", "[1, 2]"])
def test_from_json_file_rejects_bad_content(tmp_path, content):
    path = tmp_path / "records.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(RecordSourceError):
        StaticRecordSource.from_json_file(path)


def test_from_json_file_missing_file(tmp_path):
    with pytest.raises(RecordSourceError):
        StaticRecordSource.from_json_file(tmp_path / "missing.json")
