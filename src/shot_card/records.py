"""Helpers for reading loosely shaped Airtable records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime, timezone
from typing import Any

Record = dict[str, Any]

BARISTA_FIELDS = ("Barista", "barista", "Made by", "made by")
NAME_FIELDS = ("Name", "name")
ROASTER_FIELDS = ("Roaster", "roaster")
COFFEE_BAG_FIELD = "Coffee Bag"
START_TIME_FIELD = "Start time"

DEFAULT_EXCLUDED_BARISTAS = ("matt mccrary", "mccrary")
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def first_present(record: Mapping[str, Any], candidate_keys: Iterable[str], default: Any = None) -> Any:
    """Return the first truthy value among candidate keys, in priority order."""
    for key in candidate_keys:
        value = record.get(key)
        if value:
            return value
    return default


def linked_id(value: Any) -> str | None:
    """Return the record id from a linked-record field (string or list of ids)."""
    if isinstance(value, str):
        return value or None
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, (list, tuple)) and value:
        first = value[0]
        return str(first) if first else None
    return None


def barista_of(record: Mapping[str, Any]) -> str:
    value = first_present(record, BARISTA_FIELDS, "")
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def filter_records(
    records: Sequence[Record] | None,
    excluded: Iterable[str] = DEFAULT_EXCLUDED_BARISTAS,
) -> Sequence[Record] | None:
    """Drop shots whose barista field contains an excluded name.

    Empty or missing input is returned unchanged.
    """
    if not records:
        return records

    needles = [name.strip().lower() for name in excluded if name and name.strip()]
    if not needles:
        return list(records)

    kept: list[Record] = []
    for record in records:
        barista = barista_of(record).lower()
        if any(needle in barista for needle in needles):
            continue
        kept.append(record)
    return kept


def parse_start_time(value: Any) -> datetime:
    """Parse a shot timestamp; missing or invalid values map to the epoch."""
    if value is None or value == "":
        return EPOCH

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        return EPOCH
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return EPOCH
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return EPOCH
    else:
        return EPOCH

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_by_start_time(records: Iterable[Record]) -> list[Record]:
    """Return a new list of shots, most recent first."""
    return sorted(
        records,
        key=lambda record: parse_start_time(record.get(START_TIME_FIELD)),
        reverse=True,
    )
