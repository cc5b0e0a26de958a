"""In-memory record source."""

from __future__ import annotations

import copy
import json
from pathlib import Path

from shot_card.exceptions import RecordSourceError
from shot_card.sources.base import BaseRecordSource, Record


class StaticRecordSource(BaseRecordSource):
    """Serves fixed tables, e.g. an exported fixture for offline rendering."""

    def __init__(self, tables: dict[str, list[Record]] | None = None):
        self.tables = tables or {}

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StaticRecordSource":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise RecordSourceError(f"Failed to read records file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise RecordSourceError(f"Records file must map table names to lists: {path}")
        return cls({str(name): list(rows or []) for name, rows in data.items()})

    async def fetch_records(self, table_name: str) -> list[Record]:
        return copy.deepcopy(self.tables.get(table_name, []))
