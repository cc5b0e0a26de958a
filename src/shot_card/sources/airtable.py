"""Airtable record source."""

from __future__ import annotations

import asyncio
import json
import logging
from urllib import error, parse, request

from shot_card.exceptions import ConfigurationError, RecordSourceError
from shot_card.sources.base import BaseRecordSource, Record

API_URL = "https://api.airtable.com/v0"
MAX_PAGES = 100


class AirtableRecordSource(BaseRecordSource):
    """Reads whole tables through the Airtable REST API.

    Failures never propagate: `fetch_records` logs them and returns an empty list.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_id: str | None = None,
        *,
        timeout_sec: float = 10.0,
        api_url: str = API_URL,
    ):
        self.api_key = api_key
        self.base_id = base_id
        self.timeout_sec = timeout_sec
        self.api_url = api_url.rstrip("/")
        self.logger = logging.getLogger(__name__)

    def _credentials(self) -> tuple[str, str]:
        if not self.api_key:
            raise ConfigurationError("AIRTABLE_API_KEY is missing in environment variables")
        if not self.base_id:
            raise ConfigurationError("AIRTABLE_BASE_ID is missing in environment variables")
        return self.api_key, self.base_id

    async def fetch_records(self, table_name: str) -> list[Record]:
        try:
            api_key, base_id = self._credentials()
            self.logger.info("Connecting to Airtable base %s, table %s", base_id, table_name)
            records = await asyncio.to_thread(self._list_records, api_key, base_id, table_name)
        except Exception as exc:
            self.logger.error("Error fetching data from Airtable: %s", exc)
            status_code = getattr(exc, "status_code", None)
            if status_code == 404:
                self.logger.error(
                    "404 Not Found: the base id may be incorrect or the table does not exist"
                )
            elif status_code in (401, 403):
                self.logger.error("Authentication error: the API key may be invalid or expired")
            return []

        self.logger.info("Fetched %d records from %s", len(records), table_name)
        return records

    def _list_records(self, api_key: str, base_id: str, table_name: str) -> list[Record]:
        records: list[Record] = []
        offset: str | None = None
        for _ in range(MAX_PAGES):
            page = self._get_page(api_key, base_id, table_name, offset)
            for item in page.get("records") or []:
                fields = item.get("fields") or {}
                records.append({"id": item.get("id"), **fields})
            offset = page.get("offset")
            if not offset:
                break
        return records

    def _get_page(self, api_key: str, base_id: str, table_name: str, offset: str | None) -> dict:
        url = f"{self.api_url}/{parse.quote(base_id, safe='')}/{parse.quote(table_name, safe='')}"
        if offset:
            url = f"{url}?{parse.urlencode({'offset': offset})}"
        req = request.Request(
            url,
            headers={"Authorization": f"Bearer {api_key}"},
            method="GET",
        )
        try:
            with request.urlopen(req, timeout=self.timeout_sec) as resp:
                body = resp.read()
        except error.HTTPError as exc:
            raise RecordSourceError(
                f"Airtable returned HTTP {exc.code} for {table_name}",
                status_code=exc.code,
            ) from exc
        except (error.URLError, TimeoutError) as exc:
            raise RecordSourceError(f"Airtable request failed for {table_name}: {exc}") from exc

        try:
            payload = json.loads(body.decode("utf-8"))
        except ValueError as exc:
            raise RecordSourceError(f"Invalid JSON from Airtable for {table_name}") from exc
        if not isinstance(payload, dict):
            raise RecordSourceError(f"Unexpected Airtable payload for {table_name}")
        return payload
