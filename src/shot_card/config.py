"""Runtime settings loaded from `.env` and the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from shot_card.records import DEFAULT_EXCLUDED_BARISTAS

DEFAULT_FONT_PATH = "public/fonts/BerkeleyMono-Regular.otf"
DEFAULT_CARD_TITLE = "Patrick's Espresso Shots"
DEFAULT_CACHE_CONTROL = "public, max-age=3600, s-maxage=86400"


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _credential(value: str | None) -> str | None:
    if not value or value == "undefined":
        return None
    return value


def _parse_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    return tuple(item.strip().lower() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    airtable_api_key: str | None = None
    airtable_base_id: str | None = None
    airtable_timeout_sec: float = 10.0
    excluded_baristas: tuple[str, ...] = DEFAULT_EXCLUDED_BARISTAS
    font_path: str | None = DEFAULT_FONT_PATH
    card_title: str = DEFAULT_CARD_TITLE
    cache_control: str = DEFAULT_CACHE_CONTROL

    @classmethod
    def from_env(
        cls,
        env_file: str | Path | None = ".env",
        environ: Mapping[str, str] | None = None,
    ) -> "Settings":
        file_values = dotenv_values(env_file) if env_file else {}
        process_values = os.environ if environ is None else environ

        def get(name: str) -> str | None:
            return file_values.get(name) or process_values.get(name)

        return cls(
            airtable_api_key=_credential(get("AIRTABLE_API_KEY")),
            airtable_base_id=_credential(get("AIRTABLE_BASE_ID")),
            airtable_timeout_sec=_safe_float(get("AIRTABLE_TIMEOUT_SEC"), 10.0),
            excluded_baristas=_parse_list(get("EXCLUDED_BARISTAS"), DEFAULT_EXCLUDED_BARISTAS),
            font_path=get("OG_FONT_PATH") or DEFAULT_FONT_PATH,
            card_title=get("OG_CARD_TITLE") or DEFAULT_CARD_TITLE,
            cache_control=get("OG_CACHE_CONTROL") or DEFAULT_CACHE_CONTROL,
        )
