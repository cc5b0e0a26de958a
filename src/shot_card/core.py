"""Selection of the most recent distinct coffees."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date

from shot_card.cache import ResolutionCache
from shot_card.records import (
    COFFEE_BAG_FIELD,
    DEFAULT_EXCLUDED_BARISTAS,
    Record,
    filter_records,
    linked_id,
    sort_by_start_time,
)
from shot_card.schema import ResolvedCoffee
from shot_card.sources.base import BaseRecordSource

SHOTS_TABLE = "Shots"
MAX_COFFEES = 3
ACCENT_PALETTE = (
    "#ca4949",
    "#b45a3c",
    "#a06e3b",
    "#4b8b8b",
    "#5485b6",
    "#7272ca",
    "#8464c4",
    "#bd5187",
)

logger = logging.getLogger(__name__)


async def select_recent_coffees(
    events: Sequence[Record] | None,
    cache: ResolutionCache,
    *,
    excluded: Iterable[str] = DEFAULT_EXCLUDED_BARISTAS,
    limit: int = MAX_COFFEES,
) -> list[ResolvedCoffee]:
    """Return up to `limit` distinct coffees, most recently brewed first.

    Args:
        events: Raw "Shots" records.
        cache: Lookup tables used to resolve bag and roaster ids.
        excluded: Barista names whose shots are ignored.
        limit: Maximum number of distinct bags to return.

    Returns:
        Resolved coffees ordered by the most recent shot of each bag.
    """
    filtered = filter_records(events, excluded)
    if not filtered:
        return []

    unique: dict[str, ResolvedCoffee] = {}
    for event in sort_by_start_time(filtered):
        if len(unique) >= limit:
            break

        bag_id = linked_id(event.get(COFFEE_BAG_FIELD))
        if not bag_id or bag_id in unique:
            continue

        bag = await cache.resolve_bag(bag_id)
        roaster = await cache.resolve_roaster(bag.roaster_id) if bag.roaster_id else ""
        unique[bag_id] = ResolvedCoffee(name=bag.name, roaster=roaster)

    return list(unique.values())


async def load_recent_coffees(
    source: BaseRecordSource,
    cache: ResolutionCache,
    *,
    excluded: Iterable[str] = DEFAULT_EXCLUDED_BARISTAS,
) -> list[ResolvedCoffee]:
    """Fetch shots and select recent coffees; failures degrade to an empty list."""
    try:
        shots = await source.fetch_records(SHOTS_TABLE)
        return await select_recent_coffees(shots, cache, excluded=excluded)
    except Exception:
        logger.exception("Error loading recent coffees")
        return []


def accent_color(today: date | None = None) -> str:
    """Daily accent color, picked by day of month."""
    today = today or date.today()
    return ACCENT_PALETTE[today.day % len(ACCENT_PALETTE)]
