"""Lazy lookup tables for Coffee Bags and Roasters."""

from __future__ import annotations

import logging
from typing import Any

from shot_card.records import NAME_FIELDS, ROASTER_FIELDS, first_present, linked_id
from shot_card.schema import UNKNOWN_COFFEE, BagInfo
from shot_card.sources.base import BaseRecordSource

COFFEE_BAGS_TABLE = "Coffee Bags"
ROASTERS_TABLE = "Roasters"

logger = logging.getLogger(__name__)


class ResolutionCache:
    """Resolves linked-record ids to display names.

    A miss on either table triggers one full-table fetch that fills the whole
    table, so later lookups into the same table are served from memory. Entries
    are never expired.
    """

    def __init__(self, source: BaseRecordSource):
        self.source = source
        self.bags: dict[str, BagInfo] = {}
        self.roasters: dict[str, str] = {}

    def clear(self) -> None:
        self.bags.clear()
        self.roasters.clear()

    async def resolve_bag(self, bag_id: str) -> BagInfo:
        cached = self.bags.get(bag_id)
        if cached is not None:
            return cached

        try:
            await self._load_bags()
        except Exception:
            logger.exception("Error fetching coffee bag info")
            return BagInfo()

        # Unknown ids are not cached so a bag added upstream shows up on a later lookup.
        resolved = self.bags.get(bag_id)
        return resolved if resolved is not None else BagInfo()

    async def resolve_roaster(self, roaster_ref: Any) -> str:
        roaster_id = linked_id(roaster_ref)
        if not roaster_id:
            return ""

        if roaster_id in self.roasters:
            return self.roasters[roaster_id]

        try:
            await self._load_roasters()
        except Exception:
            logger.exception("Error fetching roaster names")
            return ""

        return self.roasters.get(roaster_id, "")

    async def _load_bags(self) -> None:
        bags = await self.source.fetch_records(COFFEE_BAGS_TABLE)
        for bag in bags or []:
            bag_id = bag.get("id")
            if not bag_id:
                continue
            self.bags[bag_id] = BagInfo(
                name=str(first_present(bag, NAME_FIELDS, UNKNOWN_COFFEE)),
                roaster_id=linked_id(first_present(bag, ROASTER_FIELDS)) or "",
            )

    async def _load_roasters(self) -> None:
        roasters = await self.source.fetch_records(ROASTERS_TABLE)
        for roaster in roasters or []:
            name = str(first_present(roaster, NAME_FIELDS, ""))
            # Bags may reference a roaster by record id or by its "ID" code.
            if roaster.get("id"):
                self.roasters[str(roaster["id"])] = name
            if roaster.get("ID"):
                self.roasters[str(roaster["ID"])] = name
