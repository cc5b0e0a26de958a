"""Table sampling for inspecting the Airtable base."""

from __future__ import annotations

import asyncio

from shot_card.cache import COFFEE_BAGS_TABLE, ROASTERS_TABLE
from shot_card.core import SHOTS_TABLE
from shot_card.records import COFFEE_BAG_FIELD, NAME_FIELDS, ROASTER_FIELDS, START_TIME_FIELD, first_present
from shot_card.schema import (
    CoffeeBagSample,
    CoffeeBagsSnapshot,
    DebugSnapshot,
    RoasterSample,
    RoastersSnapshot,
    ShotSample,
    ShotsSnapshot,
)
from shot_card.sources.base import BaseRecordSource

SHOT_SAMPLE_SIZE = 3
TABLE_SAMPLE_SIZE = 5


async def collect_debug_snapshot(source: BaseRecordSource) -> DebugSnapshot:
    """Fetch the three tables concurrently and return counts with sample rows."""
    shots, bags, roasters = await asyncio.gather(
        source.fetch_records(SHOTS_TABLE),
        source.fetch_records(COFFEE_BAGS_TABLE),
        source.fetch_records(ROASTERS_TABLE),
    )

    return DebugSnapshot(
        shots=ShotsSnapshot(
            total=len(shots),
            sample=[
                ShotSample(
                    id=record.get("id"),
                    coffeeBag=record.get(COFFEE_BAG_FIELD),
                    barista=first_present(record, ("Barista", "barista")),
                    startTime=record.get(START_TIME_FIELD),
                )
                for record in shots[:SHOT_SAMPLE_SIZE]
            ],
        ),
        coffeeBags=CoffeeBagsSnapshot(
            total=len(bags),
            sample=[
                CoffeeBagSample(
                    id=record.get("id"),
                    name=first_present(record, NAME_FIELDS),
                    roaster=first_present(record, ROASTER_FIELDS),
                    allFields=list(record.keys()),
                )
                for record in bags[:TABLE_SAMPLE_SIZE]
            ],
        ),
        roasters=RoastersSnapshot(
            total=len(roasters),
            sample=[
                RoasterSample(
                    id=record.get("id"),
                    name=first_present(record, NAME_FIELDS),
                    ID=record.get("ID"),
                    allFields=list(record.keys()),
                )
                for record in roasters[:TABLE_SAMPLE_SIZE]
            ],
        ),
    )
