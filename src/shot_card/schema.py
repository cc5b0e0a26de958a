"""Data models for shot-card."""

from typing import Any

from pydantic import BaseModel, Field

UNKNOWN_COFFEE = "Unknown Coffee"


class BagInfo(BaseModel):
    """Cached view of a Coffee Bags record."""

    name: str = UNKNOWN_COFFEE
    roaster_id: str = ""


class ResolvedCoffee(BaseModel):
    """Display-ready coffee entry handed to the renderer."""

    name: str
    roaster: str = ""

    @property
    def label(self) -> str:
        return f"{self.roaster} - {self.name}" if self.roaster else self.name


class ShotSample(BaseModel):
    id: str | None = None
    coffeeBag: Any = None
    barista: Any = None
    startTime: Any = None


class CoffeeBagSample(BaseModel):
    id: str | None = None
    name: Any = None
    roaster: Any = None
    allFields: list[str] = Field(default_factory=list)


class RoasterSample(BaseModel):
    id: str | None = None
    name: Any = None
    ID: Any = None
    allFields: list[str] = Field(default_factory=list)


class ShotsSnapshot(BaseModel):
    total: int = 0
    sample: list[ShotSample] = Field(default_factory=list)


class CoffeeBagsSnapshot(BaseModel):
    total: int = 0
    sample: list[CoffeeBagSample] = Field(default_factory=list)


class RoastersSnapshot(BaseModel):
    total: int = 0
    sample: list[RoasterSample] = Field(default_factory=list)


class DebugSnapshot(BaseModel):
    """Counts and sample rows of the three Airtable tables."""

    shots: ShotsSnapshot
    coffeeBags: CoffeeBagsSnapshot
    roasters: RoastersSnapshot
