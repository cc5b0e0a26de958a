"""Record sources for shot-card."""

from shot_card.sources.airtable import AirtableRecordSource
from shot_card.sources.base import BaseRecordSource
from shot_card.sources.static import StaticRecordSource

__all__ = ["AirtableRecordSource", "BaseRecordSource", "StaticRecordSource"]
