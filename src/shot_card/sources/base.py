"""Base record source interface."""

from abc import ABC, abstractmethod
from typing import Any

Record = dict[str, Any]


class BaseRecordSource(ABC):
    """Abstract base class for table-oriented record stores."""

    @abstractmethod
    async def fetch_records(self, table_name: str) -> list[Record]:
        """Fetch every record of a table.

        Args:
            table_name: Table name, e.g. "Shots", "Coffee Bags" or "Roasters".

        Returns:
            Flat records with the record id under "id" next to the table fields.
        """
        pass
