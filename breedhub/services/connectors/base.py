from abc import ABC, abstractmethod
from typing import Any

from breedhub.schemas import BreedRecord


class BreedSourceConnector(ABC):
    name: str

    @abstractmethod
    def fetch_raw_breeds(self) -> list[dict[str, Any]]:
        """Return the breed entries exactly as the external source sends them."""

    @abstractmethod
    def fetch_breeds(self) -> list[BreedRecord]:
        """Return every breed from the external source as normalized records.

        Raises NetworkError when the source cannot be reached and UpstreamError
        when it answers with an error status.
        """
