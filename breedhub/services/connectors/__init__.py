"""External breed source connectors."""

from breedhub.services.connectors.base import BreedSourceConnector
from breedhub.services.connectors.dog_api import (
    TheDogApiConnector,
    normalize_breed,
    normalize_breeds,
    parse_metric_range,
)

__all__ = ["BreedSourceConnector", "TheDogApiConnector", "normalize_breed", "normalize_breeds", "parse_metric_range"]
