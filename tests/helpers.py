import copy
from typing import Any

from breedhub.models.core import Temperament
from breedhub.schemas import BreedRecord
from breedhub.services.connectors import BreedSourceConnector, normalize_breeds


def sample_raw_breeds() -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "name": "Affenpinscher",
            "height": {"imperial": "9 - 11.5", "metric": "23 - 29"},
            "weight": {"imperial": "6 - 13", "metric": "3 - 6"},
            "life_span": "10 - 12 years",
            "temperament": "Stubborn, Curious, Playful, Adventurous, Active, Fun-loving",
            "image": {"url": "https://cdn2.thedogapi.com/images/BJa4kxc4X.jpg"},
        },
        {
            "id": 2,
            "name": "Afghan Hound",
            "height": {"imperial": "25 - 27", "metric": "64 - 69"},
            "weight": {"imperial": "50 - 60", "metric": "23 - 27"},
            "life_span": "10 - 13 years",
            "temperament": "Aloof, Clownish, Dignified, Independent, Happy",
            "image": {"url": "https://cdn2.thedogapi.com/images/hMyT4CDXR.jpg"},
        },
        {
            "id": 3,
            "name": "African Hunting Dog",
            "height": {"imperial": "30", "metric": "N/A"},
            "weight": {"imperial": "44 - 66", "metric": ""},
        },
        {
            "id": 12345678,
            "name": "Airedale Terrier",
            "height": {"metric": "53 - 58"},
            "weight": {"metric": "18 - 29"},
            "life_span": "10 - 13 years",
            "temperament": "Outgoing, Friendly, Alert, Confident, Intelligent, Courageous, Curious",
            "image": {"url": "https://cdn2.thedogapi.com/images/1-7cgoZSh.jpg"},
        },
    ]


class FakeBreedSource(BreedSourceConnector):
    name = "fake"

    def __init__(self, entries: list[dict[str, Any]], *, error: Exception | None = None) -> None:
        self.entries = entries
        self.error = error
        self.calls = 0

    def fetch_raw_breeds(self) -> list[dict[str, Any]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.entries)

    def fetch_breeds(self) -> list[BreedRecord]:
        return normalize_breeds(self.fetch_raw_breeds())


def create_temperaments(db, *names: str) -> list[Temperament]:
    rows = [Temperament(name=name) for name in names]
    db.add_all(rows)
    db.commit()
    return rows


def dog_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Backyard Mutt",
        "height_min": 30,
        "height_max": 45,
        "weight_min": 10,
        "weight_max": 18,
        "years_life": "12 - 15 years",
        "image": "https://example.test/mutt.jpg",
        "temperaments": [],
    }
    payload.update(overrides)
    return payload
