from __future__ import annotations

import json
import logging
import math
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from pydantic import ValidationError as PydanticValidationError

from breedhub.config import DEFAULT_DOG_IMAGE, Settings
from breedhub.schemas import BreedRecord
from breedhub.services.connectors.base import BreedSourceConnector
from breedhub.services.errors import NetworkError, UpstreamError

logger = logging.getLogger(__name__)

NOT_FOUND_TEXT = "Not found"


def _parse_bound(value: str | None) -> float | None:
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_metric_range(raw: Any) -> tuple[float | None, float | None]:
    """Split a ``"min - max"`` measurement into optional numeric bounds.

    Missing or malformed sides come back as ``None``, never as zero.
    """
    if not isinstance(raw, str):
        return None, None
    parts = raw.split("-")
    low = _parse_bound(parts[0])
    high = _parse_bound(parts[1]) if len(parts) > 1 else None
    return low, high


def _metric(entry: dict[str, Any], key: str) -> Any:
    block = entry.get(key)
    if not isinstance(block, dict):
        return None
    return block.get("metric")


def _text(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    return str(value)


def _breed_id(entry: dict[str, Any]) -> int | None:
    value = entry.get("id")
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def normalize_breed(entry: dict[str, Any], *, default_image: str = DEFAULT_DOG_IMAGE) -> BreedRecord:
    breed_id = _breed_id(entry)
    if breed_id is None:
        raise UpstreamError(f"Breed entry has no integer id: {entry.get('id')!r}")
    height_min, height_max = parse_metric_range(_metric(entry, "height"))
    weight_min, weight_max = parse_metric_range(_metric(entry, "weight"))
    image = entry.get("image") if isinstance(entry.get("image"), dict) else {}
    try:
        return BreedRecord(
            id=breed_id,
            name=_text(entry.get("name"), ""),
            height_min=height_min,
            height_max=height_max,
            weight_min=weight_min,
            weight_max=weight_max,
            years_life=_text(entry.get("life_span"), NOT_FOUND_TEXT),
            image=_text(image.get("url"), default_image),
            temperaments=_text(entry.get("temperament"), NOT_FOUND_TEXT),
        )
    except PydanticValidationError as exc:
        raise UpstreamError(f"Breed entry {breed_id} is malformed") from exc


def normalize_breeds(entries: list[dict[str, Any]], *, default_image: str = DEFAULT_DOG_IMAGE) -> list[BreedRecord]:
    """Normalize every entry, skipping the ones without a usable integer id."""
    breeds: list[BreedRecord] = []
    for entry in entries:
        if _breed_id(entry) is None:
            logger.warning("Skipping breed entry without integer id: %r", entry.get("id"))
            continue
        breeds.append(normalize_breed(entry, default_image=default_image))
    return breeds


class TheDogApiConnector(BreedSourceConnector):
    name = "thedogapi"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str = "",
        timeout: float | None = None,
        default_image: str = DEFAULT_DOG_IMAGE,
    ) -> None:
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.default_image = default_image

    @classmethod
    def from_settings(cls, settings: Settings) -> "TheDogApiConnector":
        return cls(
            base_url=settings.dog_api_url,
            api_key=settings.dog_api_key,
            timeout=settings.dog_api_timeout_seconds,
            default_image=settings.default_dog_image,
        )

    def _listing_url(self) -> str:
        if not self.api_key:
            return self.base_url
        separator = "&" if "?" in self.base_url else "?"
        return f"{self.base_url}{separator}{urlencode({'api_key': self.api_key})}"

    def _get_json(self) -> Any:
        request = Request(self._listing_url(), headers={"User-Agent": "breedhub/0.1", "Accept": "application/json"})
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            with urlopen(request, **kwargs) as response:  # noqa: S310
                raw = response.read().decode("utf-8", errors="ignore")
        except HTTPError as exc:
            logger.error("Breed API error response: status=%s reason=%s", exc.code, exc.reason)
            exc.close()
            raise UpstreamError(f"API request failed with status {exc.code}", status_code=exc.code) from exc
        except (URLError, TimeoutError, ConnectionError) as exc:
            logger.error("Breed API no response: %s", exc)
            raise NetworkError("No response received from API") from exc
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Breed API returned a body that is not JSON")
            raise UpstreamError("API response is not valid JSON") from exc

    def fetch_raw_breeds(self) -> list[dict[str, Any]]:
        payload = self._get_json()
        if not isinstance(payload, list):
            logger.error("Breed API returned %s instead of a list", type(payload).__name__)
            raise UpstreamError("API response is not a list of breeds")
        return [item for item in payload if isinstance(item, dict)]

    def fetch_breeds(self) -> list[BreedRecord]:
        entries = self.fetch_raw_breeds()
        breeds = normalize_breeds(entries, default_image=self.default_image)
        logger.debug("Fetched %d breeds from %s", len(breeds), self.name)
        return breeds
