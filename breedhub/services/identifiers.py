"""Breed identifier parsing.

Locally created breeds are keyed by UUID strings, breeds from the external
API by integers. Request paths carry either form, so the raw segment is
parsed exactly once into one of the two variants below and callers branch on
the variant type.
"""

from dataclasses import dataclass
from uuid import UUID

from breedhub.services.validation import ValidationError


@dataclass(frozen=True)
class LocalBreedId:
    value: str


@dataclass(frozen=True)
class ExternalBreedId:
    value: int


BreedId = LocalBreedId | ExternalBreedId


def parse_breed_id(raw: str) -> BreedId:
    candidate = raw.strip()
    try:
        parsed = str(UUID(candidate))
    except ValueError:
        parsed = None
    # only the hyphenated form counts, a bare 32-digit number stays numeric
    if parsed is not None and parsed == candidate.lower():
        return LocalBreedId(parsed)
    if candidate.isascii() and candidate.isdigit():
        return ExternalBreedId(int(candidate))
    raise ValidationError(f"Invalid dog id: {raw}")
