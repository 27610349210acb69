import pytest

from breedhub.services.identifiers import ExternalBreedId, LocalBreedId, parse_breed_id
from breedhub.services.validation import ValidationError


def test_uuid_is_local():
    parsed = parse_breed_id("0b8e7c4e-3f5a-4c1e-9d2b-6a7f8e9d0c1b")
    assert parsed == LocalBreedId("0b8e7c4e-3f5a-4c1e-9d2b-6a7f8e9d0c1b")


def test_uppercase_uuid_is_normalized():
    parsed = parse_breed_id("0B8E7C4E-3F5A-4C1E-9D2B-6A7F8E9D0C1B")
    assert parsed == LocalBreedId("0b8e7c4e-3f5a-4c1e-9d2b-6a7f8e9d0c1b")


@pytest.mark.parametrize("raw, expected", [("1", 1), ("264", 264), ("12345678", 12345678)])
def test_numbers_are_external_regardless_of_length(raw, expected):
    assert parse_breed_id(raw) == ExternalBreedId(expected)


def test_bare_hex_digits_are_not_a_uuid():
    raw = "1" * 32
    assert parse_breed_id(raw) == ExternalBreedId(int(raw))


@pytest.mark.parametrize("raw", ["abc", "not-a-uuid-at-all", "-5", "", "1.5"])
def test_other_values_are_rejected(raw):
    with pytest.raises(ValidationError):
        parse_breed_id(raw)
