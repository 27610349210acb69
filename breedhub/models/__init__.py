from breedhub.models.core import Dog, Temperament, dog_temperaments

__all__ = [
    "Dog",
    "Temperament",
    "dog_temperaments",
]
