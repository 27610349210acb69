from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from breedhub.models.core import Dog, Temperament
from breedhub.schemas import BreedRecord, DogCreateRequest, DogUpdateRequest
from breedhub.services.errors import NotFoundError
from breedhub.services.validation import validate_range

DOG_FIELDS = ("name", "height_min", "height_max", "weight_min", "weight_max", "years_life", "image")


def to_breed_record(dog: Dog) -> BreedRecord:
    return BreedRecord(
        id=dog.id,
        name=dog.name,
        height_min=dog.height_min,
        height_max=dog.height_max,
        weight_min=dog.weight_min,
        weight_max=dog.weight_max,
        years_life=dog.years_life,
        image=dog.image,
        temperaments=", ".join(temperament.name for temperament in dog.temperaments),
    )


def _load_dog(db: Session, dog_id: str) -> Dog | None:
    stmt = (
        select(Dog)
        .options(selectinload(Dog.temperaments))
        .where(Dog.id == dog_id)
        .execution_options(populate_existing=True)
    )
    return db.scalar(stmt)


def _resolve_temperaments(db: Session, temperament_ids: list[int]) -> list[Temperament]:
    # ids with no matching row, zero and negatives included, are skipped
    stmt = select(Temperament).where(Temperament.id.in_(set(temperament_ids))).order_by(Temperament.id.asc())
    return list(db.scalars(stmt))


def _check_ranges(values: dict[str, Any]) -> None:
    validate_range(values.get("height_min"), values.get("height_max"), "height")
    validate_range(values.get("weight_min"), values.get("weight_max"), "weight")


def list_local_breeds(db: Session) -> list[BreedRecord]:
    stmt = select(Dog).options(selectinload(Dog.temperaments)).order_by(Dog.created_at.asc(), Dog.id.asc())
    return [to_breed_record(dog) for dog in db.scalars(stmt)]


def get_local_breed(db: Session, dog_id: str) -> Dog:
    dog = _load_dog(db, dog_id)
    if dog is None:
        raise NotFoundError(f"Dog with id {dog_id} not exist in the DB!")
    return dog


def create_local_breed(db: Session, payload: DogCreateRequest) -> Dog:
    values = payload.model_dump(include=set(DOG_FIELDS))
    _check_ranges(values)

    dog = Dog(**values)
    db.add(dog)
    db.flush()

    if payload.temperaments:
        dog.temperaments = _resolve_temperaments(db, payload.temperaments)
        db.flush()

    return get_local_breed(db, dog.id)


def update_local_breed(db: Session, dog_id: str, payload: DogUpdateRequest) -> Dog:
    dog = db.get(Dog, dog_id)
    if dog is None:
        raise NotFoundError("Dog not found!")

    changes = payload.model_dump(include=set(DOG_FIELDS), exclude_unset=True)
    if changes.get("name", "") is None:
        changes.pop("name")
    merged = {field: changes.get(field, getattr(dog, field)) for field in DOG_FIELDS}
    _check_ranges(merged)

    for field, value in changes.items():
        setattr(dog, field, value)

    if payload.temperaments:
        # replaces the whole association, not additive
        dog.temperaments = _resolve_temperaments(db, payload.temperaments)
    db.flush()

    return get_local_breed(db, dog_id)


def delete_local_breed(db: Session, dog_id: str) -> None:
    dog = db.get(Dog, dog_id)
    if dog is None:
        raise NotFoundError("Dog not found!")
    db.delete(dog)
    db.flush()
