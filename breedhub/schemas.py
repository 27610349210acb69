from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BreedRecord(BaseModel):
    id: int | str
    name: str
    height_min: float | None = None
    height_max: float | None = None
    weight_min: float | None = None
    weight_max: float | None = None
    years_life: str | None = None
    image: str | None = None
    temperaments: str = ""


class TemperamentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class DogCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    height_min: float | None = Field(default=None, ge=0)
    height_max: float | None = Field(default=None, ge=0)
    weight_min: float | None = Field(default=None, ge=0)
    weight_max: float | None = Field(default=None, ge=0)
    years_life: str | None = Field(default=None, max_length=120)
    image: str | None = Field(default=None, max_length=2048)
    temperaments: list[int] | None = None


class DogUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    height_min: float | None = Field(default=None, ge=0)
    height_max: float | None = Field(default=None, ge=0)
    weight_min: float | None = Field(default=None, ge=0)
    weight_max: float | None = Field(default=None, ge=0)
    years_life: str | None = Field(default=None, max_length=120)
    image: str | None = Field(default=None, max_length=2048)
    temperaments: list[int] | None = None


class StoredDogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    height_min: float | None = None
    height_max: float | None = None
    weight_min: float | None = None
    weight_max: float | None = None
    years_life: str | None = None
    image: str | None = None
    temperaments: list[TemperamentResponse] = Field(default_factory=list)


class DogCreatedResponse(BaseModel):
    succ_msg: str = Field(default="Dog Created Successfully!", serialization_alias="succMsg")
    new_dog: StoredDogResponse = Field(serialization_alias="newDog")


class DogUpdatedResponse(BaseModel):
    succ_msg: str = Field(default="Dog Updated Successfully!", serialization_alias="succMsg")
    updated_dog: StoredDogResponse = Field(serialization_alias="updatedDog")


class DogDeletedResponse(BaseModel):
    succ_msg: str = Field(default="Dog Deleted Successfully!", serialization_alias="succMsg")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime


class HealthDetailsResponse(BaseModel):
    status: str
    timestamp: datetime
    database_ok: bool
    dog_count: int
    temperament_count: int
    temperament_cache_populated: bool
