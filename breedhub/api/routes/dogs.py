from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from breedhub.api.deps import get_breed_source
from breedhub.database import get_db
from breedhub.schemas import (
    BreedRecord,
    DogCreatedResponse,
    DogCreateRequest,
    DogDeletedResponse,
    DogUpdatedResponse,
    DogUpdateRequest,
    ErrorResponse,
    StoredDogResponse,
)
from breedhub.services.aggregator import find_external_breed, get_all_breeds, search_breeds
from breedhub.services.breeds import (
    create_local_breed,
    delete_local_breed,
    get_local_breed,
    to_breed_record,
    update_local_breed,
)
from breedhub.services.connectors import BreedSourceConnector
from breedhub.services.errors import NotFoundError
from breedhub.services.identifiers import LocalBreedId, parse_breed_id
from breedhub.services.validation import ValidationError

router = APIRouter(prefix="/dogs", tags=["dogs"])

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse}}


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": message})


@router.get("", response_model=list[BreedRecord], responses={404: {"content": {"text/plain": {}}}})
def list_dogs(
    name: str | None = Query(default=None),
    db: Session = Depends(get_db),
    source: BreedSourceConnector = Depends(get_breed_source),
):
    breeds = get_all_breeds(db, source)
    if not name:
        return breeds
    matches = search_breeds(breeds, name)
    if not matches:
        return PlainTextResponse(f"Dog with name {name} not exist!", status_code=404)
    return matches


@router.get("/{dog_id}", response_model=BreedRecord, responses={404: {"content": {"text/plain": {}}}})
def get_dog(
    dog_id: str,
    db: Session = Depends(get_db),
    source: BreedSourceConnector = Depends(get_breed_source),
):
    try:
        breed_id = parse_breed_id(dog_id)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if isinstance(breed_id, LocalBreedId):
        try:
            dog = get_local_breed(db, breed_id.value)
        except NotFoundError:
            return PlainTextResponse(f"Dog with id {dog_id} not exist in the DB!", status_code=404)
        return to_breed_record(dog)

    breed = find_external_breed(get_all_breeds(db, source), breed_id.value)
    if breed is None:
        return PlainTextResponse(f"Dog with id {dog_id} not exist in the API!", status_code=404)
    return breed


@router.post("", response_model=DogCreatedResponse, status_code=201)
def create_dog(request: DogCreateRequest, db: Session = Depends(get_db)) -> DogCreatedResponse:
    try:
        dog = create_local_breed(db, request)
    except ValidationError as exc:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    response = DogCreatedResponse(new_dog=StoredDogResponse.model_validate(dog))
    db.commit()
    return response


@router.put("/{dog_id}", response_model=DogUpdatedResponse, responses=NOT_FOUND_RESPONSES)
def update_dog(dog_id: str, request: DogUpdateRequest, db: Session = Depends(get_db)):
    try:
        dog = update_local_breed(db, dog_id, request)
    except NotFoundError as exc:
        return _not_found(str(exc))
    except ValidationError as exc:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    response = DogUpdatedResponse(updated_dog=StoredDogResponse.model_validate(dog))
    db.commit()
    return response


@router.delete("/{dog_id}", response_model=DogDeletedResponse, responses=NOT_FOUND_RESPONSES)
def delete_dog(dog_id: str, db: Session = Depends(get_db)):
    try:
        delete_local_breed(db, dog_id)
    except NotFoundError as exc:
        return _not_found(str(exc))
    db.commit()
    return DogDeletedResponse()
