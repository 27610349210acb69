from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from breedhub.api.deps import get_breed_source
from breedhub.database import get_db
from breedhub.schemas import TemperamentResponse
from breedhub.services.aggregator import seed_temperaments
from breedhub.services.connectors import BreedSourceConnector

router = APIRouter(prefix="/temperaments", tags=["temperaments"])


@router.get("", response_model=list[TemperamentResponse])
def list_temperaments(
    db: Session = Depends(get_db),
    source: BreedSourceConnector = Depends(get_breed_source),
) -> list[TemperamentResponse]:
    temperaments = seed_temperaments(db, source)
    db.commit()
    return [TemperamentResponse.model_validate(row) for row in temperaments]
