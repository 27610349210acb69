from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from breedhub.database import get_db
from breedhub.models.core import Dog
from breedhub.schemas import HealthDetailsResponse, HealthResponse
from breedhub.services.aggregator import count_temperaments, temperament_cache_populated

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(UTC))


@router.get("/health/details", response_model=HealthDetailsResponse)
def health_details(db: Session = Depends(get_db)) -> HealthDetailsResponse:
    db.execute(select(1))
    dog_count = int(db.scalar(select(func.count()).select_from(Dog)) or 0)
    return HealthDetailsResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        database_ok=True,
        dog_count=dog_count,
        temperament_count=count_temperaments(db),
        temperament_cache_populated=temperament_cache_populated(db),
    )
