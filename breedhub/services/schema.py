from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from breedhub.models import Dog, Temperament, dog_temperaments
from breedhub.models.base import Base

REQUIRED_TABLES = (Dog.__tablename__, Temperament.__tablename__, dog_temperaments.name)


def missing_tables(engine: Engine) -> list[str]:
    existing = set(inspect(engine).get_table_names())
    return [name for name in REQUIRED_TABLES if name not in existing]


def ensure_schema(engine: Engine) -> list[str]:
    """Create any missing tables and return the names that were created."""
    missing = missing_tables(engine)
    if missing:
        Base.metadata.create_all(bind=engine)
    return missing
