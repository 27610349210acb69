from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from breedhub.models.core import Temperament
from breedhub.schemas import BreedRecord
from breedhub.services.breeds import list_local_breeds
from breedhub.services.connectors.base import BreedSourceConnector

logger = logging.getLogger(__name__)


def _first_failure(*futures: Future) -> BaseException | None:
    for future in futures:
        if future.done() and not future.cancelled() and future.exception() is not None:
            return future.exception()
    return None


def get_all_breeds(db: Session, source: BreedSourceConnector) -> list[BreedRecord]:
    """Return external breeds followed by local ones.

    Both reads run at the same time. The first failure cancels whatever is
    still pending and is re-raised; no partial list is ever returned.
    """
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="breed-fanout")
    try:
        external = executor.submit(source.fetch_breeds)
        local = executor.submit(list_local_breeds, db)
        wait([external, local], return_when=FIRST_EXCEPTION)
        failure = _first_failure(external, local)
        if failure is not None:
            for future in (external, local):
                future.cancel()
            logger.error("Error getting all dogs: %s", failure)
            raise failure
        return [*external.result(), *local.result()]
    finally:
        # the local read holds the request session, so it must finish before we return
        executor.shutdown(wait=True, cancel_futures=True)


def search_breeds(records: list[BreedRecord], name: str) -> list[BreedRecord]:
    needle = name.lower()
    return [record for record in records if needle in record.name.lower()]


def find_external_breed(records: list[BreedRecord], breed_id: int) -> BreedRecord | None:
    for record in records:
        if isinstance(record.id, int) and record.id == breed_id:
            return record
    return None


def temperament_cache_populated(db: Session) -> bool:
    """True once any temperament row exists.

    The cache has no invalidation: after the first successful seed the
    external source is never asked for temperaments again.
    """
    return db.scalar(select(Temperament.id).limit(1)) is not None


def extract_temperament_names(entries: list[dict[str, Any]]) -> list[str]:
    seen: dict[str, None] = {}
    for entry in entries:
        raw = entry.get("temperament")
        if not raw or not isinstance(raw, str):
            continue
        for part in raw.split(","):
            name = part.strip()
            if name:
                seen.setdefault(name, None)
    return list(seen)


def _insert_ignoring_duplicates(db: Session, names: list[str]) -> None:
    if not names:
        return
    rows = [{"name": name} for name in names]
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        stmt = pg_insert(Temperament).values(rows).on_conflict_do_nothing(index_elements=["name"])
    elif dialect == "sqlite":
        stmt = sqlite_insert(Temperament).values(rows).on_conflict_do_nothing(index_elements=["name"])
    else:
        existing = set(db.scalars(select(Temperament.name).where(Temperament.name.in_(names))))
        db.add_all(Temperament(name=name) for name in names if name not in existing)
        db.flush()
        return
    db.execute(stmt)


def list_temperaments(db: Session) -> list[Temperament]:
    return list(db.scalars(select(Temperament).order_by(Temperament.name.asc())))


def count_temperaments(db: Session) -> int:
    return int(db.scalar(select(func.count()).select_from(Temperament)) or 0)


def seed_temperaments(db: Session, source: BreedSourceConnector) -> list[Temperament]:
    if temperament_cache_populated(db):
        return list_temperaments(db)

    names = extract_temperament_names(source.fetch_raw_breeds())
    _insert_ignoring_duplicates(db, names)
    logger.info("Seeded temperament vocabulary with %d names", len(names))
    return list_temperaments(db)
