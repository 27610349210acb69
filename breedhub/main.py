import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from sqlalchemy import text

from breedhub.api.errors import register_exception_handlers
from breedhub.api.routes import dogs, health, temperaments
from breedhub.config import get_settings
from breedhub.database import engine, session_scope
from breedhub.logging_setup import configure_logging
from breedhub.services.aggregator import seed_temperaments
from breedhub.services.connectors import TheDogApiConnector
from breedhub.services.schema import ensure_schema

logger = logging.getLogger(__name__)

SERVICE_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    created = ensure_schema(engine)
    if created:
        logger.info("Created tables: %s", ", ".join(created))
    with session_scope() as db:
        db.execute(text("SELECT 1"))
        if settings.seed_temperaments_on_startup:
            seeded = seed_temperaments(db, TheDogApiConnector.from_settings(settings))
            logger.info("Temperament vocabulary ready with %d entries", len(seeded))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Breedhub",
        version=SERVICE_VERSION,
        description="Dog breed catalogue merging TheDogAPI with locally created breeds.",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(dogs.router)
    app.include_router(temperaments.router)

    @app.get("/meta")
    def meta() -> dict:
        return {
            "service": "breedhub",
            "version": SERVICE_VERSION,
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_app()
