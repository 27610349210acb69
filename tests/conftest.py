import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_breedhub.db")
os.environ.setdefault("DOG_API_KEY", "test-key")
os.environ.setdefault("DOG_API_URL", "https://dogs.example.test/v1/breeds")
os.environ.setdefault("SEED_TEMPERAMENTS_ON_STARTUP", "false")

from breedhub.api.deps import get_breed_source  # noqa: E402
from breedhub.config import get_settings  # noqa: E402
from breedhub.database import SessionLocal, engine  # noqa: E402
from breedhub.main import create_app  # noqa: E402
from breedhub.models.base import Base  # noqa: E402
from tests.helpers import FakeBreedSource, sample_raw_breeds  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    get_settings.cache_clear()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def breed_source():
    return FakeBreedSource(sample_raw_breeds())


@pytest.fixture()
def client(breed_source):
    app = create_app()
    app.dependency_overrides[get_breed_source] = lambda: breed_source
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    with SessionLocal() as db:
        yield db
        db.rollback()
