import pytest
from sqlalchemy import select, text

from breedhub.database import build_engine, session_scope
from breedhub.models.core import Temperament


def test_sqlite_engine_enforces_foreign_keys(tmp_path):
    built = build_engine(f"sqlite+pysqlite:///{tmp_path / 'fk.db'}")
    with built.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1
    built.dispose()


def test_session_scope_commits_on_success(db_session):
    with session_scope() as db:
        db.add(Temperament(name="Calm"))

    assert db_session.scalar(select(Temperament.name)) == "Calm"


def test_session_scope_rolls_back_on_error(db_session):
    with pytest.raises(RuntimeError):
        with session_scope() as db:
            db.add(Temperament(name="Calm"))
            db.flush()
            raise RuntimeError("abort")

    assert db_session.scalar(select(Temperament.name)) is None
