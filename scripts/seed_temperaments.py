import argparse

from breedhub.config import get_settings
from breedhub.database import engine, session_scope
from breedhub.logging_setup import configure_logging
from breedhub.services.aggregator import seed_temperaments, temperament_cache_populated
from breedhub.services.connectors import TheDogApiConnector
from breedhub.services.schema import ensure_schema


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the temperament vocabulary from TheDogAPI")
    parser.add_argument("--list", action="store_true", help="Print every stored temperament after seeding")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)
    ensure_schema(engine)

    with session_scope() as db:
        if temperament_cache_populated(db):
            print("Temperament vocabulary already populated; external source not queried")
        rows = seed_temperaments(db, TheDogApiConnector.from_settings(settings))
        print(f"{len(rows)} temperaments stored")
        if args.list:
            for row in rows:
                print(f"{row.id}\t{row.name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
