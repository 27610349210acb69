from breedhub.database import engine
from breedhub.services.schema import REQUIRED_TABLES, ensure_schema


def main() -> int:
    created = ensure_schema(engine)
    for name in REQUIRED_TABLES:
        status = "created" if name in created else "present"
        print(f"{status} {name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
