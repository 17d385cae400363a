"""Create (or drop) the contacts table: ``python -m contacts_api.db.create_tables [--drop]``."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers ContactRow on Base.metadata


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())


def drop_all() -> None:
    Base.metadata.drop_all(bind=get_engine())


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Manage the contacts SQL schema")
    ap.add_argument("--drop", action="store_true", help="Drop the tables before creating them")
    args = ap.parse_args(argv)
    try:
        if args.drop:
            drop_all()
        create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Contacts table ready.")


if __name__ == "__main__":
    main()
