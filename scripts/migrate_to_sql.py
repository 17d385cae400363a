"""One-off migration script: JSON contact files -> SQL ``contacts`` table."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from contacts_api.core.config import get_settings
from contacts_api.core.logging_setup import configure_logging
from contacts_api.repositories.base import ContactRepository
from contacts_api.repositories.errors import CorruptRecordError
from contacts_api.repositories.json_storage import loads

logger = logging.getLogger("contacts_api.migrate")


def migrate(data_dir: Path, repo: ContactRepository) -> int:
    """Copy every ``*.json`` contact under data_dir into repo; returns the count."""
    if not data_dir.is_dir():
        raise SystemExit(f"Directory not found: {data_dir}")
    count = 0
    for path in sorted(data_dir.glob("*.json")):
        try:
            contact = loads(path.read_text(encoding="utf-8"))
        except (CorruptRecordError, UnicodeDecodeError) as exc:
            logger.warning("skipping %s: %s", path.name, exc)
            continue
        repo.set(contact)
        count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy JSON contacts into the SQL backend")
    ap.add_argument("--data-dir", default=settings.data_dir, help=f"Source directory (default: {settings.data_dir})")
    args = ap.parse_args(argv)

    configure_logging(settings.log_level)
    from contacts_api.db.create_tables import create_all
    from contacts_api.repositories.sql_repository import SQLContactRepository

    create_all()
    total = migrate(Path(args.data_dir), SQLContactRepository())
    print(f"{total} contact(s) migrated to the SQL backend.")


if __name__ == "__main__":
    main()
