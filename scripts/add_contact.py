#!/usr/bin/env python3
"""
Store a contact through the configured repository.

Usage:
  python scripts/add_contact.py --id 1 --first-name Ada --last-name Lovelace
"""
from __future__ import annotations

import argparse
import sys

from contacts_api.core.config import get_settings
from contacts_api.core.logging_setup import configure_logging
from contacts_api.domain.contact import Contact
from contacts_api.repositories.errors import RepositoryError
from contacts_api.repositories.factory import build_repository
from contacts_api.services import contact_service


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Store a contact")
    ap.add_argument("--id", required=True, help="Contact id (storage key)")
    ap.add_argument("--first-name", required=True)
    ap.add_argument("--last-name", required=True)
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    repo = build_repository(settings)

    contact_id = (args.id or "").strip()
    if not contact_id:
        raise SystemExit("Invalid id")
    contact = Contact(id=contact_id, first_name=args.first_name, last_name=args.last_name)
    try:
        contact_service.create(contact, repo)
    except RepositoryError as exc:
        raise SystemExit(f"Failed to store contact: {exc.message}") from exc
    print("OK: contact stored")
    print(f"  id: {contact.id}")
    print(f"  name: {contact.first_name} {contact.last_name}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
