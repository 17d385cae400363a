#!/usr/bin/env python3
"""
Print a stored contact as JSON.

Usage:
  python scripts/get_contact.py 1
"""
from __future__ import annotations

import argparse
import json
import sys

from contacts_api.core.config import get_settings
from contacts_api.repositories.errors import ContactNotFoundError, RepositoryError
from contacts_api.repositories.factory import build_repository
from contacts_api.services import contact_service


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Print a stored contact")
    ap.add_argument("id", help="Contact id (or content key with CONTACTS_KEY_SCHEME=hash)")
    args = ap.parse_args(argv)

    repo = build_repository(get_settings())
    try:
        contact = contact_service.get(args.id, repo)
    except ContactNotFoundError:
        sys.stderr.write(f"Contact '{args.id}' not found\n")
        return 1
    except RepositoryError as exc:
        sys.stderr.write(f"Error: {exc.message}\n")
        return 1
    print(json.dumps(contact.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
