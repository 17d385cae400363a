"""
JSON file persistence for contacts.

Each record lives in its own file under a base directory. Where the file goes
depends on the key scheme:

- ``id``: ``<base>/<id>.json``, the caller-supplied id is the storage key;
- ``hash``: ``<base>/<content key>.json``, so ``get`` expects the content key;
- ``single``: ``<base>/contact.json``, one slot shared by every record.

Writes go to a temp file in the same directory and are renamed into place, so
readers never observe a partially written record.
"""

from __future__ import annotations

import enum
import json
import logging
import os
import tempfile
from pathlib import Path

from contacts_api.domain.contact import Contact
from contacts_api.repositories.errors import (
    ContactNotFoundError,
    CorruptRecordError,
    InvalidContactIdError,
    StorageError,
)

logger = logging.getLogger(__name__)

SINGLE_FILE_NAME = "contact.json"


class KeyScheme(str, enum.Enum):
    ID = "id"
    HASH = "hash"
    SINGLE = "single"


def dumps(contact: Contact) -> bytes:
    try:
        text = json.dumps(contact.to_dict(), ensure_ascii=False, indent=2) + "\n"
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        # UnicodeEncodeError (lone surrogates) is a ValueError too
        raise CorruptRecordError(f"Unable to serialize contact: {exc}") from exc


def loads(raw: str) -> Contact:
    try:
        return Contact.from_dict(json.loads(raw))
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError too
        raise CorruptRecordError(f"Unable to decode contact: {exc}") from exc


def _check_id(contact_id: str) -> str:
    value = contact_id or ""
    if not value or value in {".", ".."} or "\x00" in value:
        raise InvalidContactIdError(f"Invalid contact id {contact_id!r}")
    if "/" in value or "\\" in value or os.sep in value:
        raise InvalidContactIdError(f"Invalid contact id {contact_id!r}")
    try:
        os.fsencode(value)
    except UnicodeEncodeError as exc:
        raise InvalidContactIdError(f"Invalid contact id {contact_id!r}") from exc
    return value


class FileContactRepository:
    """ContactRepository backed by JSON files on local disk."""

    def __init__(self, base_dir: str | Path, key_scheme: KeyScheme | str = KeyScheme.ID) -> None:
        self.base_dir = Path(base_dir)
        self.key_scheme = KeyScheme(key_scheme)

    def path_for_id(self, contact_id: str) -> Path:
        if self.key_scheme is KeyScheme.SINGLE:
            return self.base_dir / SINGLE_FILE_NAME
        return self.base_dir / f"{_check_id(contact_id)}.json"

    def path_for(self, contact: Contact) -> Path:
        if self.key_scheme is KeyScheme.HASH:
            return self.base_dir / f"{contact.content_key()}.json"
        return self.path_for_id(contact.id)

    def set(self, contact: Contact) -> Contact:
        path = self.path_for(contact)
        payload = dumps(contact)
        logger.debug("writing contact to %s", path)
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".contact-", suffix=".tmp", dir=self.base_dir)
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Unable to write {path}: {exc}") from exc
        return contact

    def get(self, contact_id: str) -> Contact:
        path = self.path_for_id(contact_id)
        logger.debug("reading contact from %s", path)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ContactNotFoundError(contact_id) from exc
        except UnicodeDecodeError as exc:
            raise CorruptRecordError(f"Unable to decode {path}: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Unable to read {path}: {exc}") from exc
        return loads(raw)
