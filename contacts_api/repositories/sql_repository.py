"""Contact repository backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from contacts_api.db.models import ContactRow
from contacts_api.db.session import get_session
from contacts_api.domain.contact import Contact
from contacts_api.repositories.errors import (
    ContactNotFoundError,
    CorruptRecordError,
    InvalidContactIdError,
    StorageError,
)


def _row_to_contact(row: ContactRow) -> Contact:
    return Contact(id=row.id, first_name=row.first_name, last_name=row.last_name)


class SQLContactRepository:
    """Upserts contacts into the ``contacts`` table keyed by id."""

    def set(self, contact: Contact) -> Contact:
        now = datetime.now(timezone.utc)
        try:
            with get_session() as session:
                row = session.get(ContactRow, contact.id)
                if not row:
                    row = ContactRow(
                        id=contact.id,
                        first_name=contact.first_name,
                        last_name=contact.last_name,
                        created_at=now,
                        updated_at=now,
                    )
                    session.add(row)
                else:
                    row.first_name = contact.first_name
                    row.last_name = contact.last_name
                    row.updated_at = now
                session.commit()
                session.refresh(row)
                return _row_to_contact(row)
        except UnicodeEncodeError as exc:
            raise CorruptRecordError(f"Unable to store contact {contact.id!r}: {exc}") from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to store contact {contact.id!r}: {exc}") from exc

    def get(self, contact_id: str) -> Contact:
        try:
            with get_session() as session:
                row = session.get(ContactRow, contact_id)
                if not row:
                    raise ContactNotFoundError(contact_id)
                return _row_to_contact(row)
        except UnicodeEncodeError as exc:
            raise InvalidContactIdError(f"Invalid contact id {contact_id!r}") from exc
        except SQLAlchemyError as exc:
            raise StorageError(f"Unable to load contact {contact_id!r}: {exc}") from exc
