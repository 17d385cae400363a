"""Repository interface shared by every storage backend."""
from __future__ import annotations

from typing import Protocol

from contacts_api.domain.contact import Contact


class ContactRepository(Protocol):
    def set(self, contact: Contact) -> Contact:
        """Persist the contact and return the stored record."""
        ...

    def get(self, contact_id: str) -> Contact:
        """Return the stored contact or raise ContactNotFoundError."""
        ...
