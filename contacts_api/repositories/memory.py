"""In-process repository used by tests and throwaway runs."""
from __future__ import annotations

import threading
from typing import Dict

from contacts_api.domain.contact import Contact
from contacts_api.repositories.errors import ContactNotFoundError


class MemoryContactRepository:
    def __init__(self) -> None:
        self._items: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def set(self, contact: Contact) -> Contact:
        with self._lock:
            self._items[contact.id] = contact.to_dict()
        return contact

    def get(self, contact_id: str) -> Contact:
        with self._lock:
            data = self._items.get(contact_id)
        if data is None:
            raise ContactNotFoundError(contact_id)
        return Contact.from_dict(data)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
