"""Exceptions raised by the repositories."""
from __future__ import annotations


class RepositoryError(Exception):
    """Base class for storage failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ContactNotFoundError(RepositoryError):
    def __init__(self, contact_id: str):
        super().__init__(f"Contact {contact_id!r} not found")
        self.contact_id = contact_id


class InvalidContactIdError(RepositoryError):
    """Raised when an id cannot be used as a storage key."""


class CorruptRecordError(RepositoryError):
    """Raised when a record cannot be serialized or decoded."""


class StorageError(RepositoryError):
    """Raised when the underlying filesystem or database fails."""
