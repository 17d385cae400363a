"""
Persistence adapters.

These modules encapsulate how contacts are stored/retrieved (JSON files by
default, SQL or memory when configured). Services depend on the
ContactRepository interface rather than touching files or sessions.
"""

from .base import ContactRepository
from .errors import (
    ContactNotFoundError,
    CorruptRecordError,
    InvalidContactIdError,
    RepositoryError,
    StorageError,
)

__all__ = [
    "ContactRepository",
    "ContactNotFoundError",
    "CorruptRecordError",
    "InvalidContactIdError",
    "RepositoryError",
    "StorageError",
]
