"""Pick the repository implementation named by the settings."""
from __future__ import annotations

import logging

from contacts_api.core.config import Settings
from contacts_api.repositories.base import ContactRepository
from contacts_api.repositories.json_storage import FileContactRepository
from contacts_api.repositories.memory import MemoryContactRepository

logger = logging.getLogger(__name__)

BACKENDS = ("file", "memory", "sql")


def build_repository(settings: Settings) -> ContactRepository:
    backend = settings.storage_backend
    if backend == "file":
        logger.info("storing contacts under %s (key scheme: %s)", settings.data_dir, settings.key_scheme)
        return FileContactRepository(settings.data_dir, settings.key_scheme)
    if backend == "memory":
        return MemoryContactRepository()
    if backend == "sql":
        from contacts_api.db.create_tables import create_all
        from contacts_api.repositories.sql_repository import SQLContactRepository

        create_all()
        return SQLContactRepository()
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {', '.join(BACKENDS)}")
