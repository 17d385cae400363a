"""Create/get use cases for contacts."""
from __future__ import annotations

import logging

from contacts_api.domain.contact import Contact
from contacts_api.repositories.base import ContactRepository

logger = logging.getLogger(__name__)


def create(contact: Contact, repository: ContactRepository) -> Contact:
    stored = repository.set(contact)
    logger.info("contact created %r", contact)
    return stored


def get(contact_id: str, repository: ContactRepository) -> Contact:
    return repository.get(contact_id)
