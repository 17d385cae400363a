"""
GraphQL schema for contacts.

Resolvers map GraphQL payloads to the Contact record, call the use cases and
map the result back. The repository comes from the request context, which
reads it from ``app.state.contact_repository``.
"""
from __future__ import annotations

import logging

import strawberry
from fastapi import Request
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from contacts_api.domain.contact import Contact
from contacts_api.repositories.base import ContactRepository
from contacts_api.repositories.errors import (
    ContactNotFoundError,
    InvalidContactIdError,
    RepositoryError,
)
from contacts_api.services import contact_service

logger = logging.getLogger(__name__)


class ContactOperationError(Exception):
    """Generic failure surfaced to GraphQL clients."""


@strawberry.type(name="Contact")
class ContactType:
    id: str
    first_name: str
    last_name: str


@strawberry.type
class ContactSummary:
    first_name: str
    last_name: str


@strawberry.input
class ContactInput:
    id: str
    first_name: str
    last_name: str


def contact_from_input(payload: ContactInput) -> Contact:
    return Contact(id=payload.id, first_name=payload.first_name, last_name=payload.last_name)


def contact_to_output(contact: Contact) -> ContactType:
    return ContactType(id=contact.id, first_name=contact.first_name, last_name=contact.last_name)


def contact_to_summary(contact: Contact) -> ContactSummary:
    return ContactSummary(first_name=contact.first_name, last_name=contact.last_name)


def _failure(exc: RepositoryError, fallback: str) -> ContactOperationError:
    logger.warning("contact operation failed: %s", exc.message)
    if isinstance(exc, ContactNotFoundError):
        return ContactOperationError("contact not found")
    if isinstance(exc, InvalidContactIdError):
        return ContactOperationError("invalid contact id")
    return ContactOperationError(fallback)


def _repository(info: Info) -> ContactRepository:
    repo = info.context.get("repository")
    if repo is None:
        raise RuntimeError("Contact repository not configured")
    return repo


@strawberry.type
class Query:
    @strawberry.field(description="Fetch a stored contact by id.")
    def get(self, info: Info, id: str) -> ContactType:
        try:
            contact = contact_service.get(id, _repository(info))
        except RepositoryError as exc:
            raise _failure(exc, "failed to load contact") from exc
        return contact_to_output(contact)


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Store a contact, overwriting any record with the same key.")
    def create(self, info: Info, contact: ContactInput) -> ContactSummary:
        try:
            stored = contact_service.create(contact_from_input(contact), _repository(info))
        except RepositoryError as exc:
            raise _failure(exc, "failed to store contact") from exc
        return contact_to_summary(stored)


class ContactSchema(strawberry.Schema):
    """Schema that leaves expected contact failures to the resolvers' own WARNING log."""

    def process_errors(self, errors, execution_context=None) -> None:
        unexpected = [
            error for error in errors if not isinstance(error.original_error, ContactOperationError)
        ]
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = ContactSchema(query=Query, mutation=Mutation)


async def get_context(request: Request) -> dict:
    return {"repository": request.app.state.contact_repository}


def build_router(*, graphql_ide: bool = True) -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphql_ide else None,
    )
