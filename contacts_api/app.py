from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contacts_api.core.config import Settings, get_settings
from contacts_api.core.logging_setup import configure_logging
from contacts_api.repositories.base import ContactRepository
from contacts_api.repositories.factory import build_repository
from contacts_api.routers import contacts as contacts_router

logger = logging.getLogger(__name__)

DEV_ORIGINS = {
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


def create_app(settings: Settings | None = None, repository: ContactRepository | None = None) -> FastAPI:
    """Factory used by uvicorn (``--factory``) and by the tests."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Contacts GraphQL API")
    app.state.settings = settings
    app.state.contact_repository = repository if repository is not None else build_repository(settings)

    if settings.app_env != "prod":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(DEV_ORIGINS),
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    graphql_router = contacts_router.build_router(graphql_ide=settings.graphql_ide)
    app.include_router(graphql_router, prefix=settings.graphql_path)

    @app.get("/healthz")
    def healthz():
        return {"ok": True, "storage": settings.storage_backend}

    logger.debug("GraphQL endpoint mounted at %s", settings.graphql_path)
    return app
