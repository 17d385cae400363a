"""Run the API with uvicorn: ``python -m contacts_api [--host H] [--port P]``."""
from __future__ import annotations

import argparse

import uvicorn

from contacts_api.core.config import get_settings


UVICORN_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}
LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}


def uvicorn_log_level(level: str) -> str:
    """Translate a LOG_LEVEL value into a name uvicorn accepts (falls back to info)."""
    name = (level or "").strip().lower()
    name = LOG_LEVEL_ALIASES.get(name, name)
    return name if name in UVICORN_LOG_LEVELS else "info"


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Contacts GraphQL API")
    ap.add_argument("--host", default=settings.host, help=f"Listen address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args(argv)

    print(f"GraphiQL: http://{args.host}:{args.port}{settings.graphql_path}")
    uvicorn.run(
        "contacts_api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=uvicorn_log_level(settings.log_level),
    )


if __name__ == "__main__":
    main()
