"""
Configuration helpers for the contacts service.

Routers/services never read os.environ directly; they go through the cached
Settings object returned by get_settings().
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_dir: str
    key_scheme: str
    database_url: str
    graphql_path: str
    graphql_ide: bool
    log_level: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    graphql_path = "/" + (os.getenv("GRAPHQL_PATH") or "/graphql").strip().strip("/")
    return Settings(
        app_env=app_env,
        storage_backend=(os.getenv("CONTACTS_STORAGE_BACKEND") or "file").strip().lower(),
        data_dir=os.getenv("CONTACTS_DATA_DIR") or "/tmp",
        key_scheme=(os.getenv("CONTACTS_KEY_SCHEME") or "id").strip().lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        graphql_path=graphql_path,
        graphql_ide=_bool(os.getenv("GRAPHQL_IDE"), True),
        log_level=(os.getenv("LOG_LEVEL") or ("DEBUG" if app_env == "dev" else "INFO")).upper(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8000"), 8000),
    )
