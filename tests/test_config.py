from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts_api.core import config as core_config  # noqa: E402
from contacts_api.repositories.factory import build_repository  # noqa: E402
from contacts_api.repositories.json_storage import FileContactRepository, KeyScheme  # noqa: E402
from contacts_api.repositories.memory import MemoryContactRepository  # noqa: E402

ENV_VARS = (
    "APP_ENV",
    "CONTACTS_STORAGE_BACKEND",
    "CONTACTS_DATA_DIR",
    "CONTACTS_KEY_SCHEME",
    "DATABASE_URL",
    "GRAPHQL_PATH",
    "GRAPHQL_IDE",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(clean_env):
    settings = core_config.get_settings()
    assert settings.app_env == "dev"
    assert settings.storage_backend == "file"
    assert settings.data_dir == "/tmp"
    assert settings.key_scheme == "id"
    assert settings.graphql_path == "/graphql"
    assert settings.graphql_ide is True
    assert settings.log_level == "DEBUG"
    assert (settings.host, settings.port) == ("127.0.0.1", 8000)


def test_env_overrides(clean_env):
    clean_env.setenv("APP_ENV", "PROD")
    clean_env.setenv("CONTACTS_STORAGE_BACKEND", "Memory")
    clean_env.setenv("CONTACTS_KEY_SCHEME", "single")
    clean_env.setenv("GRAPHQL_PATH", "api/gql/")
    clean_env.setenv("GRAPHQL_IDE", "off")
    clean_env.setenv("PORT", "not-a-number")
    settings = core_config.get_settings()
    assert settings.app_env == "prod"
    assert settings.storage_backend == "memory"
    assert settings.key_scheme == "single"
    assert settings.graphql_path == "/api/gql"
    assert settings.graphql_ide is False
    assert settings.log_level == "INFO"
    assert settings.port == 8000


def test_build_repository_picks_backend(clean_env, tmp_path):
    clean_env.setenv("CONTACTS_DATA_DIR", str(tmp_path))
    clean_env.setenv("CONTACTS_KEY_SCHEME", "hash")
    repo = build_repository(core_config.get_settings())
    assert isinstance(repo, FileContactRepository)
    assert repo.base_dir == tmp_path
    assert repo.key_scheme is KeyScheme.HASH

    core_config.get_settings.cache_clear()
    clean_env.setenv("CONTACTS_STORAGE_BACKEND", "memory")
    assert isinstance(build_repository(core_config.get_settings()), MemoryContactRepository)


def test_build_repository_rejects_unknown_backend(clean_env):
    clean_env.setenv("CONTACTS_STORAGE_BACKEND", "redis")
    with pytest.raises(ValueError):
        build_repository(core_config.get_settings())
