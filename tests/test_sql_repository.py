"""
Smoke tests for the SQLContactRepository against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contacts_api.core import config as core_config  # noqa: E402
from contacts_api.db import create_tables, models  # noqa: E402
from contacts_api.db import session as db_session  # noqa: E402
from contacts_api.domain.contact import Contact  # noqa: E402
from contacts_api.repositories.errors import ContactNotFoundError, RepositoryError  # noqa: E402
from contacts_api.repositories.sql_repository import SQLContactRepository  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # limpa caches para forçar re-leitura de envs
    core_config.get_settings.cache_clear()
    db_session.reset_engine()
    create_tables.drop_all()
    create_tables.create_all()

    yield db_file

    create_tables.drop_all()
    db_session.reset_engine()
    core_config.get_settings.cache_clear()


def test_set_then_get(temp_db):
    repo = SQLContactRepository()
    ada = Contact(id="1", first_name="Ada", last_name="Lovelace")
    assert repo.set(ada) == ada
    assert repo.get("1") == ada


def test_set_upserts_by_id(temp_db):
    repo = SQLContactRepository()
    repo.set(Contact(id="1", first_name="Ada", last_name="Lovelace"))
    repo.set(Contact(id="1", first_name="Ada", last_name="King"))
    assert repo.get("1") == Contact(id="1", first_name="Ada", last_name="King")
    with db_session.get_session() as session:
        assert session.query(models.ContactRow).count() == 1


def test_missing_id_raises_not_found(temp_db):
    repo = SQLContactRepository()
    with pytest.raises(ContactNotFoundError):
        repo.get("nope")


def test_engine_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    db_session.reset_engine()
    try:
        with pytest.raises(RuntimeError):
            db_session.get_engine()
    finally:
        core_config.get_settings.cache_clear()
        db_session.reset_engine()


def test_factory_builds_sql_backend_and_creates_table(tmp_path, monkeypatch):
    from contacts_api.repositories.factory import build_repository

    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'factory.db'}")
    monkeypatch.setenv("CONTACTS_STORAGE_BACKEND", "sql")
    core_config.get_settings.cache_clear()
    db_session.reset_engine()
    try:
        repo = build_repository(core_config.get_settings())
        assert isinstance(repo, SQLContactRepository)
        ada = Contact(id="1", first_name="Ada", last_name="Lovelace")
        repo.set(ada)
        assert repo.get("1") == ada
    finally:
        db_session.reset_engine()
        core_config.get_settings.cache_clear()


def test_create_tables_main_drop_recreates_empty_table(temp_db, capsys):
    repo = SQLContactRepository()
    repo.set(Contact(id="1", first_name="Ada", last_name="Lovelace"))

    create_tables.main(["--drop"])
    assert "Contacts table ready." in capsys.readouterr().out
    with pytest.raises(ContactNotFoundError):
        repo.get("1")


def test_unencodable_text_raises_repository_error(temp_db):
    repo = SQLContactRepository()
    with pytest.raises(RepositoryError):
        repo.set(Contact(id="1", first_name="\ud800", last_name="x"))
    with pytest.raises(RepositoryError):
        repo.get("\ud800")
