"""Shared fixtures: a throwaway SQLite database and an app bound to it."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.config import AppConfig, DatabaseConfig
from src.db.connection import Database, init_db
from src.main import create_app

# Seeded by 003_seed.sql
ENGLISH_ID = "0b6a3c1e-2f4d-4c8a-9e1b-5d7f3a2c6e01"
SPANISH_ID = "0b6a3c1e-2f4d-4c8a-9e1b-5d7f3a2c6e02"


@pytest.fixture
def config(tmp_path) -> AppConfig:
    config = AppConfig()
    config.database = DatabaseConfig(sqlite_path=tmp_path / "test.db")
    return config


@pytest.fixture
def db(config) -> Database:
    """Migrated database, including the seed languages and greetings."""
    return init_db(config)


@pytest.fixture
def client(config):
    app = create_app(config)
    with TestClient(app) as c:
        yield c
