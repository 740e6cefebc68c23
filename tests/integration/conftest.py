import os
import uuid
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from legaldesk.config.settings import Settings
from legaldesk.database.connection import close_pool, get_connection, init_pool

_SCHEMA_PATH = Path(__file__).resolve().parents[2] / "legaldesk" / "database" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "legaldesk_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session", autouse=True)
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(_SCHEMA_PATH.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def user_id(integration_pool: None) -> Generator[str, None, None]:
    """A fresh user id whose rows are removed after the test."""
    value = str(uuid.uuid4())
    yield value
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM saved_queries WHERE user_id = %s", (value,))
            cur.execute("DELETE FROM documents WHERE user_id = %s", (value,))
        conn.commit()


@pytest.fixture
def other_user_id(user_id: str) -> Generator[str, None, None]:
    value = str(uuid.uuid4())
    yield value
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM saved_queries WHERE user_id = %s", (value,))
            cur.execute("DELETE FROM documents WHERE user_id = %s", (value,))
        conn.commit()
