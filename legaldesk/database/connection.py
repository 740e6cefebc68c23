from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from legaldesk.config.settings import Settings
from legaldesk.logging.logger import Log

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    """Build a libpq connection string; values are quoted by psycopg."""
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
    )


def init_pool(settings: Settings) -> None:
    """Open the process-wide pool. Calling it again replaces the old pool."""
    global _pool  # noqa: PLW0603
    close_pool()
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=1,
        max_size=max(1, settings.db_pool_max_size),
        open=True,
    )
    Log.debug(f"Opened connection pool to {settings.db_host}/{settings.db_database}")


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Borrow a pooled connection; the caller commits its own writes."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
