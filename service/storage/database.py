"""
Lookup store connection handling.

The lookup store is the UIM SQL Server database (CA_UIM). We only ever read
from it: one connection per enrichment, at most one query on it, closed
before the enrichment returns. No pooling, no caching.

pymssql rows are requested as dicts so callers can read the origin column
by name.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Generator

import pymssql

from config import settings
from errors import ConfigurationError, StoreConnectionError

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    """Host and login are the minimum needed to attempt a connection."""
    return bool(settings.db_host and settings.db_user)


def get_connection(log: logging.Logger = logger) -> Any:
    """
    Open a new connection to the lookup store.

    Raises ConfigurationError when host/user are missing, StoreConnectionError
    when the server can't be reached or rejects the login.
    """
    if not is_configured():
        raise ConfigurationError("Lookup store host and user must be set (DB_HOST, DB_USER)")

    log.info("Lookup store configured: %s database=%s", settings.db_server, settings.db_name)
    log.info("About to connect...")
    try:
        conn = pymssql.connect(
            server=settings.db_host,
            port=str(settings.db_port),
            user=settings.db_user,
            password=settings.db_password.get_secret_value(),
            database=settings.db_name,
        )
    except pymssql.Error as exc:
        raise StoreConnectionError(f"Connection to {settings.db_server} failed: {exc}") from exc

    log.info("Connection good to %s", settings.db_server)
    return conn


Connect = Callable[[logging.Logger], Any]


@contextmanager
def lookup_cursor(
    connect: Connect = get_connection, log: logging.Logger = logger
) -> Generator[Any, None, None]:
    """Context manager: yields a dict-row cursor and always closes the connection."""
    conn = connect(log)
    try:
        cursor = conn.cursor(as_dict=True)
        yield cursor
    finally:
        conn.close()


def check_store_connection(connect: Connect = get_connection) -> bool:
    """Lightweight connectivity check used by /health endpoint."""
    try:
        with lookup_cursor(connect) as cursor:
            cursor.execute("SELECT 1")
        return True
    except Exception as exc:  # pylint: disable=broad-except
        logger.error("Lookup store connectivity check failed: %s", exc)
        return False
