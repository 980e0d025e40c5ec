"""Database engine and connection management for MySQL."""

from __future__ import annotations

import logging

import sqlalchemy.engine
from sqlalchemy import create_engine
from sqlalchemy.engine import URL
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.pool import NullPool

from mysql_fulltext.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

DRIVERNAME = "mysql+pymysql"
DEFAULT_PORT = 3306


def build_url(
    host: str,
    user: str | None,
    password: str | None,
    database: str | None,
    port: int = DEFAULT_PORT,
) -> URL:
    """Build a SQLAlchemy URL for a MySQL server reached through PyMySQL."""
    return URL.create(
        DRIVERNAME,
        username=user,
        password=password,
        host=host,
        port=port,
        database=database,
        query={"charset": "utf8mb4"},
    )


def driver_error_details(exc: BaseException) -> tuple[int | None, str]:
    """Extract the native ``(code, message)`` pair from a driver error.

    MySQL drivers report ``args == (errno, message)``; SQLite exposes
    ``sqlite_errorcode``. Falls back to ``(None, str(exc))``.
    """
    orig = exc.orig if isinstance(exc, DBAPIError) else exc
    args = getattr(orig, "args", ())
    if len(args) >= 2 and isinstance(args[0], int):
        return args[0], str(args[1])
    code = getattr(orig, "sqlite_errorcode", None)
    return code, str(orig)


def get_engine(url: str | URL) -> sqlalchemy.engine.Engine:
    """Create a SQLAlchemy engine for a search connection.

    Args:
        url: SQLAlchemy database URL.

    Returns:
        SQLAlchemy engine. Connections are opened lazily.
    """
    # One connection per search, nothing kept open between searches
    return create_engine(url, poolclass=NullPool)


def open_connection(
    url: str | URL,
) -> tuple[sqlalchemy.engine.Engine, sqlalchemy.engine.Connection]:
    """Open a new connection to the database at ``url``.

    Returns:
        Tuple of (engine, connection). The caller owns both.

    Raises:
        DatabaseConnectionError: If the connection cannot be established.
    """
    try:
        engine = get_engine(url)
    except (SQLAlchemyError, ValueError) as e:
        raise DatabaseConnectionError(f"Invalid database URL: {e}") from e

    try:
        connection = engine.connect()
    except DBAPIError as e:
        engine.dispose()
        code, message = driver_error_details(e)
        logger.warning("Failed to connect to database: %s", message)
        raise DatabaseConnectionError(f"Failed to connect to MySQL: {message}", code) from e

    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    return engine, connection
