"""Database connection layer for MySQL."""

from mysql_fulltext.db.session import build_url, get_engine, open_connection

__all__ = [
    "build_url",
    "get_engine",
    "open_connection",
]
