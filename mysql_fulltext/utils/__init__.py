"""Utility modules for mysql-fulltext."""

from mysql_fulltext.utils.output import (
    console,
    error,
    info,
    success,
    warning,
)

__all__ = [
    "console",
    "error",
    "info",
    "success",
    "warning",
]
