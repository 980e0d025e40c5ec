"""Render the SELECT statement used for fulltext searches."""

from __future__ import annotations

from collections.abc import Sequence


def build_select(columns: Sequence[str], table: str | None, where: str, order_by: str) -> str:
    """Assemble ``SELECT ... FROM ... WHERE ... ORDER BY ...``.

    Values are inserted verbatim; callers escape anything user supplied.
    A missing table renders as an empty string and yields malformed SQL.
    """
    cols = ", ".join(columns)
    return f"SELECT {cols} FROM {table or ''} WHERE {where} ORDER BY {order_by}"
