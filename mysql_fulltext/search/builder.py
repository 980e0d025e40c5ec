"""Compose MySQL boolean-mode fulltext queries."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pymysql.converters import escape_string

from mysql_fulltext.search.conditions import Condition, Operator
from mysql_fulltext.search.parser import parse_terms
from mysql_fulltext.search.sql import build_select

logger = logging.getLogger(__name__)

# Order field that selects the computed MATCH score and sorts by it.
RELEVANCE = "relevance"


class QueryBuilder:
    """Accumulate search directives and render a single SELECT statement.

    Usage:
        sql = (
            QueryBuilder()
            .set_table("articles")
            .set_search_fields("title,body")
            .must_include("mysql")
            .exclude("oracle")
            .compose()
        )

    Args:
        escape: Function escaping a string for use inside a single-quoted
            MySQL literal. Defaults to PyMySQL's ``escape_string``.
    """

    def __init__(self, escape: Callable[[str], str] = escape_string) -> None:
        self._escape = escape
        self._table: str | None = None
        self._search_fields: str | None = None
        self._select_fields: list[str] = ["*"]
        self._conditions: list[Condition] = []
        self._order_field: str = RELEVANCE
        self._direction: str = "DESC"

    def set_table(self, table: str) -> QueryBuilder:
        """Set the table to search in."""
        self._table = table
        return self

    def set_search_fields(self, fields: str) -> QueryBuilder:
        """Set the fulltext-indexed columns to match against (e.g. ``'title,body'``)."""
        self._search_fields = fields
        return self

    def set_select_fields(self, fields: Sequence[str]) -> QueryBuilder:
        """Set the columns to include in the results (``['*']`` for all)."""
        self._select_fields = list(fields)
        return self

    def must_include(self, term: str) -> QueryBuilder:
        """Require the term in every returned row."""
        return self._add(Operator.MUST_INCLUDE, term)

    def exclude(self, term: str) -> QueryBuilder:
        """Drop rows that contain the term."""
        return self._add(Operator.EXCLUDE, term)

    def can_include(self, term: str) -> QueryBuilder:
        """Rank rows containing the term higher without requiring it."""
        return self._add(Operator.CAN_INCLUDE, term)

    def prefer_without(self, term: str) -> QueryBuilder:
        """Rank rows containing the term lower without excluding them."""
        return self._add(Operator.PREFER_WITHOUT, term)

    def add_terms(self, expression: str) -> QueryBuilder:
        """Append every condition of a term expression like ``+cat -dog fish``.

        Raises:
            TermParseError: If the expression cannot be parsed.
        """
        self._conditions.extend(parse_terms(expression))
        return self

    def order_by(self, field: str, direction: str = "DESC") -> QueryBuilder:
        """Sort by ``field`` instead of the computed relevance."""
        self._order_field = field
        self._direction = direction
        return self

    def _add(self, operator: Operator, term: str) -> QueryBuilder:
        self._conditions.append(Condition(operator=operator, term=term))
        return self

    @property
    def conditions(self) -> tuple[Condition, ...]:
        return tuple(self._conditions)

    def compose_conditions_string(self) -> str:
        """Return all conditions as one boolean-mode expression, unescaped.

        Every condition is followed by a single space, so the result ends
        with a trailing space when any condition is present.
        """
        return "".join(f"{condition} " for condition in self._conditions)

    def match_expression(self) -> str:
        """Return the ``MATCH (...) AGAINST (... IN BOOLEAN MODE)`` clause."""
        fields = self._escape(self._search_fields or "")
        terms = self._escape(self.compose_conditions_string())
        return f"MATCH ({fields}) AGAINST ('{terms}' IN BOOLEAN MODE)"

    def compose(self) -> str:
        """Compose the SQL statement to send to the database.

        When ordering by relevance the MATCH expression is also selected
        as a ``relevance`` column so it can be read and sorted on.
        """
        match = self.match_expression()

        columns = list(self._select_fields)
        if self._order_field == RELEVANCE:
            columns.append(f"{match} AS {RELEVANCE}")

        sql = build_select(
            columns,
            self._table,
            where=match,
            order_by=f"{self._order_field} {self._direction}",
        )
        logger.debug("Composed fulltext query: %s", sql)
        return sql

    def __str__(self) -> str:
        return self.compose()
