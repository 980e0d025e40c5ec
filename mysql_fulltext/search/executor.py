"""Execute composed fulltext queries against a database connection."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from mysql_fulltext.db.session import DEFAULT_PORT, build_url, driver_error_details, open_connection
from mysql_fulltext.exceptions import QueryError
from mysql_fulltext.search.builder import QueryBuilder

if TYPE_CHECKING:
    from sqlalchemy.engine import URL, Connection, Engine

    from mysql_fulltext.config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Rows returned by a single search, in database order."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    row_count: int = 0

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return self.row_count


class SearchExecutor:
    """Run composed queries on a MySQL connection.

    The connection passed to the constructor stays owned by the caller and
    is never closed here. Connections opened through :meth:`connect`,
    :meth:`from_url` or :meth:`from_config` belong to the executor and are
    released by :meth:`close` or when leaving a ``with`` block.

    Example:
        with SearchExecutor.connect("localhost", "app", "secret", "blog") as executor:
            result = executor.execute(query)
            for row in result:
                print(row["title"], row["relevance"])
    """

    def __init__(self, connection: Connection) -> None:
        self.connection = connection
        self._engine: Engine | None = None

    @classmethod
    def connect(
        cls,
        host: str,
        user: str | None,
        password: str | None,
        database: str | None,
        port: int = DEFAULT_PORT,
    ) -> SearchExecutor:
        """Open a new MySQL connection and wrap it.

        Raises:
            DatabaseConnectionError: With the driver's connect error code
                if the server cannot be reached or refuses the login.
        """
        return cls.from_url(build_url(host, user, password, database, port))

    @classmethod
    def from_url(cls, url: str | URL) -> SearchExecutor:
        """Open a new connection from a SQLAlchemy URL and wrap it."""
        engine, connection = open_connection(url)
        executor = cls(connection)
        executor._engine = engine
        return executor

    @classmethod
    def from_config(cls, config: Config) -> SearchExecutor:
        """Open a new connection to the server named in ``config``."""
        return cls.from_url(config.database_url())

    def execute(self, query: str | QueryBuilder) -> SearchResult:
        """Run a composed query and return every row.

        The statement is passed to the driver as is, without bind
        parameter processing.

        Args:
            query: Composed SQL string, or a QueryBuilder to compose.

        Returns:
            SearchResult holding one column-name to value mapping per row.
            A query matching nothing yields an empty result.

        Raises:
            QueryError: With the driver's error code and message if the
                database returns no valid result, or without a code when
                the connection is already closed.
        """
        sql = str(query)
        logger.debug("Executing: %s", sql)

        try:
            result = self.connection.exec_driver_sql(
                sql, execution_options={"no_parameters": True}
            )
            rows = [dict(row) for row in result.mappings()] if result.returns_rows else []
        except SQLAlchemyError as e:
            # Driver errors, plus use of a connection that is already closed
            code, message = driver_error_details(e)
            logger.warning("Query failed (%s): %s", code, message)
            raise QueryError(f"No valid result from database, error: {message}", code) from e

        logger.info("Search returned %d rows", len(rows))
        return SearchResult(rows=rows, row_count=len(rows))

    def close(self) -> None:
        """Release the connection if this executor opened it."""
        if self._engine is None:
            return
        self.connection.close()
        self._engine.dispose()
        self._engine = None

    def __enter__(self) -> SearchExecutor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
