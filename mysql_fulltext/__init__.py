"""mysql-fulltext: ranked MySQL boolean-mode fulltext searches."""

from mysql_fulltext.exceptions import (
    DatabaseConnectionError,
    FulltextError,
    QueryError,
    TermParseError,
)
from mysql_fulltext.search import (
    Condition,
    Operator,
    QueryBuilder,
    SearchExecutor,
    SearchResult,
    parse_terms,
)

__version__ = "0.1.0"

__all__ = [
    "Condition",
    "DatabaseConnectionError",
    "FulltextError",
    "Operator",
    "QueryBuilder",
    "QueryError",
    "SearchExecutor",
    "SearchResult",
    "TermParseError",
    "__version__",
    "parse_terms",
]
