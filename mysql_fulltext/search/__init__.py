"""Boolean-mode fulltext query composition and execution."""

from mysql_fulltext.search.builder import RELEVANCE, QueryBuilder
from mysql_fulltext.search.conditions import Condition, Operator
from mysql_fulltext.search.executor import SearchExecutor, SearchResult
from mysql_fulltext.search.parser import parse_terms

__all__ = [
    "RELEVANCE",
    "Condition",
    "Operator",
    "QueryBuilder",
    "SearchExecutor",
    "SearchResult",
    "parse_terms",
]
