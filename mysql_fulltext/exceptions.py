"""Exception hierarchy for mysql-fulltext."""

from pathlib import Path


class FulltextError(Exception):
    """Base exception for all mysql-fulltext errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all mysql-fulltext errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(FulltextError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Database Errors
class DatabaseError(FulltextError):
    """Database-related errors.

    Attributes:
        code: Native error number reported by the driver, if any.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message if code is None else f"{message} (code {code})")


class DatabaseConnectionError(DatabaseError):
    """Failed to connect to database."""

    pass


class QueryError(DatabaseError):
    """The database returned no valid result for a query."""

    pass


# Search expression errors
class TermParseError(FulltextError):
    """Raised when a search term expression cannot be parsed."""

    def __init__(self, expression: str, message: str) -> None:
        self.expression = expression
        super().__init__(f"Failed to parse search terms '{expression}': {message}")
