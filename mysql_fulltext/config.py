"""Configuration management for mysql-fulltext."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w
from sqlalchemy.engine import URL

from mysql_fulltext.db.session import DEFAULT_PORT, build_url
from mysql_fulltext.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)
from mysql_fulltext.utils.fileops import secure_atomic_write


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "mysql-fulltext" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        host: MySQL server host name.
        port: MySQL server port.
        user: Database user.
        password: Database password.
        database: Database (schema) to search in.
        table: Default table to search.
        search_fields: Default fulltext-indexed columns, comma-joined.
        select_fields: Default result columns.
        colored_output: Whether to use colored terminal output.
        config_path: Path where config was loaded from (None if defaults).
    """

    host: str = "localhost"
    port: int = DEFAULT_PORT
    user: str | None = None
    password: str | None = None
    database: str | None = None
    table: str | None = None
    search_fields: str | None = None
    select_fields: list[str] = field(default_factory=lambda: ["*"])
    colored_output: bool = True
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if not self.database:
            warnings.append("No database configured (set database.database)")

        if not 0 < self.port < 65536:
            warnings.append(f"database.port={self.port} is outside valid range 1-65535")

        return warnings

    def database_url(self) -> URL:
        """Build the SQLAlchemy URL for the configured server."""
        return build_url(self.host, self.user, self.password, self.database, self.port)


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: mysql-fulltext init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _get_optional_str(section: dict[str, Any], section_name: str, key: str) -> str | None:
    value = section[key]
    if value is not None and not isinstance(value, str):
        raise ConfigValidationError(f"{section_name}.{key}", value, "must be a string or null")
    return value


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [database] section
    database = data.get("database", {})
    if "host" in database:
        value = database["host"]
        if not isinstance(value, str):
            raise ConfigValidationError("database.host", value, "must be a string")
        config.host = value

    if "port" in database:
        value = database["port"]
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigValidationError("database.port", value, "must be an integer")
        config.port = value

    for key in ("user", "password", "database"):
        if key in database:
            setattr(config, key, _get_optional_str(database, "database", key))

    # Parse [search] section
    search = data.get("search", {})
    for key in ("table", "search_fields"):
        if key in search:
            setattr(config, key, _get_optional_str(search, "search", key))

    if "select_fields" in search:
        value = search["select_fields"]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigValidationError("search.select_fields", value, "must be a list of strings")
        # An empty list selects all columns
        config.select_fields = value or ["*"]

    # Parse [display] section
    display = data.get("display", {})
    if "colored_output" in display:
        value = display["colored_output"]
        if not isinstance(value, bool):
            raise ConfigValidationError("display.colored_output", value, "must be a boolean")
        config.colored_output = value

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()

    # Build TOML structure, None values are left out
    database_data: dict[str, Any] = {"host": config.host, "port": config.port}
    for key in ("user", "password", "database"):
        value = getattr(config, key)
        if value is not None:
            database_data[key] = value

    search_data: dict[str, Any] = {"select_fields": list(config.select_fields)}
    if config.table is not None:
        search_data["table"] = config.table
    if config.search_fields is not None:
        search_data["search_fields"] = config.search_fields

    data: dict[str, Any] = {
        "database": database_data,
        "search": search_data,
        "display": {
            "colored_output": config.colored_output,
        },
    }

    # Holds the database password, keep it owner-only
    secure_atomic_write(config_path, tomli_w.dumps(data))
