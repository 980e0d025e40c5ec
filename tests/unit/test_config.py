"""Unit tests for configuration."""

import stat
import tomllib
from pathlib import Path

import pytest

from mysql_fulltext.config import Config, load_config, save_config
from mysql_fulltext.exceptions import ConfigParseError, ConfigValidationError


def test_default_config() -> None:
    """Test that default config has sensible values."""
    config = Config()
    assert config.host == "localhost"
    assert config.port == 3306
    assert config.select_fields == ["*"]
    assert config.colored_output is True


def test_load_missing_config(temp_dir: Path) -> None:
    """Test loading when config file doesn't exist."""
    config_path = temp_dir / "nonexistent.toml"
    config, warnings = load_config(config_path)

    assert config is not None
    assert any("No config file found" in w for w in warnings)


def test_load_valid_config(sample_config: Path) -> None:
    """Test loading a valid config file."""
    config, warnings = load_config(sample_config)

    assert warnings == []
    assert config.host == "db.example.com"
    assert config.port == 3307
    assert config.user == "search"
    assert config.password == "s3cret"
    assert config.database == "blog"
    assert config.table == "articles"
    assert config.search_fields == "title,body"
    assert config.select_fields == ["id", "title"]
    assert config.colored_output is False
    assert config.config_path == sample_config.resolve()


def test_load_invalid_toml(temp_dir: Path) -> None:
    """Test loading invalid TOML raises error."""
    config_path = temp_dir / "invalid.toml"
    config_path.write_text("this is not valid [ toml")

    with pytest.raises(ConfigParseError):
        load_config(config_path)


@pytest.mark.parametrize(
    "content,key",
    [
        ('[display]\ncolored_output = "yes"\n', "display.colored_output"),
        ('[database]\nport = "3306"\n', "database.port"),
        ("[database]\nport = true\n", "database.port"),
        ("[database]\nhost = 1\n", "database.host"),
        ("[database]\nuser = 42\n", "database.user"),
        ('[search]\nselect_fields = "id"\n', "search.select_fields"),
        ("[search]\nselect_fields = [1, 2]\n", "search.select_fields"),
        ("[search]\ntable = []\n", "search.table"),
    ],
)
def test_config_validation_invalid_type(temp_dir: Path, content: str, key: str) -> None:
    """Test that invalid types raise validation error."""
    config_path = temp_dir / "bad_types.toml"
    config_path.write_text(content)

    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(config_path)
    assert exc_info.value.key == key


def test_validate_warnings() -> None:
    config = Config(port=70000, select_fields=[])
    warnings = config.validate()

    assert any("database.database" in w for w in warnings)
    assert any("database.port" in w for w in warnings)
    assert config.select_fields == []


def test_empty_select_fields_select_all_columns(temp_dir: Path) -> None:
    config_path = temp_dir / "config.toml"
    config_path.write_text("[search]\nselect_fields = []\n")

    config, _ = load_config(config_path)

    assert config.select_fields == ["*"]


def test_database_url() -> None:
    config = Config(host="db", port=3307, user="u", password="p", database="blog")
    url = config.database_url()
    assert url.drivername == "mysql+pymysql"
    assert (url.host, url.port, url.username, url.database) == ("db", 3307, "u", "blog")


def test_save_and_reload(temp_dir: Path) -> None:
    config_path = temp_dir / "nested" / "config.toml"
    config = Config(user="search", password="pw", database="blog", table="articles")

    save_config(config, config_path)
    loaded, _ = load_config(config_path)

    assert loaded.user == "search"
    assert loaded.password == "pw"
    assert loaded.table == "articles"
    assert loaded.search_fields is None
    assert stat.S_IMODE(config_path.stat().st_mode) == 0o600


def test_save_omits_unset_values(temp_dir: Path) -> None:
    config_path = temp_dir / "config.toml"
    save_config(Config(), config_path)

    data = tomllib.loads(config_path.read_text())
    assert "password" not in data["database"]
    assert "table" not in data["search"]
    assert data["search"]["select_fields"] == ["*"]
