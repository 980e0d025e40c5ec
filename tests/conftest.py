"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, text

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlalchemy.engine import Connection


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[database]
host = "db.example.com"
port = 3307
user = "search"
password = "s3cret"
database = "blog"

[search]
table = "articles"
search_fields = "title,body"
select_fields = ["id", "title"]

[display]
colored_output = false
""")
    return config_path


@pytest.fixture
def articles_connection() -> Generator[Connection, None, None]:
    """In-memory SQLite connection with a small ``articles`` table.

    SQLite has no MATCH ... AGAINST, so executor tests run plain SELECTs.
    """
    engine = create_engine("sqlite://")
    connection = engine.connect()
    connection.execute(
        text("CREATE TABLE articles (id INTEGER PRIMARY KEY, title TEXT, body TEXT, score REAL)")
    )
    connection.execute(
        text("""
        INSERT INTO articles (id, title, body, score) VALUES
            (1, 'MySQL Tutorial', 'DBMS stands for DataBase ...', 0.9),
            (2, 'How To Use MySQL Well', 'After you went through a ...', 0.5),
            (3, 'Optimizing MySQL', 'In this tutorial, we show ...', 0.7)
    """)
    )
    try:
        yield connection
    finally:
        connection.close()
        engine.dispose()
