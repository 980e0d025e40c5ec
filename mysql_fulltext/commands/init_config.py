"""Initialize configuration file for mysql-fulltext."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import click

from mysql_fulltext.cli import Context, pass_context
from mysql_fulltext.config import get_default_config_path
from mysql_fulltext.utils.fileops import secure_atomic_write
from mysql_fulltext.utils.output import error, info, success


def _load_example_config() -> str:
    """Load the example configuration from package data."""
    return resources.files("mysql_fulltext").joinpath("config.example.toml").read_text()


@click.command("init-config")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    default=False,
    help="Overwrite existing config file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output path for config file (default: ~/.config/mysql-fulltext/config.toml)",
)
@pass_context
def cli(ctx: Context, force: bool, output: Path | None) -> None:
    """Create a new configuration file with default settings.

    The generated file lists every option with documentation comments.
    It is written with owner-only permissions since it may hold the
    database password.

    Examples:

    \b
      # Create config at default location
      mysql-fulltext init-config

    \b
      # Create config at custom location
      mysql-fulltext init-config --output ./my-config.toml
    """
    config_path = output if output is not None else get_default_config_path()
    config_path = config_path.expanduser().resolve()

    if config_path.exists() and not force:
        error(
            f"Config file already exists: {config_path}",
            hint="Use --force to overwrite",
        )
        raise SystemExit(1)

    try:
        secure_atomic_write(config_path, _load_example_config())
    except OSError as e:
        error(f"Failed to write config file: {e}")
        raise SystemExit(1)

    success(f"Created config file: {config_path}")
    info("Set [database] connection details and [search] defaults, then run a search.")
