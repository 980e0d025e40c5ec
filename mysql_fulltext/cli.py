"""Command-line interface for mysql-fulltext."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from mysql_fulltext import __version__
from mysql_fulltext.config import Config, load_config
from mysql_fulltext.utils.output import (
    error,
    set_color,
    set_pager,
    set_verbosity,
    warning,
)


class Context:
    """Shared context for all commands."""

    def __init__(self) -> None:
        self.config: Config | None = None
        self.verbose: bool = False
        self.debug: bool = False
        self.quiet: bool = False
        self.pager: bool | None = None  # None = auto


pass_context = click.make_pass_decorator(Context, ensure=True)


def _configure_logging(*, verbose: bool, debug: bool) -> None:
    """Route library log records to stderr at the requested level."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="[%(asctime)s][%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/mysql-fulltext/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug output (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress non-error output",
)
@click.option(
    "--pager/--no-pager",
    default=None,
    help="Force pager on/off (default: auto-detect)",
)
@click.version_option(version=__version__, prog_name="mysql-fulltext")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
    pager: bool | None,
) -> None:
    """mysql-fulltext: Ranked boolean-mode fulltext searches on MySQL.

    Builds MATCH ... AGAINST (... IN BOOLEAN MODE) queries from simple
    term directives and runs them against a MySQL database.

    Configuration is loaded from ~/.config/mysql-fulltext/config.toml by default.
    Use --config to specify an alternative configuration file.

    Examples:

        # Show the SQL for a search without connecting
        mysql-fulltext compose -t articles -F title,body -- +mysql -oracle

        # Run the search
        mysql-fulltext search -t articles -F title,body -- +mysql -oracle
    """
    # Initialize context
    ctx.ensure_object(Context)
    app_ctx = ctx.obj
    app_ctx.verbose = verbose or debug
    app_ctx.debug = debug
    app_ctx.quiet = quiet
    app_ctx.pager = pager

    # Configure module-level verbosity for output helpers and log records
    set_verbosity(verbose=verbose, debug=debug)
    _configure_logging(verbose=verbose, debug=debug)

    # Configure pager
    set_pager(pager)

    # Configure color output: disabled by --no-color, NO_COLOR env, or config
    disable_color = no_color or os.environ.get("NO_COLOR") is not None

    if disable_color:
        set_color(False)

    # Load configuration
    try:
        loaded_config, warnings = load_config(config)
        app_ctx.config = loaded_config

        # Apply config settings
        if not disable_color and not loaded_config.colored_output:
            set_color(False)

        # Show warnings unless quiet
        if not quiet:
            for warn in warnings:
                warning(warn)

    except Exception as e:
        error(str(e))
        ctx.exit(1)


@cli.command("help")
@click.argument("command", required=False, nargs=-1)
@click.pass_context
def help_cmd(ctx: click.Context, command: tuple[str, ...]) -> None:
    """Show help for a command."""
    group = cli
    for name in command:
        cmd = group.get_command(ctx, name)
        if cmd is None:
            error(f"Unknown command: {name}")
            ctx.exit(1)
            return
        if isinstance(cmd, click.Group):
            group = cmd
        else:
            click.echo(cmd.get_help(ctx))
            return
    click.echo(group.get_help(ctx))


def register_commands() -> None:
    """Register all commands from the commands package."""
    from mysql_fulltext.commands import discover_commands

    for command in discover_commands():
        cli.add_command(command)


# Register commands on import
register_commands()
