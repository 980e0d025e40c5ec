"""Run a boolean-mode fulltext search against MySQL."""

from __future__ import annotations

import io
import json
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from mysql_fulltext.cli import Context, pass_context
from mysql_fulltext.commands._options import (
    EXIT_DATABASE_ERROR,
    EXIT_SUCCESS,
    TermCommand,
    build_query,
    query_options,
)
from mysql_fulltext.config import Config
from mysql_fulltext.exceptions import DatabaseError
from mysql_fulltext.search.builder import RELEVANCE
from mysql_fulltext.search.executor import SearchExecutor
from mysql_fulltext.utils.output import (
    THEME,
    console,
    create_table,
    debug,
    error,
    info,
    pager_print,
    verbose,
)


def _format_cell(value: Any) -> str:
    """Format a column value for table display."""
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:.4f}"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


@click.command("search", cls=TermCommand)
@query_options
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Limit number of displayed results",
)
@pass_context
def cli(
    ctx: Context,
    terms: tuple[str, ...],
    table: str | None,
    search_fields: str | None,
    select_fields: str | None,
    order_field: str,
    asc: bool,
    output_format: str,
    limit: int | None,
) -> None:
    """Search a table with MySQL boolean-mode fulltext matching.

    TERMS are boolean-mode terms; put them after "--" when one starts with "-".

    \b
    Term syntax:
      +word      word must be present
      -word      word must not be present
      ~word      rows with word rank lower
      word       optional, rows with word rank higher
      "a phrase" words must appear together
      word*      prefix match

    \b
    Examples:
      mysql-fulltext search -t articles -F title,body -- +mysql -oracle
      mysql-fulltext search -t articles -F title,body -s id,title -f json -- tuning

    Connection settings come from the [database] section of the config file.
    """
    config = ctx.config or Config()
    builder = build_query(config, terms, table, search_fields, select_fields, order_field, asc)
    query = builder.compose()
    verbose(f"Query: {query}")

    try:
        with SearchExecutor.from_config(config) as executor:
            result = executor.execute(query)
            debug(f"Fetched {result.row_count} rows")
    except DatabaseError as e:
        error(str(e))
        raise SystemExit(EXIT_DATABASE_ERROR)

    rows = result.rows if limit is None else result.rows[:limit]

    if not rows:
        info(f"No results for: {' '.join(terms)}")
        raise SystemExit(EXIT_SUCCESS)

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2, default=str))
    else:
        _print_table(rows, " ".join(terms), result.row_count)

    raise SystemExit(EXIT_SUCCESS)


def _print_table(rows: list[dict[str, Any]], term_string: str, total: int) -> None:
    """Print results as a Rich table, using pager when appropriate."""
    info(f"Search: {term_string} ({total} results)")

    table = create_table(show_header=True, header_style="bold")

    columns = list(rows[0].keys())
    for col in columns:
        if col == RELEVANCE:
            table.add_column(col, style="relevance", justify="right", no_wrap=True)
        else:
            table.add_column(col, no_wrap=True)

    for row in rows:
        table.add_row(*(escape(_format_cell(row.get(col))) for col in columns))

    # Render to buffer so we can route through pager
    buf = io.StringIO()
    render_console = Console(
        file=buf,
        theme=THEME,
        force_terminal=not console.no_color,
        width=1000,
        no_color=console.no_color,
    )
    render_console.print(table)

    pager_print(buf.getvalue(), header_lines=3)
