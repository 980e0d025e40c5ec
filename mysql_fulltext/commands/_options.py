"""Options shared by the search and compose commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from mysql_fulltext.config import Config
from mysql_fulltext.exceptions import TermParseError
from mysql_fulltext.search.builder import RELEVANCE, QueryBuilder
from mysql_fulltext.utils.output import error

EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_DATABASE_ERROR = 2


def _is_dash_term(arg: str) -> bool:
    """Return True for arguments like "-oracle" that click would unpack.

    Click reads "-safe" as the short option cluster "-s afe", so an exclude
    term ahead of "--" silently becomes an option value.
    """
    return arg.startswith("-") and not arg.startswith("--") and len(arg) > 2


class TermCommand(click.Command):
    """Command taking boolean-mode terms as trailing arguments.

    Terms starting with "+", "~" or a quote pass through as plain arguments.
    Terms starting with "-" must follow "--"; before it they are rejected
    with a usage error. Short options therefore take their value as a
    separate argument ("-t articles", not "-tarticles").
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        head = args[: args.index("--")] if "--" in args else args
        for arg in head:
            if _is_dash_term(arg):
                raise click.UsageError(
                    f"{arg!r} looks like an option. Put terms starting with '-' after '--'.",
                    ctx=ctx,
                )
        return super().parse_args(ctx, args)


def query_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the term argument and query shaping options to a command."""
    decorators = [
        click.argument("terms", nargs=-1, required=True, type=click.UNPROCESSED),
        click.option(
            "--table",
            "-t",
            default=None,
            help="Table to search (default: search.table from config)",
        ),
        click.option(
            "--fields",
            "-F",
            "search_fields",
            default=None,
            help="Comma-separated fulltext columns (default: search.search_fields from config)",
        ),
        click.option(
            "--select",
            "-s",
            "select_fields",
            default=None,
            help="Comma-separated result columns (default: search.select_fields from config)",
        ),
        click.option(
            "--order-by",
            "order_field",
            default=RELEVANCE,
            show_default=True,
            help="Column to sort by",
        ),
        click.option(
            "--asc",
            is_flag=True,
            default=False,
            help="Sort ascending instead of descending",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_query(
    config: Config | None,
    terms: tuple[str, ...],
    table: str | None,
    search_fields: str | None,
    select_fields: str | None,
    order_field: str,
    asc: bool,
) -> QueryBuilder:
    """Build a QueryBuilder from command options, falling back to config.

    Exits with EXIT_USAGE_ERROR when table or search fields are unknown or
    the terms cannot be parsed.
    """
    config = config or Config()

    table = table or config.table
    if not table:
        error("No table given", hint="Use --table or set search.table in the config")
        raise SystemExit(EXIT_USAGE_ERROR)

    search_fields = search_fields or config.search_fields
    if not search_fields:
        error(
            "No search fields given",
            hint="Use --fields or set search.search_fields in the config",
        )
        raise SystemExit(EXIT_USAGE_ERROR)

    columns = [c.strip() for c in (select_fields or "").split(",") if c.strip()]
    columns = columns or config.select_fields

    builder = (
        QueryBuilder()
        .set_table(table)
        .set_search_fields(search_fields)
        .set_select_fields(columns)
    )
    if order_field != RELEVANCE or asc:
        builder.order_by(order_field, "ASC" if asc else "DESC")

    try:
        builder.add_terms(" ".join(terms))
    except TermParseError as e:
        error(str(e))
        raise SystemExit(EXIT_USAGE_ERROR)

    return builder
