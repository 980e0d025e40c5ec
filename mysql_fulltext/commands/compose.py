"""Print the SQL for a fulltext search without running it."""

from __future__ import annotations

import click

from mysql_fulltext.cli import Context, pass_context
from mysql_fulltext.commands._options import TermCommand, build_query, query_options
from mysql_fulltext.utils.output import print_sql


@click.command("compose", cls=TermCommand)
@query_options
@pass_context
def cli(
    ctx: Context,
    terms: tuple[str, ...],
    table: str | None,
    search_fields: str | None,
    select_fields: str | None,
    order_field: str,
    asc: bool,
) -> None:
    """Compose the boolean-mode search query and print it.

    TERMS are boolean-mode terms; put them after "--" when one starts with "-".

    \b
    Examples:
      mysql-fulltext compose -t articles -F title,body -- +mysql -oracle
      mysql-fulltext compose -t articles -F title,body --order-by title --asc -- database
    """
    builder = build_query(ctx.config, terms, table, search_fields, select_fields, order_field, asc)
    print_sql(builder.compose())
