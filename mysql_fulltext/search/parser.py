"""Parse boolean-mode term expressions into search conditions."""

from __future__ import annotations

from importlib import resources
from typing import Any

from lark import Lark, Token, Transformer, UnexpectedInput

from mysql_fulltext.exceptions import TermParseError
from mysql_fulltext.search.conditions import Condition, Operator


def _load_grammar() -> str:
    """Load the Lark grammar from the package resources."""
    return resources.files("mysql_fulltext.search").joinpath("grammar.lark").read_text()


_GRAMMAR_TEXT = _load_grammar()

# LALR with the standard lexer keeps "well-known" a single word instead of
# splitting it into "well" and "-known".
_parser = Lark(
    _GRAMMAR_TEXT,
    parser="lalr",
)


class _TermTransformer(Transformer):
    """Transform Lark parse tree into a list of Conditions."""

    def start(self, items: list[Any]) -> list[Condition]:
        return list(items)

    def term(self, items: list[Any]) -> Condition:
        if len(items) == 2:
            operator, value = items
        else:
            operator, value = Operator.CAN_INCLUDE, items[0]
        return Condition(operator=operator, term=value)

    def OPERATOR(self, token: Token) -> Operator:
        return Operator(str(token))

    def PHRASE(self, token: Token) -> str:
        # Quotes are kept so MySQL matches the words as a phrase
        return str(token)

    def WORD(self, token: Token) -> str:
        return str(token)


_transformer = _TermTransformer()


def parse_terms(expression: str) -> list[Condition]:
    """Parse a boolean-mode term expression.

    Args:
        expression: Whitespace separated terms such as ``+cat -dog ~"old news" fish*``.

    Returns:
        Conditions in the order they appear in the expression.

    Raises:
        TermParseError: If the expression cannot be parsed.
    """
    expression = expression.strip()
    if not expression:
        return []

    try:
        tree = _parser.parse(expression)
        return _transformer.transform(tree)
    except UnexpectedInput as e:
        raise TermParseError(expression, str(e)) from e
