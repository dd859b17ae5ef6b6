"""Adapters from host (ESTree-style) token records to typed tokens."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Final

from parenspace.lexer.tokens import Token, TokenKind, classify_template_text
from parenspace.text import Position, SourceLocation, TextRange

_HOST_KINDS: Final[dict[str, TokenKind]] = {
    "Punctuator": TokenKind.PUNCTUATOR,
    "String": TokenKind.STRING,
    "Line": TokenKind.LINE_COMMENT,
    "Block": TokenKind.BLOCK_COMMENT,
    "Identifier": TokenKind.IDENTIFIER,
    "Keyword": TokenKind.IDENTIFIER,
    "Boolean": TokenKind.IDENTIFIER,
    "Null": TokenKind.IDENTIFIER,
    "Numeric": TokenKind.NUMERIC,
}


def kind_from_host(type_name: str, value: str) -> TokenKind:
    """Map an ESTree token type name to a `TokenKind`.

    Template pieces are classified from their text; unknown names map to OTHER.
    """
    if type_name == "Template":
        return classify_template_text(value)
    return _HOST_KINDS.get(type_name, TokenKind.OTHER)


def token_from_host(
    type_name: str,
    value: str,
    range: tuple[int, int],
    loc: tuple[tuple[int, int], tuple[int, int]],
) -> Token:
    """Build a token from host data. `loc` is `((line, column), (line, column))`."""
    (start_line, start_column), (end_line, end_column) = loc
    return Token(
        kind=kind_from_host(type_name, value),
        value=value,
        range=TextRange(range[0], range[1]),
        loc=SourceLocation(
            start=Position(line=start_line, column=start_column),
            end=Position(line=end_line, column=end_column),
        ),
    )


def tokens_from_host(records: Iterable[Mapping[str, Any]]) -> list[Token]:
    """Convert ESTree token/comment records (`type`, `value`, `range`, `loc`).

    ESTree comment records carry the comment body without its delimiters, so
    comment values are kept as given; only ranges are used for spacing.
    """
    tokens: list[Token] = []
    for record in records:
        loc = record["loc"]
        tokens.append(
            token_from_host(
                record["type"],
                record["value"],
                (record["range"][0], record["range"][1]),
                (
                    (loc["start"]["line"], loc["start"]["column"]),
                    (loc["end"]["line"], loc["end"]["column"]),
                ),
            )
        )
    return tokens
