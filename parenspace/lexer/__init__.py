"""Lexer."""

from parenspace.lexer.host import kind_from_host, token_from_host, tokens_from_host
from parenspace.lexer.lexer import Lexer, dump_tokens
from parenspace.lexer.tokens import (
    Token,
    TokenKind,
    classify_template_text,
    is_closing_paren,
    is_opening_paren,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "classify_template_text",
    "dump_tokens",
    "is_closing_paren",
    "is_opening_paren",
    "kind_from_host",
    "token_from_host",
    "tokens_from_host",
]
