"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from parenspace.text import SourceLocation, TextRange, TextSize

INTERPOLATION_START: Final[str] = "${"
INTERPOLATION_END: Final[str] = "}"


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11

    # -------------------------
    # Comments (kept in the token stream, like ESTree `tokensAndComments`)
    # -------------------------
    LINE_COMMENT = 15  # // ...
    BLOCK_COMMENT = 16  # /* ... */

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # '...' or "..."
    NUMERIC = 22

    # -------------------------
    # Template literal pieces
    # -------------------------
    TEMPLATE_COMPLETE = 30  # `...`
    TEMPLATE_OPEN = 31  # `...${
    TEMPLATE_MIDDLE = 32  # }...${
    TEMPLATE_CLOSE = 33  # }...`

    # -------------------------
    # Punctuation / operators
    # -------------------------
    PUNCTUATOR = 40

    # Anything a host tokenizer supplies that we have no use for.
    OTHER = 99

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE)

    @property
    def is_comment(self) -> bool:
        return self in (TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT)

    @property
    def is_template(self) -> bool:
        return self in (
            TokenKind.TEMPLATE_COMPLETE,
            TokenKind.TEMPLATE_OPEN,
            TokenKind.TEMPLATE_MIDDLE,
            TokenKind.TEMPLATE_CLOSE,
        )


def classify_template_text(text: str) -> TokenKind:
    """Classify a template piece by its first and last characters.

    Text that starts with neither a backtick nor `}` is treated as a complete
    literal; that only happens for unterminated input.
    """
    if text.startswith(INTERPOLATION_END):
        if text.endswith(INTERPOLATION_START):
            return TokenKind.TEMPLATE_MIDDLE
        return TokenKind.TEMPLATE_CLOSE
    if len(text) > 1 and text.endswith(INTERPOLATION_START):
        return TokenKind.TEMPLATE_OPEN
    return TokenKind.TEMPLATE_COMPLETE


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    value: str
    range: TextRange
    loc: SourceLocation

    @property
    def start(self) -> TextSize:
        return self.range.start

    @property
    def end(self) -> TextSize:
        return self.range.end

    @property
    def is_trivia(self) -> bool:
        return self.kind.is_trivia

    @property
    def is_comment(self) -> bool:
        return self.kind.is_comment

    @property
    def is_template(self) -> bool:
        return self.kind.is_template

    def is_punctuator(self, value: str) -> bool:
        return self.kind == TokenKind.PUNCTUATOR and self.value == value


def is_opening_paren(token: Token) -> bool:
    return token.is_punctuator("(")


def is_closing_paren(token: Token) -> bool:
    return token.is_punctuator(")")

