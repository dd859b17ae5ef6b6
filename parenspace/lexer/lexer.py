"""Lexer."""

from __future__ import annotations

import logging
from typing import Final

from parenspace.diagnostics import Diagnostic, DiagnosticSpec
from parenspace.diagnostics.codes import (
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    LEXER_UNTERMINATED_TEMPLATE,
)
from parenspace.lexer.tokens import Token, TokenKind
from parenspace.text import LineIndex, TextRange, TextSize

logger = logging.getLogger(__name__)

# Longest first; the lexer takes the first entry that matches.
_PUNCTUATORS: Final[tuple[str, ...]] = (
    ">>>=",
    "...",
    "===",
    "!==",
    "**=",
    "<<=",
    ">>=",
    ">>>",
    "&&=",
    "||=",
    "??=",
    "=>",
    "==",
    "!=",
    "<=",
    ">=",
    "&&",
    "||",
    "??",
    "?.",
    "++",
    "--",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "**",
    "<<",
    ">>",
)
_SINGLE_PUNCTUATORS: Final[frozenset[str]] = frozenset("()[];,<>+-*/%&|^!~?:=.@#")

_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\v\f\u00a0\ufeff")
_NEWLINES: Final[frozenset[str]] = frozenset("\r\n\u2028\u2029")


class Lexer:
    """Lossless lexer for the JavaScript subset the paren rules need.

    Emits trivia (whitespace/newlines), comments and non-trivia tokens, then a
    single EOF token. Template literals are split into pieces at every `${`
    and matching `}`; a brace stack tells an interpolation's closing `}` apart
    from an ordinary closing brace. Regular-expression literals are not
    recognized.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = TextSize.from_int(0)
        self._line_index = LineIndex(source)
        # True entries are open template interpolations, False are plain `{`.
        self._brace_stack: list[bool] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        kind = TokenKind.EOF if self.is_eof else self._lex_token()
        range = self.current_range
        return Token(
            kind,
            self._source[range.start.value : range.end.value],
            range,
            self._line_index.location(range),
        )

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        if any(self._brace_stack):
            # An interpolation was still open at end of input.
            self._report(LEXER_UNTERMINATED_TEMPLATE)
        logger.debug("lexed %d tokens with %d diagnostics", len(tokens), len(self._diagnostics))
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch in _NEWLINES:
            self._consume_newline()
            return TokenKind.NEWLINE
        if ch in _WHITESPACE:
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()
        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch == "'" or ch == '"':
            return self._lex_string(ch)

        if ch == "`":
            return self._lex_template_piece(opened_with_backtick=True)

        if ch.isdigit() or (ch == "." and self._peek_char().isdigit()):
            return self._lex_number()

        if ch.isalpha() or ch == "_" or ch == "$":
            return self._lex_identifier()

        if ch == "{":
            self._brace_stack.append(False)
            self._advance(1)
            return TokenKind.PUNCTUATOR
        if ch == "}":
            if self._brace_stack and self._brace_stack.pop():
                return self._lex_template_piece(opened_with_backtick=False)
            self._advance(1)
            return TokenKind.PUNCTUATOR

        for punctuator in _PUNCTUATORS:
            if self._source.startswith(punctuator, self._position):
                self._advance(len(punctuator))
                return TokenKind.PUNCTUATOR
        if ch in _SINGLE_PUNCTUATORS:
            self._advance(1)
            return TokenKind.PUNCTUATOR

        self._advance(1)
        return TokenKind.OTHER

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof and self._current_char() not in _NEWLINES:
            self._advance(1)
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        end = self._source.find("*/", self._position)
        if end < 0:
            self._position = len(self._source)
            self._report(LEXER_UNTERMINATED_COMMENT)
        else:
            self._position = end + 2
        return TokenKind.BLOCK_COMMENT

    def _lex_string(self, quote: str) -> TokenKind:
        # Consume opening quote
        self._advance(1)
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                closed = True
                break
            if ch == "\\":
                self._advance(1)
                if not self.is_eof:
                    self._consume_escaped_char()
                continue
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)

        if not closed:
            self._report(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _lex_template_piece(self, *, opened_with_backtick: bool) -> TokenKind:
        # Consume the opening backtick or the `}` that ends an interpolation.
        self._advance(1)

        while not self.is_eof:
            ch = self._current_char()
            if ch == "\\":
                self._advance(1)
                if not self.is_eof:
                    self._consume_escaped_char()
                continue
            if ch == "`":
                self._advance(1)
                return TokenKind.TEMPLATE_COMPLETE if opened_with_backtick else TokenKind.TEMPLATE_CLOSE
            if ch == "$" and self._peek_char() == "{":
                self._advance(2)
                self._brace_stack.append(True)
                return TokenKind.TEMPLATE_OPEN if opened_with_backtick else TokenKind.TEMPLATE_MIDDLE
            self._advance(1)

        self._report(LEXER_UNTERMINATED_TEMPLATE)
        return TokenKind.TEMPLATE_COMPLETE if opened_with_backtick else TokenKind.TEMPLATE_CLOSE

    def _lex_number(self) -> TokenKind:
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                if ch in "eE" and self._peek_char() in "+-":
                    self._advance(1)
                self._advance(1)
                continue
            if ch == "." and not saw_dot:
                saw_dot = True
                self._advance(1)
                continue
            break
        return TokenKind.NUMERIC

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_" or ch == "$":
                self._advance(1)
                continue
            break
        return TokenKind.IDENTIFIER

    def _consume_whitespaces(self) -> None:
        while not self.is_eof and self._current_char() in _WHITESPACE:
            self._advance(1)

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _consume_escaped_char(self) -> None:
        # A backslash-newline continuation swallows `\r\n` as one unit.
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _report(self, spec: DiagnosticSpec) -> None:
        self._diagnostics.append(
            Diagnostic(
                code=spec.code,
                message=spec.message,
                range=self.current_range,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, location, and text for debugging."""
    for i, tok in enumerate(tokens):
        start = tok.loc.start
        print(f"{i:03d} {tok.kind.name:<18} range={tok.range.as_tuple()} at={start.line}:{start.column} text={tok.value!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
