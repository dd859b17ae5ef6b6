"""Read-only view over one source text and its token stream."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from parenspace.diagnostics import Diagnostic
from parenspace.lexer import Lexer, Token, TokenKind
from parenspace.text import LineIndex, Position, TextSize


@dataclass(slots=True)
class SourceCode:
    """Source text plus the tokens and comments the lint rules walk.

    `tokens` may come from the bundled lexer or from a host tokenizer; trivia
    and EOF tokens are dropped from `tokens_and_comments`. Whitespace questions
    are answered from the text itself, so they do not depend on which tokens
    the host chose to supply.
    """

    text: str
    tokens: Sequence[Token]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    _tokens_and_comments: tuple[Token, ...] | None = field(default=None, init=False, repr=False)
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)

    @staticmethod
    def from_text(text: str) -> "SourceCode":
        lexer = Lexer(text)
        tokens = lexer.lex()
        return SourceCode(text=text, tokens=tokens, diagnostics=list(lexer.diagnostics))

    @property
    def tokens_and_comments(self) -> tuple[Token, ...]:
        if self._tokens_and_comments is None:
            self._tokens_and_comments = tuple(
                token for token in self.tokens if not token.is_trivia and token.kind != TokenKind.EOF
            )
        return self._tokens_and_comments

    @property
    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.text)
        return self._line_index

    def is_space_between(self, left: Token, right: Token) -> bool:
        """Whether any whitespace sits in the text between `left` and `right`."""
        between = self.text[left.end.value : right.start.value]
        return any(ch.isspace() for ch in between)

    def is_only_whitespace_between(self, left: Token, right: Token) -> bool:
        """Whether the text between `left` and `right` is non-empty whitespace and nothing else."""
        return self.text[left.end.value : right.start.value].isspace()

    def is_same_line(self, left: Token, right: Token) -> bool:
        return left.loc.end.line == right.loc.start.line

    def line_col(self, offset: TextSize) -> Position:
        return self.line_index.position(offset)
