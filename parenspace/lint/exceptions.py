"""Resolve configured paren exceptions into concrete punctuator sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from parenspace.lexer import Token, TokenKind
from parenspace.lint.options import ParenException


@dataclass(frozen=True, slots=True)
class ExceptionSet:
    openers: frozenset[str] = frozenset()
    closers: frozenset[str] = frozenset()
    empty: bool = False
    paren_string: bool = False

    def is_opener_exception(self, token: Token) -> bool:
        """Whether `token`, sitting right after `(`, inverts the policy."""
        return token.kind == TokenKind.PUNCTUATOR and token.value in self.openers

    def is_closer_exception(self, token: Token) -> bool:
        """Whether `token`, sitting right before `)`, inverts the policy."""
        return token.kind == TokenKind.PUNCTUATOR and token.value in self.closers


def resolve_exceptions(exceptions: Iterable[ParenException]) -> ExceptionSet:
    openers: set[str] = set()
    closers: set[str] = set()
    empty = False
    paren_string = False

    for exception in exceptions:
        match exception:
            case ParenException.BRACES:
                openers.add("{")
                closers.add("}")
            case ParenException.BRACKETS:
                openers.add("[")
                closers.add("]")
            case ParenException.PARENS:
                openers.add("(")
                closers.add(")")
            case ParenException.EMPTY:
                # `()` is recognized by its other half being the neighbour.
                openers.add(")")
                closers.add("(")
                empty = True
            case ParenException.STRING:
                paren_string = True

    return ExceptionSet(
        openers=frozenset(openers),
        closers=frozenset(closers),
        empty=empty,
        paren_string=paren_string,
    )
