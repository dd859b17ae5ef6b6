"""Diagnostic and fix construction for paren spacing violations."""

from __future__ import annotations

from parenspace.diagnostics import (
    LINT_STYLE_MISSING_SPACE_IN_PARENS,
    LINT_STYLE_REJECTED_SPACE_IN_PARENS,
    LINT_STYLE_SPACE_AROUND_PAREN_STRING,
    Diagnostic,
    DiagnosticSpec,
    Fix,
)
from parenspace.lexer import Token
from parenspace.source import SourceCode
from parenspace.text import TextRange


def missing_space_after_opener(opener: Token) -> Diagnostic:
    return _diagnostic(LINT_STYLE_MISSING_SPACE_IN_PARENS, opener.range, Fix.insert(opener.end, " "))


def missing_space_before_closer(closer: Token) -> Diagnostic:
    return _diagnostic(LINT_STYLE_MISSING_SPACE_IN_PARENS, closer.range, Fix.insert(closer.start, " "))


def rejected_space(source: SourceCode, left: Token, right: Token) -> Diagnostic:
    return _space_removal(LINT_STYLE_REJECTED_SPACE_IN_PARENS, source, left, right)


def rejected_space_around_string(source: SourceCode, left: Token, right: Token) -> Diagnostic:
    return _space_removal(LINT_STYLE_SPACE_AROUND_PAREN_STRING, source, left, right)


def _space_removal(spec: DiagnosticSpec, source: SourceCode, left: Token, right: Token) -> Diagnostic:
    gap = TextRange.new(left.end, right.start)
    # A gap that also holds text the token stream left out (a comment the
    # host dropped) is reported but never deleted.
    fix = Fix.delete(gap) if source.is_only_whitespace_between(left, right) else None
    return _diagnostic(spec, gap, fix)


def _diagnostic(spec: DiagnosticSpec, range: TextRange, fix: Fix | None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
        fix=fix,
    )
