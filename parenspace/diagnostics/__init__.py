"""Diagnostics."""

from parenspace.diagnostics.codes import (
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    LEXER_UNTERMINATED_TEMPLATE,
    LINT_STYLE_MISSING_SPACE_IN_PARENS,
    LINT_STYLE_REJECTED_SPACE_IN_PARENS,
    LINT_STYLE_SPACE_AROUND_PAREN_STRING,
    DiagnosticSpec,
)
from parenspace.diagnostics.diagnostic import Diagnostic, Fix, FixKind, Severity
from parenspace.diagnostics.report import (
    collect_fixes,
    sort_diagnostics,
)

__all__ = [
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "LEXER_UNTERMINATED_TEMPLATE",
    "LINT_STYLE_MISSING_SPACE_IN_PARENS",
    "LINT_STYLE_REJECTED_SPACE_IN_PARENS",
    "LINT_STYLE_SPACE_AROUND_PAREN_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Fix",
    "FixKind",
    "Severity",
    "collect_fixes",
    "sort_diagnostics",
]
