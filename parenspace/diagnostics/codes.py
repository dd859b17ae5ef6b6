"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote it was opened with.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_TEMPLATE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_TEMPLATE",
    message="Unterminated template literal.",
    hint="Close the template literal with a backtick.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="lexer",
)

LINT_STYLE_MISSING_SPACE_IN_PARENS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_MISSING_SPACE_IN_PARENS",
    message="There must be a space inside this paren.",
    hint="Insert a single space next to the paren.",
    severity="warning",
    category="lint/style",
)

LINT_STYLE_REJECTED_SPACE_IN_PARENS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_REJECTED_SPACE_IN_PARENS",
    message="There should be no spaces inside this paren.",
    hint="Remove the whitespace next to the paren.",
    severity="warning",
    category="lint/style",
)

LINT_STYLE_SPACE_AROUND_PAREN_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_STYLE_SPACE_AROUND_PAREN_STRING",
    message="There must be no space inside this paren with STRING expression.",
    hint="Write a lone string or template argument as `(value)`.",
    severity="warning",
    category="lint/style",
)
