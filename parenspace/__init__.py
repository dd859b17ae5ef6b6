"""Whitespace checks and fixes just inside parentheses."""

from parenspace.diagnostics import Diagnostic, Fix, FixKind
from parenspace.format import apply_fixes, run_format
from parenspace.lint import (
    ParenException,
    SpaceInParensOptions,
    SpaceInParensRule,
    SpacingPolicy,
    run_lint,
)
from parenspace.pipeline import FormatRunResult, LintRunResult
from parenspace.source import SourceCode

__all__ = [
    "Diagnostic",
    "Fix",
    "FixKind",
    "FormatRunResult",
    "LintRunResult",
    "ParenException",
    "SourceCode",
    "SpaceInParensOptions",
    "SpaceInParensRule",
    "SpacingPolicy",
    "apply_fixes",
    "run_format",
    "run_lint",
]
