"""Paren spacing lint rules."""

from parenspace.lint.exceptions import ExceptionSet, resolve_exceptions
from parenspace.lint.options import ParenException, SpaceInParensOptions, SpacingPolicy
from parenspace.lint.rules import (
    LintConfidence,
    LintDomain,
    LintRule,
    SpaceInParensRule,
    StringParenUnit,
    default_lint_rules,
    validate_lint_rules,
)
from parenspace.lint.runner import run_lint
from parenspace.lint.templates import (
    TemplateIndex,
    TemplatePair,
    TemplatePiece,
    coordinate_template_pieces,
    locate_template_pieces,
)

__all__ = [
    "ExceptionSet",
    "LintConfidence",
    "LintDomain",
    "LintRule",
    "ParenException",
    "SpaceInParensOptions",
    "SpaceInParensRule",
    "SpacingPolicy",
    "StringParenUnit",
    "TemplateIndex",
    "TemplatePair",
    "TemplatePiece",
    "coordinate_template_pieces",
    "default_lint_rules",
    "locate_template_pieces",
    "resolve_exceptions",
    "run_lint",
    "validate_lint_rules",
]
