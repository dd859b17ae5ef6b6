"""Lint runner over a shared source view."""

from __future__ import annotations

from collections.abc import Sequence

from parenspace.diagnostics import Diagnostic, sort_diagnostics
from parenspace.lint.options import SpaceInParensOptions
from parenspace.lint.rules import (
    LintRule,
    default_lint_rules,
    validate_lint_rules,
)
from parenspace.pipeline.results import LintRunResult
from parenspace.source import SourceCode


def run_lint(
    text: str,
    options: SpaceInParensOptions | None = None,
    *,
    source: SourceCode | None = None,
    rules: Sequence[LintRule] | None = None,
) -> LintRunResult:
    """Run lint diagnostics over one tokenized source."""
    resolved_source = resolve_source(text, source=source)
    if rules is not None and options is not None:
        raise ValueError("Pass either rules or options, not both")
    resolved_rules = tuple(rules) if rules is not None else default_lint_rules(options)
    validate_lint_rules(resolved_rules)

    diagnostics: list[Diagnostic] = list(resolved_source.diagnostics)
    for rule in resolved_rules:
        diagnostics.extend(rule.run(resolved_source))

    return LintRunResult(
        source=resolved_source,
        diagnostics=sort_diagnostics(diagnostics),
    )


def resolve_source(text: str, *, source: SourceCode | None) -> SourceCode:
    if source is not None:
        if source.text != text:
            raise ValueError("Provided source must wrap the same text")
        return source
    return SourceCode.from_text(text)
