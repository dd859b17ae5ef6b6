"""Format runner: lint once, then apply every fix."""

from __future__ import annotations

import logging

from parenspace.diagnostics import collect_fixes
from parenspace.format.fixes import apply_fixes
from parenspace.lint.options import SpaceInParensOptions
from parenspace.lint.runner import run_lint
from parenspace.pipeline.results import FormatRunResult
from parenspace.source import SourceCode

logger = logging.getLogger(__name__)


def run_format(
    text: str,
    options: SpaceInParensOptions | None = None,
    *,
    source: SourceCode | None = None,
) -> FormatRunResult:
    """Run formatting from a single lint pass."""
    lint_result = run_lint(text, options, source=source)
    fixes = collect_fixes(lint_result.diagnostics)
    formatted_text = apply_fixes(lint_result.source.text, fixes)
    logger.debug("applied %d fix(es)", len(fixes))

    return FormatRunResult(
        source=lint_result.source,
        formatted_text=formatted_text,
        diagnostics=lint_result.diagnostics,
        changed=formatted_text != lint_result.source.text,
    )
