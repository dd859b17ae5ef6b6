"""Run result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from parenspace.pipeline.results import FormatRunResult, LintRunResult

if TYPE_CHECKING:
    from parenspace.lint.options import SpaceInParensOptions
    from parenspace.source import SourceCode


def run_lint(
    text: str,
    options: SpaceInParensOptions | None = None,
    *,
    source: SourceCode | None = None,
) -> LintRunResult:
    from parenspace.lint.runner import run_lint as _run_lint

    return _run_lint(text, options, source=source)


def run_format(
    text: str,
    options: SpaceInParensOptions | None = None,
    *,
    source: SourceCode | None = None,
) -> FormatRunResult:
    from parenspace.format.runner import run_format as _run_format

    return _run_format(text, options, source=source)


__all__ = [
    "FormatRunResult",
    "LintRunResult",
    "run_format",
    "run_lint",
]
