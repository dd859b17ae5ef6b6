"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from parenspace.diagnostics.diagnostic import Diagnostic, Fix


def collect_fixes(diagnostics: Iterable[Diagnostic]) -> list[Fix]:
    return [d.fix for d in diagnostics if d.fix is not None]


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start.value,
            diagnostic.range.end.value,
            diagnostic.code,
            diagnostic.message,
        ),
    )
