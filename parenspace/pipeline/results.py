"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from parenspace.diagnostics import Diagnostic
from parenspace.source import SourceCode


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running lint rules over one source."""

    source: SourceCode
    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of applying every lint fix to one source."""

    source: SourceCode
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
