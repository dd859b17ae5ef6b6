"""Diagnostics core types."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from parenspace.text import TextRange, TextSize

Severity = Literal["error", "warning"]


class FixKind(StrEnum):
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Fix:
    """Text edit attached to a diagnostic, in absolute source offsets.

    An insert has an empty range and non-empty text; a delete has empty text.
    """

    kind: FixKind
    range: TextRange
    text: str = ""

    @staticmethod
    def insert(offset: TextSize, text: str) -> "Fix":
        return Fix(FixKind.INSERT, TextRange.empty(offset), text)

    @staticmethod
    def delete(range: TextRange) -> "Fix":
        return Fix(FixKind.DELETE, range)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by lexers/linters/formatters."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    fix: Fix | None = None
