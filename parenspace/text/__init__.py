"""Text offsets, ranges and line/column positions."""

from parenspace.text.text import (
    LineIndex,
    Position,
    SourceLocation,
    TextRange,
    TextSize,
)

__all__ = [
    "LineIndex",
    "Position",
    "SourceLocation",
    "TextRange",
    "TextSize",
]
