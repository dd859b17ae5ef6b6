"""Apply diagnostic fixes to source text."""

from __future__ import annotations

from collections.abc import Iterable

from parenspace.diagnostics import Fix


def apply_fixes(text: str, fixes: Iterable[Fix]) -> str:
    """Apply non-overlapping fixes in one pass.

    Raises ValueError when two fixes overlap or when two inserts target the
    same offset, since the result would depend on application order.
    """
    ordered = sorted(fixes, key=lambda fix: fix.range.as_tuple())
    previous: Fix | None = None
    for fix in ordered:
        if fix.range.end.value > len(text):
            raise ValueError(f"Fix range {fix.range!r} is outside the text (length {len(text)})")
        if previous is not None and _overlaps(previous, fix):
            raise ValueError(f"Overlapping fixes at {previous.range!r} and {fix.range!r}")
        previous = fix

    parts: list[str] = []
    cursor = 0
    for fix in ordered:
        start, end = fix.range.as_tuple()
        parts.append(text[cursor:start])
        parts.append(fix.text)
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def _overlaps(first: Fix, second: Fix) -> bool:
    if second.range.start.value < first.range.end.value:
        return True
    return second.range.start == first.range.start and (first.range.is_empty() or second.range.is_empty())
