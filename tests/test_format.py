import pytest

from parenspace.diagnostics import Fix
from parenspace.format import apply_fixes, run_format
from parenspace.lint import SpaceInParensOptions, SpacingPolicy
from parenspace.text import TextRange, TextSize
from tests._shared_cases import ALWAYS_WITH_STRING


def test_apply_fixes_is_order_independent() -> None:
    fixes = [
        Fix.delete(TextRange(18, 19)),
        Fix.insert(TextSize(0), ">"),
        Fix.delete(TextRange(4, 5)),
    ]

    assert apply_fixes("foo( 'string only' )", fixes) == ">foo('string only')"


def test_apply_fixes_rejects_overlapping_ranges() -> None:
    with pytest.raises(ValueError, match="Overlapping fixes"):
        apply_fixes("abcdef", [Fix.delete(TextRange(1, 4)), Fix.delete(TextRange(3, 5))])


def test_apply_fixes_rejects_the_same_boundary_twice() -> None:
    with pytest.raises(ValueError, match="Overlapping fixes"):
        apply_fixes("ab", [Fix.insert(TextSize(1), " "), Fix.insert(TextSize(1), " ")])


def test_apply_fixes_rejects_ranges_past_the_end() -> None:
    with pytest.raises(ValueError, match="outside the text"):
        apply_fixes("ab", [Fix.delete(TextRange(1, 5))])


def test_adjacent_delete_and_insert_are_allowed() -> None:
    assert apply_fixes("a  b", [Fix.delete(TextRange(1, 3)), Fix.insert(TextSize(3), "-")]) == "a-b"


def test_run_format_pads_plain_arguments() -> None:
    result = run_format("foo(arg)", ALWAYS_WITH_STRING)

    assert result.formatted_text == "foo( arg )"
    assert result.changed
    assert len(result.diagnostics) == 2


def test_run_format_tightens_lone_strings() -> None:
    result = run_format("foo( 'string only' )", ALWAYS_WITH_STRING)

    assert result.formatted_text == "foo('string only')"


def test_run_format_leaves_clean_source_untouched() -> None:
    source = "foo(bar, baz);\n"

    result = run_format(source, SpaceInParensOptions(SpacingPolicy.NEVER))

    assert result.formatted_text == source
    assert not result.changed
    assert result.diagnostics == []


def test_run_format_handles_multiline_sources() -> None:
    source = "function f( a ) {\n  return g( a, `x${ h(a) }` );\n}\n"

    result = run_format(source, SpaceInParensOptions(SpacingPolicy.NEVER))

    assert result.formatted_text == "function f(a) {\n  return g(a, `x${ h(a) }`);\n}\n"
