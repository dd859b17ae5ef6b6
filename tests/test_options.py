import pytest

from parenspace.lexer import TokenKind, token_from_host
from parenspace.lint import ParenException, SpaceInParensOptions, SpacingPolicy, resolve_exceptions


def test_empty_rule_options_use_never_policy() -> None:
    options = SpaceInParensOptions.from_rule_options([])

    assert options == SpaceInParensOptions(SpacingPolicy.NEVER, ())


def test_rule_options_with_exceptions() -> None:
    options = SpaceInParensOptions.from_rule_options(["always", {"exceptions": ["(STRING)", "{}", "(STRING)"]}])

    assert options.policy == SpacingPolicy.ALWAYS
    assert options.exceptions == (ParenException.STRING, ParenException.BRACES)


def test_rule_options_policy_only() -> None:
    assert SpaceInParensOptions.from_rule_options(["never"]).policy == SpacingPolicy.NEVER


@pytest.mark.parametrize(
    ("raw", "fragment"),
    [
        (["sometimes"], "Invalid spacing policy `sometimes`"),
        (["always", {"exceptions": ["<>"]}], "Invalid paren exception `<>`"),
        (["always", {"exceptions": "{}"}], "must be a list"),
        (["always", {"exeptions": []}], "Unknown rule option key(s): exeptions"),
        (["always", ["{}"]], "must be an object"),
        (["always", {}, {}], "at most 2 rule options"),
        ("always", "not a string"),
    ],
)
def test_invalid_rule_options_raise(raw: object, fragment: str) -> None:
    with pytest.raises(ValueError) as excinfo:
        SpaceInParensOptions.from_rule_options(raw)  # type: ignore[arg-type]

    assert fragment in str(excinfo.value)


def test_resolver_builds_punctuator_sets() -> None:
    exceptions = resolve_exceptions(
        (ParenException.BRACES, ParenException.BRACKETS, ParenException.PARENS, ParenException.STRING)
    )

    assert exceptions.openers == frozenset({"{", "[", "("})
    assert exceptions.closers == frozenset({"}", "]", ")"})
    assert exceptions.paren_string
    assert not exceptions.empty


def test_empty_exception_swaps_paren_sides() -> None:
    exceptions = resolve_exceptions((ParenException.EMPTY,))

    assert exceptions.openers == frozenset({")"})
    assert exceptions.closers == frozenset({"("})
    assert exceptions.empty
    assert not exceptions.paren_string


def test_no_exceptions_resolve_to_empty_sets() -> None:
    exceptions = resolve_exceptions(())

    assert exceptions.openers == frozenset()
    assert exceptions.closers == frozenset()


def test_exceptions_only_match_punctuators() -> None:
    exceptions = resolve_exceptions((ParenException.BRACES,))
    brace = token_from_host("Punctuator", "{", (0, 1), ((1, 0), (1, 1)))
    string = token_from_host("String", "{", (0, 1), ((1, 0), (1, 1)))

    assert brace.kind == TokenKind.PUNCTUATOR
    assert exceptions.is_opener_exception(brace)
    assert not exceptions.is_opener_exception(string)
    assert not exceptions.is_closer_exception(brace)
