from parenspace.lexer import TokenKind, classify_template_text, kind_from_host, tokens_from_host
from parenspace.lint import SpaceInParensOptions, SpaceInParensRule, SpacingPolicy
from parenspace.pipeline import run_format
from parenspace.source import SourceCode
from tests._shared_cases import ALWAYS_WITH_STRING, REJECTED, STRING


def _record(type_name: str, value: str, start: int, end: int) -> dict[str, object]:
    return {
        "type": type_name,
        "value": value,
        "range": [start, end],
        "loc": {"start": {"line": 1, "column": start}, "end": {"line": 1, "column": end}},
    }


def test_template_text_classification() -> None:
    assert classify_template_text("`plain`") == TokenKind.TEMPLATE_COMPLETE
    assert classify_template_text("`a${") == TokenKind.TEMPLATE_OPEN
    assert classify_template_text("}b${") == TokenKind.TEMPLATE_MIDDLE
    assert classify_template_text("}c`") == TokenKind.TEMPLATE_CLOSE
    assert classify_template_text("`${") == TokenKind.TEMPLATE_OPEN


def test_host_type_names_map_to_closed_kinds() -> None:
    assert kind_from_host("Punctuator", "(") == TokenKind.PUNCTUATOR
    assert kind_from_host("Line", " note") == TokenKind.LINE_COMMENT
    assert kind_from_host("Block", " note ") == TokenKind.BLOCK_COMMENT
    assert kind_from_host("Keyword", "return") == TokenKind.IDENTIFIER
    assert kind_from_host("Template", "}x`") == TokenKind.TEMPLATE_CLOSE
    assert kind_from_host("RegularExpression", "/a/") == TokenKind.OTHER


def test_rule_runs_over_host_supplied_tokens() -> None:
    text = "foo( `id${ n }` )"
    tokens = tokens_from_host(
        [
            _record("Identifier", "foo", 0, 3),
            _record("Punctuator", "(", 3, 4),
            _record("Template", "`id${", 5, 10),
            _record("Identifier", "n", 11, 12),
            _record("Template", "}`", 13, 15),
            _record("Punctuator", ")", 16, 17),
        ]
    )
    source = SourceCode(text=text, tokens=tokens)

    diagnostics = SpaceInParensRule(options=ALWAYS_WITH_STRING).run(source)

    assert [d.message for d in diagnostics] == [STRING, STRING]
    assert [d.range.as_tuple() for d in diagnostics] == [(4, 5), (15, 16)]


def test_whitespace_is_read_from_text_not_token_adjacency() -> None:
    # The host left the comment out of the stream; its text still sits between the tokens.
    text = "f(/**/a)"
    tokens = tokens_from_host(
        [
            _record("Identifier", "f", 0, 1),
            _record("Punctuator", "(", 1, 2),
            _record("Identifier", "a", 6, 7),
            _record("Punctuator", ")", 7, 8),
        ]
    )
    source = SourceCode(text=text, tokens=tokens)

    assert not source.is_space_between(tokens[1], tokens[2])
    assert SourceCode(text="f(/* */a)", tokens=tokens).is_space_between(tokens[1], tokens[2])


def test_gap_holding_a_dropped_comment_is_reported_without_a_fix() -> None:
    text = "f( /*keep*/a)"
    tokens = tokens_from_host(
        [
            _record("Identifier", "f", 0, 1),
            _record("Punctuator", "(", 1, 2),
            _record("Identifier", "a", 11, 12),
            _record("Punctuator", ")", 12, 13),
        ]
    )
    source = SourceCode(text=text, tokens=tokens)
    options = SpaceInParensOptions(SpacingPolicy.NEVER)

    diagnostics = SpaceInParensRule(options=options).run(source)

    assert [d.message for d in diagnostics] == [REJECTED]
    assert diagnostics[0].range.as_tuple() == (2, 11)
    assert diagnostics[0].fix is None
    assert run_format(text, options, source=source).formatted_text == text
