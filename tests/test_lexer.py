from parenspace.lexer import Lexer, Token, TokenKind
from parenspace.text import Position


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def significant(text: str) -> list[Token]:
    return [token for token in lex(text) if not token.is_trivia and token.kind != TokenKind.EOF]


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in significant(text)]


def test_call_with_string_argument() -> None:
    tokens = significant("foo( 'a' )")

    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.PUNCTUATOR,
        TokenKind.STRING,
        TokenKind.PUNCTUATOR,
    ]
    assert [token.value for token in tokens] == ["foo", "(", "'a'", ")"]
    assert tokens[2].range.as_tuple() == (5, 8)


def test_lexer_is_lossless_and_ends_with_eof() -> None:
    source = "if (a) {\r\n  run(`x${ {k: 1}.k }y`, \"s\\\"q\"); // done\n}\n/* tail */"

    tokens = lex(source)

    assert "".join(token.value for token in tokens) == source
    assert tokens[-1].kind == TokenKind.EOF
    assert tokens[-1].range.is_empty()


def test_template_pieces_split_at_interpolations() -> None:
    assert kinds("`a${b}c${d}e`") == [
        TokenKind.TEMPLATE_OPEN,
        TokenKind.IDENTIFIER,
        TokenKind.TEMPLATE_MIDDLE,
        TokenKind.IDENTIFIER,
        TokenKind.TEMPLATE_CLOSE,
    ]


def test_nested_templates_close_innermost_first() -> None:
    tokens = significant("a(`x${ `y${z}w` }v`)")

    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.PUNCTUATOR,
        TokenKind.TEMPLATE_OPEN,
        TokenKind.TEMPLATE_OPEN,
        TokenKind.IDENTIFIER,
        TokenKind.TEMPLATE_CLOSE,
        TokenKind.TEMPLATE_CLOSE,
        TokenKind.PUNCTUATOR,
    ]
    assert tokens[5].value == "}w`"
    assert tokens[6].value == "}v`"


def test_object_literal_inside_interpolation_keeps_its_braces() -> None:
    tokens = significant("`${ {a: 1}.a }`")

    assert [token.kind for token in tokens] == [
        TokenKind.TEMPLATE_OPEN,
        TokenKind.PUNCTUATOR,
        TokenKind.IDENTIFIER,
        TokenKind.PUNCTUATOR,
        TokenKind.NUMERIC,
        TokenKind.PUNCTUATOR,
        TokenKind.PUNCTUATOR,
        TokenKind.IDENTIFIER,
        TokenKind.TEMPLATE_CLOSE,
    ]
    assert tokens[5].value == "}"
    assert tokens[8].value == "}`"


def test_escaped_backtick_and_dollar_stay_in_one_piece() -> None:
    tokens = significant("`a\\`b\\${c}`")

    assert [token.kind for token in tokens] == [TokenKind.TEMPLATE_COMPLETE]


def test_comments_are_tokens() -> None:
    assert kinds("a // c\n/* b */ d") == [
        TokenKind.IDENTIFIER,
        TokenKind.LINE_COMMENT,
        TokenKind.BLOCK_COMMENT,
        TokenKind.IDENTIFIER,
    ]


def test_punctuators_use_longest_match() -> None:
    tokens = significant("a === b ?. c => d...e")

    assert [token.value for token in tokens if token.kind == TokenKind.PUNCTUATOR] == ["===", "?.", "=>", "..."]


def test_numbers_and_identifiers() -> None:
    tokens = significant("$el _x 1.5e-3 .5 0x1F")

    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.NUMERIC,
        TokenKind.NUMERIC,
        TokenKind.NUMERIC,
    ]
    assert [token.value for token in tokens] == ["$el", "_x", "1.5e-3", ".5", "0x1F"]


def test_token_locations_are_line_and_column() -> None:
    tokens = significant("a\n  (b)")

    paren = tokens[1]
    assert paren.loc.start == Position(line=2, column=2)
    assert paren.loc.end == Position(line=2, column=3)


def test_unterminated_literals_report_diagnostics() -> None:
    for source, code in (
        ("'abc", "LEXER_UNTERMINATED_STRING"),
        ("`abc", "LEXER_UNTERMINATED_TEMPLATE"),
        ("`a${b", "LEXER_UNTERMINATED_TEMPLATE"),
        ("/* abc", "LEXER_UNTERMINATED_COMMENT"),
    ):
        lexer = Lexer(source)
        tokens = lexer.lex()

        assert [d.code for d in lexer.diagnostics] == [code], source
        assert "".join(token.value for token in tokens) == source


def test_string_stops_at_newline() -> None:
    lexer = Lexer("'abc\nd")
    tokens = [token for token in lexer.lex() if not token.is_trivia]

    assert tokens[0].value == "'abc"
    assert tokens[1].value == "d"
    assert lexer.diagnostics[0].range.as_tuple() == (0, 4)
