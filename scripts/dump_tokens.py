#!/usr/bin/env python
import argparse
from pathlib import Path

from parenspace.lexer import Lexer, dump_tokens
from parenspace.lint import TemplateIndex
from parenspace.source import SourceCode


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump tokens and template-literal pairs for a source file.")
    parser.add_argument("path", type=Path)
    parser.add_argument("--trivia", action="store_true", help="Include whitespace and newline tokens.")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    lexer = Lexer(text)
    tokens = lexer.lex()
    source = SourceCode(text=text, tokens=tokens, diagnostics=list(lexer.diagnostics))

    shown = tokens if args.trivia else list(source.tokens_and_comments)
    dump_tokens(shown, source.diagnostics)

    print("\nTemplate literals:")
    for pair in TemplateIndex.build(source.tokens_and_comments).pairs:
        print(f"- tokens {pair.start_index}..{pair.end_index} single={pair.is_single_piece} start={pair.start_token.value!r}")


if __name__ == "__main__":
    main()
