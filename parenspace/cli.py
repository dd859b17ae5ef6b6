"""Command-line entrypoint: lint (and optionally fix) files in place."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from parenspace.diagnostics import Diagnostic
from parenspace.format import run_format
from parenspace.lint import ParenException, SpaceInParensOptions, SpacingPolicy, run_lint
from parenspace.source import SourceCode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parenspace",
        description="Check (and fix) spacing just inside parentheses.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Source files to check.")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in SpacingPolicy],
        default=SpacingPolicy.NEVER.value,
        help="Require (always) or forbid (never) a space inside parens.",
    )
    parser.add_argument(
        "--exception",
        dest="exceptions",
        action="append",
        default=[],
        choices=[exception.value for exception in ParenException],
        help="Paren contents that invert the policy. Repeatable.",
    )
    parser.add_argument("--fix", action="store_true", help="Rewrite files with every fix applied.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = SpaceInParensOptions.of(args.policy, args.exceptions)

    remaining = 0
    for path in args.paths:
        text = path.read_text(encoding="utf-8")
        if args.fix:
            formatted = run_format(text, options)
            if formatted.changed:
                path.write_text(formatted.formatted_text, encoding="utf-8")
                logger.info("fixed %s", path)
            result = run_lint(formatted.formatted_text, options)
        else:
            result = run_lint(text, options)
        for diagnostic in result.diagnostics:
            print(format_diagnostic(path, result.source, diagnostic))
        remaining += len(result.diagnostics)

    return 1 if remaining else 0


def format_diagnostic(path: Path, source: SourceCode, diagnostic: Diagnostic) -> str:
    position = source.line_col(diagnostic.range.start)
    return f"{path}:{position.line}:{position.column + 1}: {diagnostic.code} {diagnostic.message}"
