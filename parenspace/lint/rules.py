"""Lint rules and rule contracts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, Protocol, TypeAlias

from parenspace.diagnostics import Diagnostic
from parenspace.lexer import Token, TokenKind, is_closing_paren, is_opening_paren
from parenspace.lint.emit import (
    missing_space_after_opener,
    missing_space_before_closer,
    rejected_space,
    rejected_space_around_string,
)
from parenspace.lint.exceptions import ExceptionSet, resolve_exceptions
from parenspace.lint.options import SpaceInParensOptions, SpacingPolicy
from parenspace.lint.templates import TemplateIndex
from parenspace.source import SourceCode

logger = logging.getLogger(__name__)

LintDomain: TypeAlias = Literal["style", "heuristic"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]


class LintRule(Protocol):
    """Lint rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, source: SourceCode) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class StringParenUnit:
    """`(` + one string or whole template literal + `)`, as token indices."""

    open_index: int
    unit_start: int
    unit_end: int
    close_index: int


@dataclass(frozen=True, slots=True)
class _ParenPass:
    """Everything one run over one token stream needs; rebuilt per run."""

    source: SourceCode
    tokens: Sequence[Token]
    templates: TemplateIndex
    exceptions: ExceptionSet
    always: bool

    def should_opener_have_space(self, left: Token, right: Token) -> bool:
        if self.source.is_space_between(left, right):
            return False
        if not self.always or is_closing_paren(right):
            return False
        return not self.exceptions.is_opener_exception(right)

    def should_closer_have_space(self, left: Token, right: Token) -> bool:
        if is_opening_paren(left):
            return False
        if self.source.is_space_between(left, right):
            return False
        if not self.always:
            return False
        return not self.exceptions.is_closer_exception(left)

    def should_opener_reject_space(self, left: Token, right: Token) -> bool:
        if right.kind == TokenKind.LINE_COMMENT:
            return False
        if not self.source.is_same_line(left, right):
            return False
        if not self.source.is_space_between(left, right):
            return False
        if self.always:
            return self.exceptions.is_opener_exception(right)
        return not self.exceptions.is_opener_exception(right)

    def should_closer_reject_space(self, left: Token, right: Token) -> bool:
        if is_opening_paren(left):
            return False
        if not self.source.is_same_line(left, right):
            return False
        if not self.source.is_space_between(left, right):
            return False
        if self.always:
            return self.exceptions.is_closer_exception(left)
        return not self.exceptions.is_closer_exception(left)

    def logical_unit(self, index: int) -> tuple[int, int]:
        """First and last token index of the logical unit at `index`."""
        pair = self.templates.pair_at(index)
        if pair is None or pair.is_single_piece:
            return index, index
        return pair.start_index, pair.end_index

    def string_paren_unit(self, open_index: int) -> StringParenUnit | None:
        tokens = self.tokens
        unit_index = open_index + 1
        if unit_index >= len(tokens):
            return None
        unit = tokens[unit_index]
        if unit.kind != TokenKind.STRING and self.templates.pair_starting_at(unit_index) is None:
            return None
        unit_start, unit_end = self.logical_unit(unit_index)
        close_index = unit_end + 1
        if close_index >= len(tokens) or not is_closing_paren(tokens[close_index]):
            return None
        return StringParenUnit(open_index, unit_start, unit_end, close_index)


@dataclass(frozen=True, slots=True)
class SpaceInParensRule:
    """Enforces consistent spacing just inside `(` and `)`.

    With the `(STRING)` exception, a paren pair holding nothing but one string
    or template literal must not be padded; that pair is then skipped by the
    general check so its boundaries are never reported twice.
    """

    options: SpaceInParensOptions = field(default_factory=SpaceInParensOptions)
    code: str = "LINT_STYLE_SPACE_IN_PARENS"
    name: str = "styleSpaceInParens"
    category: str = "style"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, source: SourceCode) -> list[Diagnostic]:
        tokens = source.tokens_and_comments
        paren_pass = _ParenPass(
            source=source,
            tokens=tokens,
            templates=TemplateIndex.build(tokens),
            exceptions=resolve_exceptions(self.options.exceptions),
            always=self.options.policy == SpacingPolicy.ALWAYS,
        )

        diagnostics: list[Diagnostic] = []
        string_parens: set[int] = set()
        if paren_pass.exceptions.paren_string:
            for unit in find_string_paren_units(paren_pass):
                string_parens.update((unit.open_index, unit.close_index))
                diagnostics.extend(_check_string_paren_unit(paren_pass, unit))

        for index, token in enumerate(tokens):
            if is_within_string_paren_unit(index, string_parens):
                continue
            diagnostic = _check_paren(paren_pass, index, token)
            if diagnostic is not None:
                diagnostics.append(diagnostic)

        logger.debug("%s reported %d diagnostic(s) over %d tokens", self.name, len(diagnostics), len(tokens))
        return diagnostics


def find_string_paren_units(paren_pass: _ParenPass) -> list[StringParenUnit]:
    units: list[StringParenUnit] = []
    for index, token in enumerate(paren_pass.tokens):
        if not is_opening_paren(token):
            continue
        unit = paren_pass.string_paren_unit(index)
        if unit is not None:
            units.append(unit)
    return units


def is_within_string_paren_unit(index: int, string_parens: set[int]) -> bool:
    """Whether the paren at `index` was already checked as a `(STRING)` pair."""
    return index in string_parens


def _check_string_paren_unit(paren_pass: _ParenPass, unit: StringParenUnit) -> list[Diagnostic]:
    tokens = paren_pass.tokens
    source = paren_pass.source
    diagnostics: list[Diagnostic] = []
    boundaries = (
        (tokens[unit.open_index], tokens[unit.unit_start]),
        (tokens[unit.unit_end], tokens[unit.close_index]),
    )
    for left, right in boundaries:
        if source.is_same_line(left, right) and source.is_space_between(left, right):
            diagnostics.append(rejected_space_around_string(source, left, right))
    return diagnostics


def _check_paren(paren_pass: _ParenPass, index: int, token: Token) -> Diagnostic | None:
    tokens = paren_pass.tokens
    opening = is_opening_paren(token)
    closing = is_closing_paren(token)
    if not opening and not closing:
        return None

    next_token = tokens[index + 1] if index + 1 < len(tokens) else None
    prev_token = tokens[index - 1] if index > 0 else None

    if opening and next_token is not None and paren_pass.should_opener_have_space(token, next_token):
        return missing_space_after_opener(token)
    if closing and prev_token is not None and paren_pass.should_closer_have_space(prev_token, token):
        return missing_space_before_closer(token)
    if opening and next_token is not None and paren_pass.should_opener_reject_space(token, next_token):
        return rejected_space(paren_pass.source, token, next_token)
    if closing and prev_token is not None and paren_pass.should_closer_reject_space(prev_token, token):
        return rejected_space(paren_pass.source, prev_token, token)
    return None


def default_lint_rules(options: SpaceInParensOptions | None = None) -> tuple[LintRule, ...]:
    rules: list[LintRule] = [
        SpaceInParensRule(options=options if options is not None else SpaceInParensOptions()),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.category, rule.code, rule.name)))


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    allowed_domains = {"style", "heuristic"}
    allowed_confidence = {"policy", "heuristic"}
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected style/heuristic.")
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code.startswith("LINT_"):
            raise ValueError(f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix.")
