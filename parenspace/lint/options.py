"""Space-in-parens policy and configuration options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class SpacingPolicy(StrEnum):
    """Whether a paren must be padded with a space on its inner side."""

    ALWAYS = "always"
    NEVER = "never"


class ParenException(StrEnum):
    """Sole paren contents that invert the spacing policy."""

    BRACES = "{}"
    BRACKETS = "[]"
    PARENS = "()"
    EMPTY = "empty"
    STRING = "(STRING)"


@dataclass(frozen=True, slots=True)
class SpaceInParensOptions:
    """Rule options; mirrors the `["always", {"exceptions": [...]}]` option list."""

    policy: SpacingPolicy = SpacingPolicy.NEVER
    exceptions: tuple[ParenException, ...] = ()

    @staticmethod
    def of(policy: str, exceptions: Iterable[str] = ()) -> "SpaceInParensOptions":
        return SpaceInParensOptions(
            policy=_parse_policy(policy),
            exceptions=_parse_exceptions(exceptions),
        )

    @staticmethod
    def from_rule_options(options: Sequence[Any]) -> "SpaceInParensOptions":
        """Parse an ESLint-style option list.

        `[]` gives the defaults, `["always"]` sets the policy and an optional
        second element `{"exceptions": [...]}` lists exceptions.
        """
        if isinstance(options, str):
            raise ValueError("Rule options must be a list like `['always', {'exceptions': []}]`, not a string.")
        if len(options) > 2:
            raise ValueError(f"Expected at most 2 rule options, got {len(options)}.")
        if not options:
            return SpaceInParensOptions()

        policy = _parse_policy(options[0])
        if len(options) == 1:
            return SpaceInParensOptions(policy=policy)

        extra = options[1]
        if not isinstance(extra, Mapping):
            raise ValueError(f"Second rule option must be an object, got `{extra!r}`.")
        unknown = sorted(str(key) for key in extra if key != "exceptions")
        if unknown:
            raise ValueError(f"Unknown rule option key(s): {', '.join(unknown)}; expected `exceptions`.")
        raw_exceptions = extra.get("exceptions", ())
        if isinstance(raw_exceptions, str):
            raise ValueError("`exceptions` must be a list of strings.")
        return SpaceInParensOptions(policy=policy, exceptions=_parse_exceptions(raw_exceptions))


def _parse_policy(value: object) -> SpacingPolicy:
    try:
        return SpacingPolicy(value)
    except ValueError:
        allowed = "/".join(policy.value for policy in SpacingPolicy)
        raise ValueError(f"Invalid spacing policy `{value}`; expected {allowed}.") from None


def _parse_exceptions(values: Iterable[object]) -> tuple[ParenException, ...]:
    parsed: list[ParenException] = []
    for value in values:
        try:
            exception = ParenException(value)
        except ValueError:
            allowed = ", ".join(f"`{item.value}`" for item in ParenException)
            raise ValueError(f"Invalid paren exception `{value}`; expected one of {allowed}.") from None
        if exception not in parsed:
            parsed.append(exception)
    return tuple(parsed)
