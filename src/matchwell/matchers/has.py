"""Feature projection: check one derived value of a larger value."""

from __future__ import annotations

from typing import Any, Callable

from matchwell.matchers.base import Matcher
from matchwell.results import MatchResult, Unmatched, unmatched
from matchwell.text_tree import ExprTree, concat, nested, text


class HasMatcher(Matcher):
    def __init__(self, name: str, extract: Callable[[Any], Any], matcher: Matcher) -> None:
        self.name = name
        self.extract = extract
        self.matcher = matcher

    def match_value(self, value: Any) -> MatchResult:
        result = self.matcher.match_value(self.extract(value))
        if isinstance(result, Unmatched):
            return unmatched(
                nested(
                    concat([text(self.name), text(" mismatched")]),
                    result.explanation,
                )
            )
        return result

    def describe(self) -> ExprTree:
        return nested(text(self.name), self.matcher.describe())


def has(name: str, extract: Callable[[Any], Any], matcher: Matcher) -> HasMatcher:
    """Match values whose feature ``extract(value)`` satisfies *matcher*.

    Each ``has`` layer wraps a mismatch in one more ``name mismatched:``
    heading, so failures deep inside a structure are indented once per level.
    """
    return HasMatcher(name, extract, matcher)
