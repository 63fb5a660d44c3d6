from __future__ import annotations

from typing import Any

from matchwell.matchers.base import Matcher
from matchwell.results import MatchResult, matched
from matchwell.text_tree import ExprTree, text


class AnythingMatcher(Matcher):
    def match_value(self, value: Any) -> MatchResult:
        return matched()

    def describe(self) -> ExprTree:
        return text("anything")


def anything() -> AnythingMatcher:
    return AnythingMatcher()
