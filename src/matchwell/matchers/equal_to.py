"""Equality matcher."""

from __future__ import annotations

from typing import Any

from matchwell.matchers.base import Matcher
from matchwell.results import MatchResult, matched, unmatched
from matchwell.text_tree import ExprTree, concat, debug, text


class EqualToMatcher(Matcher):
    def __init__(self, value: Any) -> None:
        self.value = value

    def match_value(self, value: Any) -> MatchResult:
        if value == self.value:
            return matched()
        return unmatched(concat([text("was "), debug(value)]))

    def describe(self) -> ExprTree:
        return debug(self.value)


def equal_to(value: Any) -> EqualToMatcher:
    """Match values equal to *value*; mismatches read ``was <repr of actual>``."""
    return EqualToMatcher(value)
