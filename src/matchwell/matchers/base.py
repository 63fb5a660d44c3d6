"""The capability every matcher implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from matchwell.results import MatchResult
from matchwell.text_tree import ExprTree


class Matcher(ABC):
    @abstractmethod
    def match_value(self, value: Any) -> MatchResult:
        """Evaluate *value*, explaining the mismatch when it does not match.

        Must not mutate the matcher; the same matcher may be evaluated any
        number of times.
        """

    @abstractmethod
    def describe(self) -> ExprTree:
        """Describe what a matching value looks like, independent of any value."""
