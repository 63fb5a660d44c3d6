"""Outcomes of evaluating a matcher against a value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from matchwell.text_tree import ExprTree


@dataclass(frozen=True)
class Matched:
    @property
    def is_match(self) -> bool:
        return True


@dataclass(frozen=True)
class Unmatched:
    """A failed match.

    Attributes:
        explanation: Why the value did not match. Compared structurally, so
            two results are equal only if their trees have the same shape.
    """

    explanation: ExprTree

    @property
    def is_match(self) -> bool:
        return False


MatchResult = Union[Matched, Unmatched]


def matched() -> Matched:
    return Matched()


def unmatched(explanation: ExprTree) -> Unmatched:
    return Unmatched(explanation=explanation)
