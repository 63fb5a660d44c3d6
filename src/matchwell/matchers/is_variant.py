"""Variant destructuring: check which case of a union a value is.

A selector decides whether a value is the expected variant and, if so, which
feature of it the sub-matchers see::

    is_variant(Circle, has("radius", lambda c: c.radius, equal_to(2)))
    is_variant(Shape.EMPTY)
    is_variant(Ok, equal_to(3), extract=lambda ok: ok.value)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from matchwell.matchers.base import Matcher
from matchwell.results import MatchResult, Unmatched, matched, unmatched
from matchwell.text_tree import ExprTree, text, unordered_list


@dataclass(frozen=True)
class Selected:
    """The feature extracted from a value that is the expected variant."""

    feature: Any


Selector = Callable[[Any], Optional[Selected]]


class VariantMatcher(Matcher):
    def __init__(self, name: str, select: Selector, matchers: Sequence[Matcher] = ()) -> None:
        self.name = name
        self.select = select
        self.matchers = tuple(matchers)

    def match_value(self, value: Any) -> MatchResult:
        selected = self.select(value)
        if selected is None:
            # Says nothing about which variant was found instead.
            return unmatched(text(""))

        for matcher in self.matchers:
            result = matcher.match_value(selected.feature)
            if isinstance(result, Unmatched):
                return result
        return matched()

    def describe(self) -> ExprTree:
        if not self.matchers:
            return text(self.name)
        return unordered_list(
            f"{self.name} with",
            [matcher.describe() for matcher in self.matchers],
        )


def _variant_name(variant: Any) -> str:
    if isinstance(variant, type):
        return variant.__name__
    return repr(variant)


def variant_selector(variant: Any, extract: Callable[[Any], Any] | None = None) -> Selector:
    """Build a selector for *variant*.

    A class selects instances of it; anything else (an enum member, a
    sentinel) selects only that very object. The selected feature is
    ``extract(value)``, or the value itself when no *extract* is given.
    """
    if isinstance(variant, type):
        def is_selected(value: Any) -> bool:
            return isinstance(value, variant)
    else:
        def is_selected(value: Any) -> bool:
            return value is variant

    def select(value: Any) -> Selected | None:
        if not is_selected(value):
            return None
        return Selected(extract(value) if extract is not None else value)

    return select


def is_variant(
    variant: Any,
    *matchers: Matcher,
    extract: Callable[[Any], Any] | None = None,
    name: str | None = None,
) -> VariantMatcher:
    """Match values that are *variant*, then check them with *matchers* in order.

    The first failing sub-matcher's result is returned as-is and later
    sub-matchers are not evaluated.
    """
    return VariantMatcher(
        name if name is not None else _variant_name(variant),
        variant_selector(variant, extract),
        matchers,
    )
