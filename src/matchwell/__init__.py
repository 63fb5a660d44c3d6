"""Composable matchers with structured, indented mismatch explanations."""

from matchwell.assertions import AssertionFailure, assert_that, failure_report
from matchwell.matchers import (
    Matcher,
    anything,
    equal_to,
    has,
    is_variant,
)
from matchwell.results import Matched, MatchResult, Unmatched, matched, unmatched

__all__ = [
    "AssertionFailure",
    "MatchResult",
    "Matched",
    "Matcher",
    "Unmatched",
    "anything",
    "assert_that",
    "equal_to",
    "failure_report",
    "has",
    "is_variant",
    "matched",
    "unmatched",
]
