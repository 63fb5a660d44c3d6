"""Top-level assertion entry point."""

from __future__ import annotations

import logging
from typing import Any

from matchwell.matchers.base import Matcher
from matchwell.results import Unmatched
from matchwell.text_tree import ExprTree, lines, nested, text

logger = logging.getLogger(__name__)


class AssertionFailure(AssertionError):
    """Raised by :func:`assert_that` when a value does not match.

    Attributes:
        report: The full ``Expected: ... but: ...`` tree.
        explanation: The matcher's own mismatch explanation.
    """

    def __init__(self, report: ExprTree, explanation: ExprTree) -> None:
        super().__init__(report.render())
        self.report = report
        self.explanation = explanation


def failure_report(matcher: Matcher, explanation: ExprTree) -> ExprTree:
    return lines([
        text(""),
        nested(text("Expected"), matcher.describe()),
        nested(text("but"), explanation),
    ])


def assert_that(value: Any, matcher: Matcher) -> None:
    """Assert that *value* satisfies *matcher*.

    Raises:
        AssertionFailure: with the rendered failure report as its message.
    """
    result = matcher.match_value(value)
    logger.debug(f"{type(matcher).__name__} evaluated, matched={result.is_match}")

    if isinstance(result, Unmatched):
        report = failure_report(matcher, result.explanation)
        error = AssertionFailure(report, result.explanation)
        logger.info(f"Assertion failed:{error}")
        raise error
