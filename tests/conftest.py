"""Pytest configuration and shared helpers."""

import logging

import pytest

from matchwell.results import MatchResult, Unmatched


@pytest.fixture
def assert_unmatched():
    """Helper asserting that a result is a mismatch whose explanation renders as given."""

    def _check(result: MatchResult, expected_explanation: str) -> None:
        assert isinstance(result, Unmatched), f"expected unmatched, got {result!r}"
        assert result.explanation.render() == expected_explanation

    return _check


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers added to matchwell loggers so tests don't leak output."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("matchwell")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
