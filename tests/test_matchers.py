"""Tests for the primitive matchers and the feature projection combinator."""

from dataclasses import dataclass

from matchwell.matchers import anything, equal_to, has
from matchwell.results import Matched, Unmatched, matched, unmatched
from matchwell.text_tree import concat, nested, text


@dataclass
class User:
    username: str
    age: int = 30


@dataclass
class Account:
    owner: User


# --- anything ---


def test_anything_matches_any_value():
    matcher = anything()

    assert matcher.match_value(4) == matched()
    assert matcher.match_value("hello") == matched()
    assert matcher.match_value(None) == matched()


def test_anything_description():
    assert anything().describe().render() == "anything"


# --- equal_to ---


def test_equal_to_matches_when_values_are_equal():
    assert equal_to(1).match_value(1) == Matched()


def test_equal_to_mismatch_explanation_contains_repr_of_actual(assert_unmatched):
    assert_unmatched(equal_to(1).match_value(2), "was 2")


def test_equal_to_mismatch_explanation_shape():
    result = equal_to(2).match_value(1)
    assert result == unmatched(concat([text("was "), text("1")]))


def test_equal_to_description_is_repr_of_expected():
    assert equal_to(1).describe().render() == "1"
    assert equal_to("bob").describe().render() == "'bob'"


def test_equal_to_can_be_evaluated_repeatedly(assert_unmatched):
    matcher = equal_to(3)

    assert matcher.match_value(3) == matched()
    assert_unmatched(matcher.match_value(4), "was 4")
    assert matcher.match_value(3) == matched()


def test_equal_to_multiline_repr_is_kept_whole(assert_unmatched):
    class Multi:
        def __eq__(self, other):
            return False

        def __repr__(self):
            return "Multi(\n  x=1\n)"

    assert_unmatched(equal_to(0).match_value(Multi()), "was Multi(\n  x=1\n)")


# --- results ---


def test_results_expose_is_match():
    assert matched().is_match is True
    assert unmatched(text("x")).is_match is False
    assert isinstance(unmatched(text("x")), Unmatched)


# --- has ---


def test_has_matches_when_feature_has_correct_value():
    matcher = has("username", lambda user: user.username, equal_to("bob"))

    assert matcher.match_value(User(username="bob")) == matched()


def test_has_mismatch_explanation_contains_mismatch_of_feature(assert_unmatched):
    matcher = has("username", lambda user: user.username, equal_to("bob"))

    result = matcher.match_value(User(username="bobbity"))

    assert_unmatched(result, "username mismatched:\n  was 'bobbity'")


def test_has_mismatch_wraps_sub_explanation_in_nested():
    matcher = has("age", lambda user: user.age, equal_to(40))

    result = matcher.match_value(User(username="bob", age=30))

    assert result == unmatched(
        nested(
            concat([text("age"), text(" mismatched")]),
            concat([text("was "), text("30")]),
        )
    )


def test_has_description_contains_description_of_feature():
    matcher = has("username", lambda user: user.username, equal_to("bob"))

    assert matcher.describe().render() == "username:\n  'bob'"


def test_nested_has_indents_once_per_level(assert_unmatched):
    matcher = has(
        "owner",
        lambda account: account.owner,
        has("username", lambda user: user.username, equal_to("bob")),
    )

    result = matcher.match_value(Account(owner=User(username="alice")))

    assert_unmatched(
        result, "owner mismatched:\n  username mismatched:\n    was 'alice'"
    )
    assert matcher.describe().render() == "owner:\n  username:\n    'bob'"
