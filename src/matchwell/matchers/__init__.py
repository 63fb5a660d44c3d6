"""Primitive matchers and combinators."""

from matchwell.matchers.anything import AnythingMatcher, anything
from matchwell.matchers.base import Matcher
from matchwell.matchers.equal_to import EqualToMatcher, equal_to
from matchwell.matchers.has import HasMatcher, has
from matchwell.matchers.is_variant import (
    Selected,
    VariantMatcher,
    is_variant,
    variant_selector,
)

__all__ = [
    "AnythingMatcher",
    "EqualToMatcher",
    "HasMatcher",
    "Matcher",
    "Selected",
    "VariantMatcher",
    "anything",
    "equal_to",
    "has",
    "is_variant",
    "variant_selector",
]
