"""Ingredient canonicalization and naming utilities."""

from .canonical import PANTRY, canonical_key, is_pantry_token, same_combination
from .naming import FALLBACK_WORDS, fallback_name, ingredient_word

__all__ = [
    "PANTRY",
    "canonical_key",
    "is_pantry_token",
    "same_combination",
    "FALLBACK_WORDS",
    "fallback_name",
    "ingredient_word",
]
