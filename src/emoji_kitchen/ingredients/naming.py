"""Descriptive names for dishes that match no recipe."""

from typing import Dict, Sequence

from emoji_kitchen.data import KITCHEN_DATA

# Only a handful of tokens have words; everything else is used verbatim.
FALLBACK_WORDS: Dict[str, str] = dict(KITCHEN_DATA["fallback_words"])


def ingredient_word(token: str) -> str:
    """Return the short lowercase word for a token, or the token itself."""
    return FALLBACK_WORDS.get(token, token)


def fallback_name(items: Sequence[str], heat_label: str) -> str:
    """Generate the default name for an unmatched combination.

    Args:
        items: Ingredient tokens in the order they were entered.
        heat_label: Display label of the heat band, e.g. "Medium".

    Returns:
        The mapped words joined with " + ", followed by the heat.

    Examples:
        >>> fallback_name(["🐟"], "Medium")
        'fish on medium heat'
        >>> fallback_name(["🥚", "🍄"], "Low")
        'egg + 🍄 on low heat'
    """
    joined = " + ".join(ingredient_word(token) for token in items)
    return f"{joined} on {heat_label.lower()} heat"