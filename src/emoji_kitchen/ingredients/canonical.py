"""Order-independent identity for ingredient combinations."""

from typing import Sequence, Tuple

from emoji_kitchen.data import KITCHEN_DATA

# Fixed vocabulary the kitchen offers; the engine itself accepts any token.
PANTRY: Tuple[str, ...] = tuple(KITCHEN_DATA["pantry"])


def canonical_key(items: Sequence[str]) -> str:
    """Build the canonical key for an ingredient multiset.

    Tokens are sorted by code point and concatenated, so the key ignores the
    order of entry but keeps how many times each token was added.

    Args:
        items: Ingredient tokens in the order they were entered.

    Returns:
        The concatenated, sorted tokens.

    Examples:
        >>> canonical_key(["🧀", "🍞", "🍞"]) == canonical_key(["🍞", "🍞", "🧀"])
        True
        >>> canonical_key(["🥚"]) == canonical_key(["🥚", "🥚"])
        False
    """
    return "".join(sorted(items))


def same_combination(first: Sequence[str], second: Sequence[str]) -> bool:
    """Check whether two ingredient lists are the same combination."""
    return canonical_key(first) == canonical_key(second)


def is_pantry_token(token: str) -> bool:
    return token in PANTRY
