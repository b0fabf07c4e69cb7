import itertools

import pytest

from emoji_kitchen.ingredients.canonical import (
    PANTRY,
    canonical_key,
    is_pantry_token,
    same_combination,
)


@pytest.mark.parametrize(
    "items",
    [
        ["🍞", "🧀", "🍞"],
        ["🐟", "🧈", "🧄", "🌶️"],
        ["🥚"],
    ],
)
def test_canonical_key_ignores_order(items):
    """Test that every permutation of a combination has the same key."""
    keys = {canonical_key(list(p)) for p in itertools.permutations(items)}
    assert len(keys) == 1


@pytest.mark.parametrize(
    "first, second",
    [
        (["🥚"], ["🥚", "🥚"]),
        (["🍞", "🧀"], ["🍞", "🧀", "🍞"]),
        (["🍞", "🧀", "🧀"], ["🍞", "🍞", "🧀"]),
    ],
)
def test_canonical_key_counts_duplicates(first, second):
    """Test that different multiplicities give different keys."""
    assert canonical_key(first) != canonical_key(second)


def test_canonical_key_does_not_modify_input():
    items = ["🧀", "🍞", "🍞"]
    canonical_key(items)
    assert items == ["🧀", "🍞", "🍞"]


def test_canonical_key_empty():
    assert canonical_key([]) == ""


def test_same_combination():
    assert same_combination(["🍞", "🧀", "🍞"], ["🍞", "🍞", "🧀"])
    assert not same_combination(["🥚"], ["🥚", "🥚"])


def test_pantry():
    """Test the pantry vocabulary has every offered ingredient once."""
    assert len(PANTRY) == 36
    assert len(set(PANTRY)) == len(PANTRY)
    assert is_pantry_token("🌶️")
    assert not is_pantry_token("🦄")
