import pytest

from emoji_kitchen.recipes import RecipeRegistry


@pytest.fixture
def registry():
    return RecipeRegistry()
