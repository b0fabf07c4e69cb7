import pytest

from emoji_kitchen import Kitchen
from emoji_kitchen.cooking import HeatBand, OutcomeKind
from emoji_kitchen.recipes import Cookware, RejectReason


@pytest.fixture
def kitchen(registry):
    return Kitchen(registry=registry)


def test_kitchen_defaults(kitchen):
    assert kitchen.selected is Cookware.PAN
    assert kitchen.heat.value == 5
    assert kitchen.items == []
    assert not kitchen.can_cook
    assert kitchen.last_outcome is None


def test_add_item_rejects_unknown_token(kitchen):
    assert kitchen.add_item("🥚")
    assert not kitchen.add_item("🦄")
    assert kitchen.items == ["🥚"]


def test_cookware_keep_separate_items(kitchen):
    kitchen.add_item("🥚")
    kitchen.select(Cookware.POT)
    kitchen.add_item("🐟")
    assert kitchen.items == ["🐟"]
    assert kitchen.items_in(Cookware.PAN) == ["🥚"]
    kitchen.select(Cookware.PAN)
    assert kitchen.items == ["🥚"]


def test_remove_item(kitchen):
    for token in ["🍞", "🧀", "🍞"]:
        kitchen.add_item(token)
    assert kitchen.remove_item(1) == "🧀"
    assert kitchen.remove_item(5) is None
    assert kitchen.items == ["🍞", "🍞"]


def test_cook_and_changes_clear_dish(kitchen):
    kitchen.add_item("🥚")
    outcome = kitchen.cook()
    assert outcome.kind is OutcomeKind.MATCHED
    assert kitchen.last_outcome is outcome
    kitchen.add_item("🥓")
    assert kitchen.last_outcome is None
    assert kitchen.cook().name == "Bacon & Eggs"
    kitchen.clear()
    assert kitchen.last_outcome is None
    assert kitchen.items == []


def test_cook_empty_is_invalid(kitchen):
    assert kitchen.cook().kind is OutcomeKind.INVALID_INPUT


def test_heat_controls(kitchen):
    kitchen.add_item("🥚")
    for _ in range(8):
        kitchen.increase_heat()
    assert kitchen.heat.value == 10
    assert kitchen.reading.band is HeatBand.HIGH
    assert kitchen.cook().kind is OutcomeKind.BURNT
    kitchen.reset_heat()
    for _ in range(8):
        kitchen.decrease_heat()
    assert kitchen.heat.value == 0
    assert kitchen.cook().kind is OutcomeKind.UNDERCOOKED


def test_save_custom_and_cook(kitchen):
    kitchen.select(Cookware.POT)
    kitchen.add_item("🐟")
    kitchen.add_item("🍋")
    assert kitchen.can_save("Lemon Fish")
    assert not kitchen.can_save("  ")
    result = kitchen.save_custom("Lemon Fish")
    assert result.accepted
    assert kitchen.cook().name == "Lemon Fish"


def test_save_custom_empty_cookware(kitchen):
    assert not kitchen.can_save("Nothing")
    result = kitchen.save_custom("Nothing")
    assert result.reason is RejectReason.NO_INGREDIENTS


def test_load_recipe(kitchen):
    kitchen.add_item("🥚")
    kitchen.select(Cookware.POT)
    kitchen.add_item("🐟")
    result = kitchen.save_custom("Fish Water")
    kitchen.select(Cookware.PAN)
    kitchen.cook()

    kitchen.load_recipe(result.recipe)
    assert kitchen.selected is Cookware.POT
    assert kitchen.items == ["🐟"]
    assert kitchen.items_in(Cookware.PAN) == ["🥚"]
    assert kitchen.last_outcome is None


def test_load_recipe_copies_items(kitchen):
    recipe = kitchen.registry.builtin_recipes[1]
    kitchen.load_recipe(recipe)
    kitchen.add_item("🧀")
    assert recipe.items == ("🍞", "🧀", "🍞")


def test_cooking_message(kitchen):
    assert kitchen.cooking_message == "♨️💥 Sizzle..."
    kitchen.select(Cookware.POT)
    assert kitchen.cooking_message == "💨🍲 Boiling..."
