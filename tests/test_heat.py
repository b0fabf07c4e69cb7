import pytest

from emoji_kitchen.cooking.heat import (
    HeatBand,
    HeatLevel,
    HeatOverride,
    classify,
    heat_band,
    heat_override,
)


@pytest.mark.parametrize(
    "heat, expected_band",
    [
        (0, HeatBand.LOW),
        (3, HeatBand.LOW),
        (4, HeatBand.MEDIUM),
        (7, HeatBand.MEDIUM),
        (8, HeatBand.HIGH),
        (10, HeatBand.HIGH),
    ],
)
def test_heat_band(heat, expected_band):
    assert heat_band(heat) is expected_band


@pytest.mark.parametrize(
    "heat, expected_override",
    [
        (0, HeatOverride.UNDERCOOKED),
        (1, HeatOverride.UNDERCOOKED),
        (2, None),
        (3, None),
        (8, None),
        (9, HeatOverride.BURNT),
        (10, HeatOverride.BURNT),
    ],
)
def test_heat_override(heat, expected_override):
    """Test the override thresholds differ from the display bands."""
    assert heat_override(heat) is expected_override


@pytest.mark.parametrize(
    "heat, expected_mood",
    [(0, "💤"), (2, "💤"), (3, "✨"), (8, "✨"), (9, "🔥🔥🔥")],
)
def test_classify_mood(heat, expected_mood):
    assert classify(heat).mood == expected_mood


def test_classify_high_band_without_override():
    reading = classify(8)
    assert reading.band is HeatBand.HIGH
    assert reading.label == "High"
    assert reading.override is None


def test_heat_level_defaults_to_five():
    assert HeatLevel().value == 5


def test_heat_level_clamps():
    """Test that heat never leaves [0, 10]."""
    heat = HeatLevel(10)
    assert heat.increment() == 10
    heat.set(0)
    assert heat.decrement() == 0
    assert HeatLevel(42).value == 10
    assert HeatLevel(-3).value == 0


def test_heat_level_steps_and_reset():
    heat = HeatLevel(5)
    assert heat.increment() == 6
    assert heat.decrement() == 5
    assert heat.decrement() == 4
    assert heat.reset() == 5
    assert int(heat) == 5
    assert heat.reading().band is HeatBand.MEDIUM
