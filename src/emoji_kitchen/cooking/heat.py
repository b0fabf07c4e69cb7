"""Heat bands, mood and the heat levels that ruin a dish."""

import dataclasses
import enum
from typing import Optional

MIN_HEAT = 0
MAX_HEAT = 10
DEFAULT_HEAT = 5

# Display bands
LOW_BAND_MAX = 3
MEDIUM_BAND_MAX = 7

# Overrides, deliberately separate from the display bands
BURNT_MIN = 9
UNDERCOOKED_MAX = 1

# Mood indicator
FIERY_MIN = 9
SLEEPY_MAX = 2


class HeatBand(enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def label(self) -> str:
        return self.value


class HeatOverride(enum.Enum):
    """Heat levels that decide the outcome before any recipe is checked."""

    BURNT = "burnt"
    UNDERCOOKED = "undercooked"


@dataclasses.dataclass(frozen=True)
class HeatReading:
    heat: int
    band: HeatBand
    mood: str
    override: Optional[HeatOverride]

    @property
    def label(self) -> str:
        return self.band.label


def heat_band(heat: int) -> HeatBand:
    if heat <= LOW_BAND_MAX:
        return HeatBand.LOW
    if heat <= MEDIUM_BAND_MAX:
        return HeatBand.MEDIUM
    return HeatBand.HIGH


def heat_override(heat: int) -> Optional[HeatOverride]:
    """Return the override for a heat level, or None if cooking can proceed.

    Only heat strictly between 1 and 9 reaches recipe matching.
    """
    if heat >= BURNT_MIN:
        return HeatOverride.BURNT
    if heat <= UNDERCOOKED_MAX:
        return HeatOverride.UNDERCOOKED
    return None


def heat_mood(heat: int) -> str:
    if heat >= FIERY_MIN:
        return "🔥🔥🔥"
    if heat <= SLEEPY_MAX:
        return "💤"
    return "✨"


def classify(heat: int) -> HeatReading:
    """Classify a heat level for display and for the ruined-dish rules.

    Args:
        heat: Heat level, normally in [0, 10].

    Returns:
        A HeatReading with the band, mood indicator and any override.

    Examples:
        >>> classify(8).band, classify(8).override
        (<HeatBand.HIGH: 'High'>, None)
        >>> classify(9).override
        <HeatOverride.BURNT: 'burnt'>
    """
    heat = int(heat)
    return HeatReading(
        heat=heat,
        band=heat_band(heat),
        mood=heat_mood(heat),
        override=heat_override(heat),
    )


class HeatLevel:
    """A burner setting that always stays within [0, 10]."""

    def __init__(self, value: int = DEFAULT_HEAT):
        self._value = self._clamp(value)

    @staticmethod
    def _clamp(value: int) -> int:
        return max(MIN_HEAT, min(MAX_HEAT, int(value)))

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        self._value = self._clamp(self._value + 1)
        return self._value

    def decrement(self) -> int:
        self._value = self._clamp(self._value - 1)
        return self._value

    def reset(self) -> int:
        self._value = DEFAULT_HEAT
        return self._value

    def set(self, value: int) -> int:
        self._value = self._clamp(value)
        return self._value

    def reading(self) -> HeatReading:
        return classify(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"<HeatLevel({self._value})>"
