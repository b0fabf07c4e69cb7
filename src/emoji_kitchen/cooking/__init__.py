"""Heat policy and resolution of cooked combinations."""

from .heat import HeatBand, HeatLevel, HeatOverride, HeatReading, classify
from .outcome import BURNT_DISH, UNDERCOOKED_DISH, Outcome, OutcomeKind
from .resolve import fallback_dish, resolve

__all__ = [
    "HeatBand",
    "HeatLevel",
    "HeatOverride",
    "HeatReading",
    "classify",
    "BURNT_DISH",
    "UNDERCOOKED_DISH",
    "Outcome",
    "OutcomeKind",
    "fallback_dish",
    "resolve",
]
