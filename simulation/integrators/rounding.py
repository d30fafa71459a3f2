# simulation/integrators/rounding.py

import math

from config import DECIMALS


def round_half_away(value: float, decimals: int = DECIMALS) -> float:
    """
    Round to `decimals` places with halves going away from zero.

    Unlike the built-in `round`, which rounds halves to even:
    round_half_away(2.5, 0) == 3.0.
    """
    scale = 10.0 ** decimals
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def round4(value: float) -> float:
    """Shorthand for the 4-decimal rounding applied to every stored y."""
    return round_half_away(value, 4)
