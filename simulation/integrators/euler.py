from typing import Dict, Tuple

from .base import NumericalMethod
from .rounding import round4


class EulersMethod(NumericalMethod):
    """
    Explicit first-order Euler method:

        y_{i+1} = y_i + h * f(x_i, y_i)
        x_{i+1} = x_i + h

    The new y is rounded to 4 decimals before it is stored, so rounding
    error accumulates from step to step.
    """

    name = "Euler's Method"
    key = "euler"

    def step(self, x: float, y: float, h: float) -> Tuple[float, float, Dict[str, float]]:
        slope = self.diff_func(x, y)
        x_next = x + h
        y_next = round4(y + h * slope)
        return x_next, y_next, {"slope": round4(slope)}
