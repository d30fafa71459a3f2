from typing import Dict, Tuple

from .base import NumericalMethod
from .rounding import round4


class ModifiedEulersMethod(NumericalMethod):
    """
    Modified Euler (Heun) predictor-corrector method.

    Predictor:  y* = y_i + h * f(x_i, y_i)
    Corrector:  y_{i+1} = y_i + h/2 * (f(x_i, y_i) + f(x_{i+1}, y*))

    Only the corrector is stored; the predictor is kept in the step log.
    """

    name = "Modified Euler's Method"
    key = "modified_euler"

    def step(self, x: float, y: float, h: float) -> Tuple[float, float, Dict[str, float]]:
        k1 = self.diff_func(x, y)
        x_next = x + h
        y_predictor = y + h * k1

        k2 = self.diff_func(x_next, y_predictor)
        y_corrector = round4(y + h * 0.5 * (k1 + k2))

        return x_next, y_corrector, {"predictor": round4(y_predictor)}
