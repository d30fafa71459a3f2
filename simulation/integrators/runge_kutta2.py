from typing import Dict, Tuple

from .base import NumericalMethod
from .rounding import round4


class RungeKutta2(NumericalMethod):
    """
    Second-order Runge-Kutta method:

        k1 = h * f(x, y)
        k2 = h * f(x + h, y + k1)
        delta = (k1 + k2) / 2

    k1, k2 and delta are each rounded to 4 decimals on their own; delta is
    added to y and the sum is rounded again.
    """

    name = "2nd Order Runge-Kutta Method"
    key = "rk2"

    def step(self, x: float, y: float, h: float) -> Tuple[float, float, Dict[str, float]]:
        k1 = h * self.diff_func(x, y)
        k2 = h * self.diff_func(x + h, y + k1)
        delta = round4(0.5 * (k1 + k2))

        y_next = round4(y + delta)
        return x + h, y_next, {"k1": round4(k1), "k2": round4(k2), "delta": delta}
