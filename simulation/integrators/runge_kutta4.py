from typing import Dict, Tuple

from .base import NumericalMethod
from .rounding import round4


class RungeKutta4(NumericalMethod):
    """
    Classical fourth-order Runge-Kutta method:

        k1 = h * f(x, y)
        k2 = h * f(x + h/2, y + k1/2)
        k3 = h * f(x + h/2, y + k2/2)
        k4 = h * f(x + h, y + k3)
        delta = (k1 + 2*k2 + 2*k3 + k4) / 6

    Same rounding policy as `RungeKutta2`: every k-term and delta rounded
    independently, then y + delta rounded.
    """

    name = "4th Order Runge-Kutta Method"
    key = "rk4"

    def step(self, x: float, y: float, h: float) -> Tuple[float, float, Dict[str, float]]:
        k1 = h * self.diff_func(x, y)
        k2 = h * self.diff_func(x + 0.5 * h, y + 0.5 * k1)
        k3 = h * self.diff_func(x + 0.5 * h, y + 0.5 * k2)
        k4 = h * self.diff_func(x + h, y + k3)
        delta = round4((k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0)

        y_next = round4(y + delta)
        terms = {
            "k1": round4(k1),
            "k2": round4(k2),
            "k3": round4(k3),
            "k4": round4(k4),
            "delta": delta,
        }
        return x + h, y_next, terms
