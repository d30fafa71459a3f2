# equations/library.py

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

DiffFunction = Callable[[float, float], float]
ExactFunction = Callable[[float], float]


def differential_function(x: float, y: float) -> float:
    """Default right-hand side: dy/dx = x + y."""
    return x + y


def exact_solution(x: float) -> float:
    """Closed form of dy/dx = x + y with y(0) = 1: y = 2e^x - x - 1."""
    return 2.0 * np.exp(x) - x - 1.0


def x_squared_plus_y(x: float, y: float) -> float:
    return x * x + y


def exact_x_squared_plus_y(x: float) -> float:
    # y(0) = 1
    return 3.0 * np.exp(x) - x * x - 2.0 * x - 2.0


def x_times_y(x: float, y: float) -> float:
    return x * y


def exact_x_times_y(x: float) -> float:
    # y(0) = 1
    return np.exp(0.5 * x * x)


def sin_x_plus_cos_y(x: float, y: float) -> float:
    return np.sin(x) + np.cos(y)


@dataclass(frozen=True)
class ODEProblem:
    """
    A first-order equation dy/dx = f(x, y) together with its closed form.

    Attributes:
        label (str): Human readable form of the equation.
        f (DiffFunction): Right-hand side f(x, y).
        exact (Optional[ExactFunction]): Exact solution y(x) for the
            reference initial condition, None when no closed form is known.
        reference_initial (tuple): (x0, y0) the exact solution refers to.
    """
    label: str
    f: DiffFunction
    exact: Optional[ExactFunction] = None
    reference_initial: tuple = (0.0, 1.0)

    @property
    def has_exact(self) -> bool:
        return self.exact is not None
