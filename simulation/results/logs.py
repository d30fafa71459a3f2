from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import numpy as np


@dataclass
class StepRecord:
    """
    Diagnostics logged for one step of a stepping algorithm.

    Only the fields a method actually computes are filled, the display
    layer prints whatever is present.

    Attributes:
        step (int): 1-based step index (the point index it produced).
        x (float): Abscissa of the new point.
        y (float): Stored (rounded) value of the new point.
        x_prev (float): Abscissa the step started from.
        y_prev (float): Value the step started from.
        terms (Dict[str, float]): Intermediate quantities, rounded to 4
            decimals for display (e.g. "slope", "predictor", "k1".."k4",
            "delta").
        bootstrap (bool): True for points produced by a bootstrap method.
    """
    step: int
    x: float
    y: float
    x_prev: float
    y_prev: float
    terms: Dict[str, float] = field(default_factory=dict)
    bootstrap: bool = False


class Trajectory:
    """
    Ordered (x, y) sample points of one solution.

    Index 0 is the seed point (x0, y0). Points are only ever appended, and
    `reset` starts over from a new seed.
    """

    def __init__(self, x0: Optional[float] = None, y0: Optional[float] = None):
        self._x: List[float] = []
        self._y: List[float] = []
        if x0 is not None and y0 is not None:
            self.reset(x0, y0)

    def reset(self, x0: float, y0: float) -> None:
        self._x = [x0]
        self._y = [y0]

    def append(self, x: float, y: float) -> None:
        self._x.append(x)
        self._y.append(y)

    def extend(self, points) -> None:
        for x, y in points:
            self.append(x, y)

    def __len__(self) -> int:
        return len(self._x)

    def __getitem__(self, index: int) -> Tuple[float, float]:
        return self._x[index], self._y[index]

    def __iter__(self):
        return iter(zip(self._x, self._y))

    @property
    def points(self) -> Tuple[Tuple[float, float], ...]:
        """Read-only copy of the points as (x, y) pairs."""
        return tuple(zip(self._x, self._y))

    @property
    def x(self) -> np.ndarray:
        return np.array(self._x, dtype=float)

    @property
    def y(self) -> np.ndarray:
        return np.array(self._y, dtype=float)

    @property
    def last(self) -> Tuple[float, float]:
        return self._x[-1], self._y[-1]
