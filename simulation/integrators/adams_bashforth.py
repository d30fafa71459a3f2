from collections import deque
import logging
from typing import Deque, Dict, Tuple

from simulation.params import ProblemParameters
from .base import NumericalMethod
from .rounding import round4
from .runge_kutta4 import RungeKutta4

logger = logging.getLogger(__name__)

# number of prior points the 4-step formula needs
WINDOW = 4


class AdamsBashforth(NumericalMethod):
    """
    Explicit 4-step Adams-Bashforth method.

    The multi-step formula needs four known points, so the first three
    steps are computed by an internal `RungeKutta4` solver (verbose off)
    over [x0, x0 + 3h]. Its points are copied in as indices 0..3, then for
    i = 4..steps:

        y_i = y_{i-1} + h * (55*f3 - 59*f2 + 37*f1 - 9*f0) / 24

    where f0..f3 are the derivatives at the four most recent points, f3
    being the newest. The window slides by one after every new point.

    When the whole problem needs fewer than three steps, the bootstrap only
    runs that many RK4 steps and the multi-step formula is never used.
    """

    name = "Adams-Bashforth Method"
    key = "adams_bashforth"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._window: Deque[float] = deque(maxlen=WINDOW)

    def _integrate(self, params: ProblemParameters) -> None:
        h = params.step_size
        n_bootstrap = min(WINDOW - 1, params.steps)

        self._bootstrap(params, n_bootstrap)
        if params.steps < WINDOW:
            return

        self._window.clear()
        for x, y in self.trajectory.points[-WINDOW:]:
            self._window.append(self.diff_func(x, y))

        x, y = self.trajectory.last
        self._advance(x, y, h, WINDOW, params.steps)

    def _bootstrap(self, params: ProblemParameters, n_steps: int) -> None:
        """Seed the first `n_steps` points with an internal RK4 solver."""
        rk4 = RungeKutta4(self.diff_func, self.exact_func, verbose=False)
        rk4.set_parameters(
            params.x0,
            params.y0,
            params.x0 + n_steps * params.step_size,
            params.step_size,
        )
        rk4.solve()
        logger.debug("%s: bootstrapped %d points with RK4", self.name, len(rk4.trajectory))

        # index 0 is our own seed already
        for record in rk4.step_log:
            self._record(
                record.step, record.x_prev, record.y_prev, record.x, record.y,
                record.terms, bootstrap=True,
            )

    def step(self, x: float, y: float, h: float) -> Tuple[float, float, Dict[str, float]]:
        f0, f1, f2, f3 = self._window
        x_next = x + h
        y_next = round4(y + h * (55.0 * f3 - 59.0 * f2 + 37.0 * f1 - 9.0 * f0) / 24.0)

        # oldest derivative drops out of the deque
        self._window.append(self.diff_func(x_next, y_next))

        terms = {"f0": round4(f0), "f1": round4(f1), "f2": round4(f2), "f3": round4(f3)}
        return x_next, y_next, terms
