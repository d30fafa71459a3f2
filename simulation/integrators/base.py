from abc import ABC, abstractmethod
import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from equations import DiffFunction, ExactFunction, differential_function, exact_solution
from simulation.errors import ExactSolutionUnavailable, NotSolvedError
from simulation.params import ProblemParameters
from simulation.results import StepRecord, Trajectory

logger = logging.getLogger(__name__)


class NumericalMethod(ABC):
    """
        Abstract base class for fixed-step ODE solvers.

        A method instance owns the problem parameters, the right-hand side
        f(x, y), an optional exact solution and the trajectory it computes.
        Subclasses implement `step`, which advances one increment of x;
        the sequencing, trajectory bookkeeping and per-step logging are
        handled here.

        Example usage:
            method = RungeKutta4()
            method.set_parameters(0.0, 1.0, 0.2, 0.1)
            method.solve()
            method.get_result()
    """

    name: str = "Numerical Method"
    key: str = "base"

    def __init__(
        self,
        diff_func: DiffFunction = differential_function,
        exact_func: Optional[ExactFunction] = exact_solution,
        verbose: bool = True,
        compare_exact: bool = False,
    ):
        """
        Args:
            diff_func: Right-hand side f(x, y) of dy/dx = f(x, y).
            exact_func: Exact solution y(x), or None if it is unknown.
            verbose: Whether the display layer prints every step.
            compare_exact: Whether exact values and errors are reported.
        """
        self.diff_func = diff_func
        self.exact_func = exact_func
        self.verbose = verbose
        self.compare_exact = False
        self.set_compare_exact(compare_exact)

        self.params: Optional[ProblemParameters] = None
        self.trajectory = Trajectory()
        self.step_log: List[StepRecord] = []

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_parameters(
        self,
        x0: float,
        y0: float,
        x_target: float,
        step_size: float,
    ) -> ProblemParameters:
        """
        Set the initial point, target and step size.

        Any previous trajectory is discarded and replaced by the seed
        point (x0, y0).

        Args:
            x0 (float): Initial x value.
            y0 (float): Initial y value.
            x_target (float): Target x value.
            step_size (float): Step size h.

        Returns:
            ProblemParameters: The validated parameters.

        Raises:
            InvalidInput: If h is zero, a value is not finite, or the
                target lies behind x0 for the given step direction.
        """
        params = ProblemParameters(x0, y0, x_target, step_size)
        self.params = params
        self.trajectory.reset(params.x0, params.y0)
        self.step_log = []
        logger.info(
            "%s configured: x0=%s, y0=%s, x_target=%s, h=%s, steps=%d",
            self.name, params.x0, params.y0, params.x_target, params.step_size, params.steps,
        )
        return params

    configure = set_parameters

    def set_verbose(self, is_verbose: bool) -> None:
        self.verbose = bool(is_verbose)

    def set_compare_exact(self, do_compare: bool) -> None:
        if do_compare and self.exact_func is None:
            raise ExactSolutionUnavailable(
                f"{self.name} has no exact solution to compare against."
            )
        self.compare_exact = bool(do_compare)

    @property
    def has_exact(self) -> bool:
        return self.exact_func is not None

    @property
    def steps(self) -> int:
        return self._require_parameters().steps

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def solve(self) -> None:
        """
        Integrate from x0 to the target, one step at a time.

        The trajectory is rebuilt from the seed point on every call, so
        solving twice with the same parameters gives the same points.

        Raises:
            NotSolvedError: If parameters were never set.
        """
        params = self._require_parameters()
        self.trajectory.reset(params.x0, params.y0)
        self.step_log = []

        self._integrate(params)

        x, y = self.trajectory.last
        logger.info("%s finished after %d steps: y(%.4f) = %.4f", self.name, params.steps, x, y)

    def _integrate(self, params: ProblemParameters) -> None:
        self._advance(params.x0, params.y0, params.step_size, 1, params.steps)

    def _advance(self, x: float, y: float, h: float, first: int, last: int) -> Tuple[float, float]:
        """Run `step` for point indices first..last, starting from (x, y)."""
        for index in range(first, last + 1):
            x_next, y_next, terms = self.step(x, y, h)
            self._record(index, x, y, x_next, y_next, terms)
            x, y = x_next, y_next
        return x, y

    def _record(
        self,
        index: int,
        x_prev: float,
        y_prev: float,
        x: float,
        y: float,
        terms: Dict[str, float],
        bootstrap: bool = False,
    ) -> None:
        self.trajectory.append(x, y)
        self.step_log.append(
            StepRecord(step=index, x=x, y=y, x_prev=x_prev, y_prev=y_prev,
                       terms=dict(terms), bootstrap=bootstrap)
        )
        logger.debug("%s step %d: x=%.4f, y=%.4f %s", self.name, index, x, y, terms)

    @abstractmethod
    def step(self, x: float, y: float, h: float) -> Tuple[float, float, Dict[str, float]]:
        """
        Advance the solution by one step.

        Args:
            x (float): Current abscissa x_i.
            y (float): Current stored value y_i.
            h (float): Step size.

        Returns:
            Tuple[float, float, Dict[str, float]]:
                - x_next (float): x_i + h.
                - y_next (float): New value, rounded to 4 decimals.
                - terms (Dict[str, float]): Intermediate quantities for display.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def get_method_name(self) -> str:
        return self.name

    def get_result(self) -> float:
        """
        Approximated y at the target x.

        Raises:
            NotSolvedError: If `solve()` has not run for the current parameters.
        """
        self._require_solved()
        return self.trajectory.last[1]

    def get_trajectory(self) -> Tuple[Tuple[float, float], ...]:
        return self.trajectory.points

    @property
    def x_values(self) -> np.ndarray:
        return self.trajectory.x

    @property
    def y_values(self) -> np.ndarray:
        return self.trajectory.y

    def exact_values(self) -> np.ndarray:
        """Exact solution evaluated at every trajectory abscissa."""
        if self.exact_func is None:
            raise ExactSolutionUnavailable(f"{self.name} has no exact solution.")
        return np.array([self.exact_func(x) for x in self.trajectory.x], dtype=float)

    def calculate_error(self) -> float:
        """
        Global truncation error: max |exact(x_i) - y_i| over all points.

        Raises:
            NotSolvedError: If the method has not been solved.
            ExactSolutionUnavailable: If no exact solution was supplied.
        """
        self._require_solved()
        errors = np.abs(self.exact_values() - self.trajectory.y)
        return float(np.max(errors))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_parameters(self) -> ProblemParameters:
        if self.params is None:
            raise NotSolvedError(f"{self.name}: parameters have not been set.")
        return self.params

    def _require_solved(self) -> None:
        params = self._require_parameters()
        if len(self.trajectory) == 1 and params.steps > 0:
            raise NotSolvedError(f"{self.name} has not been solved yet.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(params={self.params!r}, points={len(self.trajectory)})"
