# analysis/comparison.py

import math
from dataclasses import dataclass, asdict
from typing import Callable, List, Optional, Sequence

import pandas as pd

from simulation.errors import ExactSolutionUnavailable, InvalidInput
from simulation.integrators.rounding import round4


@dataclass(frozen=True)
class ComparisonRow:
    """One line of the method comparison table, all values rounded to 4 decimals."""
    method: str
    result: float
    exact: float
    abs_error: float


def compare_methods(
    methods: Sequence,
    exact_func: Optional[Callable[[float], float]] = None,
) -> List[ComparisonRow]:
    """
    Compare the final values of several solved methods with the exact solution.

    The exact solution is evaluated once, at the final x shared by every
    method. For each method the result, that exact value and their absolute
    difference are reported, each rounded to 4 decimals. The methods are
    only read, never modified.

    Parameters
    ----------
    methods : Sequence[NumericalMethod]
        Already solved method instances with the same target x.
    exact_func : Callable[[float], float], optional
        Exact solution y(x). Defaults to the exact solution bound to the
        first method.

    Returns
    -------
    List[ComparisonRow]
        One row per method, in the order given.

    Raises
    ------
    InvalidInput
        If no method is given or the methods end at different x.
    ExactSolutionUnavailable
        If no exact solution is available.
    NotSolvedError
        If one of the methods has not been solved.

    Example
    -------
    >>> rows = compare_methods([euler, rk4])
    >>> rows[1].abs_error
    0.0
    """
    if not methods:
        raise InvalidInput("No methods to compare.")

    if exact_func is None:
        exact_func = methods[0].exact_func
    if exact_func is None:
        raise ExactSolutionUnavailable("Comparison requires an exact solution.")

    results = [round4(method.get_result()) for method in methods]

    final_x = methods[0].trajectory.last[0]
    for method in methods[1:]:
        x_last = method.trajectory.last[0]
        if not math.isclose(x_last, final_x, rel_tol=1e-9, abs_tol=1e-12):
            raise InvalidInput(
                f"{method.get_method_name()} ends at x = {x_last}, expected {final_x}."
            )

    exact = round4(exact_func(final_x))

    rows = []
    for method, result in zip(methods, results):
        rows.append(
            ComparisonRow(
                method=method.get_method_name(),
                result=result,
                exact=exact,
                abs_error=round4(abs(exact - result)),
            )
        )
    return rows


def comparison_table(methods: Sequence, exact_func=None) -> pd.DataFrame:
    """Comparison rows as a DataFrame indexed by method name."""
    rows = compare_methods(methods, exact_func)
    return pd.DataFrame([asdict(r) for r in rows]).set_index("method")


def format_comparison(rows: Sequence[ComparisonRow]) -> str:
    """Fixed-width text table used by the console menu."""
    lines = [
        "=== Comparison of All Methods ===",
        f"{'Method':<30}{'Result':<25}{'Exact Solution':<25}{'Absolute Error':<25}",
        "-" * 105,
    ]
    for r in rows:
        lines.append(f"{r.method:<30}{r.result:<25.4f}{r.exact:<25.4f}{r.abs_error:<25.4f}")
    return "\n".join(lines)
