from .library import (
    ODEProblem,
    differential_function,
    exact_solution,
    x_squared_plus_y,
    exact_x_squared_plus_y,
    x_times_y,
    exact_x_times_y,
    sin_x_plus_cos_y,
)

EQUATION_REGISTRY = {
    "x_plus_y": ODEProblem("dy/dx = x + y", differential_function, exact_solution),
    "x2_plus_y": ODEProblem("dy/dx = x^2 + y", x_squared_plus_y, exact_x_squared_plus_y),
    "x_times_y": ODEProblem("dy/dx = x*y", x_times_y, exact_x_times_y),
    "sin_x_plus_cos_y": ODEProblem("dy/dx = sin(x) + cos(y)", sin_x_plus_cos_y),
}


def get_problem(key: str) -> ODEProblem:
    """Look up a registered equation, listing the valid keys on failure."""
    try:
        return EQUATION_REGISTRY[key]
    except KeyError:
        valid = ", ".join(sorted(EQUATION_REGISTRY))
        raise KeyError(f"Unknown equation '{key}' (expected one of: {valid})") from None
