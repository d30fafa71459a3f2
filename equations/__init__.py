# equations/__init__.py

from .library import (
    DiffFunction,
    ExactFunction,
    ODEProblem,
    differential_function,
    exact_solution,
)
from .registry import EQUATION_REGISTRY, get_problem

__all__ = [
    "DiffFunction",
    "ExactFunction",
    "ODEProblem",
    "differential_function",
    "exact_solution",
    "EQUATION_REGISTRY",
    "get_problem",
]
