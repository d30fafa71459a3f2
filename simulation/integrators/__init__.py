from .base import NumericalMethod
from .euler import EulersMethod
from .modified_euler import ModifiedEulersMethod
from .runge_kutta2 import RungeKutta2
from .runge_kutta4 import RungeKutta4
from .adams_bashforth import AdamsBashforth
from .registry import (
    METHOD_REGISTRY,
    MENU_CHOICES,
    ALL_METHODS_CHOICE,
    create_method,
    create_all_methods,
)
from .rounding import round4, round_half_away

__all__ = [
    "NumericalMethod",
    "EulersMethod",
    "ModifiedEulersMethod",
    "RungeKutta2",
    "RungeKutta4",
    "AdamsBashforth",
    "METHOD_REGISTRY",
    "MENU_CHOICES",
    "ALL_METHODS_CHOICE",
    "create_method",
    "create_all_methods",
    "round4",
    "round_half_away",
]
