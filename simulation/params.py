# simulation/params.py

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Dict

from simulation.errors import InvalidInput


def compute_steps(x0: float, x_target: float, step_size: float) -> int:
    """
    Number of fixed steps needed to go from x0 to x_target.

    The ratio (x_target - x0) / h is rounded to the nearest integer, halves
    going away from zero, so that 0.2 / 0.1 = 2.0000000000000004 gives 2.

    Raises:
        InvalidInput: If the step size is zero.
    """
    if step_size == 0:
        raise InvalidInput("Step size h must be non-zero.")
    ratio = (x_target - x0) / step_size
    return int(math.copysign(math.floor(abs(ratio) + 0.5), ratio))


@dataclass(frozen=True)
class ProblemParameters:
    """
    Immutable description of one integration problem.

    Attributes:
        x0 (float): Initial abscissa.
        y0 (float): Initial value y(x0).
        x_target (float): Abscissa at which integration stops.
        step_size (float): Fixed increment h.
    """
    x0: float
    y0: float
    x_target: float
    step_size: float

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, numbers.Real) or isinstance(value, bool):
                raise InvalidInput(f"{f.name} must be a number, got {value!r}.")
            if not math.isfinite(value):
                raise InvalidInput(f"{f.name} must be finite, got {value!r}.")

        steps = compute_steps(self.x0, self.x_target, self.step_size)
        if steps < 0:
            raise InvalidInput(
                f"Target x = {self.x_target} cannot be reached from x0 = {self.x0} "
                f"with step size h = {self.step_size} (negative step count {steps})."
            )

    @property
    def steps(self) -> int:
        return compute_steps(self.x0, self.x_target, self.step_size)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProblemParameters":
        """
        Build parameters from a mapping with keys x0, y0, x_target, step_size.

        Raises:
            InvalidInput: If keys are missing or values are invalid.
        """
        required = [f.name for f in fields(cls)]
        missing = [key for key in required if key not in data]
        if missing:
            raise InvalidInput(f"Missing keys: {', '.join(missing)}")
        return cls(**{key: data[key] for key in required})

    def to_dict(self) -> dict:
        return dict(x0=self.x0, y0=self.y0, x_target=self.x_target, step_size=self.step_size)
