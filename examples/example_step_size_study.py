# examples/example_step_size_study.py
# Global error against step size for every method, on dy/dx = x*y.

import numpy as np
import matplotlib.pyplot as plt

from equations import get_problem
from simulation.integrators import create_all_methods

problem = get_problem("x_times_y")
step_sizes = [0.2, 0.1, 0.05, 0.025]

errors = {}
for h in step_sizes:
    for method in create_all_methods(problem.f, problem.exact, verbose=False):
        method.set_parameters(0.0, 1.0, 1.0, h)
        method.solve()
        errors.setdefault(method.get_method_name(), []).append(method.calculate_error())

plt.figure(figsize=(8, 6))
for name, errs in errors.items():
    plt.loglog(step_sizes, errs, "o-", label=name)

# 4-decimal storage puts a floor on the reachable error
plt.axhline(0.5e-4, color="gray", ls=":", label="rounding floor")

plt.xlabel("step size h")
plt.ylabel("max |exact - y|")
plt.title(problem.label)
plt.grid(True, which="both")
plt.legend()
plt.show()

print({name: np.round(errs, 4).tolist() for name, errs in errors.items()})
