# examples/example_compare_methods.py

import numpy as np
import matplotlib.pyplot as plt

from analysis import compare_methods, format_comparison
from equations import exact_solution
from simulation.integrators import create_all_methods

# ---- Problem: dy/dx = x + y, y(0) = 1, integrate to x = 1 ----
x0, y0 = 0.0, 1.0
x_target = 1.0
h = 0.1

methods = create_all_methods(verbose=False)
for method in methods:
    method.set_parameters(x0, y0, x_target, h)
    method.solve()

print(format_comparison(compare_methods(methods)))
print()
for method in methods:
    print(f"{method.get_method_name():<30} max error = {method.calculate_error():.4f}")

# ---------------------------------------------------------
# ---- Plots ----
# ---------------------------------------------------------
x_fine = np.linspace(x0, x_target, 200)

fig, (ax_y, ax_err) = plt.subplots(1, 2, figsize=(12, 5))

ax_y.plot(x_fine, exact_solution(x_fine), "k", lw=3, alpha=0.3, label="Exact")
for method in methods:
    ax_y.plot(method.x_values, method.y_values, "o--", ms=4, label=method.get_method_name())
    ax_err.semilogy(
        method.x_values[1:],
        np.abs(method.exact_values() - method.y_values)[1:],
        label=method.get_method_name(),
    )

ax_y.set_xlabel("x")
ax_y.set_ylabel("y")
ax_y.set_title("dy/dx = x + y")
ax_y.grid(True)
ax_y.legend()

ax_err.set_xlabel("x")
ax_err.set_ylabel("|exact - y|")
ax_err.set_title("Absolute error")
ax_err.grid(True)

plt.tight_layout()
plt.show()
