# cli/display.py

import time
from typing import Callable

from simulation.integrators.rounding import round4

# labels of the intermediate terms, in print order
TERM_LABELS = {
    "slope": "Slope f(x, y)",
    "predictor": "Predictor (Euler): y*",
    "k1": "k1",
    "k2": "k2",
    "k3": "k3",
    "k4": "k4",
    "delta": "delta k",
    "f0": "f0",
    "f1": "f1",
    "f2": "f2",
    "f3": "f3",
}


def _exact_lines(method, x: float, y: float):
    exact = round4(method.exact_func(x))
    return [
        f"Exact solution: {exact:.4f}",
        f"Error: {abs(exact - y):.4f}",
    ]


def render_header(method) -> str:
    p = method.params
    lines = [
        f"\n=== {method.get_method_name()} ===",
        f"Initial values: x0 = {p.x0:.4f}, y0 = {p.y0:.4f}",
        f"Step size: h = {p.step_size:.4f}",
        f"Target x: {p.x_target:.4f}",
    ]
    return "\n".join(lines)


def render_step(method, record) -> str:
    lines = [f"\nStep {record.step}:", f"At x = {record.x_prev:.4f}, y = {record.y_prev:.4f}"]
    for key, label in TERM_LABELS.items():
        if key in record.terms:
            lines.append(f"{label} = {record.terms[key]:.4f}")
    lines.append(f"New y = {record.y:.4f} at x = {record.x:.4f}")
    if method.compare_exact:
        lines += _exact_lines(method, record.x, record.y)
    return "\n".join(lines)


def render_final(method) -> str:
    p = method.params
    y = method.get_result()
    lines = [f"\nFinal result at x = {p.x_target:.4f}: y = {y:.4f}"]
    if method.compare_exact:
        lines += _exact_lines(method, p.x_target, y)
        lines.append(f"Maximum error over all points: {method.calculate_error():.4f}")
    return "\n".join(lines)


def print_solution(method, delay: float = 0.0, out: Callable[[str], None] = print, sleep=time.sleep) -> None:
    """
    Print the step-by-step report of a solved method.

    Nothing is printed when the method is not verbose. `delay` only paces
    the output; the numbers are already computed.
    """
    if not method.verbose:
        return

    out(render_header(method))

    bootstrap = [r for r in method.step_log if r.bootstrap]
    if bootstrap:
        out(f"Using RK4 for the first {len(bootstrap)} steps")
        for i, (x, y) in enumerate(method.get_trajectory()[: len(bootstrap) + 1]):
            out(f"Initial point {i}: x = {x:.4f}, y = {y:.4f}")

    for record in method.step_log:
        if record.bootstrap:
            continue
        out(render_step(method, record))
        if delay > 0:
            sleep(delay)

    out(render_final(method))
