import pytest

from cli.display import print_solution
from simulation.integrators import AdamsBashforth, ModifiedEulersMethod, RungeKutta4


def run(method_cls, x_target=0.2, verbose=True, compare_exact=False):
    method = method_cls(verbose=verbose, compare_exact=compare_exact)
    method.set_parameters(0.0, 1.0, x_target, 0.1)
    method.solve()
    out = []
    sleeps = []
    print_solution(method, delay=0.1, out=out.append, sleep=sleeps.append)
    return "\n".join(out), sleeps


def test_quiet_method_prints_nothing():
    text, sleeps = run(RungeKutta4, verbose=False)
    assert text == ""
    assert sleeps == []


def test_rk4_report():
    text, sleeps = run(RungeKutta4)

    assert "=== 4th Order Runge-Kutta Method ===" in text
    assert "Initial values: x0 = 0.0000, y0 = 1.0000" in text
    assert "Step 1:" in text and "Step 2:" in text
    assert "k1 = 0.1000" in text
    assert "delta k = 0.1103" in text
    assert "New y = 1.1103 at x = 0.1000" in text
    assert "Final result at x = 0.2000: y = 1.2428" in text
    assert "Exact solution" not in text
    # one pause per printed step
    assert sleeps == [0.1, 0.1]


def test_predictor_is_reported():
    text, _ = run(ModifiedEulersMethod, x_target=0.1)
    assert "Predictor (Euler): y* = 1.1000" in text
    assert "New y = 1.1100 at x = 0.1000" in text


def test_exact_comparison_lines():
    text, _ = run(RungeKutta4, compare_exact=True)
    assert "Exact solution: 1.1103" in text
    assert "Exact solution: 1.2428" in text
    assert "Maximum error over all points:" in text


def test_adams_bashforth_lists_bootstrap_points():
    text, sleeps = run(AdamsBashforth, x_target=0.5)

    assert "Using RK4 for the first 3 steps" in text
    assert "Initial point 3: x = 0.3000" in text
    assert "Step 4:" in text and "Step 5:" in text
    assert "Step 1:" not in text
    assert len(sleeps) == 2


if __name__ == "__main__":
    pytest.main([__file__])
