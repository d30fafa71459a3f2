import numpy as np
import pytest

from equations import exact_solution
from simulation.errors import ExactSolutionUnavailable, InvalidInput, NotSolvedError
from simulation.integrators import (
    METHOD_REGISTRY,
    AdamsBashforth,
    EulersMethod,
    ModifiedEulersMethod,
    RungeKutta2,
    RungeKutta4,
)

ALL_METHODS = list(METHOD_REGISTRY.values())


def solved(method_cls, x0=0.0, y0=1.0, x_target=0.2, h=0.1, **kwargs):
    method = method_cls(verbose=False, **kwargs)
    method.set_parameters(x0, y0, x_target, h)
    method.solve()
    return method


@pytest.mark.parametrize("method_cls", ALL_METHODS)
@pytest.mark.parametrize("x0, y0, x_target, h", [
    (0.0, 1.0, 0.2, 0.1),
    (0.0, 1.0, 1.0, 0.1),
    (0.3, -2.0, 0.9, 0.05),
    (0.0, 1.0, 0.0, 0.1),
])
def test_seed_point_and_length(method_cls, x0, y0, x_target, h):
    method = solved(method_cls, x0, y0, x_target, h)
    trajectory = method.get_trajectory()

    assert trajectory[0] == (x0, y0)
    assert len(trajectory) == method.steps + 1


@pytest.mark.parametrize("method_cls", ALL_METHODS)
def test_seed_is_not_rounded(method_cls):
    method = solved(method_cls, 0.0, 1.234567, 0.3, 0.1)
    assert method.get_trajectory()[0] == (0.0, 1.234567)


@pytest.mark.parametrize("method_cls, expected_y1", [
    (EulersMethod, 1.1),
    (ModifiedEulersMethod, 1.11),
    (RungeKutta2, 1.11),
    (RungeKutta4, 1.1103),
])
def test_first_step_on_x_plus_y(method_cls, expected_y1):
    method = solved(method_cls, 0.0, 1.0, 0.1, 0.1)
    x1, y1 = method.get_trajectory()[1]

    assert x1 == pytest.approx(0.1)
    assert y1 == pytest.approx(expected_y1, abs=1e-12)
    assert method.get_result() == y1


def test_euler_accumulates_rounded_values():
    method = solved(EulersMethod, 0.0, 1.0, 0.3, 0.1)
    ys = [y for _, y in method.get_trajectory()]
    assert ys == pytest.approx([1.0, 1.1, 1.22, 1.362], abs=1e-12)


def test_rk4_second_step():
    method = solved(RungeKutta4, 0.0, 1.0, 0.2, 0.1)
    assert method.get_result() == pytest.approx(1.2428, abs=1e-12)


def test_rk4_beats_euler():
    euler = solved(EulersMethod, 0.0, 1.0, 0.2, 0.1)
    rk4 = solved(RungeKutta4, 0.0, 1.0, 0.2, 0.1)
    exact = exact_solution(0.2)

    assert abs(rk4.get_result() - exact) <= abs(euler.get_result() - exact)
    assert rk4.calculate_error() <= euler.calculate_error()


def test_accuracy_ordering_over_longer_interval():
    errors = {cls: solved(cls, 0.0, 1.0, 1.0, 0.1).calculate_error() for cls in ALL_METHODS}

    assert errors[ModifiedEulersMethod] < errors[EulersMethod]
    assert errors[RungeKutta2] < errors[EulersMethod]
    assert errors[RungeKutta4] < errors[RungeKutta2]
    assert errors[AdamsBashforth] < errors[ModifiedEulersMethod]


def test_stored_values_have_four_decimals():
    method = solved(RungeKutta4, 0.0, 1.0, 1.0, 0.1)
    for y in method.y_values[1:]:
        assert y * 10000 == pytest.approx(round(y * 10000), abs=1e-6)


def test_modified_euler_logs_predictor():
    method = solved(ModifiedEulersMethod, 0.0, 1.0, 0.1, 0.1)
    record = method.step_log[0]

    assert record.terms["predictor"] == pytest.approx(1.1)
    assert record.y == pytest.approx(1.11)
    # only the corrector is stored
    assert method.get_trajectory()[1][1] == pytest.approx(1.11)


def test_rk_terms_are_logged_rounded():
    method = solved(RungeKutta4, 0.0, 1.0, 0.1, 0.1)
    terms = method.step_log[0].terms

    assert terms["k1"] == pytest.approx(0.1)
    assert terms["k2"] == pytest.approx(0.11)
    assert terms["k3"] == pytest.approx(0.1105)
    assert terms["delta"] == pytest.approx(0.1103)


@pytest.mark.parametrize("method_cls", ALL_METHODS)
def test_solve_is_idempotent(method_cls):
    method = method_cls(verbose=False)
    method.set_parameters(0.0, 1.0, 0.7, 0.1)
    method.solve()
    first = method.get_trajectory()
    method.solve()

    assert method.get_trajectory() == first
    assert len(method.step_log) == method.steps


@pytest.mark.parametrize("method_cls", ALL_METHODS)
def test_reconfigure_resets_trajectory(method_cls):
    method = solved(method_cls, 0.0, 1.0, 0.5, 0.1)
    method.set_parameters(0.0, 2.0, 0.3, 0.1)

    assert method.get_trajectory() == ((0.0, 2.0),)
    with pytest.raises(NotSolvedError):
        method.get_result()

    method.solve()
    assert len(method.get_trajectory()) == 4


@pytest.mark.parametrize("method_cls", ALL_METHODS)
def test_results_before_solve_raise(method_cls):
    method = method_cls(verbose=False)
    with pytest.raises(NotSolvedError):
        method.get_result()

    method.set_parameters(0.0, 1.0, 0.2, 0.1)
    with pytest.raises(NotSolvedError):
        method.get_result()
    with pytest.raises(NotSolvedError):
        method.calculate_error()


def test_zero_steps_needs_no_solve():
    method = EulersMethod(verbose=False)
    method.set_parameters(0.5, 3.0, 0.5, 0.1)
    assert method.get_result() == 3.0


@pytest.mark.parametrize("method_cls", ALL_METHODS)
def test_invalid_parameters(method_cls):
    method = method_cls(verbose=False)
    with pytest.raises(InvalidInput):
        method.set_parameters(0.0, 1.0, 1.0, 0.0)
    with pytest.raises(InvalidInput):
        method.set_parameters(0.0, 1.0, -1.0, 0.1)
    # no partial state left behind
    assert method.params is None
    assert len(method.get_trajectory()) == 0


def test_negative_step_integrates_backwards():
    method = solved(EulersMethod, 0.0, 1.0, -0.2, -0.1)
    xs = [x for x, _ in method.get_trajectory()]

    assert xs == pytest.approx([0.0, -0.1, -0.2])
    assert method.get_trajectory()[1][1] == pytest.approx(0.9)


def test_calculate_error_is_maximum_over_points():
    """Interior point has the largest error, not the final one."""
    method = EulersMethod(
        diff_func=lambda x, y: 0.0,
        exact_func=lambda x: np.sin(np.pi * x),
        verbose=False,
    )
    method.set_parameters(0.0, 0.0, 1.0, 0.5)
    method.solve()

    final_error = abs(np.sin(np.pi * 1.0) - method.get_result())
    assert method.calculate_error() == pytest.approx(1.0)
    assert method.calculate_error() > final_error


def test_calculate_error_without_exact_solution():
    method = RungeKutta4(exact_func=None, verbose=False)
    method.set_parameters(0.0, 1.0, 0.2, 0.1)
    method.solve()

    assert not method.has_exact
    with pytest.raises(ExactSolutionUnavailable):
        method.calculate_error()
    with pytest.raises(ExactSolutionUnavailable):
        method.set_compare_exact(True)


def test_custom_differential_function():
    # dy/dx = 2, exact y = 2x + 1
    method = RungeKutta2(diff_func=lambda x, y: 2.0, exact_func=lambda x: 2.0 * x + 1.0, verbose=False)
    method.set_parameters(0.0, 1.0, 1.0, 0.25)
    method.solve()

    assert method.get_result() == pytest.approx(3.0)
    assert method.calculate_error() == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("method_cls, name", [
    (EulersMethod, "Euler's Method"),
    (ModifiedEulersMethod, "Modified Euler's Method"),
    (RungeKutta2, "2nd Order Runge-Kutta Method"),
    (RungeKutta4, "4th Order Runge-Kutta Method"),
    (AdamsBashforth, "Adams-Bashforth Method"),
])
def test_method_names(method_cls, name):
    assert method_cls().get_method_name() == name


def test_instances_do_not_share_trajectories():
    a = solved(EulersMethod, 0.0, 1.0, 0.3, 0.1)
    b = solved(EulersMethod, 0.0, 5.0, 0.1, 0.1)

    assert len(a.get_trajectory()) == 4
    assert len(b.get_trajectory()) == 2
    assert a.get_trajectory()[0] == (0.0, 1.0)


if __name__ == "__main__":
    pytest.main([__file__])
