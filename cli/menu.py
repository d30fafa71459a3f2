# cli/menu.py

import argparse
import logging
import os
from dataclasses import replace
from typing import Callable, List, Optional

from analysis import compare_methods, format_comparison
from config import DEFAULT_EQUATION, STEP_DELAY_S, RunSettings
from equations import EQUATION_REGISTRY, get_problem
from logging_config import setup_logging
from simulation.errors import ODESolverError
from simulation.integrators import (
    ALL_METHODS_CHOICE,
    MENU_CHOICES,
    METHOD_REGISTRY,
    NumericalMethod,
    create_all_methods,
    create_method,
)
from simulation.results import default_csv_path, save_to_csv

from .console import ask_bool, ask_float, ask_int, clear_screen, prompt_to_continue
from .display import print_solution

logger = logging.getLogger(__name__)

BANNER = """===============================================
  Numerical Differential Equation Solver v2.0
==============================================="""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ode-solver",
        description="Solve dy/dx = f(x, y) with Euler, Heun, RK2, RK4 or Adams-Bashforth.",
    )
    ap.add_argument("--equation", choices=sorted(EQUATION_REGISTRY), default=DEFAULT_EQUATION,
                    help="Right-hand side to integrate")
    ap.add_argument("--no-delay", action="store_true", help="Print steps without pausing")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen on start")
    ap.add_argument("--output-dir", default=".", help="Directory for CSV files")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    ap.add_argument("--log-file", default=None, help="Optional log file")
    return ap


def print_menu(out: Callable[[str], None] = print) -> None:
    out("\nWhich method do you want to perform?")
    for number, key in MENU_CHOICES.items():
        out(f"{number}. {METHOD_REGISTRY[key].name}")
    out(f"{ALL_METHODS_CHOICE}. All Methods (for comparison)")


def solve_and_report(method: NumericalMethod, params: dict, settings: RunSettings) -> None:
    """Configure, solve, print and optionally save one method."""
    method.set_parameters(**params)
    method.set_compare_exact(settings.compare_exact)
    method.solve()
    print_solution(method, delay=settings.step_delay)

    if settings.save_csv:
        path = save_to_csv(method, default_csv_path(method, settings.output_dir))
        if method.verbose:
            print(f"Results saved to {path}")


def run_all(problem, params: dict, settings: RunSettings) -> List[NumericalMethod]:
    methods = create_all_methods(problem.f, problem.exact, verbose=False)
    for method in methods:
        solve_and_report(method, params, settings)
    return methods


def run(settings: RunSettings, input_fn: Callable = input) -> int:
    problem = get_problem(settings.equation)

    print(BANNER)
    print("\nThis program implements various numerical methods for solving differential equations.")
    print(f"The equation is: {problem.label}")

    print("\nEnter initial conditions and parameters:")
    params = dict(
        x0=ask_float("Initial x (x0) = ", input_fn),
        y0=ask_float("Initial y (y0) = ", input_fn),
        x_target=ask_float("Target x = ", input_fn),
        step_size=ask_float("Step size (h) = ", input_fn),
    )

    print("\nAdditional options:")
    settings.compare_exact = ask_bool("Compare with exact solution? (1 for yes, 0 for no): ", input_fn)
    settings.save_csv = ask_bool("Save results to CSV files? (1 for yes, 0 for no): ", input_fn)
    settings.run_comparison = ask_bool("Run comparison of all methods? (1 for yes, 0 for no): ", input_fn)

    if not problem.has_exact and (settings.compare_exact or settings.run_comparison):
        print(f"No exact solution is known for {problem.label}; exact comparison disabled.")
        settings.compare_exact = False
        settings.run_comparison = False

    print_menu()
    option = ask_int(f"Enter your choice (1-{ALL_METHODS_CHOICE}): ", input_fn)

    try:
        if option in MENU_CHOICES:
            method = create_method(MENU_CHOICES[option], problem.f, problem.exact)
            solve_and_report(method, params, settings)

            if settings.run_comparison:
                no_save = replace(settings, save_csv=False)
                print("\n" + format_comparison(compare_methods(run_all(problem, params, no_save))))

        elif option == ALL_METHODS_CHOICE:
            methods = run_all(problem, params, settings)
            if problem.has_exact:
                print("\n" + format_comparison(compare_methods(methods)))
            else:
                for method in methods:
                    print(f"{method.get_method_name():<30}{method.get_result():.4f}")

        else:
            print(f"\nInvalid option! Please choose a number between 1 and {ALL_METHODS_CHOICE}.")

    except ODESolverError as exc:
        logger.error("Run aborted: %s", exc)
        print(f"Error: {exc}")

    prompt_to_continue("Press Enter to exit...", input_fn)
    return 0


def main(argv: Optional[List[str]] = None, input_fn: Callable = input) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.output_dir != ".":
        os.makedirs(args.output_dir, exist_ok=True)
    if not args.no_clear:
        clear_screen()

    settings = RunSettings(
        step_delay=0.0 if args.no_delay else STEP_DELAY_S,
        output_dir=args.output_dir,
        equation=args.equation,
        log_file=args.log_file,
    )
    return run(settings, input_fn)


if __name__ == "__main__":
    raise SystemExit(main())
