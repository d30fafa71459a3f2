"""
Configuration & Defaults
========================
Central registry for the numerical constants and file names shared by the
engine, the console menu and the Streamlit app.

Exports:
    DECIMALS (int): Number of decimals every stored y value is rounded to.
    DEFAULT_PARAMETERS (dict): Initial point, target and step size used when
        the user does not provide any.
    STEP_DELAY_S (float): Cosmetic pause between printed steps [s].
    CSV_FILENAMES (dict): Default CSV file name per method key.
"""
from dataclasses import dataclass
from typing import Optional

DECIMALS: int = 4

DEFAULT_PARAMETERS = {
    "x0": 0.0,
    "y0": 1.0,
    "x_target": 0.2,
    "step_size": 0.1,
}

DEFAULT_EQUATION: str = "x_plus_y"

STEP_DELAY_S: float = 0.1

CSV_FILENAMES = {
    "euler": "euler_results.csv",
    "modified_euler": "modified_euler_results.csv",
    "rk2": "rk2_results.csv",
    "rk4": "rk4_results.csv",
    "adams_bashforth": "adams_bashforth_results.csv",
}

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"

# top-level packages whose loggers are configured by setup_logging
LOGGER_NAMESPACES = ("simulation", "analysis", "equations", "cli")


@dataclass
class RunSettings:
    """
    Options collected by the console menu for one run.

    Attributes:
        compare_exact (bool): Report exact values and errors next to each step.
        save_csv (bool): Write one CSV file per solved method.
        run_comparison (bool): Print the comparison table after solving.
        step_delay (float): Pause between printed steps [s], 0 disables it.
        output_dir (str): Directory CSV files are written to.
        equation (str): Key in the equation registry.
        log_file (Optional[str]): Optional log file path.
    """
    compare_exact: bool = False
    save_csv: bool = False
    run_comparison: bool = False
    step_delay: float = STEP_DELAY_S
    output_dir: str = "."
    equation: str = DEFAULT_EQUATION
    log_file: Optional[str] = None
