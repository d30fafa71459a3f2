# simulation/results/export.py

import csv
import logging
import os
from typing import List

import numpy as np

from config import CSV_FILENAMES
from simulation.errors import FileWriteError

logger = logging.getLogger(__name__)


def build_rows(method) -> List[List[str]]:
    """
    Format the trajectory of a solved method as CSV rows.

    One row per point: step index (from 0), x and y, plus the exact value
    and absolute error when the method compares against the exact solution.
    Every value is written with exactly 4 decimals.
    """
    method.get_result()  # raises NotSolvedError for an unsolved method

    x = method.x_values
    y = method.y_values

    columns = [x, y]
    if method.compare_exact:
        exact = method.exact_values()
        columns += [exact, np.abs(exact - y)]

    rows = []
    for i, values in enumerate(zip(*columns)):
        rows.append([str(i)] + [f"{v:.4f}" for v in values])
    return rows


def csv_header(compare_exact: bool) -> List[str]:
    header = ["Step", "x", "y"]
    if compare_exact:
        header += ["exact", "error"]
    return header


def save_to_csv(method, path: str) -> str:
    """
    Write the trajectory of `method` to `path`.

    Args:
        method (NumericalMethod): A solved method instance.
        path (str): Destination file.

    Returns:
        str: The path written to.

    Raises:
        FileWriteError: If the file cannot be opened or written. The
            in-memory trajectory is left untouched.
    """
    rows = build_rows(method)
    try:
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f, lineterminator="\n")
            w.writerow(csv_header(method.compare_exact))
            w.writerows(rows)
    except OSError as exc:
        raise FileWriteError(f"Failed to open file: {path} ({exc.strerror or exc})") from exc

    logger.info("Results of %s saved to %s", method.get_method_name(), path)
    return path


def default_csv_path(method, output_dir: str = ".") -> str:
    """File name used by the console menu for a given method."""
    filename = CSV_FILENAMES.get(method.key, f"{method.key}_results.csv")
    return os.path.join(output_dir, filename)
