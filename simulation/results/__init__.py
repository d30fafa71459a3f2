from .logs import StepRecord, Trajectory
from .export import save_to_csv, build_rows, csv_header, default_csv_path

__all__ = [
    "StepRecord",
    "Trajectory",
    "save_to_csv",
    "build_rows",
    "csv_header",
    "default_csv_path",
]
