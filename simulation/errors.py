# simulation/errors.py


class ODESolverError(Exception):
    """Base class for every error raised by the solver packages."""


class InvalidInput(ODESolverError, ValueError):
    """Raised when problem parameters cannot define a forward integration."""


class NotSolvedError(ODESolverError, RuntimeError):
    """Raised when results are queried before `solve()` ran."""


class FileWriteError(ODESolverError, OSError):
    """Raised when a CSV destination cannot be opened or written."""


class ExactSolutionUnavailable(ODESolverError):
    """Raised when an error metric is requested without an exact solution."""
