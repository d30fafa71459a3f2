from .menu import main, run

__all__ = ["main", "run"]
