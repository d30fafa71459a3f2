# cli/console.py

import os
from typing import Callable, Optional


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def prompt_to_continue(message: str = "Press Enter to continue...", input_fn: Callable = input) -> None:
    try:
        input_fn(f"\n{message}")
    except EOFError:
        pass


def ask_float(prompt: str, input_fn: Callable = input, default: Optional[float] = None) -> float:
    """Prompt until the answer parses as a float; empty input takes the default."""
    while True:
        answer = input_fn(prompt).strip()
        if not answer and default is not None:
            return default
        try:
            return float(answer)
        except ValueError:
            print(f"'{answer}' is not a number, please try again.")


def ask_bool(prompt: str, input_fn: Callable = input) -> bool:
    """Yes/no question answered with 1/0 (y/n also accepted)."""
    while True:
        answer = input_fn(prompt).strip().lower()
        if answer in ("1", "y", "yes"):
            return True
        if answer in ("0", "n", "no", ""):
            return False
        print("Please answer 1 for yes or 0 for no.")


def ask_int(prompt: str, input_fn: Callable = input) -> Optional[int]:
    answer = input_fn(prompt).strip()
    try:
        return int(answer)
    except ValueError:
        return None
