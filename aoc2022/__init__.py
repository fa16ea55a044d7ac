"""High-level entry points for the Advent of Code 2022 solvers (days 1-8)."""

from .errors import PuzzleInputError, PuzzleSolveError
from .io import PuzzleFileError, read_puzzle
from .solver import DayResult, HarnessConfig, PartResult, run_day, solve_text

__all__ = [
    "run_day",
    "solve_text",
    "read_puzzle",
    "HarnessConfig",
    "DayResult",
    "PartResult",
    "PuzzleInputError",
    "PuzzleSolveError",
    "PuzzleFileError",
]
