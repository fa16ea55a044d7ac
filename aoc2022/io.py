from __future__ import annotations

from pathlib import Path

INPUTS_DIR = "inputs"
EXAMPLES_DIR = "examples"


class PuzzleFileError(ValueError):
    """Raised when a puzzle input file cannot be read."""


def puzzle_path(day: int, *, example: bool = False, root: str | Path = ".") -> Path:
    folder = EXAMPLES_DIR if example else INPUTS_DIR
    return Path(root) / folder / f"{day:02d}"


def read_puzzle(day: int, *, example: bool = False, root: str | Path = ".") -> str:
    """Read the whole input for `day` or raise `PuzzleFileError`."""
    path = puzzle_path(day, example=example, root=root)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleFileError(f"failed to read puzzle input from {path}: {exc}") from exc
