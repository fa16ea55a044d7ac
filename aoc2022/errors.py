"""Error types shared by the daily puzzle parsers and solvers."""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, TypeVar

T = TypeVar("T")


class PuzzleInputError(ValueError):
    """Raised when a puzzle input cannot be parsed.

    Each day subclasses this with its own closed set of reasons; `reason` is
    always a member of that day's `Enum`. The underlying failure, when there is
    one, is attached through exception chaining.
    """

    def __init__(self, reason: Enum, detail: str | None = None, *, line_number: int | None = None) -> None:
        self.reason = reason
        self.detail = detail
        self.line_number = line_number
        super().__init__(reason, detail)

    def __str__(self) -> str:
        text = self.reason.name
        if self.detail:
            text = f"{text} ({self.detail})"
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        return text


class PuzzleSolveError(RuntimeError):
    """Raised when parsed input breaks a precondition of the computation."""

    def __init__(self, reason: Enum, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        super().__init__(reason, detail)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.reason.name} ({self.detail})"
        return self.reason.name


def parse_lines(text: str, parse_line: Callable[[str], T]) -> List[T]:
    """Parse every line of `text`, tagging a failure with its 1-based line number."""
    items: List[T] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            items.append(parse_line(line))
        except PuzzleInputError as exc:
            exc.line_number = line_number
            raise
    return items


def parse_natural(token: str) -> int:
    """Convert an unsigned decimal token, rejecting signs, blanks and underscores."""
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f"invalid unsigned integer: {token!r}")
    return int(token)
