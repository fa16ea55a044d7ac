"""Dispatch puzzle inputs to the daily solvers and collect timed answers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from .days import DAYS
from .io import puzzle_path, read_puzzle

Answer = Union[int, str]
PartSolver = Callable[[str], Optional[Answer]]


@dataclass(slots=True)
class HarnessConfig:
    root: Path = Path(".")
    include_example: bool = False
    timed: bool = False


@dataclass(slots=True)
class PartResult:
    part: int
    answer: Optional[Answer]
    elapsed: float

    @property
    def solved(self) -> bool:
        return self.answer is not None


@dataclass(slots=True)
class DayResult:
    day: int
    source: Path
    parts: List[PartResult] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return all(part.solved for part in self.parts)


def available_days() -> List[int]:
    return sorted(DAYS)


def part_solvers(day: int) -> List[PartSolver]:
    try:
        module = DAYS[day]
    except KeyError as exc:
        raise KeyError(f"no solver for day {day}; available days: {available_days()}") from exc
    return [module.part_one, module.part_two]


def solve_text(day: int, text: str) -> List[PartResult]:
    results: List[PartResult] = []
    for part, solve in enumerate(part_solvers(day), start=1):
        started = time.perf_counter()
        answer = solve(text)
        results.append(PartResult(part=part, answer=answer, elapsed=time.perf_counter() - started))
    return results


def run_day(day: int, config: HarnessConfig | None = None) -> List[DayResult]:
    """Solve the example (when requested) and then the real input for `day`.

    Raises `PuzzleFileError` when an input file is missing.
    """
    config = config or HarnessConfig()
    sources = [True, False] if config.include_example else [False]
    results: List[DayResult] = []
    for example in sources:
        text = read_puzzle(day, example=example, root=config.root)
        source = puzzle_path(day, example=example, root=config.root)
        results.append(DayResult(day=day, source=source, parts=solve_text(day, text)))
    return results
