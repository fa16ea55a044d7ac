"""Day 2: rock-paper-scissors strategy guide."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, List, Mapping, Optional, TypeVar

from ..errors import PuzzleInputError, parse_lines

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Shape(IntEnum):
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @property
    def bonus(self) -> int:
        return self.value + 1


class Outcome(IntEnum):
    # Values are the shift from the opponent's shape to the shape that produces
    # this outcome.
    DRAW = 0
    WIN = 1
    LOSE = 2

    @property
    def points(self) -> int:
        return OUTCOME_POINTS[self]


OUTCOME_POINTS = {Outcome.LOSE: 0, Outcome.DRAW: 3, Outcome.WIN: 6}

OPPONENT_CODES = {"A": Shape.ROCK, "B": Shape.PAPER, "C": Shape.SCISSORS}
OWN_CODES = {"X": Shape.ROCK, "Y": Shape.PAPER, "Z": Shape.SCISSORS}
OUTCOME_CODES = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


class RoundReason(Enum):
    FORMAT = "invalid format"
    SHAPE_1 = "bad character in shape 1"
    SHAPE_2 = "bad character in shape 2"


class RoundParseError(PuzzleInputError):
    """Raised when a strategy line is not `<A|B|C> <X|Y|Z>`."""


@dataclass(frozen=True, slots=True)
class Round:
    opponent: Shape
    own: Shape

    @classmethod
    def parse(cls, line: str) -> "Round":
        first, second = _split_codes(line)
        opponent = _decode(first, OPPONENT_CODES, RoundReason.SHAPE_1)
        return cls(opponent=opponent, own=_decode(second, OWN_CODES, RoundReason.SHAPE_2))

    @property
    def outcome(self) -> Outcome:
        return outcome_of(self.own, self.opponent)

    @property
    def score(self) -> int:
        return self.outcome.points + self.own.bonus


@dataclass(frozen=True, slots=True)
class PlannedRound:
    opponent: Shape
    outcome: Outcome

    @classmethod
    def parse(cls, line: str) -> "PlannedRound":
        first, second = _split_codes(line)
        opponent = _decode(first, OPPONENT_CODES, RoundReason.SHAPE_1)
        return cls(opponent=opponent, outcome=_decode(second, OUTCOME_CODES, RoundReason.SHAPE_2))

    def to_round(self) -> Round:
        own = Shape((self.opponent + self.outcome) % len(Shape))
        return Round(opponent=self.opponent, own=own)


def outcome_of(own: Shape, opponent: Shape) -> Outcome:
    diff = (opponent - own) % len(Shape)
    if diff == 0:
        return Outcome.DRAW
    if diff == 1:
        return Outcome.LOSE
    return Outcome.WIN


def _split_codes(line: str) -> tuple[str, str]:
    if len(line) != 3 or line[1] != " ":
        raise RoundParseError(RoundReason.FORMAT, repr(line))
    return line[0], line[2]


def _decode(code: str, table: Mapping[str, T], reason: RoundReason) -> T:
    try:
        return table[code]
    except KeyError:
        raise RoundParseError(reason, repr(code)) from None


def parse_rounds(text: str, parse_line: Callable[[str], T]) -> Optional[List[T]]:
    try:
        return parse_lines(text, parse_line)
    except RoundParseError as exc:
        logger.error("%s: %s", exc, exc.reason.value)
        return None


def part_one(text: str) -> Optional[int]:
    rounds = parse_rounds(text, Round.parse)
    if rounds is None:
        return None
    return sum(round_.score for round_ in rounds)


def part_two(text: str) -> Optional[int]:
    planned = parse_rounds(text, PlannedRound.parse)
    if planned is None:
        return None
    return sum(plan.to_round().score for plan in planned)
