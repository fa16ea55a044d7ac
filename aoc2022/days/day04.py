"""Day 4: camp cleanup section assignments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..errors import PuzzleInputError, parse_lines, parse_natural

logger = logging.getLogger(__name__)


class RangeReason(Enum):
    BAD_FORMAT = "expected <low>-<high>"
    BAD_INT = "bound is not an integer"
    BAD_ORDER = "low bound exceeds high bound"


class PairReason(Enum):
    BAD_FORMAT = "expected <range>,<range>"
    BAD_RANGE = "invalid range"


class RangeParseError(PuzzleInputError):
    """Raised when a single `a-b` range is malformed."""


class RangePairParseError(PuzzleInputError):
    """Raised when an `a-b,c-d` line is malformed; range failures are chained."""


@dataclass(frozen=True, slots=True)
class Range:
    low: int
    high: int

    @classmethod
    def parse(cls, token: str) -> "Range":
        low, sep, high = token.partition("-")
        if not sep:
            raise RangeParseError(RangeReason.BAD_FORMAT, repr(token))
        try:
            bounds = cls(low=parse_natural(low), high=parse_natural(high))
        except ValueError as exc:
            raise RangeParseError(RangeReason.BAD_INT, repr(token)) from exc
        if bounds.low > bounds.high:
            raise RangeParseError(RangeReason.BAD_ORDER, repr(token))
        return bounds

    def contains(self, other: "Range") -> bool:
        return self.low <= other.low and self.high >= other.high

    def overlaps(self, other: "Range") -> bool:
        return self.low <= other.high and self.high >= other.low


@dataclass(frozen=True, slots=True)
class RangePair:
    first: Range
    second: Range

    @classmethod
    def parse(cls, line: str) -> "RangePair":
        first, sep, second = line.partition(",")
        if not sep:
            raise RangePairParseError(PairReason.BAD_FORMAT, repr(line))
        try:
            return cls(first=Range.parse(first), second=Range.parse(second))
        except RangeParseError as exc:
            raise RangePairParseError(PairReason.BAD_RANGE, str(exc)) from exc

    def contains(self) -> bool:
        return self.first.contains(self.second) or self.second.contains(self.first)

    def overlaps(self) -> bool:
        return self.first.overlaps(self.second)


def parse_pairs(text: str) -> Optional[List[RangePair]]:
    try:
        return parse_lines(text, RangePair.parse)
    except RangePairParseError as exc:
        logger.error("%s", exc)
        return None


def part_one(text: str) -> Optional[int]:
    pairs = parse_pairs(text)
    if pairs is None:
        return None
    return sum(1 for pair in pairs if pair.contains())


def part_two(text: str) -> Optional[int]:
    pairs = parse_pairs(text)
    if pairs is None:
        return None
    return sum(1 for pair in pairs if pair.overlaps())
