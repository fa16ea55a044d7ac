"""Day 3: rucksack reorganization."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence

from ..errors import PuzzleInputError, parse_lines

logger = logging.getLogger(__name__)

GROUP_SIZE = 3


class BackpackReason(Enum):
    WRONG_SIZES = "compartments differ in size"
    BAD_CHARACTER = "item is not an ASCII letter"


class BackpackParseError(PuzzleInputError):
    """Raised when a backpack line cannot be split into two letter compartments."""


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"item {item!r} has no priority")


@dataclass(frozen=True, slots=True)
class Backpack:
    first: FrozenSet[str]
    second: FrozenSet[str]

    @classmethod
    def parse(cls, line: str) -> "Backpack":
        for char in line:
            if char not in string.ascii_letters:
                raise BackpackParseError(BackpackReason.BAD_CHARACTER, repr(char))
        if len(line) % 2 != 0:
            raise BackpackParseError(BackpackReason.WRONG_SIZES, f"{len(line)} items")
        half = len(line) // 2
        return cls(first=frozenset(line[:half]), second=frozenset(line[half:]))

    @property
    def items(self) -> FrozenSet[str]:
        return self.first | self.second

    def shared_item(self) -> Optional[str]:
        return next(iter(self.first & self.second), None)

    def score(self) -> Optional[int]:
        item = self.shared_item()
        return None if item is None else priority(item)


def badge(group: Sequence[Backpack]) -> Optional[str]:
    common = set(group[0].items)
    for backpack in group[1:]:
        common &= backpack.items
    return next(iter(common), None)


def _parse_backpacks(text: str) -> Optional[List[Backpack]]:
    try:
        return parse_lines(text, Backpack.parse)
    except BackpackParseError as exc:
        logger.error("%s: %s", exc, exc.reason.value)
        return None


def part_one(text: str) -> Optional[int]:
    backpacks = _parse_backpacks(text)
    if backpacks is None:
        return None
    total = 0
    for index, backpack in enumerate(backpacks, start=1):
        score = backpack.score()
        if score is None:
            logger.warning("backpack %d has no item in both compartments", index)
            return None
        total += score
    return total


def part_two(text: str) -> Optional[int]:
    backpacks = _parse_backpacks(text)
    if backpacks is None:
        return None
    total = 0
    for start in range(0, len(backpacks), GROUP_SIZE):
        item = badge(backpacks[start:start + GROUP_SIZE])
        if item is None:
            logger.warning("group starting at backpack %d shares no item", start + 1)
            return None
        total += priority(item)
    return total
