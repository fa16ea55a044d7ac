"""Day 8: treetop tree house visibility and scenic scores."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional

import numpy as np

from ..errors import PuzzleInputError

logger = logging.getLogger(__name__)


class GridReason(Enum):
    EMPTY = "grid has no trees"
    RAGGED = "rows differ in length"
    BAD_HEIGHT = "tree height must be a digit"


class GridParseError(PuzzleInputError):
    """Raised when the input is not a rectangular grid of digits."""


class Tree(NamedTuple):
    x: int
    y: int
    height: int


def viewing_distance(view: np.ndarray, height: int) -> int:
    """Count trees seen along `view` (nearest first), stopping at the first one at least `height` tall."""
    blockers = np.flatnonzero(view >= height)
    if blockers.size:
        return int(blockers[0]) + 1
    return int(view.size)


@dataclass(slots=True)
class TreeGrid:
    heights: np.ndarray

    @classmethod
    def parse(cls, text: str) -> "TreeGrid":
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise GridParseError(GridReason.EMPTY)
        width = len(lines[0])
        rows: List[List[int]] = []
        for line_number, line in enumerate(lines, start=1):
            if len(line) != width:
                raise GridParseError(
                    GridReason.RAGGED, f"{len(line)} trees, expected {width}", line_number=line_number
                )
            if not (line.isascii() and line.isdigit()):
                raise GridParseError(GridReason.BAD_HEIGHT, repr(line), line_number=line_number)
            rows.append([int(char) for char in line])
        return cls(heights=np.array(rows, dtype=np.int8))

    @property
    def width(self) -> int:
        return int(self.heights.shape[1])

    @property
    def depth(self) -> int:
        return int(self.heights.shape[0])

    def trees(self) -> Iterator[Tree]:
        for (y, x), height in np.ndenumerate(self.heights):
            yield Tree(x=x, y=y, height=int(height))

    def visible_mask(self) -> np.ndarray:
        """Mark trees that some edge can see over every tree in between.

        Each pass rotates the grid so the edge being looked from is on the left,
        then compares every tree with the running maximum of the trees before it
        (-1 before the first tree).
        """
        visible = np.zeros(self.heights.shape, dtype=bool)
        for turns in range(4):
            rotated = np.rot90(self.heights, turns)
            tallest_before = np.full(rotated.shape, -1, dtype=np.int8)
            tallest_before[:, 1:] = np.maximum.accumulate(rotated[:, :-1], axis=1)
            visible |= np.rot90(rotated > tallest_before, -turns)
        return visible

    def visible_trees(self) -> List[Tree]:
        mask = self.visible_mask()
        return [tree for tree in self.trees() if mask[tree.y, tree.x]]

    def scenic_score(self, x: int, y: int) -> int:
        height = self.heights[y, x]
        row = self.heights[y]
        column = self.heights[:, x]
        views = (row[x + 1:], row[:x][::-1], column[y + 1:], column[:y][::-1])
        score = 1
        for view in views:
            score *= viewing_distance(view, height)
        return score


def _parse_grid(text: str) -> Optional[TreeGrid]:
    try:
        return TreeGrid.parse(text)
    except GridParseError as exc:
        logger.error("%s", exc)
        return None


def part_one(text: str) -> Optional[int]:
    grid = _parse_grid(text)
    if grid is None:
        return None
    return int(grid.visible_mask().sum())


def part_two(text: str) -> Optional[int]:
    grid = _parse_grid(text)
    if grid is None:
        return None
    return max(grid.scenic_score(tree.x, tree.y) for tree in grid.trees())
