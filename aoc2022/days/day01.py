"""Day 1: calorie totals per elf."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..errors import parse_natural

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Group:
    items: List[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.items)


def parse_groups(text: str) -> List[Group]:
    """Split lines into groups; any line that is not a number closes the current group."""
    lines = text.splitlines()
    if not lines:
        return []

    groups: List[Group] = [Group()]
    for line in lines:
        try:
            value = parse_natural(line)
        except ValueError:
            groups.append(Group())
            continue
        groups[-1].items.append(value)
    return groups


def part_one(text: str) -> Optional[int]:
    groups = parse_groups(text)
    if not groups:
        logger.warning("no calorie groups in input")
        return None
    return max(group.total for group in groups)


def part_two(text: str) -> Optional[int]:
    groups = parse_groups(text)
    if len(groups) < 3:
        logger.warning("need at least 3 calorie groups, found %d", len(groups))
        return None
    return sum(heapq.nlargest(3, (group.total for group in groups)))
