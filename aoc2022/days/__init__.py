"""One solver module per puzzle day, each exposing `part_one` and `part_two`."""

from . import day01, day02, day03, day04, day05, day06, day07, day08

DAYS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
}

__all__ = ["DAYS"]
