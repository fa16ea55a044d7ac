from __future__ import annotations

from pathlib import Path

import pytest

from aoc2022.days.day04 import (
    PairReason,
    Range,
    RangePair,
    RangePairParseError,
    RangeParseError,
    RangeReason,
    part_one,
    part_two,
)
from aoc2022.io import read_puzzle

ROOT = Path(__file__).resolve().parents[1]


def _load_example():
    return read_puzzle(4, example=True, root=ROOT)


def test_part_one_example():
    assert part_one(_load_example()) == 2


def test_part_two_example():
    assert part_two(_load_example()) == 4


def test_parse_range_pair():
    assert RangePair.parse("11-22,33-44") == RangePair(Range(11, 22), Range(33, 44))


def test_bad_int_is_chained_under_bad_range():
    with pytest.raises(RangePairParseError) as excinfo:
        RangePair.parse("a1-22,33-44")
    assert excinfo.value.reason is PairReason.BAD_RANGE
    cause = excinfo.value.__cause__
    assert isinstance(cause, RangeParseError)
    assert cause.reason is RangeReason.BAD_INT
    assert isinstance(cause.__cause__, ValueError)


def test_missing_comma_is_bad_format():
    with pytest.raises(RangePairParseError) as excinfo:
        RangePair.parse("11-22:33-44")
    assert excinfo.value.reason is PairReason.BAD_FORMAT


def test_missing_dash_is_bad_range_format():
    with pytest.raises(RangePairParseError) as excinfo:
        RangePair.parse("11,33-44")
    assert excinfo.value.__cause__.reason is RangeReason.BAD_FORMAT


def test_contains():
    assert RangePair(Range(11, 44), Range(22, 33)).contains()
    assert RangePair(Range(22, 33), Range(11, 44)).contains()
    assert not RangePair(Range(11, 33), Range(22, 44)).contains()
    assert not RangePair(Range(11, 22), Range(33, 44)).contains()


def test_overlaps():
    assert RangePair(Range(11, 44), Range(22, 33)).overlaps()
    assert RangePair(Range(11, 33), Range(22, 44)).overlaps()
    assert RangePair(Range(11, 22), Range(22, 44)).overlaps()
    assert not RangePair(Range(11, 22), Range(33, 44)).overlaps()


def test_ranges_wider_than_a_byte():
    assert part_one("100-1000,200-300\n") == 1


def test_malformed_line_has_no_answer():
    assert part_one("2-4,6-8\n2-x,4-5\n") is None


def test_reversed_range_is_rejected():
    with pytest.raises(RangePairParseError) as excinfo:
        RangePair.parse("4-4,5-3")
    assert excinfo.value.reason is PairReason.BAD_RANGE
    assert excinfo.value.__cause__.reason is RangeReason.BAD_ORDER
    assert part_one("5-3,1-2\n") is None
    assert part_two("5-3,1-2\n") is None
