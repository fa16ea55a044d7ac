from __future__ import annotations

from pathlib import Path

import pytest

from aoc2022.days.day05 import (
    ApplyReason,
    CollectionReason,
    Command,
    CommandApplyError,
    CommandParseError,
    CommandReason,
    CrateCollection,
    CrateCollectionParseError,
    CrateParseError,
    CrateReason,
    parse_crate,
    parse_input,
    part_one,
    part_two,
)
from aoc2022.io import read_puzzle

ROOT = Path(__file__).resolve().parents[1]

PICTURE = "    [M]\n[A] [Q]\n[R] [W] [S]\n 1   2   3"


def _load_example():
    return read_puzzle(5, example=True, root=ROOT)


def test_part_one_example():
    assert part_one(_load_example()) == "CMZ"


def test_part_two_example():
    assert part_two(_load_example()) == "MCD"


def test_parse_crates():
    crates = CrateCollection.parse(PICTURE)
    assert crates.stacks == [["R", "A"], ["W", "Q", "M"], ["S"]]


def test_parse_example_input():
    crates, commands = parse_input(_load_example())
    assert crates.stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]
    assert commands[0] == Command(amount=1, source=2, target=1)
    assert len(commands) == 4


def test_render_collection_and_command():
    crates = CrateCollection.parse(PICTURE)
    assert str(crates) == "1 [R] [A]\n2 [W] [Q] [M]\n3 [S]"
    assert str(Command.parse("move 3 from 1 to 2")) == "move 3 from 1 to 2"


def test_crate_floating_above_gap_is_rejected():
    with pytest.raises(CrateCollectionParseError) as excinfo:
        CrateCollection.parse("[A]\n    [B]\n 1   2")
    assert excinfo.value.reason is CollectionReason.BAD_STACKING
    assert excinfo.value.line_number == 1


@pytest.mark.parametrize(
    "footer, reason",
    [
        (" 1   3", CollectionReason.BAD_NUMBER_SEQUENCE),
        (" 2   1", CollectionReason.BAD_NUMBER_SEQUENCE),
        (" 1   x", CollectionReason.BAD_NUMBER_PARSE),
    ],
)
def test_stack_numbers_must_count_up(footer, reason):
    with pytest.raises(CrateCollectionParseError) as excinfo:
        CrateCollection.parse(f"[A] [B]\n{footer}")
    assert excinfo.value.reason is reason


def test_bad_crate_is_chained():
    with pytest.raises(CrateCollectionParseError) as excinfo:
        CrateCollection.parse("(A) [B]\n 1   2")
    assert excinfo.value.reason is CollectionReason.BAD_CRATE
    assert excinfo.value.__cause__.reason is CrateReason.BAD_CHARACTER


def test_crate_parse_reasons():
    assert parse_crate("[Q]") == "Q"
    with pytest.raises(CrateParseError) as excinfo:
        parse_crate("[]")
    assert excinfo.value.reason is CrateReason.BAD_LENGTH
    with pytest.raises(CrateParseError) as excinfo:
        parse_crate("[A")
    assert excinfo.value.reason is CrateReason.BAD_CHARACTER


def test_columns_must_be_separated_by_spaces():
    with pytest.raises(CrateCollectionParseError) as excinfo:
        CrateCollection.parse("[A]x[B]\n 1   2")
    assert excinfo.value.reason is CollectionReason.BAD_FORMAT


def test_crate_beyond_last_stack_is_rejected():
    with pytest.raises(CrateCollectionParseError) as excinfo:
        CrateCollection.parse("[A] [B] [C]\n 1   2")
    assert excinfo.value.reason is CollectionReason.BAD_FORMAT


@pytest.mark.parametrize(
    "line, reason",
    [
        ("move 1 from 2", CommandReason.BAD_STRING),
        ("move 1 form 2 to 3", CommandReason.BAD_STRING),
        ("move one from 2 to 3", CommandReason.BAD_INT),
        ("move 1 from -2 to 3", CommandReason.BAD_INT),
    ],
)
def test_command_parse_errors(line, reason):
    with pytest.raises(CommandParseError) as excinfo:
        Command.parse(line)
    assert excinfo.value.reason is reason


def test_command_error_reports_line_number():
    text = "[A]\n 1\n\nmove 1 from 1 to 1\nmove x from 1 to 1\n"
    with pytest.raises(CommandParseError) as excinfo:
        parse_input(text)
    assert excinfo.value.line_number == 5


def test_apply_command_reverses_moved_crates():
    crates = CrateCollection(stacks=[["A", "B", "C"], []])
    crates.apply_command(Command(amount=2, source=1, target=2))
    assert crates.stacks == [["A"], ["C", "B"]]


def test_new_apply_command_keeps_order():
    crates = CrateCollection(stacks=[["A", "B", "C"], []])
    crates.new_apply_command(Command(amount=2, source=1, target=2))
    assert crates.stacks == [["A"], ["B", "C"]]


@pytest.mark.parametrize(
    "command, reason",
    [
        (Command(amount=1, source=4, target=1), ApplyReason.BAD_FROM_INDEX),
        (Command(amount=1, source=0, target=1), ApplyReason.BAD_FROM_INDEX),
        (Command(amount=1, source=1, target=4), ApplyReason.BAD_TO_INDEX),
        (Command(amount=4, source=1, target=2), ApplyReason.BAD_AMOUNT),
    ],
)
def test_apply_errors(command, reason):
    for apply in (CrateCollection.apply_command, CrateCollection.new_apply_command):
        crates = CrateCollection(stacks=[["A", "B", "C"], [], ["D"]])
        with pytest.raises(CommandApplyError) as excinfo:
            apply(crates, command)
        assert excinfo.value.reason is reason


def test_rejected_command_leaves_stacks_untouched():
    for apply in (CrateCollection.apply_command, CrateCollection.new_apply_command):
        crates = CrateCollection(stacks=[["A", "B", "C"], []])
        with pytest.raises(CommandApplyError):
            apply(crates, Command(amount=4, source=1, target=2))
        assert crates.stacks == [["A", "B", "C"], []]


def test_impossible_command_has_no_answer():
    text = "[A] [B]\n 1   2\n\nmove 3 from 1 to 2\n"
    assert part_one(text) is None
    assert part_two(text) is None


def test_empty_stack_at_end_has_no_answer():
    text = "[A] [B]\n 1   2\n\nmove 1 from 1 to 2\n"
    assert part_one(text) is None


def test_missing_separator_has_no_answer():
    assert part_one("[A]\n 1\nmove 1 from 1 to 1\n") is None
