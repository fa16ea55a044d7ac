"""Day 5: supply stacks rearranged by a crane.

The input is a picture of the stacks, a blank line, then one command per line::

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1

The picture is read bottom-up. Its last line numbers the stacks and must read
``1 2 ... n``; every line above it is cut into four-character columns, each
either blank or a bracketed crate. Part one moves crates one at a time, part
two moves a whole slice at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..errors import PuzzleInputError, PuzzleSolveError, parse_natural

logger = logging.getLogger(__name__)

COLUMN_WIDTH = 4
SECTION_SEPARATOR = "\n\n"


class CrateReason(Enum):
    BAD_LENGTH = "crate label must be exactly one character"
    BAD_CHARACTER = "crate must be wrapped in brackets"


class CollectionReason(Enum):
    BAD_FORMAT = "malformed stack picture"
    BAD_NUMBER_SEQUENCE = "stack numbers must read 1 2 ... n"
    BAD_NUMBER_PARSE = "stack number is not an integer"
    BAD_STACKING = "crate floats above an empty slot"
    BAD_CRATE = "invalid crate"


class CommandReason(Enum):
    BAD_STRING = "expected 'move <n> from <i> to <j>'"
    BAD_INT = "command argument is not an integer"


class ApplyReason(Enum):
    BAD_FROM_INDEX = "source stack does not exist"
    BAD_TO_INDEX = "target stack does not exist"
    BAD_AMOUNT = "not enough crates on source stack"


class CrateParseError(PuzzleInputError):
    """Raised when a picture column is neither blank nor `[X]`."""


class CrateCollectionParseError(PuzzleInputError):
    """Raised when the stack picture is malformed."""


class CommandParseError(PuzzleInputError):
    """Raised when a command line is malformed."""


class CommandApplyError(PuzzleSolveError):
    """Raised when a command cannot be carried out on the current stacks."""


@dataclass(frozen=True, slots=True)
class Command:
    amount: int
    source: int
    target: int

    @classmethod
    def parse(cls, line: str) -> "Command":
        words = line.split()
        if len(words) != 6 or (words[0], words[2], words[4]) != ("move", "from", "to"):
            raise CommandParseError(CommandReason.BAD_STRING, repr(line))
        try:
            amount, source, target = (parse_natural(word) for word in words[1::2])
        except ValueError as exc:
            raise CommandParseError(CommandReason.BAD_INT, repr(line)) from exc
        return cls(amount=amount, source=source, target=target)

    def __str__(self) -> str:
        return f"move {self.amount} from {self.source} to {self.target}"


def parse_crate(column: str) -> str:
    if not (column.startswith("[") and column.endswith("]")):
        raise CrateParseError(CrateReason.BAD_CHARACTER, repr(column))
    label = column[1:-1]
    if len(label) != 1:
        raise CrateParseError(CrateReason.BAD_LENGTH, repr(column))
    return label


def _parse_stack_numbers(line: str, line_number: int) -> int:
    tokens = line.split()
    for expected, token in enumerate(tokens, start=1):
        try:
            number = parse_natural(token)
        except ValueError as exc:
            raise CrateCollectionParseError(
                CollectionReason.BAD_NUMBER_PARSE, repr(token), line_number=line_number
            ) from exc
        if number != expected:
            raise CrateCollectionParseError(
                CollectionReason.BAD_NUMBER_SEQUENCE,
                f"found {number} where {expected} was expected",
                line_number=line_number,
            )
    return len(tokens)


@dataclass(slots=True)
class CrateCollection:
    stacks: List[List[str]] = field(default_factory=list)

    @classmethod
    def parse(cls, picture: str) -> "CrateCollection":
        lines = picture.splitlines()
        if not lines:
            raise CrateCollectionParseError(CollectionReason.BAD_FORMAT, "missing stack numbers")

        count = _parse_stack_numbers(lines[-1], line_number=len(lines))
        stacks: List[List[str]] = [[] for _ in range(count)]
        ended = [False] * count

        for line_number in range(len(lines) - 1, 0, -1):
            line = lines[line_number - 1]
            for index, start in enumerate(range(0, len(line), COLUMN_WIDTH)):
                column = line[start:start + COLUMN_WIDTH]
                if len(column) == COLUMN_WIDTH:
                    if not column[-1].isspace():
                        raise CrateCollectionParseError(
                            CollectionReason.BAD_FORMAT,
                            f"column {index + 1} is not separated by a space",
                            line_number=line_number,
                        )
                    column = column[:-1]
                if column.isspace():
                    if index < count:
                        ended[index] = True
                    continue
                if index >= count:
                    raise CrateCollectionParseError(
                        CollectionReason.BAD_FORMAT,
                        f"crate in column {index + 1} but only {count} stacks",
                        line_number=line_number,
                    )
                try:
                    crate = parse_crate(column)
                except CrateParseError as exc:
                    raise CrateCollectionParseError(
                        CollectionReason.BAD_CRATE, str(exc), line_number=line_number
                    ) from exc
                if ended[index]:
                    raise CrateCollectionParseError(
                        CollectionReason.BAD_STACKING, f"stack {index + 1}", line_number=line_number
                    )
                stacks[index].append(crate)

        return cls(stacks=stacks)

    def _stack(self, number: int, reason: ApplyReason) -> List[str]:
        if not 1 <= number <= len(self.stacks):
            raise CommandApplyError(reason, f"stack {number} of {len(self.stacks)}")
        return self.stacks[number - 1]

    def apply_command(self, command: Command) -> None:
        """Move crates one at a time, reversing the moved slice."""
        source = self._stack(command.source, ApplyReason.BAD_FROM_INDEX)
        target = self._stack(command.target, ApplyReason.BAD_TO_INDEX)
        if len(source) < command.amount:
            raise CommandApplyError(ApplyReason.BAD_AMOUNT, str(command))
        for _ in range(command.amount):
            target.append(source.pop())

    def new_apply_command(self, command: Command) -> None:
        """Move the top `amount` crates at once, keeping their order."""
        source = self._stack(command.source, ApplyReason.BAD_FROM_INDEX)
        target = self._stack(command.target, ApplyReason.BAD_TO_INDEX)
        if len(source) < command.amount:
            raise CommandApplyError(ApplyReason.BAD_AMOUNT, str(command))
        split_at = len(source) - command.amount
        moved = source[split_at:]
        del source[split_at:]
        target.extend(moved)

    def tops(self) -> List[Optional[str]]:
        return [stack[-1] if stack else None for stack in self.stacks]

    def __str__(self) -> str:
        lines = []
        for number, stack in enumerate(self.stacks, start=1):
            lines.append(" ".join([str(number)] + [f"[{crate}]" for crate in stack]))
        return "\n".join(lines)


def parse_input(text: str) -> Tuple[CrateCollection, List[Command]]:
    picture, sep, command_block = text.partition(SECTION_SEPARATOR)
    if not sep:
        raise CrateCollectionParseError(CollectionReason.BAD_FORMAT, "no blank line after the stack picture")

    crates = CrateCollection.parse(picture)
    offset = len(picture.splitlines()) + 1
    commands: List[Command] = []
    for line_number, line in enumerate(command_block.splitlines(), start=offset + 1):
        try:
            commands.append(Command.parse(line))
        except CommandParseError as exc:
            exc.line_number = line_number
            raise
    return crates, commands


def _rearrange(text: str, move: Callable[[CrateCollection, Command], None]) -> Optional[str]:
    try:
        crates, commands = parse_input(text)
    except PuzzleInputError as exc:
        logger.error("%s", exc)
        return None

    logger.debug("initial stacks:\n%s", crates)
    for command in commands:
        try:
            move(crates, command)
        except CommandApplyError as exc:
            logger.warning("cannot %s: %s", command, exc)
            return None
        logger.debug("%s\n%s", command, crates)

    tops = crates.tops()
    if None in tops:
        logger.warning("stack %d is empty after rearranging", tops.index(None) + 1)
        return None
    return "".join(tops)


def part_one(text: str) -> Optional[str]:
    return _rearrange(text, CrateCollection.apply_command)


def part_two(text: str) -> Optional[str]:
    return _rearrange(text, CrateCollection.new_apply_command)
