"""Day 7: rebuild a filesystem from a shell transcript and size its directories."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

from ..errors import PuzzleInputError, parse_lines, parse_natural

logger = logging.getLogger(__name__)

SMALL_DIRECTORY_LIMIT = 100_000
MAX_USED_SPACE = 40_000_000

PROMPT = "$"
CD_PREFIX = "$ cd "
PARENT = ".."
DIR_KEYWORD = "dir"


class CommandReason(Enum):
    BAD_COMMAND = "unknown command"
    BAD_LS = "ls takes no arguments"
    BAD_CD = "cd needs a directory name"
    BAD_DIR = "expected 'dir <name>'"
    BAD_FILE = "expected '<size> <name>'"


class TranscriptParseError(PuzzleInputError):
    """Raised when a transcript line is neither a command nor a listing entry."""


@dataclass(slots=True)
class File:
    size: int
    name: str

    @classmethod
    def parse(cls, line: str) -> "File":
        parts = line.split(maxsplit=1)
        if len(parts) != 2:
            raise TranscriptParseError(CommandReason.BAD_FILE, repr(line))
        size_token, name = parts
        try:
            size = parse_natural(size_token)
        except ValueError as exc:
            raise TranscriptParseError(CommandReason.BAD_FILE, f"bad size {size_token!r}") from exc
        return cls(size=size, name=name)


@dataclass(slots=True)
class Directory:
    name: str = ""
    children: List[Union[File, "Directory"]] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> "Directory":
        rest = line[len(DIR_KEYWORD):]
        if not rest[:1].isspace() or not rest[1:]:
            raise TranscriptParseError(CommandReason.BAD_DIR, repr(line))
        return cls(name=rest[1:])

    def child_directory(self, name: str) -> Optional["Directory"]:
        for child in self.children:
            if isinstance(child, Directory) and child.name == name:
                return child
        return None

    def iter_files(self) -> Iterator[File]:
        pending = [iter(self.children)]
        while pending:
            for child in pending[-1]:
                if isinstance(child, File):
                    yield child
                else:
                    pending.append(iter(child.children))
                    break
            else:
                pending.pop()

    def collect_sizes(self, out: List[int]) -> int:
        """Append the size of every directory below and including this one, children first."""
        pending = [iter(self.children)]
        totals = [0]
        while True:
            for child in pending[-1]:
                if isinstance(child, File):
                    totals[-1] += child.size
                else:
                    pending.append(iter(child.children))
                    totals.append(0)
                    break
            else:
                pending.pop()
                size = totals.pop()
                out.append(size)
                if not totals:
                    return size
                totals[-1] += size

    def render(self) -> str:
        lines = [f"- {self.name}"]
        pending = [iter(self.children)]
        while pending:
            pad = " " * len(pending)
            for child in pending[-1]:
                if isinstance(child, File):
                    lines.append(f"{pad}{child.size} {child.name}")
                else:
                    lines.append(f"{pad}- {child.name}")
                    pending.append(iter(child.children))
                    break
            else:
                pending.pop()
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class ChangeDir:
    name: str


@dataclass(frozen=True, slots=True)
class ChangeDirUp:
    pass


@dataclass(frozen=True, slots=True)
class ListDir:
    pass


Command = Union[ChangeDir, ChangeDirUp, ListDir, File, Directory]


def parse_command(line: str) -> Command:
    words = line.split()
    if not words:
        raise TranscriptParseError(CommandReason.BAD_COMMAND, "blank line")
    if words[0] == PROMPT:
        verb = words[1] if len(words) > 1 else ""
        if verb == "ls":
            if len(words) > 2:
                raise TranscriptParseError(CommandReason.BAD_LS, repr(line))
            return ListDir()
        if verb == "cd":
            if not line.startswith(CD_PREFIX) or not line[len(CD_PREFIX):]:
                raise TranscriptParseError(CommandReason.BAD_CD, repr(line))
            name = line[len(CD_PREFIX):]
            return ChangeDirUp() if name == PARENT else ChangeDir(name)
        raise TranscriptParseError(CommandReason.BAD_COMMAND, repr(line))
    if line.startswith(DIR_KEYWORD):
        return Directory.parse(line)
    return File.parse(line)


def process_commands(directory: Directory, commands: Iterator[Command]) -> None:
    """Apply commands starting in `directory` until it is left with `cd ..` or the stream ends."""
    path = [directory]
    for command in commands:
        current = path[-1]
        if isinstance(command, ChangeDirUp):
            path.pop()
            if not path:
                return
        elif isinstance(command, ChangeDir):
            child = current.child_directory(command.name)
            if child is None:
                logger.info("directory %s doesn't exist, creating it", command.name)
                child = Directory(name=command.name)
                current.children.append(child)
            path.append(child)
        elif isinstance(command, (File, Directory)):
            current.children.append(command)


def build_tree(text: str) -> Directory:
    commands = parse_lines(text, parse_command)
    root = Directory()
    process_commands(root, iter(commands))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("filesystem:\n%s", root.render())
    return root


def directory_sizes(root: Directory) -> Tuple[List[int], int]:
    sizes: List[int] = []
    total = root.collect_sizes(sizes)
    return sizes, total


def _load_sizes(text: str) -> Optional[Tuple[List[int], int]]:
    try:
        root = build_tree(text)
    except TranscriptParseError as exc:
        logger.error("%s", exc)
        return None
    return directory_sizes(root)


def part_one(text: str) -> Optional[int]:
    loaded = _load_sizes(text)
    if loaded is None:
        return None
    sizes, _ = loaded
    return sum(size for size in sizes if size <= SMALL_DIRECTORY_LIMIT)


def part_two(text: str) -> Optional[int]:
    loaded = _load_sizes(text)
    if loaded is None:
        return None
    sizes, total = loaded
    needed = total - MAX_USED_SPACE
    candidates = [size for size in sizes if size >= needed]
    if not candidates:
        logger.warning("no directory frees %d bytes", needed)
        return None
    return min(candidates)
