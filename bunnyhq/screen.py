"""Simulate the little two-factor screen and its rect/rotate instructions."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_SIZE = (6, 50)


class Op(Enum):
    RECT = "rect"
    ROTATE_ROW = "rotate row"
    ROTATE_COL = "rotate column"


@dataclass(frozen=True)
class Instruction:
    """An operation with its two numbers: width/height or index/shift."""

    op: Op
    a: int
    b: int


_PATTERNS = (
    (Op.RECT, re.compile(r"rect (\d+)x(\d+)")),
    (Op.ROTATE_ROW, re.compile(r"rotate row y=(\d+) by (\d+)")),
    (Op.ROTATE_COL, re.compile(r"rotate column x=(\d+) by (\d+)")),
)


def parse_commands(lines: Iterable[str]) -> list[Instruction]:
    """Parse each line that holds a known instruction; other lines are skipped."""
    commands = []
    for line in lines:
        for op, pattern in _PATTERNS:
            match = pattern.search(line)
            if match:
                commands.append(Instruction(op, int(match[1]), int(match[2])))
                break
    return commands


def read_commands(path: str | Path) -> list[Instruction]:
    with open(path, encoding="utf-8") as handle:
        return parse_commands(handle)


def _rotated(values: list[bool], shift: int) -> list[bool]:
    shift %= len(values)
    return values[-shift:] + values[:-shift] if shift else list(values)


class Screen:
    """A grid of pixels, ``size`` being (rows, columns), all off at first."""

    def __init__(self, size: tuple[int, int] = DEFAULT_SIZE) -> None:
        self.size = tuple(size)
        rows, cols = self.size
        self.pixels = [[False] * cols for _ in range(rows)]

    def set_rect(self, width: int, height: int) -> None:
        """Turn on the top-left rectangle of the given width and height."""
        rows, cols = self.size
        if height > rows or width > cols:
            raise ValueError(f"rect {width}x{height} does not fit a {rows}x{cols} screen")
        for row in self.pixels[:height]:
            row[:width] = [True] * width

    def rotate_row(self, row: int, shift: int) -> None:
        """Shift a row right, wrapping pixels around."""
        self.pixels[row] = _rotated(self.pixels[row], shift)

    def rotate_col(self, col: int, shift: int) -> None:
        """Shift a column down, wrapping pixels around."""
        column = _rotated([row[col] for row in self.pixels], shift)
        for row, value in zip(self.pixels, column):
            row[col] = value

    def execute(self, commands: Iterable[Instruction]) -> None:
        actions = {
            Op.RECT: self.set_rect,
            Op.ROTATE_ROW: self.rotate_row,
            Op.ROTATE_COL: self.rotate_col,
        }
        for command in commands:
            actions[command.op](command.a, command.b)

    def render(self) -> str:
        """The screen as lines of ``#`` (on) and ``.`` (off)."""
        return "\n".join("".join("#" if on else "." for on in row) for row in self.pixels)

    def on_pixels(self) -> int:
        return sum(sum(row) for row in self.pixels)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the screen instructions.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    screen = Screen(DEFAULT_SIZE)
    screen.execute(read_commands(args.path))
    print(f"Part 1 = {screen.on_pixels()}\n")
    print(screen.render())


if __name__ == "__main__":
    main()