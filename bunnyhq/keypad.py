"""Work out a bathroom code by walking over a keypad."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from enum import Enum
from itertools import takewhile
from pathlib import Path

BLANK = "0"

STANDARD_GRID = ("123", "456", "789")
STANDARD_START = (1, 1)

STAR_GRID = ("00100", "02340", "56789", "0ABC0", "00D00")
STAR_START = (2, 0)


class Direction(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


_LETTERS = frozenset(d.value for d in Direction)
_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def parse_commands(text: str) -> list[list[Direction]]:
    """Parse one list of moves per line; a line's moves end at its first other character."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [[Direction(c) for c in takewhile(_LETTERS.__contains__, line)] for line in lines]


class KeyPad:
    """A keypad grid with a current position and the move lines to follow."""

    def __init__(self, grid: Sequence[Sequence[str]], start: tuple[int, int]) -> None:
        self.grid = [list(row) for row in grid]
        self.pos = tuple(start)
        self.commands: list[list[Direction]] = []

    def read_commands(self, path: str | Path) -> None:
        """Append the move lines read from a file."""
        self.commands.extend(parse_commands(Path(path).read_text()))

    def move(self, direction: Direction) -> None:
        """Move one key, ignoring moves that leave the grid or land on a blank."""
        row, col = self.pos
        if (row >= len(self.grid) - 1 and direction is Direction.DOWN) or (
            col >= len(self.grid[0]) - 1 and direction is Direction.RIGHT
        ):
            return
        d_row, d_col = _OFFSETS[direction]
        new_row, new_col = max(row + d_row, 0), max(col + d_col, 0)
        if self.grid[new_row][new_col] != BLANK:
            self.pos = (new_row, new_col)

    def find_access_code(self) -> str:
        """Follow every move line and collect the key pressed at the end of each."""
        code = []
        for line in self.commands:
            for direction in line:
                self.move(direction)
            row, col = self.pos
            code.append(self.grid[row][col])
        return "".join(code)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the bathroom codes.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    for part, (grid, start) in enumerate(
        [(STANDARD_GRID, STANDARD_START), (STAR_GRID, STAR_START)], start=1
    ):
        pad = KeyPad(grid, start)
        pad.read_commands(args.path)
        print(f"Part {part} = {pad.find_access_code()}")


if __name__ == "__main__":
    main()