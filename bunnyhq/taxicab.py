"""Follow turn-and-walk directions on a city grid and measure taxicab distance."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_STEP_RE = re.compile(r"(R|L)(\d+)")
_MAX_DISTANCE = 255


class Turn(Enum):
    """A quarter turn to the left or the right."""

    LEFT = "L"
    RIGHT = "R"

    @property
    def rotation(self) -> complex:
        """The complex factor that applies this turn to a heading."""
        return 1j if self is Turn.LEFT else -1j


@dataclass(frozen=True)
class Step:
    """Turn, then walk a number of blocks."""

    turn: Turn
    distance: int


def parse_directions(text: str) -> list[Step]:
    """Extract every ``R<n>`` / ``L<n>`` step from the text, in order."""
    steps = []
    for turn, distance in _STEP_RE.findall(text):
        blocks = int(distance)
        if blocks > _MAX_DISTANCE:
            raise ValueError(f"step {turn}{distance} walks more than {_MAX_DISTANCE} blocks")
        steps.append(Step(Turn(turn), blocks))
    return steps


def read_directions(path: str | Path) -> list[Step]:
    """Read and parse a directions file."""
    return parse_directions(Path(path).read_text())


def _grid_distance(point: complex) -> int:
    return int(abs(point.real) + abs(point.imag))


def find_shortest_path(directions: Iterable[Step], overlap: bool = False) -> int:
    """Walk the directions from the origin facing north and return the grid distance.

    With ``overlap`` the walk stops at the first block visited twice.
    """
    heading = 1j
    position = 0j
    visited: set[complex] = set()

    for step in directions:
        heading *= step.turn.rotation
        if overlap:
            for blocks in range(1, step.distance + 1):
                point = position + heading * blocks
                if point in visited:
                    return _grid_distance(point)
                visited.add(point)
        position += heading * step.distance

    return _grid_distance(position)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Distance to Easter Bunny HQ.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    directions = read_directions(args.path)
    print(f"Part 1 = {find_shortest_path(directions, False)}")
    print(f"Part 2 = {find_shortest_path(directions, True)}")


if __name__ == "__main__":
    main()