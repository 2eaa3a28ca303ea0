"""Count which listed side lengths can form a triangle."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from pathlib import Path

Triangle = tuple[int, int, int]

_TRIANGLE_RE = re.compile(r"(\d+)\s+(\d+)\s+(\d+)")


def read_triangles(path: str | Path, vertical: bool = False) -> list[Triangle]:
    """Read side triples from a file.

    With ``vertical`` each block of three rows is read column by column, provided
    the row count is a multiple of three.
    """
    rows: list[Triangle] = []
    pending = ""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            pending += line
            match = _TRIANGLE_RE.search(pending)
            if match is None:
                continue
            a, b, c = (int(side) for side in match.groups())
            rows.append((a, b, c))
            pending = ""

    if not vertical or len(rows) % 3:
        return rows

    columns: list[Triangle] = []
    for block in zip(*[iter(rows)] * 3):
        columns.extend(zip(*block))
    return columns


def is_valid_triangle(triangle: Triangle) -> bool:
    """True when every side is shorter than the sum of the other two."""
    a, b, c = triangle
    return a < b + c and b < a + c and c < a + b


def count_valid_triangles(triangles: Iterable[Triangle]) -> int:
    return sum(1 for triangle in triangles if is_valid_triangle(triangle))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count possible triangles.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    print(f"Part 1 = {count_valid_triangles(read_triangles(args.path, False))}")
    print(f"Part 2 = {count_valid_triangles(read_triangles(args.path, True))}")


if __name__ == "__main__":
    main()