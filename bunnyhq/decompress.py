"""Measure the decompressed length of data using (NxM) repeat markers."""

from __future__ import annotations

import argparse
from itertools import pairwise
from pathlib import Path
from typing import NamedTuple

_DIGITS = frozenset("0123456789")


class Marker(NamedTuple):
    """A ``(lengthxrepeat)`` marker spanning ``start``..``end`` (the parentheses)."""

    start: int
    end: int
    length: int
    repeat: int

    @property
    def reach(self) -> int:
        """Index of the last character the marker repeats."""
        return self.end + self.length


def read_compressed_data(path: str | Path) -> str:
    """Read the compressed data, dropping the trailing newline."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()[:-1]


def _take_number(digits: list[str]) -> int:
    text = "".join(digits)
    digits.clear()
    if not text:
        raise ValueError("marker is missing a number")
    return int(text)


def find_markers(data: str) -> list[Marker]:
    """Locate every marker in the data, in order."""
    markers: list[Marker] = []
    start: int | None = None
    digits: list[str] = []
    length = 0

    for idx, char in enumerate(data):
        if char == "(":
            if start is not None:
                raise ValueError("Nested markers are not supported!")
            start = idx
        elif char == ")":
            if start is None:
                raise ValueError("Unmatched markers are not supported!")
            markers.append(Marker(start, idx, length, _take_number(digits)))
            length = 0
            start = None
        elif start is not None and char == "x":
            length = _take_number(digits)
        elif start is not None and char in _DIGITS:
            digits.append(char)
    return markers


def _gap(size: int) -> int:
    if size < 0:
        raise ValueError("markers overlap or run past the end of the data")
    return size


def decompressed_len(data: str) -> int:
    """Length after one level of decompression; markers inside repeated data are plain text."""
    markers = find_markers(data)
    if not markers:
        return len(data)

    skipped: set[int] = set()
    valid: list[Marker] = []
    for idx, marker in enumerate(markers):
        if idx in skipped:
            continue
        valid.append(marker)
        for later_idx, later in enumerate(markers[idx + 1 :], start=idx + 1):
            if marker.reach > later.start:
                skipped.add(later_idx)
            else:
                break

    total = markers[0].start + sum(m.length * m.repeat for m in valid)
    for current, following in pairwise(valid):
        total += _gap(following.start - current.reach - 1)
    total += _gap(len(data) - 1 - valid[-1].reach)
    return total


def rec_decomp_len(data: str) -> int:
    """Length after recursive decompression, where markers in repeated data also expand."""
    markers = find_markers(data)
    if not markers:
        return len(data)

    weights: dict[int, int] = {}
    for marker, following in zip(markers, [*markers[1:], None]):
        last = following.start - 1 if following is not None else len(data) - 1
        for idx in range(marker.end + 1, last + 1):
            weights[idx] = 1

    for marker in markers:
        for idx in range(marker.start + 1, marker.reach + 1):
            if idx in weights:
                weights[idx] *= marker.repeat

    return markers[0].start + sum(weights.values())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Measure decompressed data length.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    data = read_compressed_data(args.path)
    print(f"Part 1 = {decompressed_len(data)}")
    print(f"Part 2 = {rec_decomp_len(data)}")


if __name__ == "__main__":
    main()