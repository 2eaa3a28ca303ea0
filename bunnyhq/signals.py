"""Recover a message from repeated noisy transmissions by letter frequency."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Sequence
from pathlib import Path


def read_signal_data(path: str | Path) -> list[str]:
    """Read the recorded lines, dropping the final character of each."""
    with open(path, encoding="utf-8", newline="") as handle:
        return [line[:-1] for line in handle]


def find_freq_msg(data: Sequence[str], minimal: bool = False) -> str:
    """Pick the most common character of each column, or the least common."""
    if not data:
        raise ValueError("no signal data to decode")

    message = []
    for column in zip(*data, strict=True):
        counts = Counter(column)
        if minimal:
            char = min(counts.items(), key=lambda item: item[1])[0]
        else:
            char = counts.most_common(1)[0][0]
        message.append(char)
    return "".join(message)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Error-correct the signal.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    signal = read_signal_data(args.path)
    print(f"Part 1 = {find_freq_msg(signal, False)}")
    print(f"Part 2 = {find_freq_msg(signal, True)}")


if __name__ == "__main__":
    main()