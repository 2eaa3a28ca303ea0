"""Simulate bots that pass microchips to each other and to output bins."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_ASSIGN_RE = re.compile(r"value (\d+) goes to bot (\d+)")
_GIVE_RE = re.compile(
    r"bot (\d+) gives low to (output|bot) (\d+) and high to (output|bot) (\d+)"
)


@dataclass(frozen=True)
class Assign:
    """Put a chip of the given value into a bot."""

    bot: int
    value: int


@dataclass(frozen=True)
class Give:
    """A bot hands its low and high chips to bots or output bins."""

    bot: int
    low: int
    high: int
    low_is_bot: bool
    high_is_bot: bool


Instruction = Assign | Give


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Parse every line holding an assignment or give instruction; others are skipped."""
    instructions: list[Instruction] = []
    for line in lines:
        if match := _ASSIGN_RE.search(line):
            instructions.append(Assign(int(match[2]), int(match[1])))
        elif match := _GIVE_RE.search(line):
            instructions.append(
                Give(
                    int(match[1]),
                    int(match[3]),
                    int(match[5]),
                    match[2] == "bot",
                    match[4] == "bot",
                )
            )
    return instructions


class Factory:
    """Bots, output bins and the instructions that move chips between them."""

    def __init__(self, instructions: Iterable[Instruction]) -> None:
        self.instructions = list(instructions)
        max_bot = 0
        max_out = 0
        for instruction in self.instructions:
            if isinstance(instruction, Assign):
                max_bot = max(max_bot, instruction.bot)
                continue
            for dest, is_bot in (
                (instruction.low, instruction.low_is_bot),
                (instruction.high, instruction.high_is_bot),
            ):
                if is_bot:
                    max_bot = max(max_bot, dest)
                else:
                    max_out = max(max_out, dest)
        self.bots: list[list[int]] = [[] for _ in range(max_bot + 1)]
        self.outputs: list[list[int]] = [[] for _ in range(max_out + 1)]
        self.used = [False] * len(self.instructions)

    @classmethod
    def from_file(cls, path: str | Path) -> Factory:
        with open(path, encoding="utf-8") as handle:
            return cls(parse_instructions(handle))

    def assign(self, bot: int, value: int) -> None:
        self.bots[bot].append(value)

    def _bins(self, is_bot: bool) -> list[list[int]]:
        return self.bots if is_bot else self.outputs

    def give(self, instruction: Give) -> None:
        """Move the source bot's lowest and highest chips, then empty it."""
        chips = self.bots[instruction.bot]
        if not chips:
            raise ValueError(f"bot {instruction.bot} holds no chips to give")
        low, high = min(chips), max(chips)
        self._bins(instruction.low_is_bot)[instruction.low].append(low)
        self._bins(instruction.high_is_bot)[instruction.high].append(high)
        chips.clear()

    def execute_all(self, val_1: int, val_2: int) -> int:
        """Run every instruction once, returning the bot that compared the two values.

        Gives wait until their bot holds exactly two chips; passes repeat until all
        instructions are used.
        """
        target = sorted((val_1, val_2))
        compared = 0
        while not all(self.used):
            progressed = False
            for idx, instruction in enumerate(self.instructions):
                if self.used[idx]:
                    continue
                if isinstance(instruction, Assign):
                    self.assign(instruction.bot, instruction.value)
                else:
                    chips = self.bots[instruction.bot]
                    if len(chips) != 2:
                        continue
                    if sorted(chips) == target:
                        compared = instruction.bot
                    self.give(instruction)
                self.used[idx] = True
                progressed = True
            if not progressed:
                raise RuntimeError("no remaining instruction can be executed")
        return compared

    def output_prod(self) -> int:
        """Product of the first chip in output bins 0, 1 and 2."""
        return self.outputs[0][0] * self.outputs[1][0] * self.outputs[2][0]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the balance bots.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    factory = Factory.from_file(args.path)
    print(f"Part 1 = {factory.execute_all(61, 17)}")
    print(f"Part 2 = {factory.output_prod()}")


if __name__ == "__main__":
    main()