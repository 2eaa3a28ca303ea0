"""Run assembunny code on a four-register computer."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

REGISTER_COUNT = 4


@dataclass(frozen=True)
class CopyValue:
    """cpy <integer> <register>"""

    value: int
    target: int


@dataclass(frozen=True)
class CopyRegister:
    """cpy <register> <register>"""

    source: int
    target: int


@dataclass(frozen=True)
class Increment:
    """inc <register>"""

    register: int


@dataclass(frozen=True)
class Decrement:
    """dec <register>"""

    register: int


@dataclass(frozen=True)
class JumpValue:
    """jnz <integer> <offset>"""

    value: int
    offset: int


@dataclass(frozen=True)
class JumpRegister:
    """jnz <register> <offset>"""

    register: int
    offset: int


Instruction = CopyValue | CopyRegister | Increment | Decrement | JumpValue | JumpRegister


def _reg(name: str) -> int:
    return ord(name) - ord("a")


_PARSERS = (
    (re.compile(r"cpy (-?\d+) ([a-z])"), lambda m: CopyValue(int(m[1]), _reg(m[2]))),
    (re.compile(r"cpy ([a-z]) ([a-z])"), lambda m: CopyRegister(_reg(m[1]), _reg(m[2]))),
    (re.compile(r"inc ([a-z])"), lambda m: Increment(_reg(m[1]))),
    (re.compile(r"dec ([a-z])"), lambda m: Decrement(_reg(m[1]))),
    (re.compile(r"jnz (-?\d+) (-?\d+)"), lambda m: JumpValue(int(m[1]), int(m[2]))),
    (re.compile(r"jnz ([a-z]) (-?\d+)"), lambda m: JumpRegister(_reg(m[1]), int(m[2]))),
)


def parse_instructs(lines: Iterable[str]) -> list[Instruction]:
    """Parse every line holding a known instruction; other lines are skipped."""
    program: list[Instruction] = []
    for line in lines:
        for pattern, build in _PARSERS:
            match = pattern.search(line)
            if match:
                program.append(build(match))
                break
    return program


def read_program(path: str | Path) -> list[Instruction]:
    with open(path, encoding="utf-8") as handle:
        return parse_instructs(handle)


class Computer:
    """Four registers, a program and an instruction pointer."""

    def __init__(self, instructions: Iterable[Instruction] = ()) -> None:
        self.instructions = list(instructions)
        self.registers = [0] * REGISTER_COUNT
        self.idx = 0

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        if not 0 <= self.idx < len(self.instructions):
            raise IndexError(f"instruction pointer {self.idx} is outside the program")
        match self.instructions[self.idx]:
            case CopyValue(value, target):
                self.registers[target] = value
                self.idx += 1
            case CopyRegister(source, target):
                self.registers[target] = self.registers[source]
                self.idx += 1
            case Increment(register):
                self.registers[register] += 1
                self.idx += 1
            case Decrement(register):
                self.registers[register] -= 1
                self.idx += 1
            case JumpValue(value, offset):
                self.idx += offset if value != 0 else 1
            case JumpRegister(register, offset):
                self.idx += offset if self.registers[register] != 0 else 1

    def execute_all(self) -> None:
        """Run until the instruction pointer leaves the program."""
        while 0 <= self.idx < len(self.instructions):
            self.step()

    def reset(self) -> None:
        """Clear the registers and rewind to the first instruction."""
        self.registers = [0] * REGISTER_COUNT
        self.idx = 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the monorail password program.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    computer = Computer(read_program(args.path))
    computer.execute_all()
    print(f"Part 1 = {computer.registers[0]}")

    computer.reset()
    computer.registers[2] = 1
    computer.execute_all()
    print(f"Part 2 = {computer.registers[0]}")


if __name__ == "__main__":
    main()