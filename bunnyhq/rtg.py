"""Move generators and microchips to the top floor without frying any chip."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Sequence
from itertools import chain, combinations
from pathlib import Path

MAX_LEVEL = 3

State = tuple[int, ...]

_GENERATOR_RE = re.compile(r"([A-Za-z]+) generator")
_MICROCHIP_RE = re.compile(r"([A-Za-z]+)-compatible microchip")


def read_generator_state(path: str | Path, extra: bool = False) -> State:
    """Read the floor layout into a state.

    The state is the elevator floor, then every generator's floor, then every
    microchip's floor, each group in alphabetical order of element. With
    ``extra`` two more elements on the ground floor are added to each group.
    """
    generators: dict[str, int] = {}
    microchips: dict[str, int] = {}
    text = Path(path).read_text(encoding="utf-8")
    for floor, line in enumerate(text.splitlines()):
        for element in _GENERATOR_RE.findall(line):
            generators[element] = floor
        for element in _MICROCHIP_RE.findall(line):
            microchips[element] = floor

    padding = (0, 0) if extra else ()
    return (
        0,
        *(generators[name] for name in sorted(generators)),
        *padding,
        *(microchips[name] for name in sorted(microchips)),
        *padding,
    )


def is_state_safe(state: Sequence[int]) -> bool:
    """True when no chip shares a floor with a generator unless its own is there."""
    count = (len(state) - 1) // 2
    generators = state[1 : 1 + count]
    chips = state[1 + count : 1 + 2 * count]
    occupied = set(generators)
    return all(gen == chip or chip not in occupied for gen, chip in zip(generators, chips))


def is_state_finished(state: Iterable[int]) -> bool:
    """True when the elevator and every item are on the top floor."""
    return all(level == MAX_LEVEL for level in state)


def _shifted(state: Sequence[int], items: Iterable[int], delta: int) -> State:
    moved = list(state)
    moved[0] += delta
    for item in items:
        moved[item] += delta
    return tuple(moved)


def create_next_states(state: Sequence[int]) -> list[State]:
    """Every safe state reached by riding the elevator one floor with one or two items."""
    elevator = state[0]
    movable = [idx for idx in range(1, len(state)) if state[idx] == elevator]
    loads = chain(((idx,) for idx in movable), combinations(movable, 2))

    states: list[State] = []
    for load in loads:
        for delta in (1, -1):
            if not 0 <= elevator + delta <= MAX_LEVEL:
                continue
            candidate = _shifted(state, load, delta)
            if is_state_safe(candidate):
                states.append(candidate)
    return states


def find_min_move_to_top(state: Sequence[int]) -> int:
    """Fewest elevator moves that bring everything to the top floor."""
    start = tuple(state)
    if is_state_finished(start):
        return 0

    seen = {start}
    frontier = {start}
    moves = 0
    while frontier:
        following: set[State] = set()
        for current in frontier:
            for candidate in create_next_states(current):
                if candidate in seen:
                    continue
                seen.add(candidate)
                if is_state_finished(candidate):
                    return moves + 1
                following.add(candidate)
        frontier = following
        moves += 1
    raise ValueError("the top floor cannot be reached from this state")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count moves to the assembly floor.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    print(f"Part 1 = {find_min_move_to_top(read_generator_state(args.path, False))}")
    print(f"Part 2 = {find_min_move_to_top(read_generator_state(args.path, True))}")


if __name__ == "__main__":
    main()