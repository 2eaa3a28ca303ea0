"""Filter decoy rooms by checksum and decrypt the real room names."""

from __future__ import annotations

import argparse
import logging
import re
import string
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_ROOM_RE = re.compile(r"([a-z\-]+)-([0-9]+)\[([a-z]+)\]")
_ALPHABET = string.ascii_lowercase


@dataclass(frozen=True)
class Room:
    """An encrypted room name, its sector id and its checksum."""

    name: str
    sector_id: int
    checksum: str

    def verify(self) -> bool:
        """True when the checksum lists the most common letters, ties alphabetical."""
        weights = {
            char: count - 1 for char, count in Counter(self.name.replace("-", "")).items()
        }
        expected: list[str] = []
        while len(expected) < len(self.checksum):
            best = max(
                (w for c, w in weights.items() if w > 0 and c not in expected), default=0
            )
            ties = sorted(c for c, w in weights.items() if w == best)
            if not ties:
                return False
            expected.extend(ties)
        return expected[: len(self.checksum)] == list(self.checksum)

    def decrypt_name(self) -> str:
        """Shift each letter forward by the sector id; dashes become spaces."""
        return "".join(
            " "
            if char == "-"
            else _ALPHABET[(ord(char) - ord("a") + self.sector_id) % len(_ALPHABET)]
            for char in self.name
        )


def read_rooms(path: str | Path) -> list[Room]:
    """Read the room list, skipping lines that do not parse."""
    rooms = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            match = _ROOM_RE.search(line)
            if match is None:
                logger.warning("Line could not be parsed: %s", line.rstrip("\n"))
                continue
            name, sector_id, checksum = match.groups()
            rooms.append(Room(name, int(sector_id), checksum))
    return rooms


def sum_real_rooms(rooms: Iterable[Room]) -> int:
    return sum(room.sector_id for room in rooms if room.verify())


def find_north_pole_room(rooms: Iterable[Room]) -> int:
    """Return the sector id of the first room whose name mentions north and pole."""
    for room in rooms:
        name = room.decrypt_name()
        if "north" in name and "pole" in name:
            return room.sector_id
    raise LookupError("Room not found!")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the real rooms.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    rooms = read_rooms(args.path)
    print(f"Part 1 = {sum_real_rooms(rooms)}")
    print(f"Part 2 = {find_north_pole_room(rooms)}")


if __name__ == "__main__":
    main()