"""Generate one-time pad keys from salted MD5 hashes with triples and quintets."""

from __future__ import annotations

import argparse
import hashlib
from bisect import bisect_right
from collections.abc import Hashable, Sequence
from itertools import count, groupby

LOOKAHEAD = 1000


class KeyGen:
    """Find key indices in the MD5 stream of a salt followed by a counter."""

    def __init__(self, salt: str | bytes) -> None:
        self.salt = salt.encode() if isinstance(salt, str) else bytes(salt)
        self._base = hashlib.md5(self.salt, usedforsecurity=False)
        self._triples: list[Hashable | None] = []
        self._quintets: dict[Hashable, list[int]] = {}

    def stream(self, index: int) -> str:
        """Hex MD5 digest of the salt followed by the decimal index."""
        hasher = self._base.copy()
        hasher.update(str(index).encode())
        return hasher.hexdigest()

    def find_multiples(self, data: Sequence[Hashable]) -> tuple[list, list]:
        """Return the first tripled item and every item run five or more times."""
        triples: list = []
        quintets: list = []
        for item, run in groupby(data):
            size = sum(1 for _ in run)
            if size >= 3 and not triples:
                triples.append(item)
            if size >= 5 and item not in quintets:
                quintets.append(item)
        return triples, quintets

    def _analyse_to(self, index: int) -> None:
        while len(self._triples) <= index:
            current = len(self._triples)
            triples, quintets = self.find_multiples(self.stream(current))
            self._triples.append(triples[0] if triples else None)
            for item in quintets:
                self._quintets.setdefault(item, []).append(current)

    def _is_key(self, index: int) -> bool:
        self._analyse_to(index + LOOKAHEAD)
        item = self._triples[index]
        if item is None:
            return False
        positions = self._quintets.get(item, [])
        nxt = bisect_right(positions, index)
        return nxt < len(positions) and positions[nxt] <= index + LOOKAHEAD

    def generate(self, num_keys: int) -> list[int]:
        """Indices of the first ``num_keys`` keys, in order."""
        keys: list[int] = []
        for index in count():
            if len(keys) >= num_keys:
                break
            if self._is_key(index):
                keys.append(index)
        return keys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate one-time pad keys.")
    parser.add_argument("salt", nargs="?", default="zpqevtbw")
    parser.add_argument("--keys", type=int, default=64)
    args = parser.parse_args(argv)

    keys = KeyGen(args.salt).generate(args.keys)
    print(f"Part 1 = {keys[-1]}")


if __name__ == "__main__":
    main()