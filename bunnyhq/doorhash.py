"""Recover a door password from MD5 hashes of a door id and a counter."""

from __future__ import annotations

import argparse
import hashlib
from collections.abc import Iterator
from itertools import count

_PREFIX = "00000"
_UNSET = "*"


def md5_idx_hash(seed: str, index: int) -> str:
    """Hex MD5 digest of the seed followed by the decimal index."""
    return hashlib.md5(f"{seed}{index}".encode(), usedforsecurity=False).hexdigest()


def is_char_hash(digest: str) -> bool:
    """True when the hex digest starts with five zeroes."""
    return digest[:5] == _PREFIX


def _char_hashes(seed: str) -> Iterator[str]:
    """Yield, in index order, every hex digest that starts with five zeroes."""
    base = hashlib.md5(seed.encode(), usedforsecurity=False)
    for index in count():
        hasher = base.copy()
        hasher.update(str(index).encode())
        raw = hasher.digest()
        if raw[0] == 0 and raw[1] == 0 and raw[2] < 0x10:
            yield hasher.hexdigest()


def decipher_password(seed: str, length: int = 8, pos_based: bool = False) -> str:
    """Build the password from the hashes that start with five zeroes.

    Without ``pos_based`` the sixth hex digit is the next character. With it the
    sixth digit gives the position and the seventh the character; invalid or
    already filled positions are ignored.
    """
    password = [_UNSET] * length
    if length == 0:
        return ""

    found = 0
    for digest in _char_hashes(seed):
        if pos_based:
            position = digest[5]
            if not position.isdigit():
                continue
            slot = int(position)
            if slot >= length or password[slot] != _UNSET:
                continue
            password[slot] = digest[6]
        else:
            password[found] = digest[5]
        found += 1
        if found == length:
            break
    return "".join(password)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Crack the door password.")
    parser.add_argument("seed", nargs="?", default="ffykfhsq")
    args = parser.parse_args(argv)

    print(f"Part 1 = {decipher_password(args.seed, 8, False)}")
    print(f"Part 2 = {decipher_password(args.seed, 8, True)}")


if __name__ == "__main__":
    main()