"""Check IPv7 addresses for TLS (ABBA) and SSL (ABA/BAB) support."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

Group = tuple[str, str, str]


@dataclass(frozen=True)
class Segment:
    """A run of an address, either inside square brackets (hypernet) or outside."""

    text: str
    hypernet: bool = False


def parse_address(line: str) -> list[Segment]:
    """Split one address line into its supernet and hypernet segments."""
    segments: list[Segment] = []
    current: list[str] = []

    def flush(hypernet: bool) -> None:
        if current:
            segments.append(Segment("".join(current), hypernet))
            current.clear()

    for char in line:
        if char == "[":
            flush(False)
        elif char == "]":
            flush(True)
        elif char == "\n":
            break
        else:
            current.append(char)
    flush(False)
    return segments


def read_ip_addresses(path: str | Path) -> list[list[Segment]]:
    """Read and parse one address per line."""
    lines = Path(path).read_text(encoding="utf-8").split("\n")
    if lines[-1] == "":
        lines.pop()
    return [parse_address(line) for line in lines]


def comp_has_abba(component: str) -> bool:
    """True when the text holds a four-character ``xyyx`` pattern with x != y."""
    return any(
        a == d and b == c and a != b
        for a, b, c, d in zip(component, component[1:], component[2:], component[3:])
    )


def find_aba_groups(component: str, reverse: bool = False) -> list[Group]:
    """Find every ``xyx`` pattern; with ``reverse`` report each as its ``yxy`` twin."""
    return [
        (b, a, b) if reverse else (a, b, a)
        for a, b, c in zip(component, component[1:], component[2:])
        if a == c and a != b
    ]


def ip_support_tls(address: Sequence[Segment]) -> bool:
    """An ABBA outside the brackets and none inside them."""
    if any(comp_has_abba(seg.text) for seg in address if seg.hypernet):
        return False
    return any(comp_has_abba(seg.text) for seg in address if not seg.hypernet)


def ip_support_ssl(address: Sequence[Segment]) -> bool:
    """An ABA outside the brackets with a matching BAB inside them."""
    outside: set[Group] = set()
    inside: set[Group] = set()
    for seg in address:
        if seg.hypernet:
            inside.update(find_aba_groups(seg.text, True))
        else:
            outside.update(find_aba_groups(seg.text, False))
    return not outside.isdisjoint(inside)


def count_valid_addrs(addresses: Iterable[Sequence[Segment]], ssl: bool = False) -> int:
    check = ip_support_ssl if ssl else ip_support_tls
    return sum(1 for address in addresses if check(address))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count IPv7 addresses supporting TLS/SSL.")
    parser.add_argument("path", nargs="?", default="data/input.txt")
    args = parser.parse_args(argv)

    addresses = read_ip_addresses(args.path)
    print(f"Part 1 = {count_valid_addrs(addresses, False)}")
    print(f"Part 2 = {count_valid_addrs(addresses, True)}")


if __name__ == "__main__":
    main()