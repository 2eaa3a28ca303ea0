"""Search the cubicle maze whose walls follow a bit-count formula."""

from __future__ import annotations

import argparse

Point = tuple[int, int]


class Maze:
    """An unbounded maze seeded by the designer's favourite number."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self.start: Point = (1, 1)

    def is_open_space(self, point: Point) -> bool:
        """Open when the formula's value has an even number of set bits."""
        x, y = point
        number = x * x + 3 * x + 2 * x * y + y + y * y + self.seed
        return bin(number).count("1") % 2 == 0

    def next_viable_moves(self, point: Point) -> list[Point]:
        """Open neighbours above, below, left and right, never at negative coordinates."""
        x, y = point
        candidates = []
        if y > 0:
            candidates.append((x, y - 1))
        candidates.append((x, y + 1))
        if x > 0:
            candidates.append((x - 1, y))
        candidates.append((x + 1, y))
        return [candidate for candidate in candidates if self.is_open_space(candidate)]

    def _expand(self, frontier: set[Point], seen: set[Point]) -> set[Point]:
        following: set[Point] = set()
        for point in frontier:
            for neighbour in self.next_viable_moves(point):
                if neighbour not in seen:
                    following.add(neighbour)
                    seen.add(neighbour)
        return following

    def shortest_route_to_point(self, end_point: Point) -> int:
        """Fewest steps from the start to the given point."""
        seen: set[Point] = set()
        frontier = {self.start}
        moves = 0
        while end_point not in frontier:
            if not frontier:
                raise ValueError(f"{end_point} cannot be reached")
            frontier = self._expand(frontier, seen)
            moves += 1
        return moves

    def location_coverage(self, num_steps: int) -> int:
        """Number of distinct locations stepped onto within the given number of steps."""
        seen: set[Point] = set()
        frontier = {self.start}
        for _ in range(num_steps):
            frontier = self._expand(frontier, seen)
        return len(seen)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Explore the cubicle maze.")
    parser.add_argument("seed", nargs="?", type=int, default=1358)
    parser.add_argument("--target", type=int, nargs=2, default=(31, 39))
    parser.add_argument("--steps", type=int, default=50)
    args = parser.parse_args(argv)

    maze = Maze(args.seed)
    print(f"Part 1 = {maze.shortest_route_to_point(tuple(args.target))}")
    print(f"Part 2 = {maze.location_coverage(args.steps)}")


if __name__ == "__main__":
    main()