"""Conway's Game of Life on a wrapping grid."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Iterable


class LifeGrid:
    """A rectangle of live and dead cells whose edges wrap around."""

    def __init__(self, cells: Iterable[Iterable[object]]) -> None:
        rows = [[bool(cell) for cell in row] for row in cells]
        if not rows or not rows[0]:
            raise ValueError("grid must have at least one cell")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("grid rows must all have the same length")
        self._cells = rows

    @classmethod
    def random(
        cls, width: int = 40, height: int = 20, rng: random.Random | None = None
    ) -> LifeGrid:
        """A grid in which each cell is alive with probability one in eight."""
        rng = rng or random.Random()
        return cls(
            [[rng.random() < 1 / 8 for _ in range(width)] for _ in range(height)]
        )

    @property
    def width(self) -> int:
        return len(self._cells[0])

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def cells(self) -> list[list[bool]]:
        """A copy of the cells, row by row."""
        return [list(row) for row in self._cells]

    @property
    def population(self) -> int:
        """Number of live cells."""
        return sum(sum(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeGrid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"LifeGrid(width={self.width}, height={self.height})"

    def _neighbours(self, y: int, x: int) -> int:
        height, width = self.height, self.width
        return sum(
            self._cells[(y + dy) % height][(x + dx) % width]
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if dy or dx
        )

    def evolve(self) -> None:
        """Advance the grid by one generation."""
        self._cells = [
            [
                (n := self._neighbours(y, x)) == 3 or (n == 2 and alive)
                for x, alive in enumerate(row)
            ]
            for y, row in enumerate(self._cells)
        ]

    def render(self, generation: int) -> str:
        """Plain-text picture with a generation header: ``*`` alive, ``.`` dead."""
        lines = [f"[Generation: {generation:05d}]"]
        lines.extend("".join("*" if cell else "." for cell in row) for row in self._cells)
        return "\n".join(lines) + "\n\n"

    def render_escape(self) -> str:
        """Terminal picture drawn from the home position in reverse video."""
        rows = (
            "".join("\x1b[07m  \x1b[m" if cell else "  " for cell in row) + "\x1b[E"
            for row in self._cells
        )
        return "\x1b[H" + "".join(rows)


def main(argv: list[str] | None = None) -> int:
    """Run a random grid for a number of generations, printing each one."""
    parser = argparse.ArgumentParser(description="Play the Game of Life.")
    parser.add_argument("--generations", type=int, default=100)
    parser.add_argument("--width", type=int, default=40)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument(
        "--escape", action="store_true", help="redraw in place with terminal escapes"
    )
    parser.add_argument(
        "--delay", type=float, help="seconds between generations (1 with --escape)"
    )
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("width and height must be positive")

    delay = args.delay if args.delay is not None else (1.0 if args.escape else 0.0)
    grid = LifeGrid.random(args.width, args.height, random.Random(args.seed))
    for generation in range(args.generations):
        picture = grid.render_escape() if args.escape else grid.render(generation)
        sys.stdout.write(picture)
        sys.stdout.flush()
        grid.evolve()
        if delay > 0:
            time.sleep(delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())