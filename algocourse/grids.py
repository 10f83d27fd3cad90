"""Random two- and three-dimensional integer grids and their text form."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from typing import Any


def _check_dimensions(*sizes: int) -> None:
    if any(size < 0 for size in sizes):
        raise ValueError("dimensions must not be negative")


def _check_modulus(modulus: int) -> None:
    if modulus <= 0:
        raise ValueError("modulus must be positive")


def random_grid(
    rows: int = 768,
    columns: int = 1024,
    modulus: int = 10,
    rng: random.Random | None = None,
) -> list[list[int]]:
    """Return ``rows`` lists of ``columns`` random integers in ``0 .. modulus-1``."""
    _check_dimensions(rows, columns)
    _check_modulus(modulus)
    rng = rng or random.Random()
    return [[rng.randrange(modulus) for _ in range(columns)] for _ in range(rows)]


def random_cube(
    x: int = 10,
    y: int = 20,
    z: int = 30,
    modulus: int = 10,
    rng: random.Random | None = None,
) -> list[list[list[int]]]:
    """Return an ``x`` by ``y`` by ``z`` nest of random integers below ``modulus``."""
    _check_dimensions(x, y, z)
    _check_modulus(modulus)
    rng = rng or random.Random()
    return [
        [[rng.randrange(modulus) for _ in range(z)] for _ in range(y)]
        for _ in range(x)
    ]


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render each row as space-terminated values on its own line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in grid)


def _walk(item: Any) -> Iterator[int]:
    if isinstance(item, (list, tuple)):
        for element in item:
            yield from _walk(element)
    else:
        yield item


def flatten(grid: Sequence[Any]) -> list[int]:
    """Return the values of a nested grid in row-major order."""
    return list(_walk(grid))