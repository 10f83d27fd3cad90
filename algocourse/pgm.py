"""Plain-text PGM (P2) images and 3x3 convolution filters."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from collections.abc import Sequence

Kernel = Sequence[Sequence[float]]

LAPLACIAN_8: Kernel = (
    (-1.0, -1.0, -1.0),
    (-1.0, 8.0, -1.0),
    (-1.0, -1.0, -1.0),
)
SOBEL_DIAGONAL: Kernel = (
    (0.0, -1.0, -2.0),
    (1.0, 0.0, -1.0),
    (2.0, 1.0, 0.0),
)
GAUSSIAN_3: Kernel = (
    (1 / 16, 2 / 16, 1 / 16),
    (2 / 16, 4 / 16, 2 / 16),
    (1 / 16, 2 / 16, 1 / 16),
)
KERNELS: dict[str, Kernel] = {
    "laplacian8": LAPLACIAN_8,
    "sobel-d": SOBEL_DIAGONAL,
    "gaussian": GAUSSIAN_3,
}


class PgmFormatError(ValueError):
    """Raised when text is not a well-formed P2 image."""


@dataclass
class PgmImage:
    """A greyscale image: ``pixels`` holds ``height`` rows of ``width`` values."""

    width: int
    height: int
    maxval: int
    pixels: list[list[float]]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(self.pixels) != self.height or any(
            len(row) != self.width for row in self.pixels
        ):
            raise ValueError("pixel rows do not match the image dimensions")


def parse_pgm(text: str) -> PgmImage:
    """Parse a P2 image from its text."""
    tokens = text.split()
    if not tokens or tokens[0] != "P2":
        raise PgmFormatError("Not PGM(P2) file!")
    if len(tokens) < 4:
        raise PgmFormatError("incomplete header")
    try:
        width, height, maxval = (int(token) for token in tokens[1:4])
    except ValueError:
        raise PgmFormatError("header values must be integers") from None
    if width < 0 or height < 0:
        raise PgmFormatError("image dimensions must not be negative")
    values = tokens[4:]
    if len(values) < width * height:
        raise PgmFormatError("not enough pixel values")
    try:
        flat = [float(token) for token in values[: width * height]]
    except ValueError:
        raise PgmFormatError("pixel values must be numbers") from None
    rows = [flat[start : start + width] for start in range(0, width * height, width)] if width else [
        [] for _ in range(height)
    ]
    return PgmImage(width, height, maxval, rows)


def read_pgm(path: str | PathLike[str]) -> PgmImage:
    """Read a P2 image from a file."""
    return parse_pgm(Path(path).read_text(encoding="ascii"))


def format_pgm(image: PgmImage) -> str:
    """Render an image as P2 text, each pixel truncated to an integer."""
    header = f"P2\n{image.width} {image.height} \n{image.maxval} \n"
    body = "".join(
        "".join(f"{int(value):2d} " for value in row) + "\n" for row in image.pixels
    )
    return header + body


def write_pgm(image: PgmImage, path: str | PathLike[str]) -> None:
    """Write an image to a file as P2 text."""
    Path(path).write_text(format_pgm(image), encoding="ascii")


def convolve(image: PgmImage, kernel: Kernel) -> PgmImage:
    """Apply a square, odd-sized ``kernel`` to ``image``.

    Each result is truncated to an integer and clamped to ``0 .. maxval``.
    Pixels closer to the edge than the kernel's radius are left at zero.
    """
    size = len(kernel)
    if size == 0 or size % 2 == 0 or any(len(row) != size for row in kernel):
        raise ValueError("kernel must be square with an odd size")
    radius = (size - 1) // 2
    source = image.pixels
    output = [[0.0] * image.width for _ in range(image.height)]
    for i in range(radius, image.height - radius):
        window_rows = source[i - radius : i + radius + 1]
        for j in range(radius, image.width - radius):
            total = sum(
                weight * value
                for kernel_row, pixel_row in zip(kernel, window_rows)
                for weight, value in zip(kernel_row, pixel_row[j - radius : j + radius + 1])
            )
            value = int(total)
            if value > image.maxval:
                value = image.maxval
            if value < 0:
                value = 0
            output[i][j] = float(value)
    return PgmImage(image.width, image.height, image.maxval, output)


def main(argv: list[str] | None = None) -> int:
    """Filter a P2 image and write the result."""
    parser = argparse.ArgumentParser(description="Apply a 3x3 filter to a PGM image.")
    parser.add_argument("input", nargs="?", default="sample.pgm")
    parser.add_argument("output", nargs="?", help="defaults to <filter>.pgm")
    parser.add_argument("--filter", choices=sorted(KERNELS), default="laplacian8")
    args = parser.parse_args(argv)
    output = args.output or f"{args.filter}.pgm"

    try:
        image = read_pgm(args.input)
    except OSError:
        print(f"Can not open file [{args.input}]", file=sys.stderr)
        return 1
    except PgmFormatError as exc:
        print(exc, file=sys.stderr)
        return 2
    print(f"image:P2 [{image.width}x{image.height}] ({image.maxval})")

    result = convolve(image, KERNELS[args.filter])
    try:
        write_pgm(result, output)
    except OSError:
        print(f"Can not open file [{output}]", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())