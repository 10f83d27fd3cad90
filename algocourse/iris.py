"""Reading iris measurements and averaging them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

DEFAULT_LIMIT = 256


@dataclass(frozen=True)
class IrisSample:
    """Sepal and petal measurements of one flower and its species name."""

    sepal_length: float
    sepal_width: float
    petal_length: float
    petal_width: float
    name: str


def _parse_line(line: str, number: int) -> IrisSample:
    fields = line.split(",", 4)
    if len(fields) != 5:
        raise ValueError(f"line {number}: expected five comma-separated fields")
    words = fields[4].split()
    if not words:
        raise ValueError(f"line {number}: missing species name")
    try:
        sl, sw, pl, pw = (float(field) for field in fields[:4])
    except ValueError:
        raise ValueError(f"line {number}: measurements must be numbers") from None
    return IrisSample(sl, sw, pl, pw, words[0])


def parse_iris(lines: Iterable[str], limit: int | None = DEFAULT_LIMIT) -> list[IrisSample]:
    """Parse ``sl,sw,pl,pw,name`` lines, skipping blank ones.

    With ``limit`` set, reading a ``limit``-th sample is an error, so fewer
    than ``limit`` samples are accepted.
    """
    samples: list[IrisSample] = []
    for number, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        samples.append(_parse_line(text, number))
        if limit is not None and len(samples) >= limit:
            raise ValueError("not enough room for the data")
    return samples


def read_iris(path: str | PathLike[str], limit: int | None = DEFAULT_LIMIT) -> list[IrisSample]:
    """Read samples from a file; see :func:`parse_iris`."""
    with Path(path).open(encoding="utf-8") as handle:
        return parse_iris(handle, limit)


def iris_average(samples: Sequence[IrisSample]) -> IrisSample:
    """Average each measurement over ``samples``; the result is named ``average``."""
    if not samples:
        raise ValueError("no samples to average")
    count = len(samples)
    return IrisSample(
        sum(s.sepal_length for s in samples) / count,
        sum(s.sepal_width for s in samples) / count,
        sum(s.petal_length for s in samples) / count,
        sum(s.petal_width for s in samples) / count,
        "average",
    )


def main(argv: list[str] | None = None) -> int:
    """Print the number of samples in a data file and their averages."""
    parser = argparse.ArgumentParser(description="Average iris measurements.")
    parser.add_argument("path", nargs="?", default="iris.dat", help="data file")
    args = parser.parse_args(argv)

    try:
        samples = read_iris(args.path)
        average = iris_average(samples)
    except OSError:
        print(f"ERROR: Can not open file [{args.path}]", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"iris data : {len(samples)}")
    print(f"avg. sepal length: {average.sepal_length:f}")
    print(f"avg. sepal width : {average.sepal_width:f}")
    print(f"avg. petal length: {average.petal_length:f}")
    print(f"avg. petal width : {average.petal_width:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())