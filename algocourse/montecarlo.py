"""Monte Carlo estimation of pi by sampling points in the unit square."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class PiEstimate:
    """How many of ``points`` samples fell inside the quarter circle."""

    points: int
    inside: int

    @property
    def pi(self) -> float:
        """The estimate of pi."""
        return self.inside / self.points * 4.0

    @property
    def error(self) -> float:
        """Signed difference between the estimate and pi."""
        return self.pi - math.pi


def estimate_pi(points: int = 1000, rng: random.Random | None = None) -> PiEstimate:
    """Sample ``points`` random points and count those within the unit circle."""
    if points <= 0:
        raise ValueError("points must be positive")
    rng = rng or random.Random()
    inside = 0
    for _ in range(points):
        x = rng.random()
        y = rng.random()
        if x * x + y * y <= 1.0:
            inside += 1
    return PiEstimate(points=points, inside=inside)


def pi_series(max_exponent: int = 9, rng: random.Random | None = None) -> Iterator[PiEstimate]:
    """Yield estimates for 10, 100, ... up to ``10 ** max_exponent`` points."""
    rng = rng or random.Random()
    for exponent in range(1, max_exponent + 1):
        yield estimate_pi(10**exponent, rng)


def main(argv: list[str] | None = None) -> int:
    """Print one estimate, or a series of estimates with growing sample sizes."""
    parser = argparse.ArgumentParser(description="Estimate pi by random sampling.")
    parser.add_argument("--points", type=int, default=1000, help="number of samples")
    parser.add_argument(
        "--series",
        type=int,
        metavar="N",
        help="estimate with 10**1 .. 10**N samples instead",
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.series is not None:
        for estimate in pi_series(args.series, rng):
            print(
                f"circle: {estimate.inside:10d}\t"
                f"square: {estimate.points:10d}\t"
                f"PI: {estimate.pi:f} ({estimate.error:+f})"
            )
    else:
        try:
            estimate = estimate_pi(args.points, rng)
        except ValueError as exc:
            parser.error(str(exc))
        print(
            f"circle: {estimate.inside}\t"
            f"square: {estimate.points}\t"
            f"PI: {estimate.pi:f}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())