"""Three-way string comparison in the manner of ``strcmp`` and ``strncmp``."""

from __future__ import annotations

from collections.abc import Iterable


def compare(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""
    return (a > b) - (a < b)


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most the first ``n`` characters of ``a`` and ``b``."""
    if n < 0:
        raise ValueError("prefix length must not be negative")
    return compare(a[:n], b[:n])


def comparison_report(pairs: Iterable[tuple[str, str]], n: int | None = None) -> str:
    """Report the comparison of each pair, one line per pair after a heading.

    With ``n`` given, only the first ``n`` characters are compared.
    """
    if n is None:
        lines = ["strcmp(str1, str2)"]
        lines.extend(f"[{a}] [{b}] ({compare(a, b)})" for a, b in pairs)
    else:
        lines = [f"strncmp(str1, str2, {n})"]
        lines.extend(f"[{a}] [{b}] ({compare_prefix(a, b, n)})" for a, b in pairs)
    return "\n".join(lines) + "\n"