"""Elementary conversions, arithmetic, branching and tabulation."""

from __future__ import annotations

_GRADE_COMMENTS = {
    "A": "excellent",
    "B": "good",
    "C": "fair",
    "D": "barely passing",
    "F": "not passing",
}


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return (9.0 / 5.0) * celsius + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (5.0 / 9.0) * (fahrenheit - 32.0)


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the dividend's sign."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def integer_arithmetic(a: int, b: int) -> dict[str, int]:
    """Return the results of ``+ - * / %`` on two integers.

    Division truncates toward zero and the remainder keeps the sign of ``a``.
    """
    quotient, remainder = _truncating_divmod(a, b)
    return {
        "+": a + b,
        "-": a - b,
        "*": a * b,
        "/": quotient,
        "%": remainder,
    }


def grade_comment(grade: str, ignore_case: bool = False) -> str:
    """Describe a letter grade; lower-case letters count only with ``ignore_case``."""
    key = grade.upper() if ignore_case else grade
    try:
        return _GRADE_COMMENTS[key]
    except KeyError:
        raise ValueError(f"invalid character: {grade!r}") from None


def classify_number(a: int) -> str:
    """Return ``"A"`` for 0 to 2, ``"B"`` for 3 or 4; anything else is invalid."""
    if a in (0, 1, 2):
        return "A"
    if a in (3, 4):
        return "B"
    raise ValueError(f"invalid number: {a}")


def parity_labels(n: int = 10) -> list[str]:
    """Label each of ``0 .. n-1`` as ``"i:odd"`` or ``"i:even"``."""
    return [f"{i}:{'odd' if i % 2 else 'even'}" for i in range(n)]


def multiplication_table(size: int = 9) -> list[list[int]]:
    """Build a ``size`` by ``size`` table of products of ``1 .. size``."""
    factors = range(1, size + 1)
    return [[i * j for j in factors] for i in factors]


def format_table(table: list[list[int]]) -> str:
    """Render rows of numbers as zero-padded two-digit columns."""
    return "".join(
        "".join(f"{value:02d} " for value in row) + "\n" for row in table
    )