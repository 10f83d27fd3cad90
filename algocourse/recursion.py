"""Small functions: areas, recursion classics and a record update."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class StudentRecord:
    """A student's id, letter grade and average score."""

    id: int
    grade: str
    average: float


def triangle_area(base: float, height: float) -> float:
    """Area of a triangle."""
    return (base * height) / 2.0


def trapezoid_area(a: float, b: float, h: float) -> float:
    """Area of a trapezoid with parallel sides ``a`` and ``b`` and height ``h``."""
    return ((a + b) / 2.0) * h


def factorial(n: int) -> int:
    """Return ``n!``; negative ``n`` is rejected."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("fibonacci is undefined for negative numbers")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def unwind_order(start: int = 0, limit: int = 15) -> list[int]:
    """Values emitted when a recursion descends from ``start`` up to ``limit``
    and reports each level on the way back out."""
    return list(range(limit - 1, start - 1, -1))


def initialize_student_record(student: StudentRecord) -> StudentRecord:
    """Return a reset copy of ``student`` with its id advanced by one."""
    return replace(student, id=student.id + 1, grade="x", average=0.0)