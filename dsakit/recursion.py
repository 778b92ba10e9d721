"""Classic recursive exercises: Josephus, factorial, Fibonacci, powers and counting."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def josephus(n: int, k: int) -> int:
    """1-based safe position among ``n`` people when every ``k``-th is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    position = 1
    for size in range(2, n + 1):
        position = (position + k - 1) % size + 1
    return position


def factorial(n: int) -> int:
    """n! for a non-negative integer."""
    _require_non_negative("n", n)
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number with F(0) = 0 and F(1) = 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def power(x: int, n: int) -> int:
    """x raised to ``n`` by repeated multiplication."""
    _require_non_negative("n", n)
    result = 1
    for _ in range(n):
        result *= x
    return result


def fast_power(x: int, n: int) -> int:
    """x raised to ``n`` by repeated squaring."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    half = fast_power(x, n // 2)
    squared = half * half
    return x * squared if n % 2 else squared


def count_down(n: int) -> list[int]:
    """n, n-1, ..., 1."""
    _require_non_negative("n", n)
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """1, 2, ..., n."""
    _require_non_negative("n", n)
    return list(range(1, n + 1))


def binary_search_contains(values: Iterable[int], target: int) -> bool:
    """Sort ``values`` and report by binary search whether ``target`` is among them."""
    ordered = sorted(values)
    index = bisect_left(ordered, target)
    return index < len(ordered) and ordered[index] == target