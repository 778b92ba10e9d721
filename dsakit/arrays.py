"""Array problems solved by sorting or merging: inversions, unions, intervals and gaps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def min_chocolate_difference(values: Iterable[int], m: int) -> int:
    """Smallest gap between the largest and smallest of ``m`` packets handed out."""
    items = sorted(values)
    if m < 1:
        raise ValueError("m must be at least 1")
    if m > len(items):
        raise ValueError("m must not exceed the number of packets")
    return min(items[i + m - 1] - items[i] for i in range(len(items) - m + 1))


def count_inversions_naive(values: Sequence[Any]) -> int:
    """Pairs ``i < j`` with ``values[i] > values[j]``, by checking every pair."""
    return sum(
        1
        for i, earlier in enumerate(values)
        for later in values[i + 1:]
        if earlier > later
    )


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[Any] = []
    crossing = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            crossing += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + crossing


def count_inversions(values: Iterable[Any]) -> int:
    """Number of inversions, counted while merge sorting a copy."""
    return _sort_and_count(list(values))[1]


def intersection(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Distinct values common to two sorted sequences, in order."""
    common: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if i > 0 and a[i] == a[i - 1]:
            i += 1
            continue
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            common.append(a[i])
            i += 1
            j += 1
    return common


def union(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Distinct values of two sorted sequences together, in order."""
    merged: list[Any] = []

    def emit(value: Any) -> None:
        if not merged or merged[-1] != value:
            merged.append(value)

    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            emit(a[i])
            i += 1
        elif a[i] > b[j]:
            emit(b[j])
            j += 1
        else:
            emit(a[i])
            i += 1
            j += 1
    for value in a[i:]:
        emit(value)
    for value in b[j:]:
        emit(value)
    return merged


def max_guests(arrivals: Iterable[int], departures: Iterable[int]) -> int:
    """Most guests present at once; a guest arriving when another leaves meets them."""
    arrive = sorted(arrivals)
    depart = sorted(departures)
    if len(arrive) != len(depart):
        raise ValueError("every guest needs one arrival and one departure")
    if not arrive:
        return 0
    i, j = 1, 0
    current = best = 1
    while i < len(arrive) and j < len(depart):
        if arrive[i] <= depart[j]:
            current += 1
            i += 1
        else:
            current -= 1
            j += 1
        best = max(best, current)
    return best


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Overlapping or touching intervals joined, ordered by start."""
    merged: list[tuple[int, int]] = []
    for start, end in sorted(intervals):
        if merged and merged[-1][1] >= start:
            last_start, last_end = merged[-1]
            merged[-1] = (min(last_start, start), max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def min_difference(values: Iterable[int]) -> int:
    """Smallest difference between any two elements."""
    items = sorted(values)
    if len(items) < 2:
        raise ValueError("need at least two values")
    return min(later - earlier for earlier, later in zip(items, items[1:]))