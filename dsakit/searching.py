"""Searching exercises on arrays: binary searches, peaks, medians, duplicates and more."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import cache


def _feasible(pages: Sequence[int], k: int, limit: int) -> bool:
    required, total = 1, 0
    for count in pages:
        if total + count > limit:
            required += 1
            total = count
        else:
            total += count
    return required <= k


def min_pages(pages: Sequence[int], k: int) -> int:
    """Smallest possible maximum load when splitting ``pages`` into ``k`` contiguous parts."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if not pages:
        return 0
    low, high = max(pages), sum(pages)
    result = high
    while low <= high:
        mid = (low + high) // 2
        if _feasible(pages, k, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def min_pages_naive(pages: Sequence[int], k: int) -> int:
    """Same as :func:`min_pages`, by trying every position for each cut."""
    if k < 1:
        raise ValueError("k must be at least 1")
    values = tuple(pages)
    if not values:
        return 0

    @cache
    def best(n: int, parts: int) -> int:
        if parts == 1:
            return sum(values[:n])
        if n == 1:
            return values[0]
        return min(
            max(best(i, parts - 1), sum(values[i:n])) for i in range(1, n)
        )

    return best(len(values), k)


def count_ones(arr: Sequence[int]) -> int:
    """Number of ones in a sorted array of zeros and ones."""
    return len(arr) - bisect_left(arr, 1)


def linear_first_occurrence(arr: Iterable[object], x: object) -> int:
    """Index of the first ``x`` found by scanning, or -1."""
    return next((index for index, value in enumerate(arr) if value == x), -1)


def first_occurrence(arr: Sequence[int], x: int) -> int:
    """Index of the first ``x`` in a sorted array, or -1."""
    index = bisect_left(arr, x)
    return index if index < len(arr) and arr[index] == x else -1


def last_occurrence(arr: Sequence[int], x: int) -> int:
    """Index of the last ``x`` in a sorted array, or -1."""
    index = bisect_right(arr, x) - 1
    return index if index >= 0 and arr[index] == x else -1


def count_occurrences(arr: Sequence[int], x: int) -> int:
    """How many times ``x`` occurs in a sorted array."""
    first = first_occurrence(arr, x)
    if first == -1:
        return 0
    return last_occurrence(arr, x) - first + 1


def count_pairs_with_sum(arr: Iterable[int], k: int) -> int:
    """Number of index pairs whose elements add up to ``k``."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in arr:
        pairs += seen[k - value]
        seen[value] += 1
    return pairs


def peak_naive(arr: Sequence[int]) -> int:
    """Value of a peak element (not smaller than its neighbours), edges checked first."""
    size = len(arr)
    if size == 0:
        raise ValueError("array must not be empty")
    if size == 1 or arr[0] >= arr[1]:
        return arr[0]
    if arr[-1] >= arr[-2]:
        return arr[-1]
    return next(
        arr[i]
        for i in range(1, size - 1)
        if arr[i] >= arr[i - 1] and arr[i] >= arr[i + 1]
    )


def peak_index(arr: Sequence[int]) -> int:
    """Index of a peak element found by binary search."""
    size = len(arr)
    if size == 0:
        raise ValueError("array must not be empty")
    low, high = 0, size - 1
    while low <= high:
        mid = (low + high) // 2
        if (mid == 0 or arr[mid - 1] <= arr[mid]) and (
            mid == size - 1 or arr[mid + 1] <= arr[mid]
        ):
            return mid
        if mid > 0 and arr[mid - 1] >= arr[mid]:
            high = mid - 1
        else:
            low = mid + 1
    raise RuntimeError("no peak found")


def median_of_two_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of the union of two sorted arrays, by binary search on the shorter one."""
    if len(a) > len(b):
        a, b = b, a
    n1, n2 = len(a), len(b)
    if n1 + n2 == 0:
        raise ValueError("arrays must not both be empty")
    begin, end = 0, n1
    while begin <= end:
        i1 = (begin + end) // 2
        i2 = (n1 + n2 + 1) // 2 - i1
        min1 = a[i1] if i1 < n1 else math.inf
        max1 = a[i1 - 1] if i1 > 0 else -math.inf
        min2 = b[i2] if i2 < n2 else math.inf
        max2 = b[i2 - 1] if i2 > 0 else -math.inf
        if max1 <= min2 and max2 <= min1:
            if (n1 + n2) % 2 == 0:
                return (max(max1, max2) + min(min1, min2)) / 2
            return float(max(max1, max2))
        if max1 > min2:
            end = i1 - 1
        else:
            begin = i1 + 1
    raise ValueError("arrays must be sorted")


def find_repeating_naive(arr: Iterable[int]) -> int:
    """Smallest value that occurs more than once, found by sorting."""
    ordered = sorted(arr)
    for previous, current in zip(ordered, ordered[1:]):
        if previous == current:
            return current
    raise ValueError("no repeating element")


def find_repeating(arr: Sequence[int]) -> int:
    """Repeated value of an array of n elements drawn from 0..n-2, by cycle detection."""
    size = len(arr)
    if size < 2 or any(not 0 <= value <= size - 2 for value in arr):
        raise ValueError("need n >= 2 elements, each between 0 and n - 2")
    slow = fast = arr[0] + 1
    while True:
        slow = arr[slow] + 1
        fast = arr[arr[fast] + 1] + 1
        if slow == fast:
            break
    slow = arr[0] + 1
    while slow != fast:
        slow = arr[slow] + 1
        fast = arr[fast] + 1
    return slow - 1


def search_unbounded(arr: Iterable[int], x: int) -> int:
    """Index of ``x`` in a sorted, possibly endless, stream; -1 once passed or exhausted."""
    for index, value in enumerate(arr):
        if value == x:
            return index
        if value > x:
            return -1
    return -1


def search_rotated(arr: Sequence[int], x: int) -> int:
    """Index of ``x`` in a rotated sorted array of distinct values, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == x:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= x < arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] < x <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def isqrt_floor(x: int) -> int:
    """Largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("x must not be negative")
    low, high, answer = 0, x, 0
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square > x:
            high = mid - 1
        else:
            answer = mid
            low = mid + 1
    return answer