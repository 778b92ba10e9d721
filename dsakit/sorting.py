"""Sorting algorithms, partition schemes and quickselect."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def _check_range(values: MutableSequence[Any], low: int, high: int) -> None:
    if not 0 <= low <= high < len(values):
        raise IndexError(f"range [{low}, {high}] is out of bounds")


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy by adjacent swaps, stopping early once a pass makes no swap."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bucket_sort(values: Iterable[int], k: int) -> list[int]:
    """Sorted copy of non-negative integers spread over ``k`` value-range buckets."""
    if k < 1:
        raise ValueError("k must be at least 1")
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("bucket sort needs non-negative values")
    bound = max(items) + 1
    buckets: list[list[int]] = [[] for _ in range(k)]
    for value in items:
        buckets[k * value // bound].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def counting_sort(values: Iterable[int], k: int) -> list[int]:
    """Sorted copy of integers that all lie in ``0 .. k - 1``."""
    items = list(values)
    if any(not 0 <= value < k for value in items):
        raise ValueError(f"values must lie between 0 and {k - 1}")
    counts = [0] * k
    for value in items:
        counts[value] += 1
    for i in range(1, k):
        counts[i] += counts[i - 1]
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def cycle_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy that writes each element straight to its final place."""
    items = list(values)
    size = len(items)
    for start in range(size - 1):
        item = items[start]
        pos = start + sum(1 for other in items[start + 1:] if other < item)
        if pos == start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = start + sum(1 for other in items[start + 1:] if other < item)
            while item == items[pos]:
                pos += 1
            items[pos], item = item, items[pos]
    return items


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy built from a max-heap by repeatedly moving the top to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Stable sorted copy by inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy by swapping the minimum of the unsorted tail into place."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sorted(a: Iterable[Any], b: Iterable[Any]) -> list[Any]:
    """Merge two sorted sequences, taking from ``a`` first on ties."""
    left, right = list(a), list(b)
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable sorted copy by divide and conquer."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy by quicksort around the middle element of each range."""
    items = list(values)
    ranges = [(0, len(items) - 1)] if items else []
    while ranges:
        low, high = ranges.pop()
        i, j = low, high
        pivot = items[(low + high) // 2]
        while i <= j:
            while items[i] < pivot:
                i += 1
            while items[j] > pivot:
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if low < j:
            ranges.append((low, j))
        if i < high:
            ranges.append((i, high))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy of non-negative integers, one decimal digit at a time."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("radix sort needs non-negative values")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        digits: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            digits[value // exp % 10].append(value)
        items = [value for bucket in digits for value in bucket]
        exp *= 10
    return items


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy of a sequence of 0s, 1s and 2s in a single pass."""
    items = list(values)
    if any(value not in (0, 1, 2) for value in items):
        raise ValueError("values must be 0, 1 or 2")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def hoare_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low..high]`` in place around its first element.

    Returns ``j`` with every element of ``low..j`` not greater than every
    element of ``j + 1..high``.
    """
    _check_range(values, low, high)
    pivot = values[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def lomuto_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low..high]`` in place around its last element; return the pivot's index."""
    _check_range(values, low, high)
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def naive_partition(
    values: MutableSequence[Any], low: int, high: int, pivot_index: int
) -> int:
    """Stable partition of ``values[low..high]`` around ``values[pivot_index]``.

    Smaller elements come first, then those equal to the pivot, then larger
    ones; returns the index of the last element equal to the pivot.
    """
    _check_range(values, low, high)
    if not low <= pivot_index <= high:
        raise IndexError(f"pivot index {pivot_index} is outside the range")
    pivot = values[pivot_index]
    segment = list(values[low:high + 1])
    less = [value for value in segment if value < pivot]
    equal = [value for value in segment if value == pivot]
    greater = [value for value in segment if value > pivot]
    values[low:high + 1] = less + equal + greater
    return low + len(less) + len(equal) - 1


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """The ``k``-th smallest element (1-based), found by quickselect."""
    work = list(values)
    if not 1 <= k <= len(work):
        raise ValueError("k must lie between 1 and the number of values")
    low, high = 0, len(work) - 1
    while True:
        p = lomuto_partition(work, low, high)
        if p == k - 1:
            return work[p]
        if p > k - 1:
            high = p - 1
        else:
            low = p + 1