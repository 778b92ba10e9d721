"""Small standalone exercises on numbers, strings and arrays."""

from __future__ import annotations

from collections.abc import Sequence

_MOD = 10**9 + 7


def fibonacci_series(n: int) -> list[int]:
    """The first ``n`` Fibonacci terms starting 0, 1."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(max(n, 0)):
        terms.append(current)
        current, following = following, current + following
    return terms


def min_chars_to_append(target: str, text: str) -> int:
    """Characters of ``target`` left unmatched after greedily matching it as a subsequence of ``text``."""
    matched = 0
    for char in text:
        if matched < len(target) and char == target[matched]:
            matched += 1
    return len(target) - matched


def zco_scholarship(rank: int) -> int:
    """Scholarship percentage for a given rank."""
    if 1 <= rank <= 50:
        return 100
    if 51 <= rank <= 100:
        return 50
    return 0


def concatenated_binary(n: int) -> int:
    """Value of the binary representations of 1..n joined together, modulo 10**9 + 7."""
    result = 0
    for value in range(1, n + 1):
        result = ((result << value.bit_length()) % _MOD + value) % _MOD
    return result


def find_closest_elements(arr: Sequence[int], k: int, x: int) -> list[int]:
    """The ``k`` elements of sorted ``arr`` closest to ``x``, smaller ones winning ties."""
    if not 0 <= k <= len(arr):
        raise ValueError("k must lie between 0 and the length of the array")
    left, right = 0, len(arr) - k
    while left < right:
        mid = (left + right) // 2
        if x - arr[mid] > arr[mid + k] - x:
            left = mid + 1
        else:
            right = mid
    return list(arr[left:left + k])


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring, the earliest one when lengths tie."""
    best_left = best_right = 0
    size = len(s)
    for mid in range(size):
        odd_left = odd_right = even_left = even_right = 0
        step = 1
        while mid - step >= 0 and mid + step < size and s[mid - step] == s[mid + step]:
            odd_left, odd_right = mid - step, mid + step
            step += 1
        step = 0
        while (
            mid - step >= 0
            and mid + step + 1 < size
            and s[mid - step] == s[mid + step + 1]
        ):
            even_left, even_right = mid - step, mid + step + 1
            step += 1
        odd = odd_right - odd_left
        even = even_right - even_left
        best = best_right - best_left
        if odd > even and odd > best:
            best_left, best_right = odd_left, odd_right
        elif odd < even and even > best:
            best_left, best_right = even_left, even_right
    return s[best_left:best_right + 1]


def is_number_palindrome(num: int) -> bool:
    """Whether the decimal digits of ``num`` read the same backwards; negatives never do."""
    reversed_value = 0
    remaining = num
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return num == reversed_value


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Number of stones matching a jewel type, counted once per listed jewel."""
    return sum(stones.count(jewel) for jewel in jewels)


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore vote winner; 0 for an empty sequence."""
    count = 0
    majority = 0
    for value in nums:
        if count == 0:
            majority = value
        count += 1 if value == majority else -1
    return majority