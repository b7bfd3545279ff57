"""Searching integer arrays for extremes, duplicates, gaps and pairs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, islice


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("the array has no elements")
    return items


def _non_negative(items: list[int]) -> None:
    negatives = [value for value in items if value < 0]
    if negatives:
        raise ValueError(f"negative value {negatives[0]} cannot be used as an index")


def diff_min_max(values: Iterable[int]) -> int:
    """Difference between the largest and the smallest element."""
    items = _non_empty(values)
    return max(items) - min(items)


def max_of(values: Iterable[float], count: int) -> float:
    """Largest of the first ``count`` elements of ``values``."""
    if count <= 0:
        raise ValueError(f"array size {count} must be positive")
    head = list(islice(values, count))
    if len(head) < count:
        raise ValueError(f"array holds {len(head)} elements, fewer than {count}")
    return max(head)


def duplicates_unsorted(values: Iterable[int]) -> list[tuple[int, int]]:
    """Repeated values and their counts, in order of first appearance."""
    counts = Counter(values)
    return [(value, count) for value, count in counts.items() if count > 1]


def duplicates_unsorted_hash(values: Iterable[int]) -> list[tuple[int, int]]:
    """Repeated non-negative values and their counts, in ascending order.

    Counts are kept in a table indexed by value, from zero to the largest.
    """
    items = _non_empty(values)
    _non_negative(items)
    table = [0] * (max(items) + 1)
    for value in items:
        table[value] += 1
    return [(value, count) for value, count in enumerate(table) if count > 1]


def duplicates_sorted(values: Iterable[int]) -> list[tuple[int, int]]:
    """Runs of equal adjacent values in a sorted array, with their lengths."""
    runs = ((value, sum(1 for _ in run)) for value, run in groupby(values))
    return [(value, count) for value, count in runs if count > 1]


def missing_elements_sorted(values: Sequence[int]) -> list[int]:
    """Values absent from a strictly increasing run of integers."""
    return [
        missing
        for previous, current in zip(values, values[1:])
        for missing in range(previous + 1, current)
    ]


def missing_elements_unsorted(values: Iterable[int]) -> list[int]:
    """Values from zero up to the largest element that do not occur."""
    items = _non_empty(values)
    return [number for number in range(max(items)) if number not in items]


def missing_elements_unsorted_hash(values: Iterable[int]) -> list[int]:
    """Like :func:`missing_elements_unsorted`, using a table indexed by value."""
    items = _non_empty(values)
    _non_negative(items)
    present = [False] * (max(items) + 1)
    for value in items:
        present[value] = True
    return [number for number, seen in enumerate(present) if not seen]


def pairs_with_sum_unsorted(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Every pair of elements, by position, that adds up to ``target``."""
    return [
        (first, second)
        for index, first in enumerate(values)
        for second in values[index + 1:]
        if first + second == target
    ]


def pairs_with_sum_unsorted_hash(
    values: Iterable[int], target: int
) -> list[tuple[int, int]]:
    """Pairs adding up to ``target``, reported when the second element is met."""
    seen: set[int] = set()
    pairs = []
    for value in values:
        if target - value in seen:
            pairs.append((value, target - value))
        seen.add(value)
    return pairs


def pairs_with_sum_sorted(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Pairs adding up to ``target`` in a sorted array of distinct values."""
    pairs = []
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total > target:
            high -= 1
        elif total < target:
            low += 1
        else:
            pairs.append((values[low], values[high]))
            low += 1
            high -= 1
    return pairs