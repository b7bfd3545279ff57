"""Merging and set operations on integer arrays, sorted and unsorted."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from drillbook.array_adt import BoundedArray


def _result(items: Iterable[int], first: list[int], second: list[int]) -> BoundedArray:
    return BoundedArray(len(first) + len(second), items)


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Merge two sorted arrays into one sorted array, keeping every element."""
    a, b = list(first), list(second)
    return _result(heapq.merge(a, b), a, b)


def union_unsorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """All of ``first`` followed by the elements of ``second`` not yet present."""
    a, b = list(first), list(second)
    combined = list(a)
    seen = set(a)
    for value in b:
        if value not in seen:
            combined.append(value)
            seen.add(value)
    return _result(combined, a, b)


def union_sorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Union of two sorted arrays; an element common to both appears once."""
    a, b = list(first), list(second)
    combined: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            combined.append(a[i])
            i += 1
        elif a[i] == b[j]:
            combined.append(a[i])
            i += 1
            j += 1
        else:
            combined.append(b[j])
            j += 1
    combined.extend(a[i:])
    combined.extend(b[j:])
    return _result(combined, a, b)


def intersection_unsorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Elements of ``first`` that also occur in ``second``, in ``first``'s order."""
    a, b = list(first), list(second)
    present = set(b)
    return _result((value for value in a if value in present), a, b)


def intersection_sorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Common elements of two sorted arrays."""
    a, b = list(first), list(second)
    common: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] == b[j]:
            common.append(a[i])
            i += 1
            j += 1
        else:
            j += 1
    return _result(common, a, b)


def difference_unsorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Elements of ``first`` that do not occur in ``second``."""
    a, b = list(first), list(second)
    present = set(b)
    return _result((value for value in a if value not in present), a, b)


def difference_sorted(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Elements of sorted ``first`` missing from sorted ``second``."""
    a, b = list(first), list(second)
    remaining: list[int] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            i += 1
            j += 1
        elif a[i] < b[j]:
            remaining.append(a[i])
            i += 1
        else:
            j += 1
    remaining.extend(a[i:])
    return _result(remaining, a, b)