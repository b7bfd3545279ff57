"""A fixed-capacity integer array with the classic array operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ArrayError(ValueError):
    """Raised when an array operation cannot be carried out."""


class BoundedArray:
    """An array of integers that never grows beyond its capacity."""

    def __init__(self, size: int = 10, items: Iterable[int] = ()) -> None:
        if size < 0:
            raise ArrayError(f"size {size} cannot be negative")
        values = list(items)
        if len(values) > size:
            raise ArrayError(
                f"{len(values)} elements do not fit in an array of size {size}"
            )
        self.size = size
        self._items = values

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedArray(size={self.size}, items={self._items!r})"

    def display(self) -> str:
        """Describe the array contents as a line of text."""
        if not self._items:
            return "No elements to display"
        return "Array elements: " + " ".join(str(value) for value in self._items)

    def _require_room(self, value: int) -> None:
        if len(self._items) >= self.size:
            raise ArrayError(
                f"there is no more available space to store {value} in the array"
            )

    def _require_elements(self) -> None:
        if not self._items:
            raise ArrayError("array length is less than one")

    def insert(self, value: int, index: int) -> None:
        """Insert ``value`` before position ``index`` (0..len)."""
        if index < 0 or index > len(self._items):
            raise ArrayError(
                f"inserting index {index}: index cannot be negative "
                "or greater than length"
            )
        self._require_room(value)
        self._items.insert(index, value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        self._require_room(value)
        self._items.append(value)

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        if index < 0 or index >= len(self._items):
            raise ArrayError(
                f"deleting index {index}: index cannot be negative "
                "or beyond the last element"
            )
        return self._items.pop(index)

    def linear_search(self, value: int) -> int:
        """Return the index of ``value`` and move it to the front."""
        for index, item in enumerate(self._items):
            if item == value:
                self._items[index], self._items[0] = self._items[0], self._items[index]
                return index
        raise ArrayError(f"input {value} is not found")

    def binary_search(self, value: int) -> int:
        """Return the index of ``value`` in a sorted array."""
        self._require_elements()
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            if self._items[mid] == value:
                return mid
            if self._items[mid] < value:
                low = mid + 1
            else:
                high = mid - 1
        raise ArrayError(f"input {value} is not found")

    def binary_search_recursive(
        self, value: int, low: int = 0, high: int | None = None
    ) -> int:
        """Recursive binary search of ``value`` between ``low`` and ``high``."""
        self._require_elements()
        if high is None:
            high = len(self._items) - 1
        if low > high:
            raise ArrayError(f"input {value} is not found")
        mid = (low + high) // 2
        if self._items[mid] == value:
            return mid
        if self._items[mid] < value:
            return self.binary_search_recursive(value, mid + 1, high)
        return self.binary_search_recursive(value, low, mid - 1)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of range")

    def get(self, index: int) -> int:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: int) -> None:
        """Replace the element at ``index``."""
        self._check_index(index)
        self._items[index] = value

    def max(self) -> int:
        """Largest element."""
        self._require_elements()
        return max(self._items)

    def min(self) -> int:
        """Smallest element."""
        self._require_elements()
        return min(self._items)

    def sum(self) -> int:
        """Sum of the elements; zero when empty."""
        return sum(self._items)

    def average(self) -> float:
        """Arithmetic mean of the elements."""
        self._require_elements()
        return self.sum() / len(self._items)

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def right_shift(self) -> None:
        """Drop the last element."""
        self._require_elements()
        self._items.pop()

    def left_shift(self) -> None:
        """Drop the first element, moving the rest one place left."""
        self._require_elements()
        self._items.pop(0)

    def insert_sorted(self, value: int) -> None:
        """Insert ``value`` into a sorted array keeping it sorted."""
        if len(self._items) == self.size:
            raise ArrayError(f"not enough space to insert element {value}")
        position = len(self._items)
        while position > 0 and self._items[position - 1] > value:
            position -= 1
        self._items.insert(position, value)

    def is_sorted(self) -> bool:
        """Whether the elements are in non-decreasing order."""
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def rearrange(self) -> None:
        """Move negative elements to the left and the others to the right."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            while i < len(items) and items[i] < 0:
                i += 1
            while j >= 0 and items[j] >= 0:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]