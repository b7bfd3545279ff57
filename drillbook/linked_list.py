"""Singly and doubly linked lists of integers with 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


@dataclass(eq=False, repr=False)
class _DoubleNode:
    data: int
    next: _DoubleNode | None = None
    prev: _DoubleNode | None = None


class SinglyLinkedList:
    """A singly linked list; positions count from 1 at the head."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._length = 0
        for value in reversed(list(items)):
            self._head = _Node(value, self._head)
            self._length += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "".join(f"{value} --> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def add(self, position: int, data: int) -> None:
        """Insert ``data`` so that it ends up at ``position``."""
        if not 1 <= position <= self._length + 1:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            self._head = _Node(data, self._head)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(data, previous.next)
        self._length += 1

    def remove(self, position: int) -> int:
        """Remove the node at ``position`` and return its data."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} is out of range")
        if position == 1:
            removed = self._head
            assert removed is not None
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._length -= 1
        return removed.data

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: _Node | None = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous


class DoublyLinkedList:
    """A doubly linked list that can be walked from either end."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._length = 0
        for value in items:
            node = _DoubleNode(value, prev=self._tail)
            if self._tail is None:
                self._head = node
            else:
                self._tail.next = node
            self._tail = node
            self._length += 1

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "".join(f" {value} <--> " for value in self) + " NULL"

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def head(self) -> int:
        """Data of the first node."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def tail(self) -> int:
        """Data of the last node."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def from_tail(self, position: int) -> int:
        """Data of the node ``position`` places from the tail (1 is the tail)."""
        if not 1 <= position <= self._length:
            raise IndexError(f"position {position} is out of range")
        node = self._tail
        for _ in range(position - 1):
            assert node is not None
            node = node.prev
        assert node is not None
        return node.data