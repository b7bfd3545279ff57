"""Interactive text menu driving a bounded integer array."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator

from drillbook.array_adt import ArrayError, BoundedArray

MENU = (
    "\n\nMain Menu\n"
    "1. Insert\n"
    "2. Append\n"
    "3. Delete\n"
    "4. Search\n"
    "5. Sum\n"
    "6. Display\n"
    "7. Exit\n"
)
CHOICE_PROMPT = "Enter a choice: "
INVALID_INPUT = "\nPlease Enter a valid input\n"
EXIT_CHOICE = 7


class _InvalidInput(Exception):
    """The next token is not an integer."""


class _Tokens:
    """Whitespace-separated tokens pulled lazily from lines of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._pending: deque[str] = deque()

    def next_int(self) -> int:
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                raise EOFError
            self._pending.extend(line.split())
        try:
            value = int(self._pending[0])
        except ValueError:
            raise _InvalidInput(self._pending[0]) from None
        self._pending.popleft()
        return value

    def discard_line(self) -> None:
        self._pending.clear()


def _read_array(tokens: _Tokens) -> Iterator[str]:
    yield "\nEnter a size of an array: "
    while True:
        try:
            return BoundedArray(tokens.next_int())
        except (_InvalidInput, ArrayError):
            tokens.discard_line()
            yield INVALID_INPUT


def _insert(array: BoundedArray, tokens: _Tokens) -> Iterator[str]:
    yield "Enter an element followed by an index: "
    value = tokens.next_int()
    index = tokens.next_int()
    array.insert(value, index)


def _append(array: BoundedArray, tokens: _Tokens) -> Iterator[str]:
    yield "Enter an element to append: "
    array.append(tokens.next_int())


def _delete(array: BoundedArray, tokens: _Tokens) -> Iterator[str]:
    yield "Enter an index to delete: "
    array.delete(tokens.next_int())


def _search(array: BoundedArray, tokens: _Tokens) -> Iterator[str]:
    yield "Enter an element to search for: "
    value = tokens.next_int()
    index = array.linear_search(value)
    yield f"\nInput {value} is found at index {index}\n"


def _sum(array: BoundedArray, tokens: _Tokens) -> Iterator[str]:
    yield f"The sum of the elements is: {array.sum()}\n"


def _display(array: BoundedArray, tokens: _Tokens) -> Iterator[str]:
    yield f"\n{array.display()}\n"


_ACTIONS: dict[int, Callable[[BoundedArray, _Tokens], Iterator[str]]] = {
    1: _insert,
    2: _append,
    3: _delete,
    4: _search,
    5: _sum,
    6: _display,
}


def run_menu(lines: Iterable[str]) -> Iterator[str]:
    """Run the menu over ``lines`` of input, yielding the text it shows.

    The menu ends on choice 7 or above, or when the input runs out.
    """
    tokens = _Tokens(lines)
    try:
        array = yield from _read_array(tokens)
        while True:
            yield MENU
            yield CHOICE_PROMPT
            try:
                choice = tokens.next_int()
            except _InvalidInput:
                tokens.discard_line()
                yield INVALID_INPUT
                continue
            if choice >= EXIT_CHOICE:
                return
            action = _ACTIONS.get(choice)
            if action is None:
                continue
            try:
                yield from action(array, tokens)
            except _InvalidInput:
                tokens.discard_line()
                yield INVALID_INPUT
            except ArrayError as exc:
                yield f"\nERROR: {exc}\n"
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Run the array menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Bounded array menu.")
    parser.parse_args(argv)
    for chunk in run_menu(sys.stdin):
        sys.stdout.write(chunk)
        sys.stdout.flush()
    return 0