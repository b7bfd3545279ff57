"""Classic string exercises: duplicates, anagrams, permutations and friends."""

from __future__ import annotations

import string
from collections import Counter
from dataclasses import dataclass

_PRINTABLE_FIRST = 32
_PRINTABLE_COUNT = 96
_MAX_PERMUTATION_LENGTH = 30
_VOWELS = frozenset("aeiouAEIOU")
_LETTERS = frozenset(string.ascii_letters)
_USER_NAME_CHARS = frozenset(string.ascii_letters + string.digits)
_SWAP_CASE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


@dataclass(frozen=True)
class TextCounts:
    """Counts of words, vowels and consonants in a piece of text."""

    words: int
    vowels: int
    consonants: int


def duplicates(text: str) -> list[tuple[str, int]]:
    """Characters that repeat, with the number of extra occurrences.

    Characters are listed in order of their first appearance.
    """
    return [(char, count - 1) for char, count in Counter(text).items() if count > 1]


def duplicates_hash(text: str) -> list[tuple[str, int]]:
    """Like :func:`duplicates`, counting printable ASCII in a fixed table.

    Results come in character-code order.
    """
    table = [0] * _PRINTABLE_COUNT
    for char in text:
        slot = ord(char) - _PRINTABLE_FIRST
        if not 0 <= slot < _PRINTABLE_COUNT:
            raise ValueError(f"character {char!r} is not printable ASCII")
        table[slot] += 1
    return [
        (chr(slot + _PRINTABLE_FIRST), count - 1)
        for slot, count in enumerate(table)
        if count > 1
    ]


def duplicates_bitwise(text: str) -> list[str]:
    """Each repeat of a lowercase letter, found with a bit mask.

    A letter is reported every time it is met after its first occurrence;
    other characters are ignored.
    """
    seen = 0
    repeats = []
    for char in text:
        if "a" <= char <= "z":
            bit = 1 << (ord(char) - ord("a"))
            if seen & bit:
                repeats.append(char)
            else:
                seen |= bit
    return repeats


def is_anagram_hash(first: str, second: str) -> bool:
    """Whether two lowercase words are anagrams, using a letter table."""
    if len(first) != len(second):
        return False
    for char in first + second:
        if not "a" <= char <= "z":
            raise ValueError(f"character {char!r} is not a lowercase letter")
    table = [0] * 26
    for char in first:
        table[ord(char) - ord("a")] += 1
    for char in second:
        slot = ord(char) - ord("a")
        table[slot] -= 1
        if table[slot] < 0:
            return False
    return True


def is_anagram(first: str, second: str) -> bool:
    """Whether ``second`` is a rearrangement of ``first``, matching characters one by one."""
    if len(first) != len(second):
        return False
    available = list(second)
    for char in first:
        try:
            available.remove(char)
        except ValueError:
            return False
    return True


def _check_permutation_length(text: str) -> None:
    if len(text) > _MAX_PERMUTATION_LENGTH:
        raise ValueError(
            f"string of length {len(text)} is too long "
            f"(at most {_MAX_PERMUTATION_LENGTH} characters)"
        )


def permutations(text: str) -> list[str]:
    """Every arrangement of ``text`` by backtracking over unused positions."""
    _check_permutation_length(text)
    used = [False] * len(text)
    chosen: list[str] = []
    results: list[str] = []

    def extend() -> None:
        if len(chosen) == len(text):
            results.append("".join(chosen))
            return
        for index, char in enumerate(text):
            if not used[index]:
                used[index] = True
                chosen.append(char)
                extend()
                chosen.pop()
                used[index] = False

    extend()
    return results


def permutations_swap(text: str) -> list[str]:
    """Every arrangement of ``text`` by swapping characters into place."""
    chars = list(text)
    results: list[str] = []

    def arrange(level: int) -> None:
        if level == len(chars):
            results.append("".join(chars))
            return
        for index in range(level, len(chars)):
            chars[level], chars[index] = chars[index], chars[level]
            arrange(level + 1)
            chars[level], chars[index] = chars[index], chars[level]

    arrange(0)
    return results


def remove_spaces(text: str) -> str:
    """``text`` with every space character removed."""
    return text.replace(" ", "")


def compare(first: str, second: str) -> int:
    """Compare two strings: -1, 0 or 1 as ``first`` sorts before, with or after ``second``."""
    for a, b in zip(first, second):
        if a != b:
            return 1 if a > b else -1
    return (len(first) > len(second)) - (len(first) < len(second))


def compare_alt(first: str, second: str) -> int:
    """Compare two strings by locating their first differing position."""
    mismatch = next(
        (index for index, (a, b) in enumerate(zip(first, second)) if a != b),
        min(len(first), len(second)),
    )
    a = first[mismatch : mismatch + 1]
    b = second[mismatch : mismatch + 1]
    return (a > b) - (a < b)


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same backwards."""
    return text == text[::-1]


def swap_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving every other character alone."""
    return text.translate(_SWAP_CASE)


def count_words_vowels_consonants(text: str) -> TextCounts:
    """Count space-separated words and the ASCII vowels and consonants."""
    vowels = sum(1 for char in text if char in _VOWELS)
    consonants = sum(1 for char in text if char in _LETTERS and char not in _VOWELS)
    words = sum(1 for word in text.split(" ") if word)
    return TextCounts(words=words, vowels=vowels, consonants=consonants)


def is_valid_user_name(name: str) -> bool:
    """Whether ``name`` holds only ASCII letters and digits."""
    return all(char in _USER_NAME_CHARS for char in name)


def reverse(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]