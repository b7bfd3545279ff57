import itertools

import pytest

from drillbook.text_algorithms import (
    TextCounts,
    compare,
    compare_alt,
    count_words_vowels_consonants,
    duplicates,
    duplicates_bitwise,
    duplicates_hash,
    is_anagram,
    is_anagram_hash,
    is_palindrome,
    is_valid_user_name,
    permutations,
    permutations_swap,
    remove_spaces,
    reverse,
    swap_case,
)

STRING1 = "This   string is being used to test some string functionalities!"
STRING2 = "            %$ "
SENTENCE = (
    "Strata core performance optimization - RS spikes on qml/qt alternative graph"
)


def test_duplicates_counts_extra_occurrences():
    text = "hello world!!"
    result = duplicates(text)
    assert result
    for char, extra in result:
        assert text.count(char) == extra + 1
    reported = {char for char, _ in result}
    assert reported == {c for c in text if text.count(c) > 1}


def test_duplicates_order_of_first_appearance():
    text = "hello world!!"
    chars = [char for char, _ in duplicates(text)]
    assert chars == sorted(chars, key=text.index)


def test_duplicates_hash_matches_duplicates_sorted_by_code():
    text = "hello world!!"
    assert duplicates_hash(text) == sorted(duplicates(text), key=lambda p: ord(p[0]))


def test_duplicates_hash_rejects_non_printable():
    with pytest.raises(ValueError):
        duplicates_hash("a\nb")


def test_duplicates_empty_for_distinct():
    assert duplicates("abc") == []
    assert duplicates_hash("abc") == []


def test_duplicates_bitwise_reports_each_repeat_of_lowercase():
    text = "hello, this is a test"
    repeats = duplicates_bitwise(text)
    assert all("a" <= c <= "z" for c in repeats)
    for letter in set(text):
        if "a" <= letter <= "z":
            assert repeats.count(letter) == text.count(letter) - 1


def test_duplicates_bitwise_ignores_uppercase():
    assert duplicates_bitwise("AAA") == []


def test_anagram_source_example():
    assert is_anagram_hash("listen", "silent") is True
    assert is_anagram("listen", "silent") is True


def test_anagram_length_mismatch():
    assert is_anagram_hash("listen", "silents") is False
    assert is_anagram("listen", "silents") is False


def test_anagram_not_matching():
    assert is_anagram_hash("listen", "silenn") is False
    assert is_anagram("listen", "silenn") is False


def test_anagram_hash_rejects_uppercase():
    with pytest.raises(ValueError):
        is_anagram_hash("ABC", "abc")


def test_anagram_handles_z():
    assert is_anagram_hash("zoo", "ozo") is True


def test_permutations_match_itertools_order():
    expected = ["".join(p) for p in itertools.permutations("ABC")]
    assert permutations("ABC") == expected


def test_permutations_swap_same_set():
    result = permutations_swap("ABC")
    assert len(result) == 6
    assert sorted(result) == sorted(permutations("ABC"))
    assert result[0] == "ABC"


def test_permutations_too_long():
    with pytest.raises(ValueError):
        permutations("x" * 31)


def test_remove_spaces():
    result = remove_spaces(SENTENCE)
    assert " " not in result
    assert len(result) == len(SENTENCE) - SENTENCE.count(" ")


def test_compare_source_example():
    assert compare("abcdef", "abcde") == 1
    assert compare_alt("abcdef", "abcde") == 1


@pytest.mark.parametrize(
    "first, second",
    [("abc", "abd"), ("abc", "abc"), ("", "a"), ("b", "abc"), ("abcde", "abcdef")],
)
def test_compare_agrees_with_ordering(first, second):
    expected = (first > second) - (first < second)
    assert compare(first, second) == expected
    assert compare_alt(first, second) == expected
    assert compare(second, first) == -expected


@pytest.mark.parametrize(
    "word, expected", [("little", False), ("noon", True), ("level", True)]
)
def test_is_palindrome(word, expected):
    assert is_palindrome(word) is expected


def test_swap_case_round_trip():
    swapped = swap_case(STRING1)
    assert swapped != STRING1
    assert swap_case(swapped) == STRING1
    assert swapped == STRING1.swapcase()


def test_swap_case_leaves_non_ascii_letters():
    assert swap_case("é1!") == "é1!"


def test_counts_for_symbols_only():
    assert count_words_vowels_consonants(STRING2) == TextCounts(1, 0, 0)


def test_counts_invariants():
    counts = count_words_vowels_consonants(STRING1)
    letters = sum(1 for c in STRING1 if c.isascii() and c.isalpha())
    assert counts.vowels + counts.consonants == letters
    assert counts.words == len(STRING1.split())
    assert count_words_vowels_consonants(swap_case(STRING1)) == counts


def test_counts_empty():
    assert count_words_vowels_consonants("") == TextCounts(0, 0, 0)


def test_user_names():
    assert is_valid_user_name("BAADA555") is True
    assert is_valid_user_name("TheBeast!") is False


def test_reverse_round_trip():
    assert reverse(reverse("BAADA555")) == "BAADA555"
    assert reverse(STRING1) == STRING1[::-1]
    assert is_palindrome(reverse("level"))