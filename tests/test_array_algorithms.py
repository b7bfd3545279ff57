import pytest

from drillbook.array_algorithms import (
    diff_min_max,
    duplicates_sorted,
    duplicates_unsorted,
    duplicates_unsorted_hash,
    max_of,
    missing_elements_sorted,
    missing_elements_unsorted,
    missing_elements_unsorted_hash,
    pairs_with_sum_sorted,
    pairs_with_sum_unsorted,
    pairs_with_sum_unsorted_hash,
)

DUP_UNSORTED = [1, 1, 2, 1, 100, 201, 100]
DUP_SORTED = [1, 1, 1, 2, 8, 9, 10, 10, 101, 102, 102]
MISSING_SORTED = [2, 3, 4, 5, 6, 9, 11, 13]
MISSING_UNSORTED = [9, 6, 4, 2, 3, 5, 7, 0, 1, 20]
PAIRS_UNSORTED = [6, 3, 8, 10, 16, 7, 5, 2, 9, 14]
PAIRS_SORTED = [1, 3, 4, 5, 6, 8, 9, 10, 12, 14]


def test_diff_min_max_source_example():
    assert diff_min_max([1, 2, 90, 10, 110]) == 109


def test_diff_min_max_single_element_is_zero():
    assert diff_min_max([42]) == 0


def test_diff_min_max_empty_raises():
    with pytest.raises(ValueError):
        diff_min_max([])


def test_max_of_source_cases():
    array1 = [10.0, 20.0, 100.0, 0.001]
    array2 = [[5.0, 10.0, 20.0], [8.0, 15.0, 42.0]]
    flat = [value for row in array2 for value in row]
    assert max_of(array1, 4) == 100.0
    assert max_of(array2[1], 3) == 42.0
    assert max_of(flat, 6) == 42.0


def test_max_of_counts_only_prefix():
    assert max_of([1.0, 2.0, 99.0], 2) == 2.0


def test_max_of_negative_count_raises():
    with pytest.raises(ValueError):
        max_of([10.0, 20.0], -4)


def test_max_of_count_beyond_values_raises():
    with pytest.raises(ValueError):
        max_of([1.0], 3)


def test_duplicates_sorted_source_example():
    assert duplicates_sorted(DUP_SORTED) == [(1, 3), (10, 2), (102, 2)]


def test_duplicate_variants_agree():
    expected = duplicates_sorted(sorted(DUP_UNSORTED))
    assert sorted(duplicates_unsorted(DUP_UNSORTED)) == expected
    assert duplicates_unsorted_hash(DUP_UNSORTED) == expected


def test_duplicates_unsorted_keeps_first_appearance_order():
    result = duplicates_unsorted([5, 3, 5, 3, 3])
    assert [value for value, _ in result] == [5, 3]


def test_duplicates_do_not_mutate_input():
    data = list(DUP_UNSORTED)
    duplicates_unsorted(data)
    duplicates_unsorted_hash(data)
    assert data == DUP_UNSORTED


def test_no_duplicates_gives_empty():
    assert duplicates_unsorted([1, 2, 3]) == []
    assert duplicates_sorted([1, 2, 3]) == []
    assert duplicates_unsorted_hash([1, 2, 3]) == []


def test_duplicates_hash_rejects_negative():
    with pytest.raises(ValueError):
        duplicates_unsorted_hash([1, -2, 1])


def test_missing_sorted_source_example():
    assert missing_elements_sorted(MISSING_SORTED) == [7, 8, 10, 12]


def test_missing_sorted_fills_the_range():
    result = missing_elements_sorted(MISSING_SORTED)
    assert sorted(result + MISSING_SORTED) == list(
        range(MISSING_SORTED[0], MISSING_SORTED[-1] + 1)
    )


def test_missing_unsorted_variants_agree_and_fill_range():
    result = missing_elements_unsorted(MISSING_UNSORTED)
    assert result == missing_elements_unsorted_hash(MISSING_UNSORTED)
    assert not set(result) & set(MISSING_UNSORTED)
    assert set(result) | set(MISSING_UNSORTED) == set(range(max(MISSING_UNSORTED) + 1))


def test_missing_unsorted_empty_raises():
    with pytest.raises(ValueError):
        missing_elements_unsorted([])


def test_missing_hash_rejects_negative():
    with pytest.raises(ValueError):
        missing_elements_unsorted_hash([3, -1])


def _normalised(pairs):
    return sorted(tuple(sorted(pair)) for pair in pairs)


def test_pairs_unsorted_all_sum_to_target():
    pairs = pairs_with_sum_unsorted(PAIRS_UNSORTED, 10)
    assert pairs
    assert all(a + b == 10 for a, b in pairs)


def test_pairs_hash_matches_brute_force():
    assert _normalised(pairs_with_sum_unsorted_hash(PAIRS_UNSORTED, 10)) == _normalised(
        pairs_with_sum_unsorted(PAIRS_UNSORTED, 10)
    )


def test_pairs_hash_does_not_pair_element_with_itself():
    assert pairs_with_sum_unsorted_hash([5, 1], 10) == []


def test_pairs_sorted_matches_brute_force():
    assert _normalised(pairs_with_sum_sorted(PAIRS_SORTED, 10)) == _normalised(
        pairs_with_sum_unsorted(PAIRS_SORTED, 10)
    )


def test_pairs_sorted_none_found():
    assert pairs_with_sum_sorted([1, 2, 3], 100) == []