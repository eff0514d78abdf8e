"""Tests for majority_bench.algorithm — results and counter accounting."""
import itertools
import random
from collections import Counter

import pytest

from majority_bench.algorithm import ALGORITHM_NAME, InvalidArgumentError, find_majority
from majority_bench.metrics import MetricsCounters


def _brute_force(seq):
    if not seq:
        return None
    value, count = Counter(seq).most_common(1)[0]
    return value if count > len(seq) // 2 else None


class TestFindMajorityResults:
    def test_majority_first(self):
        assert find_majority([1, 1, 1, 2, 2], MetricsCounters()) == 1

    def test_all_distinct_has_no_majority(self):
        assert find_majority([1, 2, 3, 4], MetricsCounters()) is None

    def test_all_equal(self):
        assert find_majority([7, 7, 7, 7, 7], MetricsCounters()) == 7

    def test_empty(self):
        assert find_majority([], MetricsCounters()) is None

    def test_single_element(self):
        assert find_majority([42], MetricsCounters()) == 42

    def test_negative_numbers(self):
        assert find_majority([-1, -1, -1, -2, -2], MetricsCounters()) == -1

    def test_exact_tie_is_not_majority(self):
        assert find_majority([2, 1, 2, 1], MetricsCounters()) is None

    def test_odd_length_alternating(self):
        assert find_majority([2, 1, 2, 1, 2, 1, 2], MetricsCounters()) == 2

    def test_majority_scattered(self):
        assert find_majority([1, 2, 1, 1, 3, 1, 1], MetricsCounters()) == 1

    def test_survivor_that_is_not_majority(self):
        # phase one ends holding 3, verification rejects it
        assert find_majority([1, 1, 2, 2, 3], MetricsCounters()) is None

    def test_majority_at_end(self):
        arr = [2] * 499 + [1] * 501
        assert find_majority(arr, MetricsCounters()) == 1

    def test_accepts_tuple(self):
        assert find_majority((5, 5, 4), MetricsCounters()) == 5

    def test_none_sequence_raises(self):
        with pytest.raises(InvalidArgumentError):
            find_majority(None, MetricsCounters())

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            find_majority(None)

    def test_algorithm_name(self):
        assert ALGORITHM_NAME == "Boyer_Moore"

    @pytest.mark.parametrize("length", range(0, 7))
    def test_matches_brute_force_on_small_alphabet(self, length):
        for seq in itertools.product((0, 1, 2), repeat=length):
            assert find_majority(list(seq)) == _brute_force(seq), seq

    def test_matches_brute_force_random(self):
        rng = random.Random(2024)
        for _ in range(200):
            seq = [rng.randrange(4) for _ in range(rng.randrange(0, 40))]
            assert find_majority(seq) == _brute_force(seq)


class TestDefaultMetrics:
    def test_works_without_metrics(self):
        assert find_majority([3, 3, 4]) == 3

    def test_none_sequence_raises_without_metrics(self):
        with pytest.raises(InvalidArgumentError):
            find_majority(None, None)


class TestCounterAccounting:
    def test_empty_touches_no_counter(self):
        m = MetricsCounters()
        find_majority([], m)
        assert (m.comparisons, m.array_accesses, m.assignments) == (0, 0, 0)

    def test_none_input_touches_no_counter(self):
        m = MetricsCounters()
        with pytest.raises(InvalidArgumentError):
            find_majority(None, m)
        assert (m.comparisons, m.array_accesses, m.assignments) == (0, 0, 0)

    def test_single_element_counts(self):
        m = MetricsCounters()
        find_majority([9], m)
        assert m.array_accesses == 1
        assert m.assignments == 1
        assert m.comparisons == 0

    def test_majority_with_early_exit(self):
        # phase 1: 5 reads, 4 comparisons, 12 assignments
        # phase 2: exits at the third 1 -> 3 reads, 6 comparisons, 3 assignments
        m = MetricsCounters()
        assert find_majority([1, 1, 1, 2, 2], m) == 1
        assert m.array_accesses == 8
        assert m.comparisons == 10
        assert m.assignments == 15

    def test_no_survivor_skips_verification(self):
        m = MetricsCounters()
        assert find_majority([1, 2, 3, 4], m) is None
        assert m.array_accesses == 4
        assert m.comparisons == 2
        assert m.assignments == 14

    def test_full_verification_pass(self):
        # phase 1: 5 reads, 3 comparisons, 4 + 2 + 2 + 3 + 4 = 15 assignments
        # phase 2: candidate 3 checked over all 5 elements, one match
        m = MetricsCounters()
        assert find_majority([1, 1, 2, 2, 3], m) is None
        assert m.array_accesses == 10
        assert m.comparisons == 3 + 5 + 1
        assert m.assignments == 15 + 1

    def test_accesses_bounded_by_two_n(self):
        size = 100_000
        arr = [1] * (size // 2 + 1) + [2] * (size - size // 2 - 1)
        m = MetricsCounters()
        assert find_majority(arr, m) == 1
        assert size <= m.array_accesses <= 2 * size

    def test_sorted_distribution_comparisons(self):
        arr = [1] * 501 + [2] * 499
        m = MetricsCounters()
        assert find_majority(arr, m) == 1
        assert m.comparisons >= 500

    def test_counters_accumulate_across_calls(self):
        m = MetricsCounters()
        find_majority([1, 1, 1, 2, 2], m)
        find_majority([1, 1, 1, 2, 2], m)
        assert m.array_accesses == 16

    def test_deterministic_with_fresh_sinks(self):
        arr = [4, 2, 4, 3, 4, 4, 1, 4]
        a, b = MetricsCounters(), MetricsCounters()
        assert find_majority(arr, a) == find_majority(arr, b) == 4
        assert a.snapshot() == b.snapshot()

    def test_input_not_modified(self):
        arr = [3, 1, 3, 2, 3]
        find_majority(arr, MetricsCounters())
        assert arr == [3, 1, 3, 2, 3]
