import random

import pytest

from wordcrawl.services.word_ranker import rank


def test_equal_counts_and_lengths_break_alphabetically():
    assert rank({"dog": 5, "cat": 5, "ox": 3}, 2) == [("cat", 5), ("dog", 5)]


def test_higher_count_ranks_first():
    assert rank({"a": 1, "b": 3, "c": 2}, 3) == [("b", 3), ("c", 2), ("a", 1)]


def test_longer_word_wins_on_equal_count():
    assert rank({"ox": 4, "horse": 4, "cow": 4}, 3) == [("horse", 4), ("cow", 4), ("ox", 4)]


def test_limit_truncates():
    counts = {f"w{i}": i for i in range(10)}
    ranked = rank(counts, 3)
    assert ranked == [("w9", 9), ("w8", 8), ("w7", 7)]


def test_limit_larger_than_input_returns_everything():
    assert rank({"a": 1}, 5) == [("a", 1)]


def test_zero_limit_returns_nothing():
    assert rank({"a": 1, "b": 2}, 0) == []


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        rank({"a": 1}, -1)


def test_output_independent_of_input_order():
    items = [("apple", 3), ("pear", 3), ("fig", 3), ("kiwi", 3), ("banana", 7), ("date", 1)]
    expected = rank(dict(items), 4)
    rng = random.Random(42)
    for _ in range(20):
        rng.shuffle(items)
        assert rank(dict(items), 4) == expected
    assert expected == [("banana", 7), ("apple", 3), ("kiwi", 3), ("pear", 3)]


def test_output_is_subset_with_matching_counts():
    counts = {"alpha": 2, "beta": 9, "gamma": 2, "delta": 4}
    ranked = rank(counts, 3)
    assert len(ranked) <= 3
    for word, count in ranked:
        assert counts[word] == count
