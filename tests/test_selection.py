import random
from collections import Counter

from typing_tester.models import FilterCriteria
from typing_tester.rendering import render_passage
from typing_tester.selection import (
    filter_by_length,
    rank_limit,
    sample_without_replacement,
    select_words,
)

WORDS = ["the", "be", "to", "of", "and", "a", "in", "that", "have", "it"]


def test_rank_limit_keeps_positions():
    assert rank_limit(WORDS, 3) == [(0, "the"), (1, "be"), (2, "to")]
    assert len(rank_limit(WORDS, 500)) == len(WORDS)


def test_length_filter_is_inclusive_at_bounds():
    candidates = rank_limit(["a", "bb", "ccc", "dddd"], 10)
    kept = filter_by_length(candidates, FilterCriteria(min_length=2, max_length=3))
    assert kept == [(1, "bb"), (2, "ccc")]


def test_zero_bounds_mean_unbounded():
    candidates = rank_limit(["a", "bb", "ccc"], 10)
    assert filter_by_length(candidates, FilterCriteria(0, 0)) == candidates
    assert filter_by_length(candidates, FilterCriteria(0, 2)) == candidates[:2]
    assert filter_by_length(candidates, FilterCriteria(2, 0)) == candidates[1:]


def test_selected_words_respect_rank_and_length():
    rng = random.Random(7)
    for _ in range(200):
        passage = select_words(WORDS, FilterCriteria(2, 3), 6, 3, rng)
        assert all(position < 6 for position in passage.positions)
        assert all(2 <= len(word) <= 3 for word in passage.words)
        assert len(set(passage.positions)) == len(passage.positions)
        assert [WORDS[p] for p in passage.positions] == list(passage.words)


def test_cardinality_is_capped_by_pool():
    rng = random.Random(1)
    passage = select_words(WORDS, FilterCriteria(4, 0), 10, 25, rng)
    assert sorted(passage.words) == ["have", "that"]
    passage = select_words(WORDS, FilterCriteria(0, 0), 10, 4, rng)
    assert len(passage.words) == 4


def test_duplicate_words_are_sampled_by_position():
    words = ["go", "go", "go"]
    passage = select_words(words, FilterCriteria(0, 0), 3, 3, random.Random(3))
    assert passage.words == ("go", "go", "go")
    assert sorted(passage.positions) == [0, 1, 2]


def test_empty_pool_gives_empty_passage():
    passage = select_words(["a", "bb", "ccc"], FilterCriteria(10, 0), 200, 25, random.Random(0))
    assert passage.is_empty
    assert passage.text == ""


def test_sampling_is_uniform():
    pool = rank_limit(WORDS, 10)
    rng = random.Random(2024)
    trials = 20_000
    amount = 3
    counts: Counter[int] = Counter()
    for _ in range(trials):
        counts.update(position for position, _ in sample_without_replacement(pool, amount, rng))
    expected = amount / len(pool)
    for position in range(len(pool)):
        assert abs(counts[position] / trials - expected) < 0.02


def test_same_seed_gives_same_passage():
    first = select_words(WORDS, FilterCriteria(0, 0), 10, 5, random.Random(99))
    second = select_words(WORDS, FilterCriteria(0, 0), 10, 5, random.Random(99))
    assert first == second


def test_five_word_dictionary_scenario():
    words = ["the", "be", "to", "of", "and"]
    passage = select_words(words, FilterCriteria(0, 0), 5, 3, random.Random(5))
    assert len(passage.words) == 3
    assert len(set(passage.words)) == 3
    assert set(passage.words) <= set(words)
    assert passage.text == render_passage(passage.words)


def test_render_passage_uses_single_spaces():
    assert render_passage(["cat", "dog", "owl"]) == "cat dog owl"
    assert render_passage(["cat"]) == "cat"
    assert render_passage([]) == ""
