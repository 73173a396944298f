from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from .models import FilterCriteria, Passage

LOGGER = logging.getLogger(__name__)

Candidate = Tuple[int, str]


def rank_limit(words: Sequence[str], top_n: int) -> List[Candidate]:
    """Keep the ``top_n`` most frequent words along with their rank positions."""
    return list(enumerate(words[: max(0, top_n)]))


def filter_by_length(
    candidates: Sequence[Candidate], criteria: FilterCriteria
) -> List[Candidate]:
    """Drop candidates whose length falls outside the filter bounds."""
    return [
        (position, word) for position, word in candidates if criteria.accepts(word)
    ]


def sample_without_replacement(
    pool: Sequence[Candidate], amount: int, rng: random.Random
) -> List[Candidate]:
    """
    Draw ``min(amount, len(pool))`` candidates uniformly at random.

    Every pool entry has the same chance of selection and no entry is drawn
    twice. The returned order is itself random.
    """
    count = min(max(0, amount), len(pool))
    return rng.sample(list(pool), count)


def select_words(
    dictionary: Sequence[str],
    criteria: FilterCriteria,
    top_n: int,
    amount: int,
    rng: random.Random,
) -> Passage:
    """Build a passage from the rank-limited, length-filtered dictionary."""
    candidates = rank_limit(dictionary, top_n)
    pool = filter_by_length(candidates, criteria)
    chosen = sample_without_replacement(pool, amount, rng)
    if len(chosen) < amount:
        LOGGER.info(
            "Only %d of the top %d words match the length filter; requested %d.",
            len(pool),
            len(candidates),
            amount,
        )
    return Passage(
        words=tuple(word for _, word in chosen),
        positions=tuple(position for position, _ in chosen),
    )
