from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .config import TypingTestConfig
from .dictionary import DictionaryUnavailable, read_dictionary
from .models import Passage
from .selection import select_words

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class PassageOutcome:
    """Either a generated passage or the reason the dictionary could not be used."""

    passage: Passage | None = None
    unavailable: DictionaryUnavailable | None = None

    @property
    def ok(self) -> bool:
        return self.unavailable is None


def build_rng(seed: int | None = None) -> random.Random:
    """Return the generator used for word sampling, seeded when requested."""
    return random.Random(seed)


def generate_passage(
    words: Sequence[str], config: TypingTestConfig, rng: random.Random
) -> Passage:
    """Select the passage words for an already loaded dictionary."""
    params = config.selection_parameters()
    return select_words(
        words, config.filter_criteria(), params.top_n, params.amount, rng
    )


def load_and_generate(
    config: TypingTestConfig, rng: random.Random | None = None
) -> PassageOutcome:
    """Read the configured dictionary and generate a passage from it."""
    if rng is None:
        rng = build_rng(config.seed)
    path = Path(config.dictionary) if config.dictionary else None
    result = read_dictionary(path, config.dictionary_size)
    if isinstance(result, DictionaryUnavailable):
        return PassageOutcome(unavailable=result)

    passage = generate_passage(result.words, config, rng)
    LOGGER.debug("Generated passage of %d words: %s", len(passage.words), passage.text)
    return PassageOutcome(passage=passage)
