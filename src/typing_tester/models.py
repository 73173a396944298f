from __future__ import annotations

from dataclasses import dataclass

from .rendering import render_passage


@dataclass(slots=True, frozen=True)
class FilterCriteria:
    """Word length bounds; ``0`` on either side means unbounded."""

    min_length: int = 0
    max_length: int = 0

    def accepts(self, word: str) -> bool:
        size = len(word)
        return (size <= self.max_length or not self.max_length) and (
            size >= self.min_length or not self.min_length
        )


@dataclass(slots=True, frozen=True)
class SelectionParameters:
    """Rank cutoff and sample size for one passage."""

    top_n: int
    amount: int


@dataclass(slots=True, frozen=True)
class Passage:
    """Selected words together with their rank positions in the dictionary."""

    words: tuple[str, ...]
    positions: tuple[int, ...]

    @property
    def text(self) -> str:
        return render_passage(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words


@dataclass(slots=True, frozen=True)
class CapturedInput:
    """One line typed by the user, split the way the capture reads it."""

    first_char: str
    remainder: str
    started_at: float
    finished_at: float

    @property
    def typed(self) -> str:
        return self.first_char + self.remainder

    @property
    def elapsed(self) -> float:
        return max(0.0, self.finished_at - self.started_at)

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)


@dataclass(slots=True, frozen=True)
class CharacterMark:
    """A typed character compared against the character expected at its position."""

    expected: str
    typed: str

    @property
    def correct(self) -> bool:
        return self.expected == self.typed


@dataclass(slots=True, frozen=True)
class ScoreResult:
    """Outcome of a single typing test."""

    error_count: int
    elapsed: float

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)
