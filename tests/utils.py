from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Iterator


def write_dictionary(path: Path, words: Iterable[str]) -> Path:
    """Write a newline separated word list, most frequent word first."""
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


def fake_clock(*ticks: float) -> Callable[[], float]:
    """Return a clock that yields the given timestamps in order."""
    values: Iterator[float] = iter(ticks)
    return lambda: next(values)


def fake_keystrokes(*chunks: str) -> Callable[[], str]:
    """Return a reader that yields keystroke chunks, then end of input."""
    values = iter(chunks)
    return lambda: next(values, "")
