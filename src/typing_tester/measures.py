"""Conversion of a score into the typing rate shown to the user."""

from __future__ import annotations

from enum import Enum

from .models import ScoreResult

CHARS_PER_WORD = 5.0


class MeasureUnit(str, Enum):
    WPM = "wpm"
    CPM = "cpm"
    WPS = "wps"
    CPS = "cps"


def net_characters(typed_chars: int, error_count: int) -> int:
    """Typed characters minus errors, never negative."""
    return max(0, typed_chars - error_count)


def compute_rate(score: ScoreResult, typed_chars: int, unit: MeasureUnit | str) -> float:
    """
    Convert a score into a typing rate.

    A word counts as five characters. Returns 0.0 when no time elapsed.
    """
    unit = MeasureUnit(unit)
    if score.elapsed <= 0:
        return 0.0

    chars = float(net_characters(typed_chars, score.error_count))
    if unit in (MeasureUnit.WPM, MeasureUnit.WPS):
        chars /= CHARS_PER_WORD
    if unit in (MeasureUnit.WPM, MeasureUnit.CPM):
        return chars / (score.elapsed / 60.0)
    return chars / score.elapsed


def format_rate(value: float, unit: MeasureUnit | str) -> str:
    return f"{value:.2f} {MeasureUnit(unit).value}"
