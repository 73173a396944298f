from __future__ import annotations

from typing import Callable, Iterator

from .models import CapturedInput, CharacterMark, ScoreResult

MarkCallback = Callable[[CharacterMark], None]


def iter_character_marks(
    target: str, first_char: str, remainder: str
) -> Iterator[CharacterMark]:
    """
    Pair typed characters with the target characters at the same position.

    The first typed character is paired with the first target character, the
    rest of the line with the rest of the target. Pairing stops at the end of
    the shorter side.
    """
    if first_char:
        yield CharacterMark(expected=target[:1], typed=first_char)
    for expected, typed in zip(target[1:], remainder):
        yield CharacterMark(expected=expected, typed=typed)


def length_penalty(target: str, remainder: str) -> int:
    """
    Length difference between the target and the typed line.

    The typed line is the remainder plus the separately read first character.
    """
    return abs(len(target) - (len(remainder) + 1))


def count_errors(
    target: str,
    first_char: str,
    remainder: str,
    on_mark: MarkCallback | None = None,
) -> int:
    """
    Count typing errors for one line.

    The total is the first character mismatch, plus the length penalty, plus
    one for every mismatched pair in the rest of the line. Extra or missing
    characters at the end are covered by the length penalty only. A dropped
    or inserted character is charged by the length penalty and again by
    every misaligned pair after it.
    """
    errors = length_penalty(target, remainder)
    if not first_char and target:
        # Nothing was typed, so there is no first pair to display.
        errors += 1
    for mark in iter_character_marks(target, first_char, remainder):
        if on_mark is not None:
            on_mark(mark)
        if not mark.correct:
            errors += 1
    return errors


def score_input(
    target: str, captured: CapturedInput, on_mark: MarkCallback | None = None
) -> ScoreResult:
    """Score a captured line against the target string."""
    errors = count_errors(target, captured.first_char, captured.remainder, on_mark)
    return ScoreResult(error_count=errors, elapsed=captured.elapsed)
