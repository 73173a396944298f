from __future__ import annotations

from typing import Iterable

SEPARATOR = " "


def render_passage(words: Iterable[str]) -> str:
    """Join selected words into the target string the user has to type."""
    return SEPARATOR.join(words)
