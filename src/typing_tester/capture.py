from __future__ import annotations

import time
from typing import Callable

from .models import CapturedInput

LINE_TERMINATORS = "\r\n"


def capture_typed_input(
    read_chunk: Callable[[], str],
    read_line: Callable[[], str],
    clock: Callable[[], float] = time.perf_counter,
) -> CapturedInput:
    """
    Capture one typed line and time it.

    ``read_chunk`` returns the next keystroke(s) as soon as they arrive, or an
    empty string at end of input. Whitespace typed before the first real
    character is ignored. The clock starts right after that character arrives
    and stops once ``read_line`` has returned the rest of the line.
    """
    while True:
        chunk = read_chunk()
        if not chunk:
            now = clock()
            return CapturedInput(
                first_char="", remainder="", started_at=now, finished_at=now
            )
        chunk = chunk.lstrip()
        if chunk:
            break

    started_at = clock()
    first_char, pending = chunk[0], chunk[1:]

    if any(terminator in pending for terminator in LINE_TERMINATORS):
        remainder = _cut_at_terminator(pending)
    else:
        remainder = _cut_at_terminator(pending + read_line())
    finished_at = clock()

    return CapturedInput(
        first_char=first_char,
        remainder=remainder,
        started_at=started_at,
        finished_at=finished_at,
    )


def _cut_at_terminator(text: str) -> str:
    for index, char in enumerate(text):
        if char in LINE_TERMINATORS:
            return text[:index]
    return text
