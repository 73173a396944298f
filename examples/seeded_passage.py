"""
Tiny helper script showing the library API without the interactive prompt.
Generates a reproducible passage and scores a sample line against it.
"""

from __future__ import annotations

from typing_tester import TypingTestConfig, load_and_generate, score_input
from typing_tester.measures import compute_rate, format_rate
from typing_tester.models import CapturedInput


def main() -> None:
    config = TypingTestConfig(amount=8, top=100, min_length=3, max_length=6, seed=2024)
    outcome = load_and_generate(config)
    if outcome.passage is None:
        print(f"Could not read dictionary: {outcome.unavailable}")
        return

    target = outcome.passage.text
    print(target)

    # Pretend the user typed the passage with the last character missing in 12.5 seconds.
    typed = target[:-1]
    captured = CapturedInput(
        first_char=typed[:1], remainder=typed[1:], started_at=0.0, finished_at=12.5
    )
    score = score_input(target, captured)
    rate = compute_rate(score, len(captured.typed), config.measure_units)
    print(f"Errors: {score.error_count}")
    print(f"Speed: {format_rate(rate, config.measure_units)}")


if __name__ == "__main__":
    main()
