from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

WORD_RE = re.compile(r"[a-z]+(?:'[a-z]+)?")


def iter_words(paths: Iterable[Path]) -> Iterator[str]:
    for path in paths:
        with path.open("r", encoding="utf-8", errors="ignore") as handle:
            for line in handle:
                yield from WORD_RE.findall(line.lower())


def rank_words(counts: Counter[str], limit: int | None) -> list[str]:
    # Ties keep alphabetical order so rebuilt lists are stable.
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    words = [word for word, _ in ranked]
    return words[:limit] if limit else words


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Build a frequency-ranked word list from plain text files."
    )
    parser.add_argument("inputs", type=Path, nargs="+", help="Plain text sources.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("words.txt"),
        help="Destination word list, one word per line.",
    )
    parser.add_argument(
        "--limit", type=int, default=20_000, help="Keep only the n most frequent words."
    )
    args = parser.parse_args()

    missing = [path for path in args.inputs if not path.is_file()]
    if missing:
        print(f"Input file not found: {missing[0]}", file=sys.stderr)
        sys.exit(1)

    words = rank_words(Counter(iter_words(args.inputs)), args.limit)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} words to {args.output}")


if __name__ == "__main__":
    main()
