from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Union

LOGGER = logging.getLogger(__name__)

BUNDLED_WORD_LIST = "words.txt"


@dataclass(slots=True, frozen=True)
class DictionaryLoaded:
    """Rank-ordered words read from a dictionary file, most frequent first."""

    path: Path
    words: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class DictionaryUnavailable:
    """The dictionary file could not be opened or decoded."""

    path: Path
    reason: str


DictionaryResult = Union[DictionaryLoaded, DictionaryUnavailable]


def default_dictionary_path() -> Path:
    """Return the path of the word list bundled with the package."""
    return Path(str(resources.files("typing_tester") / "data" / BUNDLED_WORD_LIST))


def read_dictionary(path: Path | None = None, size_hint: int = 20_000) -> DictionaryResult:
    """
    Read a newline separated word list.

    Parameters
    ----------
    path:
        Dictionary file. Defaults to the bundled English list.
    size_hint:
        Expected number of words. Advisory only; larger files are read in full.
    """
    if path is None:
        path = default_dictionary_path()

    if not path.is_file():
        return DictionaryUnavailable(path=path, reason="file does not exist")

    words: list[str] = []
    try:
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                word = line.strip()
                if word:
                    words.append(word)
    except UnicodeDecodeError as exc:
        LOGGER.warning("Dictionary %s is not valid UTF-8: %s", path, exc)
        return DictionaryUnavailable(path=path, reason="file is not valid UTF-8 text")
    except OSError as exc:
        LOGGER.warning("Unable to read dictionary %s: %s", path, exc)
        return DictionaryUnavailable(path=path, reason=exc.strerror or str(exc))

    if size_hint and len(words) > size_hint:
        LOGGER.debug(
            "Dictionary %s holds %d words, more than the %d size hint.",
            path,
            len(words),
            size_hint,
        )
    LOGGER.info("Loaded %d words from %s", len(words), path)
    return DictionaryLoaded(path=path, words=tuple(words))
