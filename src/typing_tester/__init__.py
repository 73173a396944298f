"""
typing_tester package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import (
    ConfigurationError,
    TypingTestConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
    validate_config,
)
from .dictionary import DictionaryLoaded, DictionaryUnavailable, read_dictionary
from .pipeline import build_rng, generate_passage, load_and_generate
from .rendering import render_passage
from .scoring import count_errors, score_input
from .selection import select_words

__all__ = [
    "ConfigurationError",
    "TypingTestConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "validate_config",
    "DictionaryLoaded",
    "DictionaryUnavailable",
    "read_dictionary",
    "build_rng",
    "generate_passage",
    "load_and_generate",
    "render_passage",
    "count_errors",
    "score_input",
    "select_words",
]

__version__ = "0.1.0"
