from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .models import FilterCriteria, SelectionParameters

MEASURE_UNITS = ("wpm", "cpm", "wps", "cps")


class ConfigurationError(ValueError):
    """Raised when typing test options cannot produce a meaningful test."""


@dataclass(slots=True)
class TypingTestConfig:
    """Configuration options for a single typing test run."""

    min_length: int = 2
    max_length: int = 0
    amount: int = 25
    top: int = 200
    dictionary: str | None = None
    dictionary_size: int = 20_000
    measure_units: str = "wpm"
    seed: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def filter_criteria(self) -> FilterCriteria:
        return FilterCriteria(min_length=self.min_length, max_length=self.max_length)

    def selection_parameters(self) -> SelectionParameters:
        return SelectionParameters(top_n=self.top, amount=self.amount)


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(TypingTestConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> TypingTestConfig:
    """Build a TypingTestConfig from a dictionary-like input."""
    if data is None:
        return TypingTestConfig()
    return TypingTestConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> TypingTestConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TypingTestConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return TypingTestConfig()
    return config_from_yaml(path)


def validate_config(config: TypingTestConfig) -> None:
    """
    Reject option combinations before any dictionary is read.

    Raises
    ------
    ConfigurationError
        With the message that should be shown to the user.
    """
    for name in ("min_length", "max_length", "amount", "top", "dictionary_size"):
        value = getattr(config, name)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ConfigurationError(
                f"--{name.replace('_', '-')} must be a non-negative integer, got {value!r}"
            )
    if config.dictionary is not None and not isinstance(config.dictionary, str):
        raise ConfigurationError(
            f"--dictionary must be a file path, got {config.dictionary!r}"
        )
    if not config.amount:
        raise ConfigurationError("--amount = 0, empty test generated")
    if not config.top:
        raise ConfigurationError("--top = 0 no words selected for test")
    if config.max_length and config.min_length > config.max_length:
        raise ConfigurationError("--min-length must not be greater than --max-length")
    if config.measure_units not in MEASURE_UNITS:
        raise ConfigurationError(
            f"--measure-units must be one of {', '.join(MEASURE_UNITS)}, "
            f"got {config.measure_units!r}"
        )
