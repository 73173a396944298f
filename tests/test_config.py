from pathlib import Path

import pytest

from typing_tester.config import (
    ConfigurationError,
    TypingTestConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
    validate_config,
)
from typing_tester.models import FilterCriteria, SelectionParameters


def test_defaults_match_cli_defaults():
    cfg = load_config()
    assert cfg.min_length == 2
    assert cfg.max_length == 0
    assert cfg.amount == 25
    assert cfg.top == 200
    assert cfg.dictionary is None
    assert cfg.dictionary_size == 20_000
    assert cfg.measure_units == "wpm"
    validate_config(cfg)


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"amount": 10, "colour": "red"})
    assert cfg.amount == 10
    assert "colour" not in cfg.to_dict()


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "typing.yaml"
    path.write_text("top: 50\nmin_length: 3\nmeasure_units: cps\n", encoding="utf-8")
    cfg = config_from_yaml(path)
    assert cfg.top == 50
    assert cfg.filter_criteria() == FilterCriteria(min_length=3, max_length=0)
    assert cfg.selection_parameters() == SelectionParameters(top_n=50, amount=25)
    assert cfg.measure_units == "cps"


def test_config_from_yaml_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "typing.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "typing.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == TypingTestConfig()


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"amount": 0}, "--amount = 0"),
        ({"top": 0}, "--top = 0"),
        ({"min_length": 5, "max_length": 3}, "--min-length"),
        ({"min_length": -1}, "non-negative"),
        ({"measure_units": "lpm"}, "--measure-units"),
        ({"dictionary": 2024}, "--dictionary"),
    ],
)
def test_validate_config_rejects_bad_values(overrides, message):
    cfg = config_from_dict(overrides)
    with pytest.raises(ConfigurationError, match=message):
        validate_config(cfg)


def test_validate_config_allows_unbounded_max_and_equal_bounds():
    validate_config(config_from_dict({"min_length": 9, "max_length": 0}))
    validate_config(config_from_dict({"min_length": 4, "max_length": 4}))
