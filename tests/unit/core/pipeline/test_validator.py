from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Default value injection.
2. Type coercion with warnings.
3. Strict mode validation.
"""

import os

import pytest

from dirlevels.core.pipeline.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["input_path"] == os.getcwd()
    assert cfg["json_output"] is False
    assert cfg["log_level"] == "INFO"
    assert len(warnings) > 0


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["output_file"] == ""
    assert cfg["log_file"] == ""
    assert warnings == []


def test_validate_empty_input_path_falls_back_to_cwd() -> None:
    cfg, _ = validate_config({"input_path": "   "})
    assert cfg["input_path"] == os.getcwd()


def test_validate_converts_strings_to_bools() -> None:
    cfg, warnings = validate_config({"json_output": "yes"})

    assert cfg["json_output"] is True
    assert any("json_output" in w for w in warnings)


def test_validate_normalizes_log_level() -> None:
    cfg, warnings = validate_config({"log_level": " debug "})
    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_validate_invalid_log_level_uses_fallback() -> None:
    cfg, warnings = validate_config({"log_level": "LOUD"})
    assert cfg["log_level"] == "INFO"
    assert any("log_level" in w for w in warnings)


def test_validate_drops_unknown_keys() -> None:
    cfg, warnings = validate_config({"colour": "blue"})
    assert "colour" not in cfg
    assert any("colour" in w for w in warnings)


def test_validate_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"input_path": 42}, strict=True)
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)
    with pytest.raises(ValueError):
        validate_config({"log_level": "LOUD"}, strict=True)
