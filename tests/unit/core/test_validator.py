from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Type coercion (String to Bool).
2. Default value injection.
3. Strict mode validation.
"""

import pytest

from detect_file.core.validator import validate_config


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)

    assert cfg["nocase"] is False
    assert cfg["locale"] == "en"
    assert len(warnings) == 1


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg["log_level"] == "INFO"
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    cfg, warnings = validate_config({"nocase": "yes", "json_output": "0"})

    assert cfg["nocase"] is True
    assert cfg["json_output"] is False
    assert len(warnings) == 2


def test_validate_normalizes_choices() -> None:
    cfg, warnings = validate_config({"locale": " ES ", "log_level": "debug"})

    assert cfg["locale"] == "es"
    assert cfg["log_level"] == "DEBUG"
    assert warnings == []


def test_validate_invalid_values_fall_back() -> None:
    cfg, warnings = validate_config({"nocase": "maybe", "locale": "klingon", "log_level": 10})

    assert cfg["nocase"] is False
    assert cfg["locale"] == "en"
    assert cfg["log_level"] == "INFO"
    assert len(warnings) == 3


def test_validate_drops_unknown_keys() -> None:
    cfg, _ = validate_config({"theme": "dark"})

    assert "theme" not in cfg


def test_strict_mode_raises_on_type_mismatch() -> None:
    with pytest.raises(TypeError):
        validate_config({"nocase": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_config("not a dict", strict=True)


def test_strict_mode_raises_on_unknown_choice() -> None:
    with pytest.raises(ValueError):
        validate_config({"log_level": "chatty"}, strict=True)


def test_validate_discards_path_convention_setting() -> None:
    cfg, warnings = validate_config({"convention": "windows", "nocase": True})

    assert "convention" not in cfg
    assert cfg["nocase"] is True
    assert warnings == []
