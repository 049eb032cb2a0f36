from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Ensures that raw configuration values are coerced, clamped and defaulted,
and that strict mode turns every coercion into an error.
"""

import pytest

from maketree.core.pipeline.validator import validate_config
from maketree.domain.config import get_default_config


def test_validate_config_defaults() -> None:
    """TC-01: An empty dictionary yields the full default configuration."""
    cfg, warnings = validate_config({})
    assert cfg == get_default_config()
    assert warnings == []


def test_validate_config_non_dict_input() -> None:
    """TC-02: Non-dictionary input falls back to defaults with a warning."""
    cfg, warnings = validate_config(["not", "a", "dict"])
    assert cfg == get_default_config()
    assert any("Invalid config type" in w for w in warnings)


def test_validate_config_non_dict_strict() -> None:
    """TC-03: Strict mode rejects non-dictionary input."""
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


@pytest.mark.parametrize("raw,expected", [
    ("yes", True),
    ("Off", False),
    (1, True),
    (0, False),
])
def test_bool_coercion(raw, expected: bool) -> None:
    """TC-04: Loose boolean representations are normalized with a warning."""
    cfg, warnings = validate_config({"dry_run": raw, "force": raw})
    assert cfg["dry_run"] is expected
    assert cfg["force"] is expected
    assert len(warnings) == 2


def test_bool_garbage_uses_fallback() -> None:
    """TC-05: Unparseable values revert to the default."""
    cfg, warnings = validate_config({"force": "maybe"})
    assert cfg["force"] is False
    assert any("expected bool" in w for w in warnings)


def test_bool_strict_rejects_strings() -> None:
    with pytest.raises(TypeError):
        validate_config({"dry_run": "true"}, strict=True)


@pytest.mark.parametrize("raw,expected", [(2, 2), ("3", 3), (9, 3), (-4, 0)])
def test_verbosity_is_clamped(raw, expected: int) -> None:
    """TC-06: Verbosity accepts ints and numeric strings within 0..3."""
    cfg, _ = validate_config({"verbosity": raw})
    assert cfg["verbosity"] == expected


def test_verbosity_rejects_bool_and_garbage() -> None:
    """TC-07: Booleans and non-numeric strings are not verbosity levels."""
    assert validate_config({"verbosity": True})[0]["verbosity"] == 0
    assert validate_config({"verbosity": "loud"})[0]["verbosity"] == 0

    with pytest.raises(ValueError):
        validate_config({"verbosity": 7}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"verbosity": 1.5}, strict=True)


def test_dialect_choice() -> None:
    """TC-08: Dialect is case-insensitive and unknown values mean auto."""
    assert validate_config({"dialect": "PLAIN"})[0]["dialect"] == "plain"

    cfg, warnings = validate_config({"dialect": "markdown"})
    assert cfg["dialect"] == "auto"
    assert any("Invalid dialect" in w for w in warnings)

    with pytest.raises(ValueError):
        validate_config({"dialect": "markdown"}, strict=True)


def test_unknown_keys_are_dropped() -> None:
    """TC-09: Keys outside the schema are reported and removed."""
    cfg, warnings = validate_config({"colour": "blue", "force": True})
    assert "colour" not in cfg
    assert cfg["force"] is True
    assert warnings == ["Unknown config keys ignored: colour."]
