from __future__ import annotations

"""
Unit tests for Configuration Domain Logic.

Validates persisted preference loading, corruption fallbacks and the
derivation of the immutable execution Policy.
"""

import json
from pathlib import Path

from maketree.domain.config import (
    Policy,
    get_default_config,
    load_config,
    policy_from_config,
)


def test_get_default_config_structure() -> None:
    """TC-01: Defaults describe a quiet, non-destructive run."""
    cfg = get_default_config()
    assert cfg == {"dry_run": False, "force": False, "verbosity": 0, "dialect": "auto"}


def test_load_config_missing_file(tmp_path: Path) -> None:
    """TC-02: A missing file yields defaults."""
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path) -> None:
    """TC-03: Persisted values override defaults; unknown keys are dropped."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"force": True, "verbosity": 2, "theme": "dark"}), encoding="utf-8")

    cfg = load_config(str(path))
    assert cfg["force"] is True
    assert cfg["verbosity"] == 2
    assert cfg["dry_run"] is False
    assert "theme" not in cfg


def test_load_config_corrupted_json(tmp_path: Path) -> None:
    """TC-04: Unparseable JSON falls back to defaults."""
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_config_non_object(tmp_path: Path) -> None:
    """TC-05: A JSON document that is not an object is ignored."""
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_policy_from_config() -> None:
    """TC-06: The policy mirrors the validated configuration."""
    policy = policy_from_config({"dry_run": True, "force": False, "verbosity": 3, "dialect": "auto"})
    assert policy == Policy(dry_run=True, force=False, verbosity=3)
    assert policy_from_config({}) == Policy()
