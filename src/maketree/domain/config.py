from __future__ import annotations

"""
Run Configuration.

User preferences live in a small JSON file in the per-user data directory
and stay a plain dict until validated. The executor only ever sees the
frozen Policy derived from the validated dict.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from maketree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
MAX_VERBOSITY = 3
DIALECT_CHOICES = ("auto", "tree", "plain")


@dataclass(frozen=True)
class Policy:
    """
    How a plan is applied.

    Attributes:
        dry_run: Report every action as planned and touch nothing.
        force: Rewrite existing files (directories are reused) instead of skipping.
        verbosity: 0 summary only, 1 per-action lines, 2-3 diagnostics.
    """
    dry_run: bool = False
    force: bool = False
    verbosity: int = 0


def get_default_config() -> Dict[str, Any]:
    return {
        "dry_run": False,
        "force": False,
        "verbosity": 0,
        "dialect": "auto",
    }


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read persisted preferences over the defaults.

    Only keys present in the defaults are taken from the file. A missing,
    unreadable or non-object file leaves the defaults untouched; the last
    two cases are logged as warnings.

    Args:
        path: Config file to read. Defaults to get_config_path().

    Returns:
        Dict[str, Any]: Unvalidated configuration.
    """
    config = get_default_config()
    source = path or get_config_path()

    if not os.path.isfile(source):
        logger.debug(f"No config file at {source}.")
        return config

    try:
        with open(source, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable config {source}: {e}")
        return config

    if not isinstance(stored, dict):
        logger.warning(f"Ignoring config {source}: top level is not a JSON object.")
        return config

    config.update({k: v for k, v in stored.items() if k in config})
    logger.debug(f"Loaded config from {source}.")
    return config


def policy_from_config(config: Dict[str, Any]) -> Policy:
    """Freeze a validated configuration into a Policy."""
    return Policy(
        dry_run=bool(config.get("dry_run", False)),
        force=bool(config.get("force", False)),
        verbosity=int(config.get("verbosity", 0)),
    )
