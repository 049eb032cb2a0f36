from __future__ import annotations

"""
Configuration Validator.

Everything that reaches the engine passes through validate_config: the
persisted config.json may be hand-edited, and CLI overrides arrive as
whatever argparse produced. Lenient mode repairs values and explains each
repair in a warning; strict mode raises instead.
"""

import logging
from typing import Any, Dict, List, Tuple

from maketree.domain.config import DIALECT_CHOICES, MAX_VERBOSITY, get_default_config

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("true", "1", "yes", "y", "on")
_FALSE_WORDS = ("false", "0", "no", "n", "off")


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Normalize a raw configuration mapping.

    Args:
        config: Candidate configuration, normally a dict.
        strict: Raise TypeError/ValueError instead of repairing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Clean configuration holding exactly
        the default keys, and the repairs that were applied.
    """
    warnings: List[str] = []
    clean = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        logger.warning(msg)
        warnings.append(f"{msg} Using defaults.")
        return clean, warnings

    extra = sorted(k for k in config if k not in clean)
    if extra:
        warnings.append(f"Unknown config keys ignored: {', '.join(extra)}.")

    for flag in ("dry_run", "force"):
        if config.get(flag) is not None:
            clean[flag] = _to_bool(flag, config[flag], clean[flag], warnings, strict)
    clean["verbosity"] = _to_verbosity(config.get("verbosity"), warnings, strict)
    clean["dialect"] = _to_dialect(config.get("dialect"), warnings, strict)
    return clean, warnings


def _to_bool(name: str, value: Any, default: bool, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value

    parsed = None
    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            parsed = bool(value)
        elif isinstance(value, str) and value.strip().lower() in _TRUE_WORDS + _FALSE_WORDS:
            parsed = value.strip().lower() in _TRUE_WORDS
    if parsed is not None:
        warnings.append(f"Field '{name}' converted from {value!r} to {parsed}.")
        return parsed

    msg = f"Invalid field '{name}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using {default}.")
    return default


def _to_verbosity(value: Any, warnings: List[str], strict: bool) -> int:
    """Integers and numeric strings, clamped to 0..MAX_VERBOSITY."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        msg = f"Invalid field 'verbosity': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using 0.")
        return 0

    try:
        level = int(value)
    except ValueError:
        if strict:
            raise
        warnings.append(f"Invalid verbosity {value!r}. Using 0.")
        return 0

    if 0 <= level <= MAX_VERBOSITY:
        return level
    msg = f"Verbosity {level} out of range 0..{MAX_VERBOSITY}."
    if strict:
        raise ValueError(msg)
    clamped = min(max(level, 0), MAX_VERBOSITY)
    warnings.append(f"{msg} Clamped to {clamped}.")
    return clamped


def _to_dialect(value: Any, warnings: List[str], strict: bool) -> str:
    if value is None:
        return "auto"
    choice = str(value).strip().lower()
    if choice in DIALECT_CHOICES:
        return choice

    msg = f"Invalid dialect {value!r}: expected one of {', '.join(DIALECT_CHOICES)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using auto-detection.")
    return "auto"
