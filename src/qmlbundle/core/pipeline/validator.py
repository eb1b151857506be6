from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the deployment pipeline: coerces untrusted values coming
from the CLI or the persisted session into the expected types, injects
defaults and normalizes the platform identity.
"""

import logging
from typing import Any, Dict, List, Tuple

from qmlbundle.domain.config import get_default_config
from qmlbundle.domain.constants import PLATFORM_ALIASES

logger = logging.getLogger(__name__)

STRING_FIELDS = ["project_dir", "output_dir", "qml_dir", "qmake_path", "resource_dir_name"]
BOOL_FIELDS = ["dry_run"]
INT_FIELDS = ["copy_workers"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults.get(field, ""), field, warnings, strict)

    for field in BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults.get(field, False), field, warnings, strict)

    for field in INT_FIELDS:
        merged[field] = _as_positive_int(merged.get(field), defaults.get(field, 1), field, warnings, strict)

    merged["target_os"] = _normalize_platform(
        _as_str(merged.get("target_os"), defaults["target_os"], "target_os", warnings, strict),
        warnings,
    )

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce counts, accepting numeric strings outside strict mode."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
        return value
    if not strict and isinstance(value, str) and value.strip().isdigit() and int(value) >= 1:
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value)

    msg = f"Invalid field '{field}': expected positive int, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_platform(value: str, warnings: List[str]) -> str:
    """Map platform aliases ('win32', 'macos', ...) onto canonical identities."""
    key = value.strip().lower()
    if key in PLATFORM_ALIASES:
        return PLATFORM_ALIASES[key]
    if key.startswith("linux"):
        return "linux"
    warnings.append(f"Unrecognized target platform '{value}'; using the standard layout.")
    return key
