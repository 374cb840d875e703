from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted inputs (CLI flags, persisted JSON) and the
traversal services. Handles type coercion and default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from fswalker.domain.constants import OUTPUT_FORMATS
from fswalker.domain.config import get_default_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

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

    Fills missing keys with domain defaults and coerces loose types
    ('yes' -> True, CSV string -> list).

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, on a wrongly typed field.
        ValueError: In strict mode, on an out-of-range value.
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

    # Target names are matched verbatim, so surrounding spaces are kept
    for field in ("target_file", "target_dir"):
        merged[field] = _as_str(merged.get(field), "", field, warnings, strict)

    merged["save_error_log"] = _as_bool(
        merged.get("save_error_log"), defaults["save_error_log"], "save_error_log", warnings, strict
    )
    merged["root_paths"] = _as_list_str(
        merged.get("root_paths"), defaults["root_paths"], "root_paths", warnings, strict
    )

    # Enumerated and single-character fields
    merged["output_format"] = _as_choice(
        merged.get("output_format"), OUTPUT_FORMATS, defaults["output_format"],
        "output_format", warnings, strict, case="lower",
    )
    merged["log_level"] = _as_choice(
        merged.get("log_level"), _LOG_LEVELS, defaults["log_level"],
        "log_level", warnings, strict, case="upper",
    )
    merged["hidden_marker"] = _as_marker(
        merged.get("hidden_marker"), defaults["hidden_marker"], warnings, strict
    )

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs. Only None and the empty string count as unset."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value if value else fallback

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


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out if out else list(fallback)

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
        *,
        case: str,
) -> str:
    """Restrict a string field to a fixed set of values, folded to 'lower' or 'upper' case."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    v = value.strip().lower() if case == "lower" else value.strip().upper()
    if v in choices:
        return v

    msg = f"Invalid value for '{field}': {value!r} (expected one of {', '.join(choices)})."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback


def _as_marker(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Hidden-entry marker must be exactly one character."""
    if value is None:
        return fallback
    if not isinstance(value, str):
        msg = f"Invalid field 'hidden_marker': expected str, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    if len(value) == 1:
        return value

    msg = f"Invalid value for 'hidden_marker': {value!r} must be a single character."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
