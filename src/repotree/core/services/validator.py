from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the merged configuration dictionary before it reaches the client
or the HTTP service. Untrusted values coming from the config file or the CLI
are coerced to their expected types, and anything unusable falls back to the
domain default with a warning.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from repotree.domain.config import get_default_config

logger = logging.getLogger(__name__)


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
        strict: If True, raises exceptions on invalid values instead of
            falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
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
    merged.update({k: v for k, v in config.items() if k in defaults})

    for field in ("server_url", "locale", "host", "branch", "log_level"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("request_timeout", "download_timeout"):
        merged[field] = _as_positive_number(
            merged.get(field), defaults[field], field, warnings, strict
        )

    merged["max_depth"] = _as_int(
        merged.get("max_depth"), defaults["max_depth"], "max_depth", warnings, strict, minimum=0
    )
    merged["port"] = _as_port(merged.get("port"), defaults["port"], warnings, strict)
    merged["log_file"] = _as_optional_str(merged.get("log_file"), "log_file", warnings, strict)

    merged["server_url"] = merged["server_url"].rstrip("/")
    merged["log_level"] = merged["log_level"].upper()

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Empty strings collapse to None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return None


def _as_positive_number(
        value: Any,
        fallback: Optional[float],
        field: str,
        warnings: List[str],
        strict: bool,
) -> Optional[float]:
    """Accept positive ints/floats or numeric strings. None means unbounded."""
    if value is None:
        return None

    # bool is an int subclass
    if not isinstance(value, bool):
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = None
        if number is not None and number > 0:
            return int(number) if number.is_integer() else number

    _reject(f"Invalid field '{field}': expected a positive number, received {value!r}.", warnings, strict)
    return fallback


def _as_int(
        value: Any,
        fallback: Optional[int],
        field: str,
        warnings: List[str],
        strict: bool,
        *,
        minimum: int = 1,
) -> Optional[int]:
    if value is None:
        return None
    if not isinstance(value, bool):
        try:
            number = int(value)
        except (TypeError, ValueError):
            number = None
        if number is not None and number >= minimum:
            return number

    _reject(f"Invalid field '{field}': expected an integer >= {minimum}, received {value!r}.", warnings, strict)
    return fallback


def _as_port(value: Any, fallback: int, warnings: List[str], strict: bool) -> int:
    port = _as_int(value, fallback, "port", warnings, strict)
    if port is None:
        return fallback
    if port > 65535:
        _reject(f"Invalid field 'port': {port} is out of range.", warnings, strict)
        return fallback
    return port
