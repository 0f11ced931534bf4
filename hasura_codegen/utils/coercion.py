"""
Type coercion utilities for hasura-codegen.

This module provides coercion functions used by the configuration layer
to safely convert YAML and command line values to expected types.
"""

from typing import Any, Optional


def coerce_bool(value: Any, default: bool = False) -> bool:
    """
    Coerce a value to a boolean.

    Args:
        value: The value to coerce.
        default: Default value if coercion fails.

    Returns:
        The coerced boolean or default.

    Examples:
        >>> coerce_bool("true")
        True
        >>> coerce_bool("Nope")
        False
        >>> coerce_bool(None, default=True)
        True
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on", "yep")
    try:
        return bool(value)
    except (ValueError, TypeError):
        return default


def coerce_optional_str(value: Any) -> Optional[str]:
    """
    Coerce a value to a stripped string, mapping blanks to ``None``.

    Examples:
        >>> coerce_optional_str("  admin ")
        "admin"
        >>> coerce_optional_str("")
        None
    """
    if value is None:
        return None
    text = str(value).strip()
    return text or None
