"""
Normalization utilities for hasura-codegen.

This module provides functions for normalizing configuration values
such as comma separated name lists and option keys.
"""

import re
from typing import Any, Dict, Iterable, List

from .naming import to_snake_case

NAME_LIST_PATTERN = re.compile(r"^\s*\w+(\s*,\s*\w+)*\s*,?\s*$")


def normalize_string_list(values: Iterable[Any]) -> List[str]:
    """
    Normalize an iterable to a list of stripped strings (preserving case).

    Args:
        values: Iterable of values to normalize.

    Returns:
        List of non-empty strings.

    Examples:
        >>> normalize_string_list(["id", 123, None, " "])
        ["id", "123"]
    """
    if not values:
        return []
    result = []
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text:
            result.append(text)
    return result


def parse_array_string(value: str) -> List[str]:
    """
    Split a comma separated string into a list of names.

    Args:
        value: String like "id, created_at,updated_at".

    Returns:
        List of trimmed, non-empty names.

    Examples:
        >>> parse_array_string(" id, created_at ,")
        ["id", "created_at"]
        >>> parse_array_string("")
        []
    """
    if not value:
        return []
    return [item.strip() for item in value.strip().split(",") if item.strip()]


def is_valid_name_list(value: str) -> bool:
    """
    Check that a comma separated string only holds word-like names.

    An empty string is valid and means "no names".

    Examples:
        >>> is_valid_name_list("_,created_at")
        True
        >>> is_valid_name_list("created-at")
        False
    """
    if not value or not value.strip():
        return True
    return bool(NAME_LIST_PATTERN.match(value))


def normalize_option_key(key: str) -> str:
    """
    Normalize a config option key to snake_case.

    Examples:
        >>> normalize_option_key("disableFieldPrefixes")
        "disable_field_prefixes"
        >>> normalize_option_key("primary-key-names")
        "primary_key_names"
    """
    return to_snake_case(key)


def normalize_option_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize every key of an options mapping to snake_case."""
    if not data:
        return {}
    return {normalize_option_key(str(k)): v for k, v in data.items()}
