"""
Utility modules for hasura-codegen.

This package contains naming and normalization helpers used by the
configuration layer and the model resolver.
"""

from .coercion import coerce_bool, coerce_optional_str
from .naming import split_words, to_camel_case, to_snake_case
from .normalization import (
    is_valid_name_list,
    normalize_option_key,
    normalize_option_keys,
    normalize_string_list,
    parse_array_string,
)

__all__ = [
    "coerce_bool",
    "coerce_optional_str",
    "split_words",
    "to_camel_case",
    "to_snake_case",
    "is_valid_name_list",
    "normalize_option_key",
    "normalize_option_keys",
    "normalize_string_list",
    "parse_array_string",
]
