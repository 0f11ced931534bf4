"""
Field exclusion rules.
"""

from .types import FilterOptions


def is_field_included(field_name: str, options: FilterOptions) -> bool:
    """
    Whether a field survives the exclusion rules.

    A field is dropped when its name equals a ``disable_fields`` entry,
    starts with a ``disable_field_prefixes`` entry or ends with a
    ``disable_field_suffixes`` entry.
    """
    if field_name in options.disable_fields:
        return False
    if any(field_name.startswith(prefix) for prefix in options.disable_field_prefixes):
        return False
    if any(field_name.endswith(suffix) for suffix in options.disable_field_suffixes):
        return False
    return True
