"""
Schema loading package.
"""

from .loader import (
    is_remote_source,
    load_schema,
    print_schema_sdl,
    schema_from_introspection,
    schema_from_sdl,
)

__all__ = [
    "is_remote_source",
    "load_schema",
    "print_schema_sdl",
    "schema_from_introspection",
    "schema_from_sdl",
]
