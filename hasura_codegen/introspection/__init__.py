"""
Schema introspection module.

This module turns a GraphQL schema into per-model field descriptors:
type resolution by naming convention, type unwrapping, field filtering,
field ordering and permission inference.
"""

from .builder import ModelDescriptorBuilder, build_model_descriptors, build_type_fields
from .filters import is_field_included
from .ordering import sort_field_order
from .resolver import ModelTypeNames, model_type_names, resolve_model_types
from .types import (
    FieldDescriptor,
    FilterOptions,
    ModelDescriptor,
    ModelPermissions,
    ResolvedModelTypes,
)
from .unwrapper import unwrap_field_type

__all__ = [
    'ModelDescriptorBuilder',
    'build_model_descriptors',
    'build_type_fields',
    'is_field_included',
    'sort_field_order',
    'ModelTypeNames',
    'model_type_names',
    'resolve_model_types',
    'FieldDescriptor',
    'FilterOptions',
    'ModelDescriptor',
    'ModelPermissions',
    'ResolvedModelTypes',
    'unwrap_field_type',
]
