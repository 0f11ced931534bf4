"""
Field type unwrapping.

Strips ``NonNull`` and ``List`` wrappers off a declared GraphQL type and
classifies the named type underneath.
"""

from dataclasses import replace
from typing import Optional

from graphql import (
    GraphQLType,
    is_enum_type,
    is_leaf_type,
    is_list_type,
    is_non_null_type,
)

from .types import FieldDescriptor


def unwrap_field_type(gql_type: GraphQLType, seed: FieldDescriptor) -> Optional[FieldDescriptor]:
    """
    Return ``seed`` completed with the innermost type of ``gql_type``.

    ``NonNull`` clears ``nullable`` and ``List`` sets ``array``; wrappers may
    nest in any order and nested lists collapse into one flag. Returns
    ``None`` when the innermost type is not a scalar or enum (objects,
    input objects, interfaces, unions), so such fields are dropped.
    """
    if is_non_null_type(gql_type):
        return unwrap_field_type(gql_type.of_type, replace(seed, nullable=False))
    if is_list_type(gql_type):
        return unwrap_field_type(gql_type.of_type, replace(seed, array=True))
    if not is_leaf_type(gql_type):
        return None
    if is_enum_type(gql_type):
        return replace(seed, type=gql_type.name, is_enum=True)
    return replace(seed, type=gql_type.name)
