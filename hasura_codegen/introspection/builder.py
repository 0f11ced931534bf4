"""
ModelDescriptorBuilder implementation.
"""

from typing import Iterable, Optional, Union

from graphql import GraphQLInputObjectType, GraphQLObjectType, GraphQLSchema

from ..exceptions import ModelNotFoundOrUnauthorizedError
from .filters import is_field_included
from .ordering import sort_field_order
from .resolver import resolve_model_types
from .types import FieldDescriptor, FilterOptions, ModelDescriptor, ModelPermissions
from .unwrapper import unwrap_field_type

FieldContainer = Union[GraphQLObjectType, GraphQLInputObjectType]


def build_type_fields(
    gql_type: Optional[FieldContainer], options: FilterOptions
) -> list[FieldDescriptor]:
    """
    Collect the included scalar and enum fields of a type.

    Fields keep their declaration order. An absent type gives an empty list.
    """
    if gql_type is None:
        return []
    fields: list[FieldDescriptor] = []
    for name, gql_field in gql_type.fields.items():
        if not is_field_included(name, options):
            continue
        descriptor = unwrap_field_type(gql_field.type, FieldDescriptor(name=name))
        if descriptor is not None:
            fields.append(descriptor)
    return fields


class ModelDescriptorBuilder:
    """
    Builds model descriptors from a GraphQL schema.

    The builder keeps no state besides its options, so one instance can be
    reused across schemas and runs.
    """

    def __init__(self, options: Optional[FilterOptions] = None):
        self.options = options or FilterOptions()

    def build(self, schema: GraphQLSchema, model_names: Iterable[str]) -> dict[str, ModelDescriptor]:
        """
        Build descriptors for every model name, in the given order.

        Raises ``ModelNotFoundOrUnauthorizedError`` for the first model that
        has no usable type; no partial result is returned.
        """
        return {name: self.build_one(schema, name) for name in model_names}

    def build_one(self, schema: GraphQLSchema, model_name: str) -> ModelDescriptor:
        """Build the descriptor of a single model."""
        resolved = resolve_model_types(schema, model_name)
        options = self.options

        model = build_type_fields(resolved.model_type, options)
        insert_input = build_type_fields(resolved.insert_input_type, options)
        set_input = build_type_fields(resolved.set_input_type, options)

        # Keys come from the already filtered model fields when there is no
        # pk-columns input type.
        if resolved.pk_input_type is not None:
            primary_keys = build_type_fields(resolved.pk_input_type, options)
        else:
            primary_keys = [f for f in model if f.name in options.primary_key_names]

        descriptor = ModelDescriptor(
            model=sort_field_order(model, options.head_fields, options.tail_fields),
            insert_input=sort_field_order(insert_input, options.head_fields, options.tail_fields),
            set_input=sort_field_order(set_input, options.head_fields, options.tail_fields),
            primary_keys=primary_keys,
            permissions=ModelPermissions(
                get=len(model) > 0,
                insert=len(insert_input) > 0,
                update=len(set_input) > 0,
                delete=resolved.can_delete,
            ),
        )
        if descriptor.is_empty:
            raise ModelNotFoundOrUnauthorizedError(model_name)
        return descriptor


def build_model_descriptors(
    schema: GraphQLSchema,
    model_names: Iterable[str],
    options: Optional[FilterOptions] = None,
) -> dict[str, ModelDescriptor]:
    """Build descriptors for ``model_names``; see ``ModelDescriptorBuilder.build``."""
    return ModelDescriptorBuilder(options).build(schema, model_names)
