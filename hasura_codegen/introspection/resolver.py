"""
Model type resolution.

Locates the object type and the insert, set and pk-columns input types that
Hasura generates for a table, under either naming convention.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    is_input_object_type,
    is_object_type,
)

from ..utils.naming import to_camel_case, to_snake_case
from .types import ResolvedModelTypes


@dataclass(frozen=True)
class ModelTypeNames:
    """Candidate schema names for one model, snake_case first."""
    base: str
    model: tuple[str, str]
    insert_input: tuple[str, str]
    set_input: tuple[str, str]
    pk_input: tuple[str, str]
    delete_mutation: tuple[str, str]


def model_type_names(model_name: str) -> ModelTypeNames:
    """Derive the candidate type and mutation names for ``model_name``."""
    base = to_snake_case(model_name)
    insert_input = f"{base}_insert_input"
    set_input = f"{base}_set_input"
    pk_input = f"{base}_pk_columns_input"
    delete_mutation = f"delete_{base}"
    return ModelTypeNames(
        base=base,
        model=(base, to_camel_case(model_name)),
        insert_input=(insert_input, to_camel_case(insert_input)),
        set_input=(set_input, to_camel_case(set_input)),
        pk_input=(pk_input, to_camel_case(pk_input)),
        delete_mutation=(delete_mutation, to_camel_case(delete_mutation)),
    )


def find_schema_type(
    schema: GraphQLSchema,
    candidates: tuple[str, ...],
    predicate: Callable[[object], bool],
) -> Optional[GraphQLNamedType]:
    """
    Return the first candidate type that satisfies ``predicate``.

    Candidates are checked in order, so the snake_case name wins when both
    forms exist. Returns ``None`` on a miss instead of raising.
    """
    for name in candidates:
        gql_type = schema.get_type(name)
        if gql_type is not None and predicate(gql_type):
            return gql_type
    return None


def has_delete_mutation(schema: GraphQLSchema, names: ModelTypeNames) -> bool:
    mutation_type = schema.mutation_type
    if mutation_type is None:
        return False
    return any(name in mutation_type.fields for name in names.delete_mutation)


def resolve_model_types(schema: GraphQLSchema, model_name: str) -> ResolvedModelTypes:
    """Resolve the schema types and delete capability of one model."""
    names = model_type_names(model_name)
    return ResolvedModelTypes(
        model_type=find_schema_type(schema, names.model, is_object_type),
        insert_input_type=find_schema_type(schema, names.insert_input, is_input_object_type),
        set_input_type=find_schema_type(schema, names.set_input, is_input_object_type),
        pk_input_type=find_schema_type(schema, names.pk_input, is_input_object_type),
        can_delete=has_delete_mutation(schema, names),
    )
