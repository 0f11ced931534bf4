"""
Data classes for model descriptor results.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from graphql import GraphQLInputObjectType, GraphQLObjectType

from ..utils.normalization import normalize_option_keys


@dataclass(frozen=True)
class FieldDescriptor:
    """A scalar or enum typed field of a model or input type."""
    name: str
    type: str = ""
    array: bool = False
    nullable: bool = True
    is_enum: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary shape consumed by templates."""
        return {
            'name': self.name,
            'type': self.type,
            'array': self.array,
            'nullable': self.nullable,
            'isEnum': self.is_enum,
        }


@dataclass(frozen=True)
class ModelPermissions:
    """Operations the current role may run on a model."""
    get: bool = False
    insert: bool = False
    update: bool = False
    delete: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            'get': self.get,
            'insert': self.insert,
            'update': self.update,
            'delete': self.delete,
        }


@dataclass
class ModelDescriptor:
    """Normalized fields, keys and permissions of one model."""
    model: list[FieldDescriptor] = field(default_factory=list)
    insert_input: list[FieldDescriptor] = field(default_factory=list)
    set_input: list[FieldDescriptor] = field(default_factory=list)
    primary_keys: list[FieldDescriptor] = field(default_factory=list)
    permissions: ModelPermissions = field(default_factory=ModelPermissions)

    @property
    def is_empty(self) -> bool:
        return not (self.model or self.insert_input or self.set_input)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'primaryKeys': [f.to_dict() for f in self.primary_keys],
            'permissions': self.permissions.to_dict(),
            'model': [f.to_dict() for f in self.model],
            'insertInput': [f.to_dict() for f in self.insert_input],
            'setInput': [f.to_dict() for f in self.set_input],
        }


@dataclass(frozen=True)
class FilterOptions:
    """
    Field exclusion and ordering rules shared by every model of a run.

    ``None`` for any rule list behaves as an empty list. Entries are kept
    verbatim, so an empty prefix or suffix matches every field.
    """
    disable_fields: tuple[str, ...] = ()
    disable_field_prefixes: tuple[str, ...] = ()
    disable_field_suffixes: tuple[str, ...] = ()
    primary_key_names: tuple[str, ...] = ()
    head_fields: tuple[str, ...] = ()
    tail_fields: tuple[str, ...] = ()

    def __post_init__(self):
        for name in (
            'disable_fields', 'disable_field_prefixes', 'disable_field_suffixes',
            'primary_key_names', 'head_fields', 'tail_fields',
        ):
            object.__setattr__(self, name, _as_name_tuple(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "FilterOptions":
        """Build options from a mapping with camelCase or snake_case keys."""
        normalized = normalize_option_keys(dict(data or {}))
        return cls(
            disable_fields=normalized.get('disable_fields'),
            disable_field_prefixes=normalized.get('disable_field_prefixes'),
            disable_field_suffixes=normalized.get('disable_field_suffixes'),
            primary_key_names=normalized.get('primary_key_names'),
            head_fields=normalized.get('head_fields'),
            tail_fields=normalized.get('tail_fields'),
        )


@dataclass(frozen=True)
class ResolvedModelTypes:
    """
    Schema types found for one logical model name.

    A ``None`` type means the schema has no type of the expected kind under
    either candidate name.
    """
    model_type: Optional[GraphQLObjectType] = None
    insert_input_type: Optional[GraphQLInputObjectType] = None
    set_input_type: Optional[GraphQLInputObjectType] = None
    pk_input_type: Optional[GraphQLInputObjectType] = None
    can_delete: bool = False


def _as_name_tuple(values: Optional[Iterable[Any]]) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    return tuple(str(value) for value in values if value is not None)
