"""
hasura-codegen.

Derives template-ready model descriptors (fields, primary keys and
permissions) from a Hasura GraphQL schema.
"""

__version__ = "0.1.0"

from .exceptions import (
    CodegenError,
    ConfigurationError,
    InvalidFieldRuleError,
    InvalidSchemaConfigError,
    ModelNotFoundOrUnauthorizedError,
    SchemaLoadError,
)
from .introspection import (
    FieldDescriptor,
    FilterOptions,
    ModelDescriptor,
    ModelDescriptorBuilder,
    ModelPermissions,
    build_model_descriptors,
)

__all__ = [
    "__version__",
    "CodegenError",
    "ConfigurationError",
    "InvalidFieldRuleError",
    "InvalidSchemaConfigError",
    "ModelNotFoundOrUnauthorizedError",
    "SchemaLoadError",
    "FieldDescriptor",
    "FilterOptions",
    "ModelDescriptor",
    "ModelDescriptorBuilder",
    "ModelPermissions",
    "build_model_descriptors",
]
