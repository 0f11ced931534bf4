"""
Custom exceptions for hasura-codegen.

This module defines specific exception types for configuration, schema
loading and model descriptor building, so that callers can tell a bad
config file apart from a model the current role cannot see.
"""

from typing import Any, Optional


class CodegenError(Exception):
    """Base exception for code generation errors."""

    def __init__(self, message: str, model_name: Optional[str] = None):
        self.model_name = model_name
        super().__init__(message)


class ConfigurationError(CodegenError):
    """Raised when a required setting is missing or unusable."""

    def __init__(self, message: str, option_name: Optional[str] = None):
        self.option_name = option_name
        super().__init__(message)


class InvalidSchemaConfigError(ConfigurationError):
    """Raised when the ``schema`` entry is neither a string nor a list."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            "invalid schema config, expected string or array object, "
            f"got {_describe_type(value)}",
            option_name="schema",
        )


class InvalidFieldRuleError(ConfigurationError):
    """Raised when a comma separated name list is malformed."""

    def __init__(self, option_name: str, value: Any):
        self.value = value
        super().__init__(f"{option_name} format is invalid: {value!r}", option_name)


class SchemaLoadError(CodegenError):
    """Raised when a GraphQL schema cannot be read from its source."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)


class ModelNotFoundOrUnauthorizedError(CodegenError):
    """
    Raised when a requested model resolves to no usable type.

    The model, insert-input and set-input field lists were all empty after
    filtering: either the model does not exist in the schema or the role
    used to fetch the schema has no permission on it.
    """

    def __init__(self, model_name: str):
        super().__init__(
            f"model {model_name} doesn't exist, "
            "or maybe the role doesn't have any permission",
            model_name,
        )


def _describe_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return type(value).__name__
