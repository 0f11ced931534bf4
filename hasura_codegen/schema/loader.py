"""
Schema loading from local files.

The schema is read from an SDL file or from a saved introspection result.
Fetching it from a live endpoint is left to external tooling.
"""

import json
import logging
from pathlib import Path
from typing import Union

from graphql import GraphQLError, GraphQLSchema, build_client_schema, build_schema, print_schema

from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

SDL_SUFFIXES = (".graphql", ".gql", ".graphqls")
INTROSPECTION_SUFFIXES = (".json",)
REMOTE_PREFIXES = ("http://", "https://", "ws://", "wss://")


def is_remote_source(source: str) -> bool:
    return source.strip().lower().startswith(REMOTE_PREFIXES)


def load_schema(source: Union[str, Path]) -> GraphQLSchema:
    """
    Load a GraphQL schema from an SDL or introspection JSON file.

    Raises ``SchemaLoadError`` for remote sources, missing files,
    unsupported file types and documents graphql-core cannot build.
    """
    source_str = str(source)
    if is_remote_source(source_str):
        raise SchemaLoadError(
            f"Remote schema sources are not supported ({source_str}); "
            "save the schema as SDL or introspection JSON and use the file path",
            source=source_str,
        )

    path = Path(source_str)
    if not path.is_file():
        raise SchemaLoadError(f"Schema file not found at {source_str}", source=source_str)

    logger.info("Loading GraphQL schema from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaLoadError(f"Could not read schema file {path}: {exc}", source=source_str) from exc

    suffix = path.suffix.lower()
    if suffix in SDL_SUFFIXES:
        return schema_from_sdl(content, source_str)
    if suffix in INTROSPECTION_SUFFIXES:
        return schema_from_introspection(content, source_str)
    raise SchemaLoadError(
        f"Unsupported schema file type '{suffix}', expected one of "
        f"{', '.join(SDL_SUFFIXES + INTROSPECTION_SUFFIXES)}",
        source=source_str,
    )


def schema_from_sdl(content: str, source: str = "<sdl>") -> GraphQLSchema:
    """Build a schema from SDL text."""
    try:
        return build_schema(content)
    except (GraphQLError, TypeError) as exc:
        raise SchemaLoadError(f"Invalid GraphQL SDL in {source}: {exc}", source=source) from exc


def schema_from_introspection(content: str, source: str = "<introspection>") -> GraphQLSchema:
    """
    Build a schema from an introspection query result.

    Both the bare ``{"__schema": ...}`` payload and the full response with
    a ``data`` envelope are accepted.
    """
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"Invalid JSON in {source}: {exc}", source=source) from exc

    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        payload = payload["data"]
    if not isinstance(payload, dict) or "__schema" not in payload:
        raise SchemaLoadError(f"No __schema entry in introspection result {source}", source=source)

    try:
        return build_client_schema(payload)
    except (GraphQLError, TypeError) as exc:
        raise SchemaLoadError(f"Invalid introspection result in {source}: {exc}", source=source) from exc


def print_schema_sdl(schema: GraphQLSchema) -> str:
    """Return the SDL of a schema."""
    return print_schema(schema)
