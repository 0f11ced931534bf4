"""
Code generation settings.

Settings are read from a ``codegen.yml`` file in the graphql-codegen layout:
a top-level ``schema`` entry describing where the schema lives and a
``hasura`` section holding the generator options. The raw text is
interpolated against the environment (after loading ``.env``) before it is
parsed.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from ..exceptions import ConfigurationError, InvalidFieldRuleError, InvalidSchemaConfigError
from ..introspection.types import FilterOptions
from ..utils.coercion import coerce_bool, coerce_optional_str
from ..utils.normalization import (
    is_valid_name_list,
    normalize_option_keys,
    normalize_string_list,
    parse_array_string,
)
from .interpolation import interpolate_env

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "CONFIG_PATH"
DEFAULT_CONFIG_FILES = ("codegen.yml", "codegen.yaml")
ADMIN_SECRET_HEADER = "x-hasura-admin-secret"
ROLE_HEADER = "x-hasura-role"
OUTPUT_FORMATS = ("json", "yaml")

NAME_LIST_OPTIONS = (
    "models",
    "disable_fields",
    "disable_field_prefixes",
    "disable_field_suffixes",
    "primary_key_names",
    "head_fields",
    "tail_fields",
)


@dataclass
class CodegenSettings:
    """Merged settings of one code generation run."""
    schema: Optional[str] = None
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "POST"
    role: Optional[str] = None
    admin_secret: Optional[str] = None
    models: list[str] = field(default_factory=list)
    disable_fields: list[str] = field(default_factory=list)
    disable_field_prefixes: list[str] = field(default_factory=list)
    disable_field_suffixes: list[str] = field(default_factory=list)
    primary_key_names: list[str] = field(default_factory=lambda: ["id"])
    head_fields: list[str] = field(default_factory=list)
    tail_fields: list[str] = field(default_factory=list)
    output_path: str = "."
    output_file_prefix: str = ""
    separate_files: bool = False
    format: str = "json"

    def filter_options(self) -> FilterOptions:
        """Build the read-only filter options shared by all models."""
        return FilterOptions(
            disable_fields=self.disable_fields,
            disable_field_prefixes=self.disable_field_prefixes,
            disable_field_suffixes=self.disable_field_suffixes,
            primary_key_names=self.primary_key_names,
            head_fields=self.head_fields,
            tail_fields=self.tail_fields,
        )

    def merge_overrides(self, **overrides: Any) -> "CodegenSettings":
        """
        Return a copy with every non-``None`` override applied.

        Name list overrides may be lists or comma separated strings.
        """
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in _SETTINGS_FIELDS:
                raise ConfigurationError(f"Unknown setting '{key}'", option_name=key)
            if key in NAME_LIST_OPTIONS:
                value = coerce_name_list(key, value)
            changes[key] = value
        merged = dataclasses.replace(self, **changes)
        merged.validate_format()
        return merged

    def validate(self) -> None:
        """Check the settings required to build descriptors."""
        if not self.schema:
            raise ConfigurationError("the graphql schema source is required", option_name="schema")
        if not self.models:
            raise ConfigurationError("models value is empty or in invalid format", option_name="models")
        self.validate_format()

    def validate_format(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unsupported output format '{self.format}', expected one of {', '.join(OUTPUT_FORMATS)}",
                option_name="format",
            )


_SETTINGS_FIELDS = {f.name for f in dataclasses.fields(CodegenSettings)}


def coerce_name_list(option_name: str, value: Any) -> list[str]:
    """
    Normalize a name list option given as a list or a comma separated string.

    Raises ``InvalidFieldRuleError`` for strings that are not comma
    separated word-like names.
    """
    if value is None:
        return []
    if isinstance(value, str):
        if not is_valid_name_list(value):
            raise InvalidFieldRuleError(option_name, value)
        return parse_array_string(value)
    if isinstance(value, (list, tuple, set)):
        return normalize_string_list(value)
    raise InvalidFieldRuleError(option_name, value)


def _coerce_headers(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(
            f"headers must be a mapping of header names to values, got {type(value).__name__}",
            option_name="headers",
        )
    return {str(k): str(v) for k, v in value.items()}


def parse_schema_config(value: Any) -> dict[str, Any]:
    """
    Parse the ``schema`` entry of a config file.

    Accepts a string source, or a list whose first item is a string source
    or a single-key mapping ``{source: {headers: ..., method: ...}}``.
    """
    if value is None:
        return {}
    if isinstance(value, str):
        return {"schema": value}
    if not isinstance(value, list):
        raise InvalidSchemaConfigError(value)
    if not value:
        return {}

    entry = value[0]
    if isinstance(entry, str):
        return {"schema": entry}
    if not isinstance(entry, dict) or not entry:
        raise InvalidSchemaConfigError(entry)

    source = next(iter(entry))
    options = entry[source] or {}
    if not isinstance(options, dict):
        raise InvalidSchemaConfigError(options)

    headers = _coerce_headers(options.get("headers"))
    result: dict[str, Any] = {
        "schema": str(source),
        "headers": headers,
        "method": options.get("method") or "POST",
    }
    lowered = {k.lower(): v for k, v in headers.items()}
    if lowered.get(ADMIN_SECRET_HEADER):
        result["admin_secret"] = lowered[ADMIN_SECRET_HEADER]
    if lowered.get(ROLE_HEADER):
        result["role"] = lowered[ROLE_HEADER]
    return result


def settings_from_config(payload: Any) -> CodegenSettings:
    """Build settings from a parsed config file payload."""
    if payload is None:
        return CodegenSettings()
    if not isinstance(payload, dict):
        raise ConfigurationError("the config file must be a mapping")

    section = payload.get("hasura") or {}
    if not isinstance(section, dict):
        raise ConfigurationError("the hasura config section must be a mapping", option_name="hasura")

    values: dict[str, Any] = {}
    for key, value in normalize_option_keys(section).items():
        if key == "url":
            values["schema"] = coerce_optional_str(value)
        elif key in NAME_LIST_OPTIONS:
            values[key] = coerce_name_list(key, value)
        elif key == "separate_files":
            values[key] = coerce_bool(value)
        elif key in ("role", "admin_secret"):
            values[key] = coerce_optional_str(value)
        elif key in ("output_path", "output_file_prefix", "method", "format"):
            values[key] = "" if value is None else str(value)
        elif key == "headers":
            values[key] = _coerce_headers(value)
        else:
            logger.debug("Ignoring unsupported option '%s'", key)

    # The schema entry wins over hasura.url.
    values.update(parse_schema_config(payload.get("schema")))
    settings = CodegenSettings(**values)
    settings.validate_format()
    return settings


def resolve_config_path(config_path: Optional[str] = None) -> Optional[Path]:
    """
    Find the config file to read.

    ``CONFIG_PATH`` wins over ``config_path``, which defaults to
    ``codegen.yml``. When the requested file is missing, ``codegen.yaml`` in
    the working directory is tried instead. Returns ``None`` when no file
    exists.
    """
    requested = os.environ.get(CONFIG_PATH_ENV) or config_path or DEFAULT_CONFIG_FILES[0]
    logger.info("trying to read config file %s...", requested)
    for candidate in (Path(requested), Path(DEFAULT_CONFIG_FILES[1])):
        if candidate.is_file():
            return candidate
    logger.warning("the config file is not found")
    return None


def read_config_file(path: Path) -> Any:
    """Read, interpolate and parse a YAML config file."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Could not read config file {path}: {exc}") from exc
    try:
        return yaml.safe_load(interpolate_env(content))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc


def load_codegen_settings(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> CodegenSettings:
    """
    Load settings from ``.env`` and the config file.

    A missing config file is not an error: defaults are returned so that
    command line arguments can supply everything.
    """
    dotenv_path = env_file or find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
    path = resolve_config_path(config_path)
    if path is None:
        return CodegenSettings()
    settings = settings_from_config(read_config_file(path))
    logger.debug("Loaded settings for %d model(s) from %s", len(settings.models), path)
    return settings
