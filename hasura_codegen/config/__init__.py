"""
Configuration package.
"""

from .interpolation import interpolate_env
from .settings import (
    CodegenSettings,
    coerce_name_list,
    load_codegen_settings,
    parse_schema_config,
    read_config_file,
    resolve_config_path,
    settings_from_config,
)

__all__ = [
    "CodegenSettings",
    "coerce_name_list",
    "interpolate_env",
    "load_codegen_settings",
    "parse_schema_config",
    "read_config_file",
    "resolve_config_path",
    "settings_from_config",
]
