#!/usr/bin/env python
"""
Command line entry point for hasura-codegen.

``describe`` builds the model descriptors of the configured models and
writes them as JSON or YAML; ``eject`` prints the loaded schema as SDL.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from hasura_codegen import __version__
from hasura_codegen.config import load_codegen_settings
from hasura_codegen.exceptions import CodegenError, ConfigurationError
from hasura_codegen.export import serialize_descriptors, write_descriptors
from hasura_codegen.introspection import build_model_descriptors
from hasura_codegen.schema import load_schema, print_schema_sdl

logger = logging.getLogger("hasura_codegen")

ACTIONS = ("describe", "eject")


def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("action", nargs="?", choices=ACTIONS, default="describe",
                        help="What to generate (default: describe).")
    parser.add_argument("--config", dest="config", help="Config file path (default: codegen.yml).")
    parser.add_argument("--env-file", dest="env_file", help="Dotenv file to load (default: nearest .env).")
    parser.add_argument("--schema", dest="schema", help="Schema SDL or introspection JSON file.")
    parser.add_argument("--models", dest="models", help="Models to describe, separated by comma.")
    parser.add_argument("--disable-fields", dest="disable_fields",
                        help="Fields to exclude from models, separated by comma.")
    parser.add_argument("--disable-field-prefixes", dest="disable_field_prefixes",
                        help="Field prefixes to exclude from models, separated by comma.")
    parser.add_argument("--disable-field-suffixes", dest="disable_field_suffixes",
                        help="Field suffixes to exclude from models, separated by comma.")
    parser.add_argument("--primary-key-names", dest="primary_key_names",
                        help="Fallback primary key names, separated by comma.")
    parser.add_argument("--head-fields", dest="head_fields", help="Fields to place first.")
    parser.add_argument("--tail-fields", dest="tail_fields", help="Fields to place last.")
    parser.add_argument("--out", dest="output_path", help="Output folder (default: .).")
    parser.add_argument("--prefix", dest="output_file_prefix", help="Output file name prefix.")
    parser.add_argument("--separate-files", dest="separate_files", action="store_true", default=None,
                        help="Write one file per model.")
    parser.add_argument("--format", dest="format", choices=("json", "yaml"), help="Output format.")
    parser.add_argument("--stdout", action="store_true", help="Print to stdout instead of writing files.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def handle(options: argparse.Namespace) -> int:
    settings = load_codegen_settings(options.config, options.env_file)
    settings = settings.merge_overrides(
        schema=options.schema,
        models=options.models,
        disable_fields=options.disable_fields,
        disable_field_prefixes=options.disable_field_prefixes,
        disable_field_suffixes=options.disable_field_suffixes,
        primary_key_names=options.primary_key_names,
        head_fields=options.head_fields,
        tail_fields=options.tail_fields,
        output_path=options.output_path,
        output_file_prefix=options.output_file_prefix,
        separate_files=options.separate_files,
        format=options.format,
    )

    if options.action == "eject":
        if not settings.schema:
            raise ConfigurationError("the graphql schema source is required", option_name="schema")
        sys.stdout.write(print_schema_sdl(load_schema(settings.schema)))
        return 0

    settings.validate()
    schema = load_schema(settings.schema)
    logger.info("prepare model descriptors for %s...", ", ".join(settings.models))
    descriptors = build_model_descriptors(schema, settings.models, settings.filter_options())

    if options.stdout:
        sys.stdout.write(serialize_descriptors(descriptors, settings.format) + "\n")
    else:
        write_descriptors(descriptors, settings)
    logger.info("Outputs generated!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the hasura-codegen command."""
    parser = argparse.ArgumentParser(
        prog="hasura-codegen",
        description="Build template-ready model descriptors from a Hasura GraphQL schema.",
    )
    add_arguments(parser)
    options = parser.parse_args(argv)
    configure_logging(options.verbose, options.quiet)

    try:
        return handle(options)
    except CodegenError as exc:
        logger.error("failed to generate: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
