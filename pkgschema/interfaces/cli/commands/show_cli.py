"""
Show command: print the schema metadata of one or more packages.

Architecture:
- Uses CLI bootstrap service to get SchemaCatalogService instance
- Does NOT build package sources or metadata directly
- Catches PkgSchemaError only; anything else is a bug and propagates
"""

from __future__ import annotations

import argparse
from typing import Any

from pkgschema.helpers.exceptions import PkgSchemaError
from pkgschema.interfaces.cli.cli_ui import console, print_error, print_warning, show_namespace
from pkgschema.interfaces.types.namespace_types import NamespaceCatalogResponse
from pkgschema.services.cli_bootstrap_svc import get_config_service, get_schema_catalog_service
from pkgschema.services.config_svc import ConfigService


def config_overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Turn command-line options into ConfigService overrides (unset options are omitted)."""
    overrides: dict[str, Any] = {}
    if getattr(args, "static", False):
        overrides["source_mode"] = "static"
    if getattr(args, "search_path", None):
        overrides["search_paths"] = list(args.search_path)
    if getattr(args, "json", False):
        overrides["output_format"] = "json"
    return overrides


def cmd_show(args: argparse.Namespace, config_service: ConfigService | None = None) -> int:
    """
    Load the requested packages and print their metadata in package-name order.

    Args:
        args: Parsed command-line arguments
        config_service: Configuration already built by main(); built from args when omitted
    """
    if config_service is None:
        config_service = get_config_service(config_overrides_from_args(args))
    service = get_schema_catalog_service(config_service)

    packages = list(args.packages) or service.config.packages
    if not packages:
        print_warning("No packages given and none configured")
        return 1

    try:
        namespaces = service.load_all(packages)
    except PkgSchemaError as e:
        print_error(str(e))
        return 1

    if config_service.get_output_format() == "json":
        # Plain print: rich markup must not touch JSON output
        print(NamespaceCatalogResponse.from_dto(namespaces).model_dump_json(indent=2))
        return 0

    for metadata in namespaces:
        show_namespace(metadata)
        console.print()
    return 0
