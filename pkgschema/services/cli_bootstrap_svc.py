"""CLI Bootstrap Service - Service Container for CLI Commands.

Provides clean DI for CLI commands that need services.

Architecture:
- This is a SERVICE layer module (interfaces → services)
- CLI commands should NOT construct components or package sources directly
- CLI commands SHOULD use these bootstrap functions to get service instances
"""

from __future__ import annotations

import logging
from typing import Any

from pkgschema.services.config_svc import ConfigService
from pkgschema.services.schema_catalog_svc import SchemaCatalogService

logger = logging.getLogger(__name__)


def get_config_service(overrides: dict[str, Any] | None = None) -> ConfigService:
    """Get ConfigService instance for CLI operations.

    Args:
        overrides: Values given on the command line; they win over YAML files
            but not over PKGSCHEMA_* environment variables.

    """
    return ConfigService(overrides)


def get_schema_catalog_service(config_service: ConfigService) -> SchemaCatalogService:
    """Get SchemaCatalogService configured from the given ConfigService.

    Example:
        >>> service = get_schema_catalog_service(get_config_service({"source_mode": "static"}))
        >>> service.load_all(["acme.orders"])

    """
    catalog_config = config_service.make_catalog_config()
    logger.debug(
        "Catalog config: source_mode=%s search_paths=%s",
        catalog_config.source_mode,
        catalog_config.search_paths,
    )
    return SchemaCatalogService(catalog_config)
