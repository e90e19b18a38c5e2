"""
Services package.
"""

from .config_svc import ConfigService
from .schema_catalog_svc import SchemaCatalogService

__all__ = ["ConfigService", "SchemaCatalogService"]
