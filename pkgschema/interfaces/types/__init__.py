"""
Pydantic types for external output.
"""

from .namespace_types import NamespaceCatalogResponse, NamespaceMetadataResponse, TypeOverrideResponse

__all__ = ["NamespaceCatalogResponse", "NamespaceMetadataResponse", "TypeOverrideResponse"]
