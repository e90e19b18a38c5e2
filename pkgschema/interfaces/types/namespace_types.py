"""
Namespace metadata types - Pydantic models for JSON output.

External contracts for the metadata produced by the schema components.
These models are thin adapters around NamespaceMetadata and TypeOverride.

Architecture:
- Response models use .from_dto() to convert domain objects to Pydantic
- Services keep returning dataclasses (no Pydantic imports in services layer)
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from pkgschema.components.schema.namespace_metadata_comp import NamespaceMetadata
from pkgschema.helpers.dto.schema_dto import TypeOverride

# ──────────────────────────────────────────────────────────────────────
# Response Models
# ──────────────────────────────────────────────────────────────────────


class TypeOverrideResponse(BaseModel):
    """Pydantic model for TypeOverride."""

    type: str = Field(..., description="Fully-qualified Python type identifier")
    name: str = Field(..., description="Schema type local name (e.g. 'date')")
    namespace: str = Field(..., description="Schema type namespace URI")

    @classmethod
    def from_dto(cls, identifier: str, dto: TypeOverride) -> TypeOverrideResponse:
        """Convert one registry entry to a response model."""
        return cls(type=identifier, name=dto.name, namespace=dto.namespace)


class NamespaceMetadataResponse(BaseModel):
    """Pydantic model for NamespaceMetadata."""

    package: str = Field(..., description="Qualified package name")
    namespace: str | None = Field(None, description="Target namespace URI, null without XmlSchema")
    element_form_default: str | None = Field(None, description="'qualified', 'unqualified' or null")
    attribute_form_default: str | None = Field(None, description="'qualified', 'unqualified' or null")
    access_type: str = Field(..., description="Default member access")
    access_order: str = Field(..., description="Default member order")
    type_overrides: list[TypeOverrideResponse] = Field(default_factory=list)
    namespace_prefixes: dict[str, str] = Field(default_factory=dict, description="Namespace URI -> prefix")

    @classmethod
    def from_dto(cls, dto: NamespaceMetadata) -> NamespaceMetadataResponse:
        """Convert NamespaceMetadata to a response model; overrides sorted by type."""
        return cls(
            package=dto.qualified_name,
            namespace=dto.namespace_uri,
            element_form_default=dto.element_form_default.value if dto.element_form_default else None,
            attribute_form_default=dto.attribute_form_default.value if dto.attribute_form_default else None,
            access_type=dto.access_type.value,
            access_order=dto.access_order.value,
            type_overrides=[
                TypeOverrideResponse.from_dto(identifier, override)
                for identifier, override in sorted(dto.type_overrides.items())
            ],
            namespace_prefixes=dict(sorted(dto.namespace_prefixes.items())),
        )


class NamespaceCatalogResponse(BaseModel):
    """All loaded packages, in emission order."""

    namespaces: list[NamespaceMetadataResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, namespaces: Iterable[NamespaceMetadata]) -> NamespaceCatalogResponse:
        return cls(namespaces=[NamespaceMetadataResponse.from_dto(ns) for ns in namespaces])
