"""Namespace metadata component.

NamespaceMetadata is the normalized, read-only view of one package's schema
declarations. It is built once from a PackageSource; both registries are
computed eagerly at that point and never recomputed.

Ordering is by the package's qualified name (not the namespace URI, which may
be absent or shared by several packages), so a list of metadata objects sorts
the same way regardless of discovery order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pkgschema.components.schema.overrides_comp import build_type_overrides, collect_schema_type_declarations
from pkgschema.components.schema.prefixes_comp import build_namespace_prefixes
from pkgschema.helpers.dto.declarations_dto import (
    XmlAccessOrder,
    XmlAccessorOrder,
    XmlAccessorType,
    XmlAccessType,
    XmlNsForm,
    XmlSchema,
    XmlSchemaType,
    XmlSchemaTypes,
)
from pkgschema.helpers.dto.schema_dto import SourcePosition, TypeOverride
from pkgschema.helpers.dto.source_dto import PackageSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamespaceMetadata:
    """
    Schema-level metadata of one package.

    Attributes:
        qualified_name: Dotted name of the package; the ordering key
        namespace_uri: Target namespace, None without an XmlSchema declaration
        element_form_default: None when undeclared or UNSET
        attribute_form_default: None when undeclared or UNSET
        access_type: Default member access (PUBLIC_MEMBER when undeclared)
        access_order: Default member order (UNDEFINED when undeclared)
        type_overrides: Read-only map of type identifier -> TypeOverride
        namespace_prefixes: Read-only map of namespace URI -> preferred prefix
        position: Where the declarations were read from (not compared)
    """

    qualified_name: str
    namespace_uri: str | None = None
    element_form_default: XmlNsForm | None = None
    attribute_form_default: XmlNsForm | None = None
    access_type: XmlAccessType = XmlAccessType.PUBLIC_MEMBER
    access_order: XmlAccessOrder = XmlAccessOrder.UNDEFINED
    type_overrides: Mapping[str, TypeOverride] = field(default_factory=dict)
    namespace_prefixes: Mapping[str, str] = field(default_factory=dict)
    position: SourcePosition | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Private copies behind read-only views; callers' dicts stay theirs
        object.__setattr__(self, "type_overrides", MappingProxyType(dict(self.type_overrides)))
        object.__setattr__(self, "namespace_prefixes", MappingProxyType(dict(self.namespace_prefixes)))

    @classmethod
    def from_source(cls, source: PackageSource) -> NamespaceMetadata:
        """Alias for read_namespace_metadata()."""
        return read_namespace_metadata(source)

    def __hash__(self) -> int:
        return hash(self.qualified_name)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, NamespaceMetadata):
            return NotImplemented
        return compare_namespaces(self, other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, NamespaceMetadata):
            return NotImplemented
        return compare_namespaces(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, NamespaceMetadata):
            return NotImplemented
        return compare_namespaces(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, NamespaceMetadata):
            return NotImplemented
        return compare_namespaces(self, other) >= 0


def _form_or_none(form: XmlNsForm) -> XmlNsForm | None:
    return None if form is XmlNsForm.UNSET else form


def read_namespace_metadata(source: PackageSource) -> NamespaceMetadata:
    """
    Read and normalize a package's schema declarations.

    Args:
        source: The package to read

    Returns:
        Fully built NamespaceMetadata

    Raises:
        InvalidTypeReference: A schema type override does not name a declared type.
            No metadata object is produced in that case.
    """
    position = source.position
    schema = source.get_declaration(XmlSchema)
    accessor_type = source.get_declaration(XmlAccessorType)
    accessor_order = source.get_declaration(XmlAccessorOrder)

    declarations = collect_schema_type_declarations(
        source.get_declaration(XmlSchemaType),
        source.get_declaration(XmlSchemaTypes),
    )
    type_overrides = build_type_overrides(declarations, position)

    metadata = NamespaceMetadata(
        qualified_name=source.qualified_name,
        namespace_uri=schema.namespace if schema is not None else None,
        element_form_default=_form_or_none(schema.element_form_default) if schema is not None else None,
        attribute_form_default=_form_or_none(schema.attribute_form_default) if schema is not None else None,
        access_type=accessor_type.value if accessor_type is not None else XmlAccessType.PUBLIC_MEMBER,
        access_order=accessor_order.value if accessor_order is not None else XmlAccessOrder.UNDEFINED,
        type_overrides=type_overrides,
        namespace_prefixes=build_namespace_prefixes(schema),
        position=position,
    )
    logger.debug(
        "Read schema metadata for %s: namespace=%r overrides=%d prefixes=%d",
        metadata.qualified_name,
        metadata.namespace_uri,
        len(metadata.type_overrides),
        len(metadata.namespace_prefixes),
    )
    return metadata


def compare_namespaces(a: NamespaceMetadata, b: NamespaceMetadata) -> int:
    """
    Total order over namespace metadata by package qualified name.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 for the same package
    """
    return (a.qualified_name > b.qualified_name) - (a.qualified_name < b.qualified_name)


def sort_namespaces(namespaces: Iterable[NamespaceMetadata]) -> list[NamespaceMetadata]:
    """Return a new list of metadata in deterministic emission order."""
    return sorted(namespaces, key=lambda ns: ns.qualified_name)
