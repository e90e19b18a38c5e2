"""
Data transfer objects shared across layers.
"""

from .declarations_dto import (
    DECLARATION_ATTRIBUTES,
    DEFAULT,
    XML_SCHEMA_NAMESPACE,
    XmlAccessOrder,
    XmlAccessorOrder,
    XmlAccessorType,
    XmlAccessType,
    XmlNs,
    XmlNsForm,
    XmlSchema,
    XmlSchemaType,
    XmlSchemaTypes,
)
from .schema_dto import SourcePosition, TypeOverride
from .source_dto import PackageSource
from .type_reference_dto import Invalid, Resolved, TypeDescription, TypeKind, TypeReference, Unresolved

__all__ = [
    "DECLARATION_ATTRIBUTES",
    "DEFAULT",
    "XML_SCHEMA_NAMESPACE",
    "Invalid",
    "PackageSource",
    "Resolved",
    "SourcePosition",
    "TypeDescription",
    "TypeKind",
    "TypeOverride",
    "TypeReference",
    "Unresolved",
    "XmlAccessOrder",
    "XmlAccessType",
    "XmlAccessorOrder",
    "XmlAccessorType",
    "XmlNs",
    "XmlNsForm",
    "XmlSchema",
    "XmlSchemaType",
    "XmlSchemaTypes",
]
