"""
Package-level schema declarations.

A package declares how it maps to an XML Schema by assigning these objects to
module-level dunder attributes (see DECLARATION_ATTRIBUTES), e.g. in
``acme/orders/__init__.py``::

    __xml_schema__ = XmlSchema(
        namespace="urn:acme:orders",
        element_form_default=XmlNsForm.QUALIFIED,
        xmlns=[XmlNs(prefix="ord", namespace_uri="urn:acme:orders")],
    )
    __xml_schema_type__ = XmlSchemaType(name="date", type=datetime.date)

Rules:
- Import only stdlib and typing (no pkgschema.* imports except sibling DTOs)
- Pure data structures only (no I/O, no resolution logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

XML_SCHEMA_NAMESPACE = "http://www.w3.org/2001/XMLSchema"


class XmlNsForm(str, Enum):
    """Qualification default for elements or attributes of a namespace."""

    QUALIFIED = "qualified"
    UNQUALIFIED = "unqualified"
    UNSET = "unset"


class XmlAccessType(str, Enum):
    """Which members of a bean are bound to XML by default."""

    PROPERTY = "property"
    FIELD = "field"
    PUBLIC_MEMBER = "public_member"
    NONE = "none"


class XmlAccessOrder(str, Enum):
    """Default ordering of bound members."""

    UNDEFINED = "undefined"
    ALPHABETICAL = "alphabetical"


class DEFAULT:
    """Marker type for an XmlSchemaType that names no type."""


@dataclass(frozen=True)
class XmlNs:
    """Preferred prefix for a namespace URI."""

    prefix: str
    namespace_uri: str


@dataclass(frozen=True)
class XmlSchema:
    """Schema-level declaration: target namespace, form defaults, prefix bindings."""

    namespace: str = ""
    element_form_default: XmlNsForm = XmlNsForm.UNSET
    attribute_form_default: XmlNsForm = XmlNsForm.UNSET
    xmlns: tuple[XmlNs, ...] = ()

    def __post_init__(self) -> None:
        # Lists are accepted for convenience; store an immutable copy
        object.__setattr__(self, "xmlns", tuple(self.xmlns))


@dataclass(frozen=True)
class XmlSchemaType:
    """
    Forces the schema type used for a Python type throughout the package.

    Attributes:
        name: Local name of the schema type (e.g. "date")
        namespace: Namespace of the schema type
        type: The Python type being mapped. A class, a TypeDescription, or a
            forward-reference string. DEFAULT (the default) is invalid at the
            package level.
    """

    name: str
    namespace: str = XML_SCHEMA_NAMESPACE
    type: Any = DEFAULT


@dataclass(frozen=True)
class XmlSchemaTypes:
    """Container for several XmlSchemaType declarations."""

    value: tuple[XmlSchemaType, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", tuple(self.value))


@dataclass(frozen=True)
class XmlAccessorType:
    """Package default for member access."""

    value: XmlAccessType = XmlAccessType.PUBLIC_MEMBER


@dataclass(frozen=True)
class XmlAccessorOrder:
    """Package default for member ordering."""

    value: XmlAccessOrder = XmlAccessOrder.UNDEFINED


# Declaration class -> module attribute that carries it
DECLARATION_ATTRIBUTES: dict[type, str] = {
    XmlSchema: "__xml_schema__",
    XmlAccessorType: "__xml_accessor_type__",
    XmlAccessorOrder: "__xml_accessor_order__",
    XmlSchemaType: "__xml_schema_type__",
    XmlSchemaTypes: "__xml_schema_types__",
}
