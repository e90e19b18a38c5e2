"""Fixture package declaring every kind of schema metadata."""

from datetime import date

from pkgschema.helpers.dto import (
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

from .money import Money

__xml_schema__ = XmlSchema(
    namespace="urn:acme:shop",
    element_form_default=XmlNsForm.QUALIFIED,
    attribute_form_default=XmlNsForm.UNSET,
    xmlns=[
        XmlNs(prefix="shop", namespace_uri="urn:acme:shop"),
        XmlNs(prefix="xs", namespace_uri="http://www.w3.org/2001/XMLSchema"),
    ],
)
__xml_accessor_type__ = XmlAccessorType(XmlAccessType.FIELD)
__xml_accessor_order__ = XmlAccessorOrder(XmlAccessOrder.ALPHABETICAL)
__xml_schema_type__ = XmlSchemaType(name="date", type=date)
__xml_schema_types__ = XmlSchemaTypes(
    [
        XmlSchemaType(name="decimal", type=Money),
        XmlSchemaType(name="string", namespace="urn:acme:types", type="Invoice"),
    ]
)


class Invoice:
    number: str
