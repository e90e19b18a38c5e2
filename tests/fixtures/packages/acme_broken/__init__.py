"""Fixture package whose override names no type."""

from pkgschema.helpers.dto import XmlSchema, XmlSchemaType

__xml_schema__ = XmlSchema(namespace="urn:acme:broken")
__xml_schema_type__ = XmlSchemaType(name="date")
