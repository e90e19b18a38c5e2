"""Schema type override registry component.

Builds the type identifier -> TypeOverride mapping for a package from its
singular (__xml_schema_type__) and plural (__xml_schema_types__) declarations.

Precedence: the singular declaration is processed first, then the plural
entries in declaration order. A later entry for an identifier already present
replaces the earlier one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pkgschema.components.schema.type_reference_comp import resolve_type_identifier
from pkgschema.helpers.dto.declarations_dto import XmlSchemaType, XmlSchemaTypes
from pkgschema.helpers.dto.schema_dto import SourcePosition, TypeOverride

logger = logging.getLogger(__name__)


def collect_schema_type_declarations(
    singular: XmlSchemaType | None,
    plural: XmlSchemaTypes | None,
) -> list[XmlSchemaType]:
    """Order all override declarations of a package: singular first, then plural entries."""
    declarations: list[XmlSchemaType] = []
    if singular is not None:
        declarations.append(singular)
    if plural is not None:
        declarations.extend(plural.value)
    return declarations


def build_type_overrides(
    declarations: Iterable[XmlSchemaType],
    position: SourcePosition | None = None,
) -> dict[str, TypeOverride]:
    """
    Build the override registry.

    Args:
        declarations: Override declarations in processing order
        position: Where the declarations live, for error messages

    Returns:
        Fresh dict of fully-qualified type identifier -> TypeOverride

    Raises:
        InvalidTypeReference: A declaration does not name a declared type
    """
    overrides: dict[str, TypeOverride] = {}
    for declaration in declarations:
        identifier = resolve_type_identifier(declaration, position)
        if identifier in overrides:
            logger.debug("Schema type override for %s replaced by a later declaration", identifier)
        overrides[identifier] = TypeOverride.from_declaration(declaration)
    return overrides
