"""
Schema metadata DTOs shared by components, services and interfaces.

Rules:
- Import only stdlib, typing and sibling DTOs
- Pure data structures only (no I/O, no DB access, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pkgschema.helpers.dto.declarations_dto import XmlSchemaType


@dataclass(frozen=True)
class SourcePosition:
    """Location of package declarations, for error messages."""

    path: str | None
    line: int | None = None

    def __str__(self) -> str:
        where = self.path or "<unknown>"
        if self.line is not None:
            return f"{where}:{self.line}"
        return where


@dataclass(frozen=True)
class TypeOverride:
    """
    Forced schema type binding for one Python type.

    name and namespace are passed through from the declaration untouched.
    The originating declaration is kept for reference but not compared.
    """

    name: str
    namespace: str
    declaration: XmlSchemaType = field(compare=False)

    @classmethod
    def from_declaration(cls, declaration: XmlSchemaType) -> TypeOverride:
        return cls(name=declaration.name, namespace=declaration.namespace, declaration=declaration)
