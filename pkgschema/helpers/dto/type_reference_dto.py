"""
Type reference DTOs.

A type named by an XmlSchemaType declaration is either already a live class
(resolved) or only known by its source-level shape (unresolved). Reading the
reference yields exactly one of Resolved, Unresolved or Invalid.

Rules:
- Import only stdlib and typing (no pkgschema.* imports)
- Pure data structures only (no I/O, no resolution logic)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeKind(str, Enum):
    """Structural category of an unresolved type reference."""

    DECLARED = "declared"  # a class-like reference with a qualified name
    PRIMITIVE = "primitive"
    ARRAY = "array"
    WILDCARD = "wildcard"
    PLACEHOLDER = "placeholder"  # could not be attributed to any known type


@dataclass(frozen=True)
class TypeDescription:
    """
    Source-level description of a type that is not available as a class.

    Attributes:
        kind: Structural category
        text: Source text of the reference (e.g. "list[int]", "Money")
        qualified_name: Dotted name of the declared type; set only for DECLARED
    """

    kind: TypeKind
    text: str
    qualified_name: str | None = None

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Resolved:
    """Reference was a live class."""

    identifier: str


@dataclass(frozen=True)
class Unresolved:
    """Reference is only available as a structural description."""

    description: TypeDescription


@dataclass(frozen=True)
class Invalid:
    """Reference cannot name a type at all (e.g. the DEFAULT marker)."""

    reason: str


TypeReference = Resolved | Unresolved | Invalid
