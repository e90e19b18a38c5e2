"""
Package source contract.

A package source is the read side of a package's declarations. The schema
components only ever read through this protocol, so they do not care whether
the declarations came from an imported module or from parsed source text.

Rules:
- Import only stdlib, typing and sibling DTOs
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pkgschema.helpers.dto.schema_dto import SourcePosition

D = TypeVar("D")


@runtime_checkable
class PackageSource(Protocol):
    """Read-only access to one package's declarations."""

    @property
    def qualified_name(self) -> str:
        """Dotted name of the package (e.g. "acme.orders")."""
        ...

    @property
    def position(self) -> SourcePosition | None:
        """Where the declarations live, if known."""
        ...

    def get_declaration(self, kind: type[D]) -> D | None:
        """Return the package's declaration of the given class, or None when absent.

        Args:
            kind: One of the declaration classes in DECLARATION_ATTRIBUTES

        """
        ...
