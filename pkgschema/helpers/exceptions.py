"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pkgschema.helpers.dto.schema_dto import SourcePosition


class PkgSchemaError(Exception):
    """Base class for every error raised by pkgschema."""


class PositionedError(PkgSchemaError):
    """Error tied to a location in package source, when one is known."""

    def __init__(self, message: str, position: SourcePosition | None = None) -> None:
        self.message = message
        self.position = position
        if position is not None:
            super().__init__(f"{position}: {message}")
        else:
            super().__init__(message)


class InvalidTypeReference(PositionedError):
    """Raised when a schema type override does not name a concrete declared type."""


class DeclarationSyntaxError(PositionedError):
    """Raised when a statically parsed declaration uses an unsupported expression."""


class PackageNotFoundError(PkgSchemaError):
    """Raised when a package cannot be located or imported."""
