"""
Helpers package.
"""

from .exceptions import (
    DeclarationSyntaxError,
    InvalidTypeReference,
    PackageNotFoundError,
    PkgSchemaError,
)
from .logging_helper import configure_logging

__all__ = [
    "DeclarationSyntaxError",
    "InvalidTypeReference",
    "PackageNotFoundError",
    "PkgSchemaError",
    "configure_logging",
]
