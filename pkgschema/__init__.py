"""
pkgschema - XML Schema metadata extracted from package-level declarations.
"""

from pkgschema.__version__ import __version__

__all__ = ["__version__"]
