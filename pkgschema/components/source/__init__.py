"""
Package source components.
"""

from .module_source_comp import ModulePackageSource
from .static_source_comp import StaticPackageSource, resolve_relative_module

__all__ = [
    "ModulePackageSource",
    "StaticPackageSource",
    "resolve_relative_module",
]
