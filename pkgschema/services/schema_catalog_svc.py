"""
Schema catalog service.

Loads NamespaceMetadata for a set of packages, through the package source
selected by configuration, and returns it in deterministic order.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Iterable, Iterator

from pkgschema.components.schema.namespace_metadata_comp import (
    NamespaceMetadata,
    read_namespace_metadata,
    sort_namespaces,
)
from pkgschema.components.source.module_source_comp import ModulePackageSource
from pkgschema.components.source.static_source_comp import StaticPackageSource
from pkgschema.helpers.dto.config_dto import CatalogConfig
from pkgschema.helpers.dto.source_dto import PackageSource

logger = logging.getLogger(__name__)


class SchemaCatalogService:
    """
    Service that answers "what schema metadata do these packages declare?".

    Each call builds fresh metadata objects; nothing is cached between calls.
    """

    def __init__(self, config: CatalogConfig) -> None:
        self._config = config

    @property
    def config(self) -> CatalogConfig:
        return self._config

    def open_source(self, name: str) -> PackageSource:
        """
        Open the package source for one package.

        Raises:
            PackageNotFoundError: The package cannot be located or imported
            DeclarationSyntaxError: Static mode and the source cannot be parsed
        """
        if self._config.source_mode == "static":
            roots = self._config.search_paths or [os.getcwd()]
            return StaticPackageSource.from_package_name(name, roots)

        with self._import_paths():
            return ModulePackageSource.from_name(name)

    def load(self, name: str) -> NamespaceMetadata:
        """
        Load metadata for one package.

        Raises:
            PackageNotFoundError, DeclarationSyntaxError, InvalidTypeReference
        """
        metadata = read_namespace_metadata(self.open_source(name))
        logger.debug("Loaded schema metadata for %s (%s mode)", name, self._config.source_mode)
        return metadata

    def load_all(self, names: Iterable[str] | None = None) -> list[NamespaceMetadata]:
        """
        Load metadata for several packages, sorted by package name.

        Args:
            names: Packages to load; defaults to the configured packages.
                Repeated names are loaded once.

        Returns:
            Metadata in deterministic order
        """
        requested = list(self._config.packages if names is None else names)
        unique = list(dict.fromkeys(requested))
        namespaces = sort_namespaces(self.load(name) for name in unique)
        logger.info("Loaded schema metadata for %d package(s)", len(namespaces))
        return namespaces

    @staticmethod
    def group_by_namespace(namespaces: Iterable[NamespaceMetadata]) -> dict[str | None, list[NamespaceMetadata]]:
        """
        Group packages that share a target namespace.

        Groups are keyed by namespace URI (None for packages without an
        XmlSchema declaration) and appear in the order of their first package;
        packages within a group are sorted.
        """
        groups: dict[str | None, list[NamespaceMetadata]] = {}
        for metadata in sort_namespaces(namespaces):
            groups.setdefault(metadata.namespace_uri, []).append(metadata)
        return groups

    @contextlib.contextmanager
    def _import_paths(self) -> Iterator[None]:
        """Temporarily prepend the configured search paths to sys.path."""
        added = [p for p in self._config.search_paths if p not in sys.path]
        sys.path[:0] = added
        try:
            yield
        finally:
            for path in added:
                with contextlib.suppress(ValueError):
                    sys.path.remove(path)
