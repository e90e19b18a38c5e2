"""
Config domain DTOs.

Data transfer objects for configuration service results.
These form cross-layer contracts between services and interfaces.

Rules:
- Import only stdlib and typing (no pkgschema.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

SourceMode = Literal["import", "static"]
OutputFormat = Literal["table", "json"]


@dataclass
class CatalogConfig:
    """
    Settings for loading a catalog of package schema metadata.

    Built by ConfigService.make_catalog_config(); validated there.
    """

    # How package declarations are read: by importing, or by parsing source
    source_mode: SourceMode = "import"

    # Roots searched for package sources (static mode) and prepended to sys.path (import mode)
    search_paths: list[str] = field(default_factory=list)

    # Packages loaded when none are given explicitly
    packages: list[str] = field(default_factory=list)
