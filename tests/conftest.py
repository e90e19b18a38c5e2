"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Core schema components are tested against StubPackageSource (in-memory declarations)
- Package sources are tested against real files: the fixture packages under
  tests/fixtures/packages, or packages written into tmp_path
"""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from pkgschema.helpers.dto.schema_dto import SourcePosition

# Add project root to path so tests can import pkgschema without installing
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

FIXTURE_PACKAGES = Path(__file__).parent / "fixtures" / "packages"


class StubPackageSource:
    """In-memory PackageSource: declarations keyed by declaration class."""

    def __init__(self, qualified_name: str, *declarations: Any, position: SourcePosition | None = None) -> None:
        self.qualified_name = qualified_name
        self.position = position
        self._declarations = {type(d): d for d in declarations}
        self.reads: list[type] = []

    def get_declaration(self, kind: type) -> Any:
        self.reads.append(kind)
        return self._declarations.get(kind)


@pytest.fixture
def stub_source() -> Callable[..., StubPackageSource]:
    """Factory for StubPackageSource instances."""
    return StubPackageSource


@pytest.fixture
def fixture_packages_dir() -> Path:
    """Root directory holding the on-disk fixture packages."""
    return FIXTURE_PACKAGES


@pytest.fixture
def write_package(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Write a package into tmp_path.

    Usage:
        path = write_package("acme.orders", '''__xml_schema__ = XmlSchema(namespace="urn:o")''')

    Returns the path of the written __init__.py. Parent packages get empty __init__.py files.
    """

    def _write(name: str, source: str) -> Path:
        directory = tmp_path
        for part in name.split("."):
            directory = directory / part
            directory.mkdir(exist_ok=True)
            init = directory / "__init__.py"
            if not init.exists():
                init.write_text("", encoding="utf-8")
        init.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
        return init

    return _write


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Remove PKGSCHEMA_* variables and run from an empty directory (no ./config)."""
    import os

    for key in list(os.environ):
        if key.startswith("PKGSCHEMA_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast test with no I/O beyond tmp_path")
    config.addinivalue_line("markers", "integration: test that imports or parses real fixture packages")
