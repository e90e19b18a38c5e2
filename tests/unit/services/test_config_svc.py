"""
Unit tests for ConfigService.

Every test runs through the clean_env fixture: no PKGSCHEMA_* variables and an
empty working directory, so only what the test writes is picked up.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from pkgschema.helpers.dto.config_dto import CatalogConfig
from pkgschema.services.config_svc import ConfigService


def _write_yaml(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestComposition:
    """Source precedence: defaults < YAML < overrides < env."""

    @pytest.mark.unit
    def test_defaults(self, clean_env) -> None:
        cfg = ConfigService().get_config()

        assert cfg == {
            "source_mode": "import",
            "search_paths": [],
            "packages": [],
            "log_level": "INFO",
            "output_format": "table",
        }

    @pytest.mark.unit
    def test_repo_local_yaml(self, clean_env, tmp_path: Path) -> None:
        _write_yaml(tmp_path / "config" / "pkgschema.yaml", "source_mode: static\npackages: [acme.a]\n")

        service = ConfigService()

        assert service.get("source_mode") == "static"
        assert service.get("packages") == ["acme.a"]

    @pytest.mark.unit
    def test_env_config_path_beats_repo_local(self, clean_env, tmp_path: Path) -> None:
        _write_yaml(tmp_path / "config" / "pkgschema.yaml", "log_level: WARNING\noutput_format: json\n")
        other = _write_yaml(tmp_path / "elsewhere.yaml", "log_level: DEBUG\n")
        clean_env.setenv("PKGSCHEMA_CONFIG", str(other))

        service = ConfigService()

        assert service.get("log_level") == "DEBUG"
        assert service.get("output_format") == "json"

    @pytest.mark.unit
    def test_overrides_beat_yaml(self, clean_env, tmp_path: Path) -> None:
        _write_yaml(tmp_path / "config" / "pkgschema.yaml", "source_mode: static\n")

        service = ConfigService({"source_mode": "import"})

        assert service.get("source_mode") == "import"

    @pytest.mark.unit
    def test_env_beats_overrides(self, clean_env) -> None:
        clean_env.setenv("PKGSCHEMA_SOURCE_MODE", "static")

        service = ConfigService({"source_mode": "import"})

        assert service.get("source_mode") == "static"

    @pytest.mark.unit
    def test_env_lists(self, clean_env) -> None:
        clean_env.setenv("PKGSCHEMA_SEARCH_PATHS", os.pathsep.join(["src", "vendor"]))
        clean_env.setenv("PKGSCHEMA_PACKAGES", "acme.a, acme.b")

        cfg = ConfigService().get_config()

        assert cfg["search_paths"] == ["src", "vendor"]
        assert cfg["packages"] == ["acme.a", "acme.b"]

    @pytest.mark.unit
    def test_unknown_env_keys_ignored(self, clean_env) -> None:
        clean_env.setenv("PKGSCHEMA_SOMETHING_ELSE", "1")

        assert "something_else" not in ConfigService().get_config()

    @pytest.mark.unit
    def test_invalid_yaml_ignored(self, clean_env, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        _write_yaml(tmp_path / "config" / "pkgschema.yaml", "source_mode: [unclosed\n")

        with caplog.at_level(logging.WARNING):
            cfg = ConfigService().get_config()

        assert cfg["source_mode"] == "import"
        assert "Ignoring unreadable config file" in caplog.text

    @pytest.mark.unit
    def test_non_mapping_yaml_ignored(self, clean_env, tmp_path: Path) -> None:
        _write_yaml(tmp_path / "config" / "pkgschema.yaml", "- just\n- a list\n")

        assert ConfigService().get("source_mode") == "import"

    @pytest.mark.unit
    def test_composed_keys_logged_at_debug(self, clean_env, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pkgschema.services.config_svc"):
            ConfigService().get_config()

        assert "compose() loaded config" in caplog.text
        assert "source_mode" in caplog.text


class TestAccess:
    """Dotted access, caching and reload."""

    @pytest.mark.unit
    def test_get_missing_returns_default(self, clean_env) -> None:
        service = ConfigService()

        assert service.get("nope", 5) == 5
        assert service.get("source_mode.deeper") is None

    @pytest.mark.unit
    def test_cached_until_reload(self, clean_env) -> None:
        service = ConfigService()
        assert service.get("log_level") == "INFO"

        clean_env.setenv("PKGSCHEMA_LOG_LEVEL", "DEBUG")
        assert service.get("log_level") == "INFO"

        service.reload()
        assert service.get("log_level") == "DEBUG"


class TestCatalogConfig:
    """make_catalog_config() and get_output_format() validation."""

    @pytest.mark.unit
    def test_builds_catalog_config(self, clean_env) -> None:
        service = ConfigService({"source_mode": "STATIC", "search_paths": "src", "packages": ["acme.a"]})

        assert service.make_catalog_config() == CatalogConfig(
            source_mode="static",
            search_paths=["src"],
            packages=["acme.a"],
        )

    @pytest.mark.unit
    def test_unknown_source_mode_falls_back(self, clean_env, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            config = ConfigService({"source_mode": "telepathy"}).make_catalog_config()

        assert config.source_mode == "import"
        assert "telepathy" in caplog.text

    @pytest.mark.unit
    def test_output_format(self, clean_env) -> None:
        assert ConfigService({"output_format": "JSON"}).get_output_format() == "json"
        assert ConfigService({"output_format": "xml"}).get_output_format() == "table"
