#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from defaults, YAML files and env vars
#  - Caches composed config
#  - Provides reload() for runtime changes
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from pkgschema.helpers.dto.config_dto import CatalogConfig

ENV_PREFIX = "PKGSCHEMA_"
CONFIG_PATH_ENV = "PKGSCHEMA_CONFIG"

# Keys that hold lists; env values for them are os.pathsep / comma separated
_LIST_KEYS = frozenset({"search_paths", "packages"})

_SOURCE_MODES = ("import", "static")
_OUTPUT_FORMATS = ("table", "json")


class ConfigService:
    """
    Service for loading and caching pkgschema configuration.

    Loads config from multiple sources (defaults -> YAML -> overrides -> env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache and optional direct overrides."""
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("source_mode")
            'import'
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_catalog_config(self) -> CatalogConfig:
        """
        Build a CatalogConfig from the current configuration.

        Invalid choices fall back to their defaults with a warning.
        """
        cfg = self.get_config()

        source_mode = str(cfg.get("source_mode", "import")).lower()
        if source_mode not in _SOURCE_MODES:
            self._logger.warning("Unknown source_mode %r; using 'import'", source_mode)
            source_mode = "import"

        return CatalogConfig(
            source_mode=source_mode,  # type: ignore[arg-type]
            search_paths=[str(p) for p in self._as_list(cfg.get("search_paths"))],
            packages=[str(p) for p in self._as_list(cfg.get("packages"))],
        )

    def get_output_format(self) -> str:
        """Configured CLI output format ("table" or "json")."""
        fmt = str(self.get("output_format", "table")).lower()
        if fmt not in _OUTPUT_FORMATS:
            self._logger.warning("Unknown output_format %r; using 'table'", fmt)
            return "table"
        return fmt

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./config/pkgschema.yaml (if present)
          3) $PKGSCHEMA_CONFIG (if set)
          4) overrides passed to the constructor
          5) Environment variables (PKGSCHEMA_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        # 1) Repo-local config
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "pkgschema.yaml")))

        # 2) Optional path via env
        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        # 3) Direct overrides
        if self._overrides:
            self._deep_merge(cfg, self._overrides)

        # 4) Environment variable overrides
        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "source_mode": "import",  # "import" or "static"
            "search_paths": [],
            "packages": [],
            "log_level": "INFO",
            "output_format": "table",  # "table" or "json"
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning("Ignoring unreadable config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            self._logger.warning("Ignoring config file %s: top level is not a mapping", path)
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides of the form:
          PKGSCHEMA_SOURCE_MODE=static
          PKGSCHEMA_SEARCH_PATHS=src:vendor
          PKGSCHEMA_LOG_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == CONFIG_PATH_ENV:
                continue
            key = k[len(ENV_PREFIX) :].lower()
            if key not in cfg:
                continue
            if key in _LIST_KEYS:
                cfg[key] = self._split_list(v)
            else:
                cfg[key] = v

    @staticmethod
    def _split_list(value: str) -> list[str]:
        separator = os.pathsep if os.pathsep in value else ","
        return [item.strip() for item in value.split(separator) if item.strip()]

    @staticmethod
    def _as_list(value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)
