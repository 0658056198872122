"""YAML configuration loading.

Updates:
    v0.1.0 - 2026-10-12 - Added cached loader for the config directory.
"""

from __future__ import annotations

import functools
import os
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_ENV_VAR = "FEEDBACK_HUB_CONFIG_PATH"


class ConfigLoader:
    """Reads YAML documents from the configuration directory."""

    def __init__(self, base_path: Path | None = None) -> None:
        """Resolve the configuration directory.

        Args:
            base_path (Path | None): Directory override; defaults to
                ``$FEEDBACK_HUB_CONFIG_PATH`` or ``./config``.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """

        self._base_path = (
            base_path or Path(os.environ.get(CONFIG_ENV_VAR, "config"))
        ).resolve()
        if not self._base_path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {self._base_path}")

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _resolve(self, name: str) -> Path:
        candidate = self._base_path / name
        if candidate.suffix not in {".yaml", ".yml"}:
            candidate = candidate.with_suffix(".yaml")
        if not candidate.exists():
            raise FileNotFoundError(f"Config file not found: {candidate}")
        return candidate

    def exists(self, name: str) -> bool:
        try:
            self._resolve(name)
        except FileNotFoundError:
            return False
        return True

    @functools.lru_cache(maxsize=None)
    def load(self, name: str) -> Dict[str, Any]:
        """Parse a configuration document, caching the result per loader.

        Args:
            name (str): Document name with or without the ``.yaml`` suffix.

        Returns:
            dict[str, Any]: Parsed mapping; empty documents yield ``{}``.

        Raises:
            FileNotFoundError: If the document does not exist.
            ValueError: If the document is not a mapping.
        """

        path = self._resolve(name)
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data
