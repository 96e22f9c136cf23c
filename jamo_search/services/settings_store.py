from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from jamo_search.domain.matching import comparator_names

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "jamo"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the default matching strategy and log level

    Notes:
      - Unknown or malformed values fall back to the defaults.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings %s: %s", self._path, e)

    def get_strategy_name(self) -> str:
        v = self.load().get("strategy", DEFAULT_STRATEGY)
        if isinstance(v, str) and v.strip().lower() in comparator_names():
            return v.strip().lower()
        logger.debug("Ignoring unknown strategy %r in settings", v)
        return DEFAULT_STRATEGY

    def set_strategy_name(self, name: str) -> None:
        key = (name or "").strip().lower()
        if key not in comparator_names():
            raise ValueError("Unknown comparator: %r" % name)
        s = self.load()
        s["strategy"] = key
        self.save(s)

    def get_log_level(self) -> str:
        v = self.load().get("log_level", DEFAULT_LOG_LEVEL)
        if isinstance(v, str) and v.strip().upper() in _LOG_LEVELS:
            return v.strip().upper()
        return DEFAULT_LOG_LEVEL

    def set_log_level(self, level: str) -> None:
        key = str(level).strip().upper()
        if key not in _LOG_LEVELS:
            raise ValueError("Unknown log level: %r" % level)
        s = self.load()
        s["log_level"] = key
        self.save(s)
