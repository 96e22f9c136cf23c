from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

import yaml

from jamo_search.domain.enums import JosaType

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Defaults (used if YAML is missing or malformed)
# ---------------------------------------------------------------------

# (after a final consonant, after a vowel)
_DEFAULT_JOSA_PAIRS: Final[dict[JosaType, tuple[str, str]]] = {
    JosaType.EN: ("은", "는"),
    JosaType.YG: ("이", "가"),
    JosaType.ER: ("을", "를"),
    JosaType.WG: ("과", "와"),
    JosaType.YDD: ("이다", "다"),
    JosaType.ERR: ("으로", "로"),
}


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

_YAML_CACHE: dict[str, Any] | None = None
_YAML_CACHE_PATH: Path | None = None
_YAML_CACHE_MTIME_NS: int | None = None


def _project_root() -> Path:
    # jamo_search/domain/josa_data.py -> jamo_search/domain -> jamo_search -> <project_root>
    return Path(__file__).resolve().parents[2]


def josa_yaml_path() -> Path:
    return _project_root() / "data" / "josa.yaml"


def _load_yaml(path: Path | None = None) -> dict[str, Any]:
    """Load josa overrides YAML if present.

    Failure is non-fatal; defaults will be used.

    Expected file: data/josa.yaml
    """
    global _YAML_CACHE, _YAML_CACHE_PATH, _YAML_CACHE_MTIME_NS

    path = path or josa_yaml_path()
    try:
        if not path.exists():
            _YAML_CACHE = {}
            _YAML_CACHE_PATH = path
            _YAML_CACHE_MTIME_NS = None
            return {}

        mtime_ns = path.stat().st_mtime_ns
        if _YAML_CACHE is not None and _YAML_CACHE_PATH == path and _YAML_CACHE_MTIME_NS == mtime_ns:
            return dict(_YAML_CACHE)

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            parsed = data if isinstance(data, dict) else {}

        _YAML_CACHE = dict(parsed)
        _YAML_CACHE_PATH = path
        _YAML_CACHE_MTIME_NS = mtime_ns
        return dict(_YAML_CACHE)
    except (OSError, UnicodeError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable josa table %s: %s", path, e)
        return {}


def _clean_pair(value: Any) -> tuple[str, str] | None:
    # Accept either [after_jongsung, after_vowel] or {jongsung: .., vowel: ..}
    if isinstance(value, dict):
        value = [value.get("jongsung"), value.get("vowel")]
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return None
    if not all(isinstance(v, str) and v.strip() for v in value):
        return None
    return value[0].strip(), value[1].strip()


# ---------------------------------------------------------------------
# Public API (domain-level)
# ---------------------------------------------------------------------

def get_josa_pair(josa_type: JosaType, path: Path | None = None) -> tuple[str, str]:
    """Return (after_jongsung, after_vowel) particles for `josa_type`.

    Entries in data/josa.yaml (keyed by the lower-case type name, e.g. `yg`) win
    over the built-in defaults; malformed entries are ignored.
    """
    data = _load_yaml(path)
    pairs = data.get("josa")
    if isinstance(pairs, dict):
        cleaned = _clean_pair(pairs.get(josa_type.value))
        if cleaned is not None:
            return cleaned
        if josa_type.value in pairs:
            logger.debug("Malformed josa entry for %s: %r", josa_type.value, pairs.get(josa_type.value))
    return _DEFAULT_JOSA_PAIRS[josa_type]


# Public domain-data defaults (use the getter for YAML-backed values)
DEFAULT_JOSA_PAIRS: Final[dict[JosaType, tuple[str, str]]] = dict(_DEFAULT_JOSA_PAIRS)
