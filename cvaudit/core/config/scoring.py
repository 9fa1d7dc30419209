from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = Path(__file__).with_name("scoring.yaml")


def get_scoring_config() -> dict[str, Any]:
    """Load ``scoring.yaml`` once; any read or parse failure is a RuntimeError naming the file."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is None:
        path = _SCORING_CONFIG_PATH
        try:
            with path.open("r", encoding="utf-8") as handle:
                parsed = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Failed to load scoring config '{path}': {exc}") from exc

        if not isinstance(parsed, dict):
            raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
        _SCORING_CONFIG_CACHE = parsed

    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Walk the config by dotted path, e.g. ``grades.a_plus``; missing keys give ``default``."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
