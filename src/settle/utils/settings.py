# src/settle/utils/settings.py
import json
import logging
import os
from typing import Any, Dict

from settle.utils.numbers import safe_int

logger = logging.getLogger(__name__)

INT_KEYS = ("filter_debounce_ms", "resize_debounce_ms", "n_rows")


def default_settings() -> Dict[str, Any]:
    return {
        "filter_debounce_ms": 200,
        "resize_debounce_ms": 150,
        "n_rows": 260,
    }


def coerce_settings(s: Dict[str, Any]) -> Dict[str, Any]:
    """Merge over defaults; numeric keys that don't parse keep their default."""
    defaults = default_settings()
    out = {**defaults, **s}
    for k in INT_KEYS:
        out[k] = safe_int(out.get(k), defaults[k])
    return out


def load_settings(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        logger.info("No settings at %s; using defaults.", path)
        return default_settings()
    with open(path, "r", encoding="utf-8") as f:
        s = json.load(f)
    if not isinstance(s, dict):
        logger.warning("Settings file %s invalid top-level; using defaults.", path)
        return default_settings()
    return coerce_settings(s)


def save_settings(path: str, s: Dict[str, Any]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(coerce_settings(s), f, indent=2, ensure_ascii=False)
    logger.info("Settings saved to %s", path)
