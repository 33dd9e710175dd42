"""
/**
 * @file rental_ai/config/settings.py
 * @description Settings loading and merging (config.json + config.local.json).
 */
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(REPO_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(REPO_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(REPO_ROOT, "config.example.json")

logger = logging.getLogger("rental_ai.config")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def endpoints(self) -> Dict[str, str]:
        value = self.raw.get("endpoints", {})
        return value if isinstance(value, dict) else {}

    @property
    def models(self) -> Dict[str, str]:
        value = self.raw.get("models", {})
        return value if isinstance(value, dict) else {}

    @property
    def api_keys(self) -> Dict[str, str]:
        value = self.raw.get("api_keys", {})
        return value if isinstance(value, dict) else {}

    @property
    def parameters(self) -> Dict[str, Any]:
        value = self.raw.get("parameters", {})
        return value if isinstance(value, dict) else {}

    @property
    def ai_enabled(self) -> bool:
        ai = self.raw.get("ai", {})
        if isinstance(ai, dict) and ai.get("enabled") is False:
            return False
        return True

    @property
    def request_timeout(self) -> float:
        try:
            return float(self.parameters.get("request_timeout", 60))
        except (TypeError, ValueError):
            return 60.0

    def resolve_dashscope_key(self) -> Optional[str]:
        return (
            os.getenv("DASHSCOPE_API_KEY")
            or os.getenv("DASHSCOPE_APIKEY")
            or (self.api_keys.get("dashscope") if isinstance(self.api_keys.get("dashscope"), str) else None)
        )


_CACHED_SETTINGS: Optional[Settings] = None
_LAST_LOAD_TIME = 0.0
_CONFIG_HASH = ""
_SETTINGS_LOCK = threading.Lock()


def _deep_diff(d1: Dict[str, Any], d2: Dict[str, Any], path: str = "") -> list:
    diffs = []
    for k in sorted(set(d1.keys()) | set(d2.keys())):
        p = f"{path}.{k}" if path else k
        if k not in d1:
            diffs.append(f"Added: {p}")
        elif k not in d2:
            diffs.append(f"Removed: {p}")
        elif isinstance(d1[k], dict) and isinstance(d2[k], dict):
            diffs.extend(_deep_diff(d1[k], d2[k], p))
        elif d1[k] != d2[k]:
            # values may hold api keys, only report the path
            diffs.append(f"Changed: {p}")
    return diffs


def read_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    """Read and merge the config files without touching the process cache."""
    base_cfg = _load_json(base_path)
    if not base_cfg.get("endpoints") and os.path.exists(example_path):
        base_cfg = _merge_dicts(_load_json(example_path), base_cfg)
    local_cfg = _load_json(local_path)
    return Settings(raw=_merge_dicts(base_cfg, local_cfg))


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
) -> Settings:
    global _CACHED_SETTINGS, _LAST_LOAD_TIME, _CONFIG_HASH

    with _SETTINGS_LOCK:
        now = time.time()
        # Debounce: 500ms
        if _CACHED_SETTINGS is not None and (now - _LAST_LOAD_TIME < 0.5):
            return _CACHED_SETTINGS

        try:
            merged = read_settings(base_path, local_path, example_path).raw

            # Sort keys so identical content hashes the same
            new_hash = hashlib.md5(json.dumps(merged, sort_keys=True).encode("utf-8")).hexdigest()

            if _CACHED_SETTINGS is not None and new_hash == _CONFIG_HASH:
                _LAST_LOAD_TIME = now
                return _CACHED_SETTINGS

            is_reload = _CACHED_SETTINGS is not None
            if is_reload:
                diffs = _deep_diff(_CACHED_SETTINGS.raw, merged)
                if diffs:
                    logger.info("Config changes detected: %s", "; ".join(diffs))

            _CACHED_SETTINGS = Settings(raw=merged)
            _CONFIG_HASH = new_hash
            _LAST_LOAD_TIME = now

            if is_reload:
                logger.info("Configuration reloaded successfully.")

        except (OSError, ValueError) as e:
            logger.error("Failed to reload config: %s. Keeping old config.", e)
            if _CACHED_SETTINGS is None:
                logger.warning("Initializing with empty settings due to load failure.")
                _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Subsequent reloads are handled by the file watcher calling reload_settings().
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
