"""Application settings stored as JSON in the per-user data directory."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional

import structlog

logger = structlog.get_logger(__name__)

APP_DIR_NAME = "StatsCard"

DEFAULT_SETTINGS: Dict[str, str] = {
    "app_theme": "light",
    "copy_feedback_ms": "2000",
    "preview_debounce_ms": "300",
}

# Environment variables that take precedence over the stored value.
ENV_OVERRIDES: Dict[str, str] = {
    "app_theme": "STATSCARD_APP_THEME",
}


def app_data_dir() -> Path:
    """Return the platform-specific application data directory."""
    override = os.getenv("STATSCARD_DATA_DIR")
    if override:
        target = Path(override)
    else:
        if os.name == "nt":
            base = Path(os.getenv("LOCALAPPDATA", Path.home()))
        else:
            base = Path.home() / ".local" / "share"
        target = base / APP_DIR_NAME
    target.mkdir(parents=True, exist_ok=True)
    return target


class SettingsManager:
    """Very small settings helper storing JSON data."""

    def __init__(self, path: Optional[str | Path] = None) -> None:
        self.path = Path(path) if path is not None else app_data_dir() / "settings.json"
        self._settings: Dict[str, str] = {}
        # keys set during this session; the environment no longer overrides them
        self._explicit: set[str] = set()
        self.load()

    def load(self) -> None:
        changed = False
        self._settings = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("settings_unreadable", path=str(self.path), error=str(exc))
            else:
                if isinstance(data, dict):
                    self._settings = {str(k): str(v) for k, v in data.items()}
                else:
                    logger.warning("settings_not_a_mapping", path=str(self.path))

        for key, value in DEFAULT_SETTINGS.items():
            if self._settings.get(key, "") == "":
                self._settings[key] = value
                changed = True

        if changed:
            self.save()

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._settings, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("settings_save_failed", path=str(self.path), error=str(exc))

    def get(self, key: str, default: str = "") -> str:
        env_name = ENV_OVERRIDES.get(key)
        if env_name and key not in self._explicit:
            env_value = os.getenv(env_name)
            if env_value:
                return env_value
        return self._settings.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        try:
            return int(self.get(key, str(default)))
        except ValueError:
            logger.warning("settings_bad_int", key=key, value=self.get(key))
            return default

    def set(self, key: str, value: str) -> None:
        self._explicit.add(key)
        self._settings[key] = value
        self.save()
