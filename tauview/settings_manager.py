from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from PySide6.QtCore import QStandardPaths

from .logger import get_logger
from .path_utils import abs_dir_str

_logger = get_logger("settings")

_DIR_KEYS = ("last_open_dir",)


def default_settings_path() -> str:
    """settings.json under the per-user config location (falls back to home)."""
    app_cfg = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    base = Path(app_cfg) if app_cfg else Path.home() / ".config"
    return (base / "tauview" / "settings.json").as_posix()


class SettingsManager:
    def __init__(self, settings_path: str | None = None):
        self.settings_path = settings_path or default_settings_path()
        self._settings: dict[str, Any] = {}
        self.load()

    DEFAULTS: dict[str, Any] = {
        "last_open_dir": None,
        "shell_qml": None,
    }

    def load(self) -> None:
        try:
            if os.path.exists(self.settings_path):
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        self._settings = data
                        _logger.debug("settings loaded: %s", self.settings_path)
                        return
        except (OSError, ValueError) as e:
            _logger.warning("settings load failed: %s", e)
        self._settings = {}

    def save(self) -> None:
        try:
            os.makedirs(os.path.dirname(self.settings_path), exist_ok=True)
            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
            _logger.debug("settings saved: %s", self.settings_path)
        except (OSError, TypeError) as e:
            _logger.error("settings save failed: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._settings:
            return self._settings[key]
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def set(self, key: str, value: Any) -> None:
        # Directory keys are stored as absolute directories; a file collapses to its parent.
        if key in _DIR_KEYS and isinstance(value, str) and value:
            value = abs_dir_str(value)
        self._settings[key] = value
        self.save()

    @property
    def last_open_dir(self) -> str | None:
        val = self.get("last_open_dir")
        return val if isinstance(val, str) and os.path.isdir(val) else None
