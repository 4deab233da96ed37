"""User configuration for the pager.

Settings are read from a JSON file in the OS-appropriate config directory.
A missing file means defaults; unreadable files and invalid values are
logged and ignored so a bad config never prevents viewing a file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import PagerConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PagerSettings:
    """Effective pager settings."""
    page_size: int = PagerConstants.PAGE_SIZE
    max_visible_pages: int = PagerConstants.MAX_VISIBLE_PAGES
    chunk_size: int = PagerConstants.READ_CHUNK_SIZE
    tab_size: int = PagerConstants.TAB_SIZE

    def with_overrides(self, **overrides: Any) -> 'PagerSettings':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


# Inclusive bounds for integer settings
_SETTING_RANGES = {
    'page_size': (1, 1 << 30),
    'max_visible_pages': (1, 100),
    'chunk_size': (1, 1 << 30),
    'tab_size': (1, 16),
}


class SettingsStore:
    """Loads pager settings from ``settings.json`` in the user config dir."""

    def __init__(self):
        self._config_dir = Path(platformdirs.user_config_dir("logpager"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[PagerSettings] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_file(self) -> Dict[str, Any]:
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> PagerSettings:
        """Return the configured settings, falling back to defaults."""
        if self._settings_cache is not None:
            return self._settings_cache

        known = {f.name for f in fields(PagerSettings)}
        values: Dict[str, Any] = {}
        for key, value in self._read_file().items():
            if key not in known:
                logger.warning(f"Unknown setting {key!r} in {self._settings_file}, ignoring")
            elif not self.validate_setting(key, value):
                logger.warning(f"Invalid value {value!r} for setting {key!r}, using default")
            else:
                values[key] = value

        self._settings_cache = PagerSettings(**values)
        return self._settings_cache

    def validate_setting(self, key: str, value: Any) -> bool:
        """Check that ``value`` is acceptable for setting ``key``.

        Unknown keys are considered valid (forward compatibility).
        """
        if key not in _SETTING_RANGES:
            return True
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        low, high = _SETTING_RANGES[key]
        return low <= value <= high

    def clear_cache(self) -> None:
        """Forget cached settings so the next load re-reads the file."""
        self._settings_cache = None


# Global instance
_store: Optional[SettingsStore] = None


def get_settings_store() -> SettingsStore:
    """Get the global settings store instance."""
    global _store
    if _store is None:
        _store = SettingsStore()
    return _store
