"""Unit tests for settings loading."""

import json
import os
import shutil
import tempfile
import unittest
from pathlib import Path

from logpager.config import PagerSettings, SettingsStore, get_settings_store
from logpager.constants import PagerConstants


class TestSettingsStore(unittest.TestCase):
    """Test reading settings.json."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.store = SettingsStore()
        self.store._config_dir = Path(self.temp_dir)
        self.store._settings_file = self.store._config_dir / "settings.json"
        self.store.clear_cache()

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _write(self, content: str):
        with open(self.store.settings_file, 'w', encoding='utf-8') as f:
            f.write(content)

    def test_missing_file_gives_defaults(self):
        settings = self.store.load()
        self.assertEqual(settings, PagerSettings())
        self.assertEqual(settings.page_size, PagerConstants.PAGE_SIZE)
        self.assertEqual(settings.max_visible_pages, 10)

    def test_values_from_file(self):
        self._write(json.dumps({"page_size": 4096, "tab_size": 4}))
        settings = self.store.load()
        self.assertEqual(settings.page_size, 4096)
        self.assertEqual(settings.tab_size, 4)
        self.assertEqual(settings.chunk_size, PagerConstants.READ_CHUNK_SIZE)

    def test_invalid_values_fall_back_to_defaults(self):
        self._write(json.dumps({"page_size": 0, "max_visible_pages": "ten", "chunk_size": True}))
        with self.assertLogs('logpager.config', level='WARNING') as logs:
            settings = self.store.load()
        self.assertEqual(settings, PagerSettings())
        self.assertEqual(len(logs.records), 3)

    def test_unknown_keys_are_ignored(self):
        self._write(json.dumps({"page_size": 100, "colour": "blue"}))
        with self.assertLogs('logpager.config', level='WARNING'):
            settings = self.store.load()
        self.assertEqual(settings.page_size, 100)

    def test_malformed_json(self):
        self._write("{not json")
        with self.assertLogs('logpager.config', level='WARNING'):
            settings = self.store.load()
        self.assertEqual(settings, PagerSettings())

    def test_non_dict_json(self):
        self._write("[1, 2, 3]")
        with self.assertLogs('logpager.config', level='WARNING'):
            settings = self.store.load()
        self.assertEqual(settings, PagerSettings())

    def test_load_is_cached_until_cleared(self):
        self._write(json.dumps({"page_size": 100}))
        self.assertEqual(self.store.load().page_size, 100)
        self._write(json.dumps({"page_size": 200}))
        self.assertEqual(self.store.load().page_size, 100)
        self.store.clear_cache()
        self.assertEqual(self.store.load().page_size, 200)

    def test_validate_setting(self):
        self.assertTrue(self.store.validate_setting("page_size", 1))
        self.assertTrue(self.store.validate_setting("max_visible_pages", 100))
        self.assertFalse(self.store.validate_setting("max_visible_pages", 101))
        self.assertFalse(self.store.validate_setting("tab_size", 0))
        self.assertFalse(self.store.validate_setting("page_size", 1.5))
        self.assertFalse(self.store.validate_setting("page_size", False))
        # Unknown settings are considered valid
        self.assertTrue(self.store.validate_setting("future_option", "x"))


class TestPagerSettings(unittest.TestCase):

    def test_with_overrides_skips_none(self):
        settings = PagerSettings(page_size=50).with_overrides(page_size=None, tab_size=2)
        self.assertEqual(settings.page_size, 50)
        self.assertEqual(settings.tab_size, 2)

    def test_with_overrides_returns_copy(self):
        base = PagerSettings()
        changed = base.with_overrides(page_size=10)
        self.assertEqual(base.page_size, PagerConstants.PAGE_SIZE)
        self.assertEqual(changed.page_size, 10)

    def test_global_store_is_shared(self):
        self.assertIs(get_settings_store(), get_settings_store())


if __name__ == '__main__':
    unittest.main()
