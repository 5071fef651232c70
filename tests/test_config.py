from pathlib import Path
import unittest
import tempfile

import pytest

from miqat.config import ConfigManager, MiqatConfig, PickerSettings
from miqat.models import FormatConfig, FormatOptionError


class ConfigManagerTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "miqat" / "config.toml"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_file_writes_defaults(self) -> None:
        config = ConfigManager(self.path).load()
        self.assertEqual(config.picker, PickerSettings())
        self.assertTrue(self.path.exists())
        reloaded = ConfigManager(self.path).load()
        self.assertEqual(reloaded.picker, PickerSettings())

    def test_loads_picker_section(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            '[picker]\ntime_type = "12h"\nformat = "HH:mm:ss"\nvalue = "02:15:09 PM"\nitem_extent = 2\n',
            encoding="utf-8",
        )
        manager = ConfigManager(self.path)
        picker = manager.load().picker
        self.assertEqual(manager.errors(), [])
        self.assertEqual(picker.format_config(), FormatConfig(hour_cycle=12, show_seconds=True))
        self.assertEqual(picker.value, "02:15:09 PM")
        self.assertEqual(picker.item_extent, 2)
        self.assertEqual(picker.placeholder, "Select Time")

    def test_invalid_options_fall_back_with_error(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text('[picker]\ntime_type = "36h"\nitem_extent = "wide"\n', encoding="utf-8")
        manager = ConfigManager(self.path)
        picker = manager.load().picker
        self.assertEqual(picker.time_type, "24h")
        self.assertEqual(picker.item_extent, 1)
        self.assertEqual(len(manager.errors()), 2)

    def test_invalid_toml_is_reported(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("[picker\n", encoding="utf-8")
        manager = ConfigManager(self.path)
        self.assertEqual(manager.load(), MiqatConfig.default())
        self.assertTrue(manager.errors()[0].startswith("Invalid TOML"))

    def test_save_escapes_quoted_strings(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text('[picker]\nplaceholder = "Pick \\"now\\" \\\\ later"\n', encoding="utf-8")
        manager = ConfigManager(self.path)
        config = manager.load()
        self.assertEqual(config.picker.placeholder, 'Pick "now" \\ later')
        config.picker.value = "07:45"
        manager.save(config)
        reloaded = ConfigManager(self.path)
        picker = reloaded.load().picker
        self.assertEqual(reloaded.errors(), [])
        self.assertEqual(picker.placeholder, 'Pick "now" \\ later')
        self.assertEqual(picker.value, "07:45")

    def test_save_round_trips_value(self) -> None:
        manager = ConfigManager(self.path)
        config = manager.load()
        config.picker.value = "07:45"
        manager.save(config)
        self.assertEqual(ConfigManager(self.path).load().picker.value, "07:45")


def test_format_options() -> None:
    assert FormatConfig.from_options() == FormatConfig(hour_cycle=24, show_seconds=False)
    config = FormatConfig.from_options("12h", "HH:mm:ss")
    assert (config.time_type, config.format) == ("12h", "HH:mm:ss")
    with pytest.raises(FormatOptionError):
        FormatConfig.from_options("12h", "hh:mm a")
    with pytest.raises(ValueError):
        FormatConfig.from_options("13h")
