import os
import unittest
from unittest.mock import patch

from src.config.settings import load_picker_settings
from src.wiktionary.domain.rules import DEFAULT_ARCHIVE_TITLE_TEMPLATE, DEFAULT_ENTRY_PATTERN
from tests.utils.tempdir import managed_temp_dir

MONTHS = "Jan,Feb,Mar,Apr,May,Jun,Jul,Aug,Sep,Oct,Nov,Dec"


class PickerSettingsTests(unittest.TestCase):
    def test_reads_values_from_env_file(self):
        with managed_temp_dir("settings") as tmp_path, patch.dict(os.environ, {}, clear=True):
            env_file = tmp_path / ".env"
            env_file.write_text(
                f"WIKTIONARY_MONTH_NAMES={MONTHS}\n"
                "WIKTIONARY_RANDOM_TRIES=7\n"
                "WIKTIONARY_ARCHIVE_TITLE_TEMPLATE=Archive/{year}/{month}\n",
                encoding="utf-8",
            )
            settings = load_picker_settings(env_file)

        self.assertEqual(len(settings.month_names), 12)
        self.assertEqual(settings.month_names[0], "Jan")
        self.assertEqual(settings.random_tries, 7)
        self.assertEqual(settings.archive_title_template, "Archive/{year}/{month}")
        self.assertEqual(settings.entry_pattern, DEFAULT_ENTRY_PATTERN)

    def test_defaults_without_month_names(self):
        with managed_temp_dir("settings") as tmp_path, patch.dict(os.environ, {}, clear=True):
            settings = load_picker_settings(tmp_path / "missing.env")

        self.assertEqual(settings.month_names, ())
        self.assertEqual(settings.random_tries, 5)
        self.assertEqual(settings.archive_title_template, DEFAULT_ARCHIVE_TITLE_TEMPLATE)

    def test_invalid_tries_fall_back_to_default(self):
        with managed_temp_dir("settings") as tmp_path, patch.dict(
            os.environ, {"WIKTIONARY_RANDOM_TRIES": "many"}, clear=True
        ):
            settings = load_picker_settings(tmp_path / "missing.env")

        self.assertEqual(settings.random_tries, 5)
