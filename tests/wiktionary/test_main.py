import io
import unittest
from unittest.mock import patch

from src.wiktionary.__main__ import main
from src.wiktionary.domain.rules import STYLE_SHEET
from tests.utils.tempdir import managed_temp_dir


class MainTests(unittest.TestCase):
    def test_renders_page_file(self):
        with managed_temp_dir("main") as tmp_path:
            page = tmp_path / "run.wiki"
            page.write_text("===Verb===\n# to [[move]] fast\n", encoding="utf-8")
            with patch("sys.stdout", new_callable=io.StringIO) as stdout:
                code = main([str(page)])

        self.assertEqual(code, 0)
        self.assertTrue(stdout.getvalue().startswith(STYLE_SHEET + "</ol><h2>Verb</h2><ol>"))
        self.assertIn('<a href="wiktionary://lookup/move">move</a>', stdout.getvalue())

    def test_page_without_sections(self):
        with managed_temp_dir("main") as tmp_path:
            page = tmp_path / "empty.wiki"
            page.write_text("==Anagrams==\nx\n", encoding="utf-8")
            self.assertEqual(main([str(page)]), 1)

    def test_usage(self):
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            self.assertEqual(main([]), 2)
        self.assertIn("usage", stderr.getvalue())
