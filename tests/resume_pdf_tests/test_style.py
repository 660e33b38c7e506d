"""Tests for resume_pdf/style.py theme helpers."""

from __future__ import annotations

import unittest

from resume_pdf.errors import ConfigError, ExitCode
from resume_pdf.style import DEFAULT_THEME, parse_hex_color, theme_from_config


class TestParseHexColor(unittest.TestCase):
    def test_with_and_without_hash(self):
        self.assertEqual(parse_hex_color("#0066CC"), (0, 102, 204))
        self.assertEqual(parse_hex_color("333333"), (51, 51, 51))

    def test_invalid(self):
        self.assertIsNone(parse_hex_color(None))
        self.assertIsNone(parse_hex_color(""))
        self.assertIsNone(parse_hex_color("#123"))
        self.assertIsNone(parse_hex_color("#GGGGGG"))


class TestDefaultTheme(unittest.TestCase):
    def test_a4_geometry(self):
        page = DEFAULT_THEME.page
        self.assertAlmostEqual(page.width, 595.28)
        self.assertAlmostEqual(page.height, 841.89)
        self.assertAlmostEqual(page.content_width, 495.28)
        self.assertAlmostEqual(page.bottom_limit, 791.89)

    def test_font_sizes(self):
        fonts = DEFAULT_THEME.fonts
        self.assertEqual((fonts.name, fonts.section_header, fonts.project), (22, 14, 9))


class TestThemeFromConfig(unittest.TestCase):
    def test_empty_returns_base(self):
        self.assertIs(theme_from_config(None), DEFAULT_THEME)
        self.assertIs(theme_from_config({}), DEFAULT_THEME)

    def test_overlays_fonts_and_colors(self):
        theme = theme_from_config({"fonts": {"name": 26}, "colors": {"link": "#112233"}})
        self.assertEqual(theme.fonts.name, 26.0)
        self.assertEqual(theme.fonts.contact, DEFAULT_THEME.fonts.contact)
        self.assertEqual(theme.colors.link, "#112233")
        self.assertEqual(theme.page, DEFAULT_THEME.page)

    def test_unknown_keys_ignored(self):
        theme = theme_from_config({"fonts": {"huge": 99}, "margins": 10})
        self.assertEqual(theme.fonts, DEFAULT_THEME.fonts)

    def test_bad_font_size(self):
        with self.assertRaises(ConfigError) as ctx:
            theme_from_config({"fonts": {"name": "big"}})
        self.assertEqual(ctx.exception.code, ExitCode.CONFIG_ERROR)
        with self.assertRaises(ConfigError):
            theme_from_config({"fonts": {"name": 0}})

    def test_bad_color(self):
        with self.assertRaises(ConfigError) as ctx:
            theme_from_config({"colors": {"black": "navy"}})
        self.assertIn("Theme color 'black'", ctx.exception.message)
        self.assertIn("'navy'", ctx.exception.hint)

    def test_non_mapping_sections(self):
        with self.assertRaises(ConfigError):
            theme_from_config({"fonts": [1, 2]})
        with self.assertRaises(ConfigError):
            theme_from_config(["fonts"])


if __name__ == "__main__":
    unittest.main()
