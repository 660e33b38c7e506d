"""Tests for resume_pdf/io_utils.py and CLI error handling."""

from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stderr
from pathlib import Path

from resume_pdf.errors import ConfigError, ExitCode, NotFoundError, RenderError, handle_error
from resume_pdf.io_utils import load_yaml, read_yaml_or_json, write_bytes


class TestReadYamlOrJson(unittest.TestCase):
    def test_yaml_and_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            y = Path(tmp) / "a.yml"
            y.write_text("firstName: Jane\nskills: [Python]\n", encoding="utf-8")
            j = Path(tmp) / "a.json"
            j.write_text('{"firstName": "Jane"}', encoding="utf-8")
            self.assertEqual(read_yaml_or_json(y), {"firstName": "Jane", "skills": ["Python"]})
            self.assertEqual(read_yaml_or_json(j), {"firstName": "Jane"})

    def test_empty_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            p = Path(tmp) / "empty.yaml"
            p.write_text("  \n", encoding="utf-8")
            self.assertEqual(load_yaml(p), {})

    def test_missing_file(self):
        with self.assertRaises(NotFoundError):
            read_yaml_or_json("/nonexistent/resume.yaml")

    def test_parse_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            p = Path(tmp) / "bad.yaml"
            p.write_text("a: [unclosed\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                read_yaml_or_json(p)

    def test_write_bytes_creates_parents(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = write_bytes(b"%PDF-1.4", Path(tmp) / "a" / "b" / "cv.pdf")
            self.assertEqual(out.read_bytes(), b"%PDF-1.4")


class TestHandleError(unittest.TestCase):
    def _handle(self, exc):
        err = io.StringIO()
        with redirect_stderr(err):
            code = handle_error(exc)
        return code, err.getvalue()

    def test_cli_error_with_hint(self):
        code, err = self._handle(ConfigError("Bad theme", hint="use #RRGGBB"))
        self.assertEqual(code, ExitCode.CONFIG_ERROR)
        self.assertIn("Hint: use #RRGGBB", err)

    def test_render_error(self):
        code, err = self._handle(RenderError("PDF generation failed"))
        self.assertEqual(code, ExitCode.ERROR)
        self.assertIn("PDF generation failed", err)

    def test_unexpected_error_hides_message(self):
        code, err = self._handle(ValueError("Jane Doe"))
        self.assertEqual(code, ExitCode.ERROR)
        self.assertNotIn("Jane", err)
        self.assertIn("ValueError", err)

    def test_interrupt(self):
        code, _ = self._handle(KeyboardInterrupt())
        self.assertEqual(code, ExitCode.INTERRUPTED)


if __name__ == "__main__":
    unittest.main()
