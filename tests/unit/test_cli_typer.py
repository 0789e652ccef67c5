# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import base64
import re
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from pdfgrid.cli import app
from pdfgrid.config.installer import CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH
from tests.test_support import temp_env, write_png

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._env = temp_env({CONFIG_PATH_ENV: str(DEFAULT_CONFIG_PATH)})
        self._env.__enter__()
        self.addCleanup(self._env.__exit__, None, None, None)

    def test_root_info_commands(self) -> None:
        cases = (
            {"args": ["--help"], "contains": ("demo", "config")},
            {"args": ["--version"], "contains": ("pdfgrid",)},
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self.runner.invoke(app, case["args"])
                self.assertEqual(result.exit_code, 0)
                for expected in case["contains"]:
                    self.assertIn(expected, _strip_ansi(result.output).lower())

    def test_root_no_subcommand_references_help(self) -> None:
        result = self.runner.invoke(app, [])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("pdfgrid --help", _strip_ansi(result.output))

    def test_demo_writes_each_document(self) -> None:
        for name in ("certificate", "report", "label"):
            with self.subTest(name=name):
                with tempfile.TemporaryDirectory() as tmpdir:
                    output = Path(tmpdir) / f"{name}.pdf"
                    result = self.runner.invoke(app, ["demo", name, "-o", str(output)])
                    self.assertEqual(result.exit_code, 0, result.output)
                    self.assertTrue(output.read_bytes().startswith(b"%PDF"))
                    self.assertIn("Document ready", _strip_ansi(result.output))

    def test_demo_quiet_and_image(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            image = write_png(Path(tmpdir) / "logo.png", 40, 20)
            output = Path(tmpdir) / "report.pdf"
            result = self.runner.invoke(
                app,
                ["--quiet", "demo", "report", "--image", str(image), "-o", str(output)],
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(output.exists())
        self.assertEqual(result.output.strip(), "")

    def test_demo_base64_prints_pdf(self) -> None:
        result = self.runner.invoke(app, ["demo", "label", "--base64"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(base64.b64decode(result.output.strip()).startswith(b"%PDF"))

    def test_demo_rejects_unknown_name(self) -> None:
        result = self.runner.invoke(app, ["demo", "poster"])
        self.assertEqual(result.exit_code, 2)

    def test_demo_missing_image_reports_error(self) -> None:
        result = self.runner.invoke(app, ["demo", "label", "--image", "/nonexistent.png"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("Error:", _strip_ansi(result.output))

    def test_config_command_prints_layout(self) -> None:
        result = self.runner.invoke(app, ["config"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = _strip_ansi(result.output)
        for expected in ("A4", "portrait", "helvetica"):
            self.assertIn(expected, output)

    def test_config_print_path_and_invalid_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            bad = Path(tmpdir) / "bad.toml"
            bad.write_text('[page]\nsize = "B5"\n', encoding="utf-8")
            result = self.runner.invoke(app, ["--config", str(bad), "config", "--print-path"])
            self.assertEqual(result.exit_code, 0)
            self.assertIn("bad.toml", result.output)
            result = self.runner.invoke(app, ["config", "--config", str(bad)])
            self.assertEqual(result.exit_code, 2)
            self.assertIn("page.size", _strip_ansi(result.output))

    def test_init_config_creates_user_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "config.toml"
            with mock.patch(
                "pdfgrid.config.installer.user_config_path", return_value=target
            ):
                result = self.runner.invoke(app, ["--init-config"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertTrue(target.exists())


if __name__ == "__main__":
    unittest.main()
