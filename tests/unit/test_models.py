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

import unittest

from pdfgrid.core.errors import ConfigurationError, PdfGridError, ReplayOverflowError
from pdfgrid.core.models import Align, Color, Font, FontFamily, FontStyle, TextProps


class TestColor(unittest.TestCase):
    def test_parse_hex_and_names(self) -> None:
        self.assertEqual(Color.parse("#c8c8c8"), Color(200, 200, 200))
        self.assertEqual(Color.parse(" red "), Color(255, 0, 0))
        self.assertEqual(Color.black().as_tuple(), (0, 0, 0))

    def test_channels_out_of_range_rejected(self) -> None:
        for channels in ((256, 0, 0), (0, -1, 0)):
            with self.subTest(channels=channels):
                with self.assertRaises(ValueError):
                    Color(*channels)


class TestTextProps(unittest.TestCase):
    def test_from_font(self) -> None:
        font = Font(family=FontFamily.COURIER, style=FontStyle.ITALIC, size=9)
        props = TextProps.from_font(font, align=Align.RIGHT, top=2.0)
        self.assertEqual(props.font, font)
        self.assertEqual(props.align, Align.RIGHT)
        self.assertEqual(props.top, 2.0)
        self.assertFalse(props.extrapolate)


class TestErrors(unittest.TestCase):
    def test_hierarchy(self) -> None:
        self.assertTrue(issubclass(PdfGridError, ValueError))
        self.assertTrue(issubclass(ConfigurationError, PdfGridError))
        self.assertFalse(issubclass(ReplayOverflowError, ConfigurationError))


if __name__ == "__main__":
    unittest.main()
