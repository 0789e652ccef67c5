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

from pdfgrid import Document
from pdfgrid.core.errors import BarcodeError, ImageError
from pdfgrid.core.models import (
    Color,
    Extension,
    Font,
    FontFamily,
    FontStyle,
    Margins,
    Orientation,
    PageSize,
    TableProps,
    TextProps,
)
from pdfgrid.render.renderer import FpdfRenderer
from tests.test_support import png_bytes


class TestFpdfRenderer(unittest.TestCase):
    def test_page_size_follows_orientation(self) -> None:
        portrait = FpdfRenderer(Orientation.PORTRAIT, PageSize.A4)
        landscape = FpdfRenderer(Orientation.LANDSCAPE, PageSize.A4)
        width, height = portrait.page_size()
        self.assertAlmostEqual(width, 210.0, places=1)
        self.assertAlmostEqual(height, 297.0, places=1)
        self.assertEqual(landscape.page_size(), (height, width))

    def test_margins_round_trip(self) -> None:
        renderer = FpdfRenderer(margins=Margins(5.0, 6.0, 7.0, 8.0))
        self.assertEqual(renderer.page_margins(), Margins(5.0, 6.0, 7.0, 8.0))

    def test_font_state_survives_new_page(self) -> None:
        renderer = FpdfRenderer()
        font = Font(family=FontFamily.TIMES, style=FontStyle.BOLD, size=14)
        renderer.set_font(font)
        renderer.set_text_color(Color(10, 20, 30))
        renderer.add_page()
        self.assertEqual(renderer.get_font(), font)
        self.assertEqual(renderer.get_text_color(), Color(10, 20, 30))

    def test_measure_grows_with_text(self) -> None:
        renderer = FpdfRenderer()
        wide = renderer.measure_string_width("abcd")
        self.assertGreater(wide, renderer.measure_string_width("ab"))
        self.assertEqual(renderer.measure_string_width(""), 0.0)

    def test_register_image_bytes(self) -> None:
        renderer = FpdfRenderer()
        handle = renderer.register_image(png_bytes(4, 2), Extension.PNG)
        self.assertEqual((handle.width, handle.height), (4.0, 2.0))
        renderer.draw_image(handle, 10, 10, 20, 10)

    def test_placed_image_is_released(self) -> None:
        renderer = FpdfRenderer()
        handle = renderer.register_image(png_bytes(4, 2), Extension.PNG)
        renderer.draw_image(handle, 10, 10, 20, 10)
        self.assertEqual(renderer._images, {})
        with self.assertRaises(ImageError):
            renderer.draw_image(handle, 10, 30, 20, 10)

    def test_register_image_rejects_bad_input(self) -> None:
        renderer = FpdfRenderer()
        with self.assertRaises(ImageError):
            renderer.register_image(b"not an image")
        with self.assertRaises(ImageError):
            renderer.register_image("/nonexistent/image.png")
        with self.assertRaises(ImageError):
            renderer.register_image(png_bytes(), Extension.JPG)

    def test_barcode_rejects_characters_outside_code39(self) -> None:
        renderer = FpdfRenderer()
        renderer.draw_barcode("abc-123", 10, 10, 80, 10)
        for code in ("", "https://example.com", "under_score"):
            with self.subTest(code=code):
                with self.assertRaises(BarcodeError):
                    renderer.draw_barcode(code, 10, 10, 80, 10)


class TestDocumentOutput(unittest.TestCase):
    def test_full_document_renders_pdf(self) -> None:
        doc = Document(Orientation.PORTRAIT, PageSize.A4)
        doc.register_header(
            lambda: doc.row(10, lambda row: row.col(lambda col: col.text("Header")))
        )
        doc.register_footer(
            lambda: doc.row(10, lambda row: row.col(lambda col: col.signature("Sign")))
        )

        def body(row) -> None:
            row.col(lambda col: col.text("São Paulo ✓", TextProps(size=12)))
            row.col(lambda col: col.qr_code("https://example.com"))
            row.col(lambda col: col.barcode("PDFGRID-1"))

        doc.row(30, body)
        doc.line(2.0)
        rows = [[f"Item {i}", f"{i * 1.5:.2f}"] for i in range(120)]
        doc.table_list(
            ["Item", "Price"], rows, TableProps(alternated_background=Color(220, 220, 220))
        )

        data = doc.output()
        self.assertTrue(data.startswith(b"%PDF"))
        self.assertGreaterEqual(doc.current_page, 1)
        self.assertEqual(doc.renderer.pdf.page, doc.current_page + 1)


if __name__ == "__main__":
    unittest.main()
