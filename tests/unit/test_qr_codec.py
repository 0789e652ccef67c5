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

import io
import unittest

from PIL import Image

from pdfgrid.qr.codec import QrConfig, make_qr, qr_png

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestQrCodec(unittest.TestCase):
    def test_png_signature_for_bytes_and_text_payloads(self) -> None:
        """Generated PNG bytes should start with a valid PNG signature."""
        for payload in (b"hello", "https://example.com"):
            with self.subTest(payload_type=type(payload).__name__):
                self.assertTrue(qr_png(payload).startswith(PNG_SIGNATURE))

    def test_scale_and_border_change_image_size(self) -> None:
        """PNG size matches the symbol size for the configured scale and border."""
        qr = make_qr("hello")
        for scale, border in ((4, 0), (8, 2)):
            with self.subTest(scale=scale, border=border):
                png = qr_png("hello", QrConfig(scale=scale, border=border))
                with Image.open(io.BytesIO(png)) as img:
                    self.assertEqual(img.size, qr.symbol_size(scale=scale, border=border))

    def test_rounded_modules_render_png(self) -> None:
        config = QrConfig(module_shape="rounded", dark="#112233", light=(255, 255, 255))
        png = qr_png("hello", config)
        with Image.open(io.BytesIO(png)) as img:
            self.assertEqual(img.mode, "RGBA")
            self.assertEqual(img.getpixel((0, 0)), (255, 255, 255, 255))

    def test_invalid_arguments_rejected(self) -> None:
        cases = (
            ("", QrConfig()),
            ("hello", QrConfig(error="Z")),
            ("hello", QrConfig(module_shape="hexagon")),
        )
        for data, config in cases:
            with self.subTest(data=data, config=config):
                with self.assertRaises(ValueError):
                    qr_png(data, config)


if __name__ == "__main__":
    unittest.main()
