"""Tests for ZPL label builders."""

from io import BytesIO

import pytest
from PIL import Image

from zebra_browser_print import ZPLError
from zebra_browser_print.zpl import barcode_label, image_to_zpl, text_label


def png_bytes(img):
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class TestTextAndBarcode:
    """Test text and barcode labels."""

    def test_text_label(self):
        zpl = text_label("Hello", font_size=25, x=5, y=6)
        assert zpl.splitlines() == ["^XA", "^FO5,6", "^A0N,25,25", "^FDHello^FS", "^XZ"]

    def test_code128(self):
        zpl = barcode_label("ABC123", height=80)
        assert "^BCN,80,Y,N,N" in zpl
        assert "^FDABC123^FS" in zpl

    def test_code39(self):
        zpl = barcode_label("ABC", barcode_type="C39")
        assert "^B3N,100,Y,N,N" in zpl
        assert "^BC" not in zpl

    def test_ean13_lowercase(self):
        assert "^BEN,100,Y,N,N" in barcode_label("5901234123457", barcode_type="ean13")

    def test_unknown_barcode_type(self):
        with pytest.raises(ZPLError, match="Unsupported barcode type"):
            barcode_label("ABC", barcode_type="CODABLOCK")

    def test_linear_label_lines(self):
        zpl = barcode_label("X", barcode_type="C128", x=1, y=2, height=50)
        assert zpl.splitlines() == ["^XA", "^FO1,2", "^BY2", "^BCN,50,Y,N,N", "^FDX^FS", "^XZ"]

    def test_qr(self):
        zpl = barcode_label("https://zebra.com", barcode_type="QR")
        assert "^BQN,2,5" in zpl
        assert "^FDQA,https://zebra.com^FS" in zpl


class TestImageToZPL:
    """Test image conversion to ^GFA graphic fields."""

    def test_black_image(self):
        img = Image.new("1", (16, 2), color=0)
        zpl = image_to_zpl(png_bytes(img))

        lines = zpl.splitlines()
        assert lines[2] == "^GFA,4,4,2,"
        assert lines[3] == "FFFF" * 2

    def test_white_image(self):
        img = Image.new("L", (8, 1), color=255)
        zpl = image_to_zpl(png_bytes(img))
        assert zpl.splitlines()[3] == "00"

    def test_row_padding(self):
        # 10 px wide: two bytes per row, leftmost pixel black
        img = Image.new("1", (10, 1), color=1)
        img.putpixel((0, 0), 0)
        zpl = image_to_zpl(png_bytes(img))

        lines = zpl.splitlines()
        assert lines[2] == "^GFA,2,2,2,"
        assert lines[3] == "8000"

    def test_resize_to_width_keeps_aspect(self):
        img = Image.new("RGB", (100, 50), color=(0, 0, 0))
        zpl = image_to_zpl(png_bytes(img), width=16)
        # 16x8 -> 2 bytes per row, 16 bytes total
        assert "^GFA,16,16,2," in zpl

    def test_resize_to_width_and_height(self):
        img = Image.new("RGB", (100, 50), color=(0, 0, 0))
        zpl = image_to_zpl(png_bytes(img), width=8, height=3)
        assert "^GFA,3,3,1," in zpl

    def test_invalid_image(self):
        with pytest.raises(ZPLError, match="Cannot read image"):
            image_to_zpl(b"not an image")

    def test_client_print_image(self, client, session):
        img = Image.new("1", (8, 1), color=0)
        client.print_image(png_bytes(img))

        data = session.request.call_args.kwargs["data"].decode("utf-8")
        assert "^GFA,1,1,1," in data
        assert "FF" in data
