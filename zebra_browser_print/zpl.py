"""
ZPL Builders
============

Small ZPL (Zebra Programming Language) label builders used by the
client's print_text / print_barcode / print_image conveniences.
"""

from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .exceptions import ZPLError

# Barcode type -> ^B command letter (linear codes)
BARCODE_COMMANDS = {
    'C128': 'C',
    'C39': '3',
    'C93': 'A',
    'EAN8': '8',
    'EAN13': 'E',
    'UPCA': 'U',
    'UPCE': '9',
    'I2OF5': '2',
}


def build_label(*commands: str) -> str:
    """Wrap field commands in ^XA ... ^XZ, one command per line."""
    return '\n'.join(('^XA',) + commands + ('^XZ',))


def text_label(text: str, font_size: int = 30, x: int = 20, y: int = 20) -> str:
    """
    Build a single-field text label.

    Args:
        text: Text to print
        font_size: Font size in dots
        x: X position
        y: Y position
    """
    return build_label(
        f'^FO{x},{y}',
        f'^A0N,{font_size},{font_size}',
        f'^FD{text}^FS',
    )


def barcode_label(data: str, barcode_type: str = 'C128',
                  x: int = 20, y: int = 20, height: int = 100) -> str:
    """
    Build a barcode label.

    Args:
        data: Barcode data
        barcode_type: QR or one of BARCODE_COMMANDS (C128, C39, EAN13, ...)
        x: X position
        y: Y position
        height: Barcode height in dots (linear codes)

    Raises:
        ZPLError: If the barcode type is not supported
    """
    kind = barcode_type.upper()
    if kind == 'QR':
        return build_label(f'^FO{x},{y}', '^BQN,2,5', f'^FDQA,{data}^FS')

    letter = BARCODE_COMMANDS.get(kind)
    if letter is None:
        raise ZPLError(f"Unsupported barcode type: {barcode_type}")

    return build_label(
        f'^FO{x},{y}',
        '^BY2',
        f'^B{letter}N,{height},Y,N,N',
        f'^FD{data}^FS',
    )


def image_to_zpl(image_data: bytes, width: Optional[int] = None,
                 height: Optional[int] = None) -> str:
    """
    Convert an image to a ZPL label with an inline ^GFA graphic field.

    Args:
        image_data: Raw image bytes (PNG/JPEG/...)
        width: Target width in dots (optional; keeps aspect ratio if height omitted)
        height: Target height in dots (optional, used with width)

    Returns:
        ZPL code string

    Raises:
        ZPLError: If the image cannot be decoded
    """
    try:
        img = Image.open(BytesIO(image_data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ZPLError(f"Cannot read image: {e}") from e

    if width and height:
        img = img.resize((width, height), Image.Resampling.LANCZOS)
    elif width:
        ratio = width / img.width
        img = img.resize((width, max(1, int(img.height * ratio))), Image.Resampling.LANCZOS)

    # 1-bit, black pixels = 0
    img = img.convert('1')

    w, h = img.size
    bytes_per_row = (w + 7) // 8

    hex_rows = []
    for y in range(h):
        row = bytearray(bytes_per_row)
        for x in range(w):
            if img.getpixel((x, y)) == 0:
                row[x // 8] |= 1 << (7 - x % 8)
        hex_rows.append(row.hex().upper())

    total_bytes = bytes_per_row * h

    return build_label(
        '^FO0,0',
        f'^GFA,{total_bytes},{total_bytes},{bytes_per_row},',
        ''.join(hex_rows),
        '^FS',
    )
