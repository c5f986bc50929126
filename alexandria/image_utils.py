"""Image utilities - blank canvases, bitmap writing and loading helpers."""

from __future__ import annotations
import os
import struct
from dataclasses import dataclass
from typing import List, Sequence

from PIL import Image

from .config import (
    BMP_BITS_PER_PIXEL,
    BMP_COLOR_HEADER_SIZE,
    BMP_FILE_HEADER_SIZE,
    BMP_INFO_HEADER_SIZE,
    BMP_SRGB_TAG,
    CANVAS_FILL,
)
from .logging import log
from .types import ColorAlpha

Canvas = List[List[ColorAlpha]]

_BI_BITFIELDS = 3

# Little-endian, no padding
_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_COLOR_HEADER = struct.Struct("<IIIII64x")


@dataclass
class BMPHeader:
    """Header for 32-bit BGRA bitmaps.

    A negative height stores rows top-down (origin in the upper left);
    a positive height stores them bottom-up.

    The info and colour headers together form a 124-byte BITMAPV5HEADER
    with explicit channel masks, so readers keep the alpha channel.
    """
    width: int
    height: int
    reserved1: int = 0
    reserved2: int = 0
    planes: int = 1
    bit_count: int = BMP_BITS_PER_PIXEL
    compression: int = _BI_BITFIELDS
    size_image: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0
    red_mask: int = 0x00FF0000
    green_mask: int = 0x0000FF00
    blue_mask: int = 0x000000FF
    alpha_mask: int = 0xFF000000
    color_space_type: int = BMP_SRGB_TAG

    @property
    def info_size(self) -> int:
        """Size of the info + colour headers (the DIB header size field)."""
        return BMP_INFO_HEADER_SIZE + BMP_COLOR_HEADER_SIZE

    @property
    def offset_data(self) -> int:
        """Start of pixel data, in bytes from the beginning of the file."""
        return BMP_FILE_HEADER_SIZE + self.info_size

    @property
    def file_size(self) -> int:
        """Total file size in bytes."""
        return abs(self.width * self.height) * 4 + self.offset_data

    def pack(self) -> bytes:
        """Serialize to the 138-byte on-disk layout."""
        return (
            _FILE_HEADER.pack(
                b"BM", self.file_size, self.reserved1, self.reserved2, self.offset_data,
            )
            + _INFO_HEADER.pack(
                self.info_size, self.width, self.height, self.planes, self.bit_count,
                self.compression, self.size_image, self.x_pixels_per_meter,
                self.y_pixels_per_meter, self.colors_used, self.colors_important,
            )
            + _COLOR_HEADER.pack(
                self.red_mask, self.green_mask, self.blue_mask, self.alpha_mask,
                self.color_space_type,
            )
        )


def make_image_array(width: int, height: int) -> Canvas:
    """Blank (opaque white) canvas indexed as pixels[x][y]."""
    if width < 0 or height < 0:
        raise ValueError(f"canvas dimensions must be non-negative, got {width}x{height}")
    return [[ColorAlpha(*CANVAS_FILL) for _ in range(height)] for _ in range(width)]


def _canvas_size(pixels: Sequence[Sequence[ColorAlpha]]) -> tuple[int, int]:
    """Validate a canvas and return (width, height)."""
    if not pixels or not pixels[0]:
        raise ValueError("canvas must have at least one pixel")
    height = len(pixels[0])
    if any(len(column) != height for column in pixels):
        raise ValueError("canvas columns must all have the same height")
    return len(pixels), height


def save_bmp(filepath: str, pixels: Sequence[Sequence[ColorAlpha]],
             origin_at_top_left: bool = True) -> None:
    """Save a pixels[x][y] canvas as an uncompressed 32-bit bitmap.

    Args:
        filepath: Destination path, normally ending in ".bmp".
        pixels: Rectangular canvas, as built by make_image_array().
        origin_at_top_left: If True, pixels[x][0] is the top row;
            otherwise it is the bottom row.
    """
    width, height = _canvas_size(pixels)
    header = BMPHeader(width, -height if origin_at_top_left else height)

    data = bytearray(header.pack())
    for y in range(height):
        for x in range(width):
            p = pixels[x][y]
            data += bytes((p.b & 0xFF, p.g & 0xFF, p.r & 0xFF, p.a & 0xFF))

    with open(filepath, "wb") as f:
        f.write(data)
    log(f"[BMP] Saved {width}x{height}: {os.path.basename(filepath)}")


def to_pil_image(pixels: Sequence[Sequence[ColorAlpha]]) -> Image.Image:
    """Convert a pixels[x][y] canvas into an RGBA Pillow image."""
    width, height = _canvas_size(pixels)
    raw = bytearray()
    for y in range(height):
        for x in range(width):
            p = pixels[x][y]
            raw += bytes((p.r & 0xFF, p.g & 0xFF, p.b & 0xFF, p.a & 0xFF))
    return Image.frombytes("RGBA", (width, height), bytes(raw))


def from_pil_image(img: Image.Image) -> Canvas:
    """Convert a Pillow image into a pixels[x][y] canvas."""
    rgba = img.convert("RGBA")
    width, height = rgba.size
    raw = rgba.tobytes()

    def at(x: int, y: int) -> ColorAlpha:
        i = (y * width + x) * 4
        return ColorAlpha(raw[i], raw[i + 1], raw[i + 2], raw[i + 3])

    return [[at(x, y) for y in range(height)] for x in range(width)]


def load_bmp(filepath: str, origin_at_top_left: bool = True) -> Canvas:
    """Load a bitmap (or any Pillow-readable image) into a canvas.

    Args:
        filepath: Path to image file.
        origin_at_top_left: Must match the flag used with save_bmp() for
            pixels[x][0] to mean the same row again.
    """
    with Image.open(filepath) as img:
        canvas = from_pil_image(img)
    if not origin_at_top_left:
        for column in canvas:
            column.reverse()
    log(f"[BMP] Loaded {len(canvas)}x{len(canvas[0]) if canvas else 0}: "
        f"{os.path.basename(filepath)}")
    return canvas


def load_file(filepath: str) -> str:
    """Read a whole text file; returns "" if it cannot be read."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        log(f"[FILE][ERR] Could not read {filepath}: {e!r}")
        return ""
