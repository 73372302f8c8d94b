"""Writing 24-bit uncompressed BMP images."""

from __future__ import annotations

import os
import struct

_HEADER_SIZE = 54
_INFO_SIZE = 40
_BITS_PER_PIXEL = 24


class BMPError(ValueError):
    """Raised when pixel data cannot be stored as a BMP image."""


def encode_bmp(data: bytes, width: int, height: int) -> bytes:
    """Return a BMP file holding ``data`` (BGR triplets, ``width`` a multiple of 8)."""
    if width % 8:
        raise BMPError("image width must be a multiple of 8")
    image_size = width * height * 3
    pixels = bytes(data)
    if len(pixels) != image_size:
        raise BMPError(f"expected {image_size} bytes of pixel data, got {len(pixels)}")
    header = struct.pack(
        "<2sIIIIiiHHIIiiII",
        b"BM",
        _HEADER_SIZE + image_size,
        0,
        _HEADER_SIZE,
        _INFO_SIZE,
        width,
        height,
        1,
        _BITS_PER_PIXEL,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )
    return header + pixels


def write_bmp(path: str | os.PathLike[str], data: bytes, width: int, height: int) -> None:
    """Encode ``data`` as BMP and write it to ``path``."""
    encoded = encode_bmp(data, width, height)
    with open(path, "wb") as fh:
        fh.write(encoded)