import struct

import pytest

from raytracer.bmp import BMPError, encode_bmp, write_bmp


def _pixels(width, height):
    return bytes(i % 256 for i in range(width * height * 3))


def test_header_fields():
    width, height = 16, 3
    encoded = encode_bmp(_pixels(width, height), width, height)
    fields = struct.unpack("<2sIIIIiiHHIIiiII", encoded[:54])
    assert fields[0] == b"BM"
    assert fields[1] == len(encoded)
    assert fields[3] == 54
    assert fields[4] == 40
    assert fields[5:7] == (width, height)
    assert fields[7:9] == (1, 24)
    assert fields[10] == width * height * 3


def test_pixel_data_follows_header_unchanged():
    data = _pixels(8, 2)
    assert encode_bmp(data, 8, 2)[54:] == data


def test_width_must_be_multiple_of_eight():
    with pytest.raises(BMPError):
        encode_bmp(_pixels(10, 2), 10, 2)


def test_data_length_must_match():
    with pytest.raises(BMPError):
        encode_bmp(b"\x00" * 5, 8, 1)


def test_write_bmp_matches_encoding(tmp_path):
    data = _pixels(8, 4)
    target = tmp_path / "out.bmp"
    write_bmp(target, data, 8, 4)
    assert target.read_bytes() == encode_bmp(data, 8, 4)