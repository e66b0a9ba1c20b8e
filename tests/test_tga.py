import struct

import pytest

from mygl2d.tga import TgaHeader, TgaImage, parse_targa, read_targa


def _header(width, height, bpp, image_type=2):
    return struct.pack("<BBBHHBHHHHBB", 0, 0, image_type, 0, 0, 0, 0, 0,
                       width, height, bpp, 0)


def test_header_from_bytes_fields():
    header = TgaHeader.from_bytes(_header(64, 16, 32))
    assert header.width == 64
    assert header.height == 16
    assert header.bits_per_pixel == 32
    assert header.image_type == 2


def test_header_needs_exactly_packed_size():
    data = _header(1, 1, 24)
    assert len(data) == 18
    header = TgaHeader.from_bytes(data)
    assert header.bits_per_pixel == 24
    with pytest.raises(ValueError):
        TgaHeader.from_bytes(data[:-1])


def test_header_too_short():
    with pytest.raises(ValueError):
        TgaHeader.from_bytes(b"\x00" * 5)


def test_parse_flips_rows():
    top = bytes([1, 2, 3])
    bottom = bytes([4, 5, 6])
    image = parse_targa(_header(1, 2, 24) + top + bottom)
    assert image == TgaImage(1, 2, 3, bottom + top)


def test_parse_single_row_unchanged():
    row = bytes(range(8))
    image = parse_targa(_header(2, 1, 32) + row)
    assert image.pixels == row
    assert image.channels == 4


def test_parse_type_ten_accepted():
    image = parse_targa(_header(1, 1, 24, image_type=10) + bytes([7, 8, 9]))
    assert image.pixels == bytes([7, 8, 9])


def test_parse_unsupported_type():
    with pytest.raises(ValueError):
        parse_targa(_header(1, 1, 24, image_type=1) + bytes(3))


def test_parse_truncated():
    with pytest.raises(ValueError):
        parse_targa(_header(2, 2, 24) + bytes(5))


def test_read_targa_from_file(tmp_path):
    path = tmp_path / "img.tga"
    rows = [bytes([i] * 8) for i in range(3)]
    path.write_bytes(_header(2, 3, 32) + b"".join(rows))
    image = read_targa(path)
    assert image.pixels == b"".join(reversed(rows))
    assert (image.width, image.height) == (2, 3)


def test_read_targa_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_targa(tmp_path / "absent.tga")