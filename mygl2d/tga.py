"""Reading of uncompressed true-colour Targa images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import ClassVar

_HEADER = struct.Struct("<BBBHHBHHHHBB")

SUPPORTED_IMAGE_TYPES = frozenset({2, 10})


@dataclass(frozen=True)
class TgaHeader:
    """The fixed 18-byte header at the start of a Targa file."""

    id_length: int
    color_map_type: int
    image_type: int
    color_map_index: int
    color_map_length: int
    color_map_size: int
    x_origin: int
    y_origin: int
    width: int
    height: int
    bits_per_pixel: int
    image_descriptor: int

    SIZE: ClassVar[int] = _HEADER.size

    @classmethod
    def from_bytes(cls, data: bytes) -> TgaHeader:
        """Decode a header from the first bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(
                f"TGA header needs {cls.SIZE} bytes, got {len(data)}"
            )
        return cls(*_HEADER.unpack_from(data))


@dataclass(frozen=True)
class TgaImage:
    """Pixel data of a Targa image, rows in reversed file order."""

    width: int
    height: int
    channels: int
    pixels: bytes


def parse_targa(data: bytes) -> TgaImage:
    """Decode a Targa image held in memory.

    The pixel bytes are taken as they follow the header and the rows are
    flipped vertically.
    """
    data = bytes(data)
    header = TgaHeader.from_bytes(data)
    if header.image_type not in SUPPORTED_IMAGE_TYPES:
        raise ValueError(f"unsupported TGA format (image type {header.image_type})")

    channels = header.bits_per_pixel // 8
    stride = header.width * channels
    size = stride * header.height
    body = data[TgaHeader.SIZE:TgaHeader.SIZE + size]
    if len(body) < size:
        raise ValueError(f"TGA pixel data truncated: need {size} bytes, got {len(body)}")

    if stride:
        rows = [body[start:start + stride] for start in range(0, size, stride)]
        pixels = b"".join(reversed(rows))
    else:
        pixels = b""
    return TgaImage(header.width, header.height, channels, pixels)


def read_targa(path: str | PathLike[str]) -> TgaImage:
    """Read and decode a Targa file."""
    with open(path, "rb") as stream:
        return parse_targa(stream.read())