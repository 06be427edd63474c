"""Truevision TGA images: pixel access, simple transforms and file I/O."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Union

_HEADER = struct.Struct("<BBBhhBhhhhBB")
_FOOTER = b"TRUEVISION-XFILE.\x00"
_EXTENSION_REFS = bytes(8)
_MAX_CHUNK = 128
_TOP_LEFT_ORIGIN = 0x20
_RIGHT_TO_LEFT = 0x10

PathLike = Union[str, "os.PathLike[str]"]


class TGAError(ValueError):
    """Raised when TGA data cannot be decoded or encoded."""


class Format(IntEnum):
    """Supported pixel sizes, in bytes per pixel."""

    GRAYSCALE = 1
    RGB = 3
    RGBA = 4


@dataclass(frozen=True)
class TGAColor:
    """A pixel value stored in TGA byte order (blue, green, red, alpha)."""

    raw: bytes = bytes(4)
    bytespp: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", bytes(self.raw)[:4].ljust(4, b"\x00"))

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "TGAColor":
        """Build a four-byte colour from its red, green, blue and alpha parts."""
        return cls(bytes((b & 0xFF, g & 0xFF, r & 0xFF, a & 0xFF)), 4)

    @classmethod
    def from_value(cls, value: int, bytespp: int) -> "TGAColor":
        """Build a colour from a packed little-endian 32-bit value."""
        return cls((value & 0xFFFFFFFF).to_bytes(4, "little"), bytespp)

    @property
    def b(self) -> int:
        return self.raw[0]

    @property
    def g(self) -> int:
        return self.raw[1]

    @property
    def r(self) -> int:
        return self.raw[2]

    @property
    def a(self) -> int:
        return self.raw[3]

    @property
    def value(self) -> int:
        """The four raw bytes as a little-endian integer."""
        return int.from_bytes(self.raw, "little")

    def __mul__(self, factor: float) -> "TGAColor":
        """Scale every channel, truncating each to a byte."""
        return TGAColor.from_rgba(
            int(self.r * factor),
            int(self.g * factor),
            int(self.b * factor),
            int(self.a * factor),
        )


def _decode_rle(body: bytes, pixelcount: int, bytespp: int) -> bytearray:
    out = bytearray()
    pos = 0
    pixels = 0
    while pixels < pixelcount:
        if pos >= len(body):
            raise TGAError("an error occurred while reading the data")
        header = body[pos]
        pos += 1
        if header < 128:
            count = header + 1
            size = count * bytespp
        else:
            count = header - 127
            size = bytespp
        if pixels + count > pixelcount:
            raise TGAError("too many pixels read")
        chunk = body[pos:pos + size]
        if len(chunk) < size:
            raise TGAError("an error occurred while reading the data")
        pos += size
        out += chunk if header < 128 else chunk * count
        pixels += count
    return out


class TGAImage:
    """An in-memory raster of width x height pixels, bytespp bytes each."""

    def __init__(self, width: int, height: int, bytespp: int = Format.RGB) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if bytespp not in tuple(Format):
            raise ValueError(f"unsupported bytes per pixel: {bytespp}")
        self.width = int(width)
        self.height = int(height)
        self.bytespp = int(bytespp)
        self.data = bytearray(self.width * self.height * self.bytespp)

    def __repr__(self) -> str:
        return f"TGAImage({self.width}, {self.height}, {self.bytespp})"

    @classmethod
    def from_bytes(cls, data: bytes) -> "TGAImage":
        """Decode an image from the contents of a TGA file."""
        if len(data) < _HEADER.size:
            raise TGAError("an error occurred while reading the header")
        fields = _HEADER.unpack_from(data)
        datatype = fields[2]
        width, height = fields[8], fields[9]
        bytespp = fields[10] >> 3
        descriptor = fields[11]
        if width <= 0 or height <= 0 or bytespp not in tuple(Format):
            raise TGAError("bad bpp (or width/height) value")
        image = cls(width, height, bytespp)
        body = bytes(data[_HEADER.size:])
        nbytes = width * height * bytespp
        if datatype in (2, 3):
            if len(body) < nbytes:
                raise TGAError("an error occurred while reading the data")
            image.data[:] = body[:nbytes]
        elif datatype in (10, 11):
            image.data[:] = _decode_rle(body, width * height, bytespp)
        else:
            raise TGAError(f"unknown file format {datatype}")
        if not descriptor & _TOP_LEFT_ORIGIN:
            image.flip_vertically()
        if descriptor & _RIGHT_TO_LEFT:
            image.flip_horizontally()
        return image

    @classmethod
    def read(cls, path: PathLike) -> "TGAImage":
        """Read a TGA file from disk."""
        return cls.from_bytes(Path(path).read_bytes())

    def to_bytes(self, rle: bool = True) -> bytes:
        """Encode the image as a TGA file with a top-left origin."""
        if self.bytespp == Format.GRAYSCALE:
            datatype = 11 if rle else 3
        else:
            datatype = 10 if rle else 2
        try:
            header = _HEADER.pack(
                0, 0, datatype, 0, 0, 0, 0, 0,
                self.width, self.height, self.bytespp << 3, _TOP_LEFT_ORIGIN,
            )
        except struct.error as exc:
            raise TGAError("image too large for the TGA format") from exc
        body = self._encode_rle() if rle else bytes(self.data)
        return header + body + _EXTENSION_REFS + _FOOTER

    def write(self, path: PathLike, rle: bool = True) -> None:
        """Write the image to a TGA file."""
        Path(path).write_bytes(self.to_bytes(rle))

    def _encode_rle(self) -> bytes:
        bpp = self.bytespp
        data = self.data
        npixels = self.width * self.height
        out = bytearray()
        curpix = 0
        while curpix < npixels:
            chunkstart = curpix * bpp
            curbyte = chunkstart
            run_length = 1
            raw = True
            while curpix + run_length < npixels and run_length < _MAX_CHUNK:
                same = data[curbyte:curbyte + bpp] == data[curbyte + bpp:curbyte + 2 * bpp]
                curbyte += bpp
                if run_length == 1:
                    raw = not same
                if raw and same:
                    run_length -= 1
                    break
                if not raw and not same:
                    break
                run_length += 1
            curpix += run_length
            out.append(run_length - 1 if raw else run_length + 127)
            out += data[chunkstart:chunkstart + (run_length * bpp if raw else bpp)]
        return bytes(out)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> TGAColor:
        """Return the pixel at (x, y), or a blank colour outside the image."""
        if not self._inside(x, y):
            return TGAColor()
        offset = (x + y * self.width) * self.bytespp
        return TGAColor(bytes(self.data[offset:offset + self.bytespp]), self.bytespp)

    def set(self, x: int, y: int, color: TGAColor) -> bool:
        """Store a pixel; return False if (x, y) lies outside the image."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return False
        offset = (x + y * self.width) * self.bytespp
        self.data[offset:offset + self.bytespp] = color.raw[:self.bytespp]
        return True

    def _rows(self) -> list[bytes]:
        line = self.width * self.bytespp
        return [bytes(self.data[start:start + line]) for start in range(0, len(self.data), line)] if line else []

    def flip_horizontally(self) -> None:
        """Mirror the image left to right."""
        bpp = self.bytespp
        flipped = bytearray()
        for row in self._rows():
            pixels = [row[i:i + bpp] for i in range(0, len(row), bpp)]
            flipped += b"".join(reversed(pixels))
        self.data[:] = flipped

    def flip_vertically(self) -> None:
        """Mirror the image top to bottom."""
        self.data[:] = b"".join(reversed(self._rows()))

    def scale(self, width: int, height: int) -> None:
        """Resize the image in place by nearest-neighbour stepping."""
        if width <= 0 or height <= 0:
            raise ValueError("target dimensions must be positive")
        bpp = self.bytespp
        target = bytearray(width * height * bpp)
        nlinebytes = width * bpp
        olinebytes = self.width * bpp
        nscanline = 0
        oscanline = 0
        erry = 0
        for _ in range(self.height):
            errx = self.width - width
            nx = -bpp
            ox = -bpp
            for _ in range(self.width):
                ox += bpp
                errx += width
                while errx >= self.width:
                    errx -= self.width
                    nx += bpp
                    src = oscanline + ox
                    dst = nscanline + nx
                    target[dst:dst + bpp] = self.data[src:src + bpp]
            erry += height
            oscanline += olinebytes
            while erry >= self.height:
                if erry >= self.height << 1:
                    target[nscanline + nlinebytes:nscanline + 2 * nlinebytes] = \
                        target[nscanline:nscanline + nlinebytes]
                erry -= self.height
                nscanline += nlinebytes
        self.data = target
        self.width = width
        self.height = height

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))

    def copy(self) -> "TGAImage":
        """Return an independent copy of the image."""
        other = TGAImage(self.width, self.height, self.bytespp)
        other.data[:] = self.data
        return other