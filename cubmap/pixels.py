"""Pixel formats and in-memory 32-bit images."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class PixelFormat:
    """Visual description: colour depth and the channel masks."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF

    def shifts(self) -> tuple[int, int, int, int, int, int]:
        """Return (shift, bits) for red, green and blue, flattened."""
        result: list[int] = []
        for mask in (self.red_mask, self.green_mask, self.blue_mask):
            if mask <= 0:
                raise ValueError(f"invalid channel mask: {mask:#x}")
            shift = (mask & -mask).bit_length() - 1
            run = mask >> shift
            bits = (~run & (run + 1)).bit_length() - 1
            result.extend((shift, bits))
        return tuple(result)  # type: ignore[return-value]

    def good_color(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value of this format."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        r_shift, r_bits, g_shift, g_bits, b_shift, b_bits = self.shifts()
        return (
            ((red >> (16 - r_bits)) << r_shift)
            + ((green >> (16 - g_bits)) << g_shift)
            + ((blue >> (16 - b_bits)) << b_shift)
        )


class DataInfo(NamedTuple):
    """Raw pixel buffer of an image and how to read it."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    endian: int


@dataclass
class Image:
    """A 32 bits-per-pixel image held in a byte buffer."""

    width: int
    height: int
    byte_order: int = 0
    bpp: int = 32
    size_line: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.byte_order not in (0, 1):
            raise ValueError(f"invalid byte order: {self.byte_order}")
        self.size_line = self.width * (self.bpp // 8)
        self.data = bytearray(self.size_line * self.height)

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * (self.bpp // 8)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store a pixel value at (x, y) in the image's byte order."""
        opp = self.bpp // 8
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bpp // 8
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._order)

    def data_info(self) -> DataInfo:
        """Return the buffer with its bits per pixel, line size and endianness."""
        return DataInfo(self.data, self.bpp, self.size_line, self.byte_order)


def new_image(width: int, height: int, byte_order: int = 0) -> Image:
    """Create a blank image; byte_order 0 is little endian, 1 big endian."""
    return Image(width, height, byte_order)