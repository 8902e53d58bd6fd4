"""A drawable RGBA pixel area."""

from __future__ import annotations

from typing import Sequence

_CHANNELS = 4


class Framebuffer:
    """RGBA pixel buffer, initially filled with opaque white."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("framebuffer dimensions must be non-negative")
        self.width = width
        self.height = height
        self.pixels = bytearray(b"\xff" * (_CHANNELS * width * height))

    def clear(self) -> None:
        """Fill every channel of every pixel with 255."""
        self.pixels[:] = b"\xff" * len(self.pixels)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return _CHANNELS * (y * self.width + x)

    def put_pixel(self, x: int, y: int, color: Sequence[int]) -> None:
        """Write an (r, g, b, a) colour; coordinates outside are ignored."""
        if not self._in_bounds(x, y):
            return
        r, g, b, a = color
        offset = self._offset(x, y)
        self.pixels[offset:offset + _CHANNELS] = bytes((r, g, b, a))

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Read the (r, g, b, a) colour at a position."""
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the framebuffer")
        offset = self._offset(x, y)
        r, g, b, a = self.pixels[offset:offset + _CHANNELS]
        return (r, g, b, a)