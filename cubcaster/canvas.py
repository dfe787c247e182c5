"""RGBA pixel buffers: the frame image, wall textures and basic drawing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_CLEAR_PIXEL = bytes((0, 0, 0, 255))


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a line from (x0, y0) to (x1, y1), both included."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        err2 = 2 * err
        if err2 > -dy:
            err -= dy
            x0 += sx
        if err2 < dx:
            err += dx
            y0 += sy


class Image:
    """A width x height RGBA image stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image size must not be negative")
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * 4)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the RGB of a pixel from a 0xRRGGBB colour, keeping its alpha."""
        if not self._inside(x, y):
            return
        at = self._offset(x, y)
        self.pixels[at:at + 3] = bytes(
            ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        )

    def put_texture_pixel(self, x: int, y: int, color: int) -> None:
        """Write a texel value as stored in a texture (little-endian RGBA)."""
        if not self._inside(x, y):
            return
        at = self._offset(x, y)
        self.pixels[at:at + 4] = (color & 0xFFFFFFFF).to_bytes(4, "little")

    def clear(self) -> None:
        """Make every pixel opaque black."""
        self.pixels[:] = _CLEAR_PIXEL * (self.width * self.height)

    def _fill_rows(self, first: int, stop: int, color: int) -> None:
        channels = ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
        for y in range(first, stop):
            start = self._offset(0, y)
            end = start + self.width * 4
            for channel, value in enumerate(channels):
                self.pixels[start + channel:end:4] = bytes((value,)) * self.width

    def fill_ceiling(self, color: int) -> None:
        """Paint the upper half of the image."""
        self._fill_rows(0, self.height // 2, color)

    def fill_floor(self, color: int) -> None:
        """Paint the lower half of the image."""
        self._fill_rows(self.height // 2, self.height, color)

    def vertical_line(self, x: int, start: int, end: int, color: int) -> None:
        """Paint column x from start to end inclusive, clipped to the image."""
        if not 0 <= x < self.width:
            return
        start = max(start, 0)
        end = min(end, self.height - 1)
        for y in range(start, end + 1):
            self.put_pixel(x, y, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a straight line, skipping points outside the image."""
        for x, y in bresenham(x0, y0, x1, y1):
            self.put_pixel(x, y, color)


@dataclass
class Texture:
    """An RGBA texture whose texels are read as little-endian 32-bit values."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError("pixel data does not match texture size")

    def pixel(self, x: int, y: int) -> int:
        """Return the texel at (x, y) as a 32-bit integer."""
        at = (y * self.width + x) * 4
        return int.from_bytes(self.pixels[at:at + 4], "little")

    @classmethod
    def load(cls, path) -> Texture:
        """Load an image file (such as PNG) as an RGBA texture."""
        import pygame

        try:
            surface = pygame.image.load(str(path))
        except (pygame.error, OSError, FileNotFoundError) as exc:
            raise OSError(f"cannot load texture {path}") from exc
        width, height = surface.get_size()
        data = pygame.image.tobytes(surface, "RGBA")
        return cls(width, height, bytes(data))