from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    @classmethod
    def from_name(cls, name: str) -> "Color":
        colors = {
            "red": cls(255, 0, 0),
            "green": cls(0, 255, 0),
            "blue": cls(0, 0, 255),
            "white": cls(255, 255, 255),
            "black": cls(0, 0, 0),
            "yellow": cls(255, 255, 0),
            "gray": cls(128, 128, 128),
        }
        return colors.get(name, cls(255, 255, 255))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse '#rrggbb' or 'rrggbb'."""
        text = value.lstrip("#")
        if len(text) != 6:
            raise ValueError(f"Expected a 6-digit hex color, got {value!r}")
        return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class Bitmap:
    """A rectangular image of RGB pixels.

    Pixels are stored as a uint8 array of shape (height, width, 3), row-major
    from the top-left corner.
    """

    def __init__(self, width: int, height: int, pixels: np.ndarray):
        if pixels.shape != (height, width, 3):
            raise ValueError(
                f"Pixel buffer shape {pixels.shape} does not match {width}x{height}"
            )
        self._width = width
        self._height = height
        self.pixels = pixels.astype(np.uint8, copy=False)

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> "Bitmap":
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = color.as_tuple()
        return cls(width, height, pixels)

    @classmethod
    def from_colors(cls, width: int, height: int, colors: Sequence[Color]) -> "Bitmap":
        """Build a bitmap from a flat row-major sequence of colors (a framebuffer)."""
        if len(colors) != width * height:
            raise ValueError(
                f"Expected {width * height} colors for {width}x{height}, got {len(colors)}"
            )
        pixels = np.array([c.as_tuple() for c in colors], dtype=np.uint8).reshape(height, width, 3)
        return cls(width, height, pixels)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def colors(self) -> list[Color]:
        """Flat row-major list of colors; its length is width * height."""
        return [Color(int(r), int(g), int(b)) for r, g, b in self.pixels.reshape(-1, 3)]

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Fill a rectangle, clipped to the bitmap edges."""
        x0, y0 = max(0, x), max(0, y)
        x1, y1 = min(self._width, x + width), min(self._height, y + height)
        if x0 < x1 and y0 < y1:
            self.pixels[y0:y1, x0:x1] = color.as_tuple()

    def blit(self, source: "Bitmap", x: int, y: int) -> None:
        """Copy another bitmap onto this one at (x, y), clipped to the edges."""
        x0, y0 = max(0, x), max(0, y)
        x1 = min(self._width, x + source.width)
        y1 = min(self._height, y + source.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.pixels[y0:y1, x0:x1] = source.pixels[y0 - y:y1 - y, x0 - x:x1 - x]

    def copy(self) -> "Bitmap":
        return Bitmap(self._width, self._height, self.pixels.copy())
