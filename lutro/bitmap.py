"""Pixel buffers and rectangles used by the painter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    """An axis-aligned rectangle in pixel coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles; empty overlaps have zero size."""
        left = max(self.x, other.x)
        right = min(self.x + self.width, other.x + other.width)
        top = max(self.y, other.y)
        bottom = min(self.y + self.height, other.y + other.height)
        return Rect(left, top, max(right - left, 0), max(bottom - top, 0))

    def is_null(self) -> bool:
        """True when the rectangle covers no pixels."""
        return self.width <= 0 or self.height <= 0


@dataclass
class Bitmap:
    """A 32-bit ARGB pixel buffer stored row by row.

    ``pitch`` is the row stride in pixels; it defaults to ``width``.
    """

    width: int
    height: int
    data: list[int] | None = None
    pitch: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        if self.pitch <= 0:
            self.pitch = self.width
        if self.pitch < self.width:
            raise ValueError("pitch must be at least the bitmap width")
        size = self.pitch * self.height
        if self.data is None:
            self.data = [0] * size
        elif len(self.data) < size:
            raise ValueError(
                f"bitmap data holds {len(self.data)} pixels, {size} needed"
            )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return y * self.pitch + x

    def get(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        return self.data[self._index(x, y)]

    def set(self, x: int, y: int, color: int) -> None:
        """Store a pixel at (x, y), truncated to 32 bits."""
        self.data[self._index(x, y)] = color & 0xFFFFFFFF

    def copy(self) -> Bitmap:
        """Return a deep copy of the bitmap."""
        return Bitmap(self.width, self.height, list(self.data), self.pitch)