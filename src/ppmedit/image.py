from __future__ import annotations

import numpy as np

from .color import Color

PIXEL_DTYPE = np.int32  # signed; holds unclamped convolution sums


class Image:
    """
    Fixed-size RGB grid, row-major: pixels[y, x] -> (r, g, b).
    get/set copy values in and out, so no Color is ever shared between cells.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 3), dtype=PIXEL_DTYPE)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Image":
        """Build an image from an (H, W, 3) array. The data is copied."""
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"expected an (H, W, 3) array, got shape {arr.shape}")
        img = cls(arr.shape[1], arr.shape[0])
        img.pixels[...] = arr
        return img

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} image")

    def get(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def copy(self) -> "Image":
        return Image.from_array(self.pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
