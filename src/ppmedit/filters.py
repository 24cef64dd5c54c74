"""
filters.py

The four pixel-map filters. Each one reads a source Image and returns a new
Image of the same size; the source is never modified.
- Emboss: 3x3 correlation on interior pixels, border left black
- Invert: 255 - c per channel
- Grayscale: rounded mean of r, g, b
- Motion blur: mean over a 1x5 window extending to the right
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict

import cv2
import numpy as np

from .color import CHANNEL_MAX, clamp_channels
from .errors import UnknownFilterError
from .image import Image

EMBOSS_KERNEL = np.array(
    [[-2, -1, 0],
     [-1,  1, 1],
     [ 0,  1, 2]],
    dtype=np.float32,
)
MOTION_BLUR_LENGTH = 5


class FilterKind(str, Enum):
    EMBOSS = "emboss"
    INVERT = "invert"
    GRAYSCALE = "grayscale"
    MOTIONBLUR = "motionblur"

    @classmethod
    def parse(cls, name: str) -> "FilterKind":
        """Validate a user-supplied filter name. Raises UnknownFilterError."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownFilterError(name) from None


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5).astype(np.int64)


# Filters

def apply_emboss(source: Image) -> Image:
    # filter2D correlates (no kernel flip); float32 is exact for these sums
    src = source.pixels.astype(np.float32)
    conv = cv2.filter2D(src, -1, EMBOSS_KERNEL, borderType=cv2.BORDER_CONSTANT)
    out = np.zeros_like(source.pixels)
    # interior only: the kernel never reaches outside the image
    out[1:-1, 1:-1] = clamp_channels(np.rint(conv[1:-1, 1:-1]))
    return Image.from_array(out)


def apply_invert(source: Image) -> Image:
    return Image.from_array(CHANNEL_MAX - source.pixels)


def apply_grayscale(source: Image) -> Image:
    total = source.pixels.astype(np.int64).sum(axis=2)
    gray = _round_half_up(total / 3.0)
    return Image.from_array(np.repeat(gray[:, :, None], 3, axis=2))


def apply_motion_blur(source: Image) -> Image:
    w = source.width
    # prefix sums along x: window [x, end) = cs[:, end] - cs[:, x]
    cs = np.zeros((source.height, w + 1, 3), dtype=np.int64)
    cs[:, 1:] = np.cumsum(source.pixels, axis=1, dtype=np.int64)

    xs = np.arange(w)
    ends = np.minimum(xs + MOTION_BLUR_LENGTH, w)
    sums = cs[:, ends] - cs[:, xs]
    counts = (ends - xs)[None, :, None]
    return Image.from_array(clamp_channels(_round_half_up(sums / counts)))


_FILTERS: Dict[FilterKind, Callable[[Image], Image]] = {
    FilterKind.EMBOSS: apply_emboss,
    FilterKind.INVERT: apply_invert,
    FilterKind.GRAYSCALE: apply_grayscale,
    FilterKind.MOTIONBLUR: apply_motion_blur,
}


def apply(image: Image, kind: FilterKind) -> Image:
    """Run the filter for `kind` on `image` and return the new image."""
    return _FILTERS[kind](image)
