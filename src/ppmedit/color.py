from __future__ import annotations
from dataclasses import dataclass

import numpy as np

CHANNEL_MIN = 0
CHANNEL_MAX = 255


def clamp_channels(values: np.ndarray) -> np.ndarray:
    """Clip an array of channel values to [0, 255] (returns a new array)."""
    return np.clip(values, CHANNEL_MIN, CHANNEL_MAX)


@dataclass
class Color:
    """One RGB triplet. Channels are plain ints and may hold unclamped sums."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def clamp(self) -> "Color":
        self.red = min(CHANNEL_MAX, max(CHANNEL_MIN, self.red))
        self.green = min(CHANNEL_MAX, max(CHANNEL_MIN, self.green))
        self.blue = min(CHANNEL_MAX, max(CHANNEL_MIN, self.blue))
        return self

    def copy(self) -> "Color":
        return Color(self.red, self.green, self.blue)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)
