from __future__ import annotations
from typing import Tuple

import matplotlib.pyplot as plt
import numpy as np

from .color import clamp_channels
from .image import Image


class Visualizer:
    """Plot helpers (only used when --show). The core never plots."""

    @staticmethod
    def to_rgb8(image: Image) -> np.ndarray:
        return clamp_channels(image.pixels).astype(np.uint8)

    @classmethod
    def show_before_after(
        cls,
        before: Image,
        after: Image,
        title: str = "Filtered",
        figsize: Tuple[int, int] = (12, 6),
        show: bool = True,
    ) -> plt.Figure:
        fig, axes = plt.subplots(1, 2, figsize=figsize)
        for ax, img, label in zip(axes, (before, after), ("Original", title)):
            ax.imshow(cls.to_rgb8(img), interpolation="nearest")
            ax.set_title(label)
            ax.axis("off")

        fig.tight_layout()
        if show:
            plt.show()
        return fig
