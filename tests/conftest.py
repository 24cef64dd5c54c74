import numpy as np
import pytest

from ppmedit import Image


@pytest.fixture
def gradient_image() -> Image:
    """5x4 image with distinct values in every channel."""
    h, w = 4, 5
    ys, xs = np.mgrid[0:h, 0:w]
    arr = np.stack([xs * 50, ys * 60, (xs + ys) * 20], axis=-1)
    return Image.from_array(arr)


@pytest.fixture
def random_image() -> Image:
    rng = np.random.default_rng(1234)
    return Image.from_array(rng.integers(0, 256, size=(7, 9, 3)))


@pytest.fixture
def white_ppm():
    """Factory for an all-white P3 text of the given size."""
    def make(width: int, height: int) -> str:
        return "P3\n{} {}\n255\n".format(width, height) + "255 255 255\n" * (width * height)
    return make
