from __future__ import annotations
from typing import Sequence, Tuple


class ImageEditorError(Exception):
    """Base class for every error raised by the ppmedit core."""


# Decoding errors

class FormatError(ImageEditorError, ValueError):
    """Text is not a valid (restricted) P3 pixel map."""


class BadMagicError(FormatError):
    def __init__(self, token: str | None) -> None:
        self.token = token
        super().__init__(f"Invalid PPM format: expected 'P3' header, got {token!r}.")


class BadDimensionsError(FormatError):
    def __init__(self, width: str | None, height: str | None) -> None:
        self.width = width
        self.height = height
        super().__init__(
            "Invalid image dimensions: width and height must be positive integers "
            f"(got {width!r} x {height!r})."
        )


class UnsupportedMaxValueError(FormatError):
    def __init__(self, token: str | None) -> None:
        self.token = token
        super().__init__(
            f"Invalid or unsupported maximum color value {token!r}. Expected 255."
        )


class TruncatedPixelDataError(FormatError):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Not enough pixel data to fill the image at ({x}, {y}).")


class InvalidChannelValueError(FormatError):
    def __init__(self, x: int, y: int, triplet: Sequence[str]) -> None:
        self.x = x
        self.y = y
        self.triplet: Tuple[str, ...] = tuple(triplet)
        super().__init__(
            f"Invalid pixel data at ({x}, {y}): ({', '.join(self.triplet)})."
        )


class PixelCountMismatchError(FormatError):
    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Mismatch in pixel count: expected {expected}, but got {actual}."
        )


# Dispatch errors

class UnknownFilterError(ImageEditorError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown filter type: {name}")
