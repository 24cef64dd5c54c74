from __future__ import annotations
import re
from typing import List, Optional

import numpy as np

from .color import CHANNEL_MAX, CHANNEL_MIN, clamp_channels
from .errors import (
    BadDimensionsError,
    BadMagicError,
    InvalidChannelValueError,
    PixelCountMismatchError,
    TruncatedPixelDataError,
    UnsupportedMaxValueError,
)
from .image import Image

MAGIC = "P3"
MAX_VALUE = 255
HEADER_TOKENS = 4  # magic, width, height, max value

# strict on purpose: "2.5" or "12abc" are rejected, never truncated to an int
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: Optional[str]) -> Optional[int]:
    """Strict integer parse; None for a missing or malformed token."""
    if token is None or not _INT_RE.fullmatch(token):
        return None
    return int(token)


def _token(tokens: List[str], i: int) -> Optional[str]:
    return tokens[i] if i < len(tokens) else None


def _valid_channel(v: Optional[int]) -> bool:
    return v is not None and CHANNEL_MIN <= v <= CHANNEL_MAX


def decode(text: str) -> Image:
    """
    Parse a P3 pixel map (max value 255 only) into an Image.
    Tokens are whitespace separated; anything after the last pixel is ignored.
    Raises a FormatError subclass on the first violation found.
    """
    tokens = text.split()  # leading whitespace before the magic is skipped

    magic = _token(tokens, 0)
    if magic != MAGIC:
        raise BadMagicError(magic)

    w_tok, h_tok = _token(tokens, 1), _token(tokens, 2)
    width, height = _parse_int(w_tok), _parse_int(h_tok)
    if width is None or height is None or width <= 0 or height <= 0:
        raise BadDimensionsError(w_tok, h_tok)

    max_tok = _token(tokens, 3)
    if _parse_int(max_tok) != MAX_VALUE:
        raise UnsupportedMaxValueError(max_tok)

    expected = width * height
    body = tokens[HEADER_TOKENS:HEADER_TOKENS + expected * 3]

    # walk pixels in row-major order so the first bad pixel wins
    values: List[int] = []
    filled = 0
    for i in range(expected):
        x, y = i % width, i // width
        triplet = body[3 * i:3 * i + 3]
        if len(triplet) < 3:
            raise TruncatedPixelDataError(x, y)
        rgb = [_parse_int(t) for t in triplet]
        if not all(_valid_channel(v) for v in rgb):
            raise InvalidChannelValueError(x, y, triplet)
        values.extend(rgb)
        filled += 1

    if filled != expected:
        raise PixelCountMismatchError(expected, filled)

    return Image.from_array(np.array(values, dtype=np.int64).reshape(height, width, 3))


def encode(image: Image) -> str:
    """Serialise an Image as P3 text: header lines, then one 'r g b' line per pixel."""
    lines = [MAGIC, f"{image.width} {image.height}", str(MAX_VALUE)]
    flat = clamp_channels(image.pixels).reshape(-1, 3)
    lines.extend(f"{r} {g} {b}" for r, g, b in flat.tolist())
    return "\n".join(lines)
