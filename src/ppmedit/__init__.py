from .color import Color, clamp_channels
from .image import Image
from .codec import decode, encode
from .filters import (
    FilterKind, apply, apply_emboss, apply_invert, apply_grayscale, apply_motion_blur,
)
from .pipeline import EditResult, run_filter
from .helpers import EditorConfig, ensure_dir, read_text, write_text
from .errors import (
    ImageEditorError, FormatError, BadMagicError, BadDimensionsError,
    UnsupportedMaxValueError, TruncatedPixelDataError, InvalidChannelValueError,
    PixelCountMismatchError, UnknownFilterError,
)

__all__ = [
    "Color", "clamp_channels",
    "Image",
    "decode", "encode",
    "FilterKind", "apply", "apply_emboss", "apply_invert", "apply_grayscale", "apply_motion_blur",
    "EditResult", "run_filter",
    "EditorConfig", "ensure_dir", "read_text", "write_text",
    "ImageEditorError", "FormatError", "BadMagicError", "BadDimensionsError",
    "UnsupportedMaxValueError", "TruncatedPixelDataError", "InvalidChannelValueError",
    "PixelCountMismatchError", "UnknownFilterError",
]
