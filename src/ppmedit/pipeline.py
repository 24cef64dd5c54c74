from __future__ import annotations
from dataclasses import dataclass

from . import codec
from .filters import FilterKind, apply
from .image import Image


@dataclass
class EditResult:
    source: Image
    image: Image
    text: str           # encoded result, ready to be written verbatim
    kind: FilterKind

    @property
    def message(self) -> str:
        return f"Filter applied successfully: {self.kind.value}"


def run_filter(text: str, filter_name: str) -> EditResult:
    """
    Validate the filter name, then decode -> filter -> encode.
    The name is checked first, so an unknown filter wins over a malformed text.
    Errors propagate unchanged; nothing partial is returned.
    """
    kind = FilterKind.parse(filter_name)
    source = codec.decode(text)
    result = apply(source, kind)
    return EditResult(source=source, image=result, text=codec.encode(result), kind=kind)
