from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

import os


# Config dataclass

@dataclass
class EditorConfig:
    source: str
    destination: str
    filter_name: str
    show: bool = False      # before/after preview window
    verbose: bool = False   # DEBUG logging


# I/O & filesystem helpers

def ensure_dir(path: str | os.PathLike) -> None:
    Path(path).mkdir(parents=True, exist_ok=True)


def read_text(path: str | os.PathLike) -> str:
    """Read a whole pixel-map file. Raises FileNotFoundError if it is missing."""
    return Path(path).read_text(encoding="utf-8")


def write_text(path: str | os.PathLike, text: str) -> None:
    p = Path(path)
    ensure_dir(p.parent)
    p.write_text(text, encoding="utf-8")
