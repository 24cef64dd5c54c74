from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

from .errors import ImageEditorError
from .helpers import EditorConfig, read_text, write_text
from .pipeline import run_filter
from .filters import FilterKind

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"


def build_argparser() -> argparse.ArgumentParser:
    kinds = ", ".join(k.value for k in FilterKind)
    p = argparse.ArgumentParser(
        prog="ppmedit",
        description="Apply one filter to a P3 (ASCII) pixel-map image",
    )
    p.add_argument("source", help="Path to the source .ppm image")
    p.add_argument("destination", help="Path the filtered image is written to")
    p.add_argument("filter", help=f"Filter to apply: {kinds}")
    p.add_argument("--show", action="store_true", help="Display before/after figure")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def run(cfg: EditorConfig) -> int:
    """Read -> filter -> write. Returns the process exit status."""
    try:
        text = read_text(cfg.source)
    except OSError as e:
        logger.error(f"Could not read image: {cfg.source} ({e})")
        return 1
    logger.debug(f"Read {len(text)} characters from {cfg.source}")

    try:
        result = run_filter(text, cfg.filter_name)
    except ImageEditorError as e:
        logger.error(str(e))
        return 1
    logger.info(result.message)

    try:
        write_text(cfg.destination, result.text)
    except OSError as e:
        logger.error(f"Could not write image: {cfg.destination} ({e})")
        return 1
    logger.info(f"Image written to {cfg.destination}")

    if cfg.show:
        # deferred so headless runs never touch a GUI backend
        from .viz import Visualizer
        Visualizer.show_before_after(result.source, result.image, title=result.kind.value)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    cfg = EditorConfig(
        source=args.source,
        destination=args.destination,
        filter_name=args.filter,
        show=args.show,
        verbose=args.verbose,
    )
    configure_logging(cfg.verbose)
    return run(cfg)
