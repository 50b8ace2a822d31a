#!/usr/bin/env python3
"""
Render a schematic symbol to PDF or SVG.

Usage:
    python render_symbol.py [symbol.json|demo] [output.pdf|output.svg] [--fit]

With no arguments the demo symbol is written to image.pdf. The output backend is
picked from the file extension. Font context comes from SYMBOL_FONT and
SYMBOL_FONT_SIZE, log level from LOG_LEVEL.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

from pdf_renderer import SymbolPDFRenderer
from svg_renderer import SymbolSVGRenderer
from symbol_description import (
    SymbolDescriptionError, demo_symbol, load_description, page_size_from_dict, symbol_from_dict,
)
from symbol_layout import Symbol
from text_metrics import TextMeasurer

logger = logging.getLogger(__name__)

DEFAULT_INPUT = "demo"
DEFAULT_OUTPUT = "image.pdf"

OUTPUT_FORMATS = {
    '.pdf': 'PDF',
    '.svg': 'SVG',
}


class UnsupportedOutputFormat(Exception):
    """The requested output file type has no drawing backend."""

    def __init__(self, output_path: str):
        self.output_path = output_path
        suffix = Path(output_path).suffix or '(none)'
        supported = ", ".join(sorted(OUTPUT_FORMATS))
        super().__init__(f"No backend for output type {suffix}; supported: {supported}")


def output_format(output_path: str) -> str:
    fmt = OUTPUT_FORMATS.get(Path(output_path).suffix.lower())
    if fmt is None:
        raise UnsupportedOutputFormat(output_path)
    return fmt


def measurer_from_env() -> TextMeasurer:
    return TextMeasurer(
        os.environ.get("SYMBOL_FONT", TextMeasurer.DEFAULT_FONT),
        float(os.environ.get("SYMBOL_FONT_SIZE", TextMeasurer.DEFAULT_FONT_SIZE)),
    )


def render_symbol(symbol: Symbol, output_path: str,
                  page_size: Optional[Tuple[float, float]] = None,
                  measurer: Optional[TextMeasurer] = None, fit: bool = False) -> Dict:
    """Render symbol to output_path; returns a summary dict.

    Raises UnsupportedOutputFormat before anything is written if the extension
    has no backend.
    """
    fmt = output_format(output_path)
    width, height = page_size if page_size is not None else (None, None)
    logger.info("rendering %r as %s to %s", symbol.name, fmt, output_path)

    if fmt == 'PDF':
        renderer = SymbolPDFRenderer(symbol, width, height, measurer, fit=fit)
        renderer.render_to_pdf(output_path)
    else:
        renderer = SymbolSVGRenderer(symbol, width, height, measurer, fit=fit)
        renderer.render_to_svg(output_path)

    return {
        'format': fmt,
        'output_path': output_path,
        'page_width': renderer.page_width,
        'page_height': renderer.page_height,
        'metrics': renderer.metrics,
    }


def load_input(input_path: str) -> Tuple[Symbol, Optional[Tuple[float, float]]]:
    """Symbol and optional page size for a CLI input argument."""
    if input_path == DEFAULT_INPUT:
        return demo_symbol(), None
    data = load_description(input_path)
    return symbol_from_dict(data), page_size_from_dict(data)


def main(argv=None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    fit = '--fit' in args
    args = [a for a in args if a != '--fit']
    input_path = args[0] if len(args) > 0 else DEFAULT_INPUT
    output_path = args[1] if len(args) > 1 else DEFAULT_OUTPUT

    try:
        output_format(output_path)
    except UnsupportedOutputFormat as e:
        print(f"Error: {e}")
        return 1

    try:
        symbol, page_size = load_input(input_path)
    except FileNotFoundError:
        print(f"Error: {input_path} not found.")
        return 1
    except SymbolDescriptionError as e:
        print(f"Error: invalid symbol description: {e}")
        return 1

    try:
        measurer = measurer_from_env()
    except (KeyError, ValueError) as e:
        print(f"Error: bad font configuration: {e}")
        return 1

    try:
        summary = render_symbol(symbol, output_path, page_size, measurer, fit=fit)
    except OSError as e:
        print(f"Error: could not write {output_path}: {e}")
        return 1

    print(f"Wrote {summary['format']} file \"{output_path}\"")
    return 0


if __name__ == "__main__":
    sys.exit(main())
