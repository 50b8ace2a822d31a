#!/usr/bin/env python3
"""
Check a rendered symbol PDF against its description.

Extracts the text layer with pypdf and looks for every label the symbol should
show: the symbol name, and each pin's name and type.

Usage:
    python verify_symbol.py [symbol.json|demo] [image.pdf] [report.md]
"""

import logging
import os
import re
import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from render_symbol import DEFAULT_INPUT, DEFAULT_OUTPUT, load_input
from symbol_description import SymbolDescriptionError
from symbol_layout import Symbol

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


@dataclass
class VerificationResult:
    found: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing


def extract_strings_from_pdf(pdf_path: str) -> List[str]:
    """Every text run painted in the PDF, plus each line of the extracted text."""
    reader = PdfReader(pdf_path)
    strings: List[str] = []

    def collect(text, cm, tm, font_dict, font_size):
        strings.append(text)

    for page in reader.pages:
        page_text = page.extract_text(visitor_text=collect) or ""
        strings.extend(page_text.splitlines())
    return strings


def expected_labels(symbol: Symbol) -> List[str]:
    """Symbol name plus every pin name and type, in drawing order, without repeats."""
    labels = [symbol.name]
    for section in symbol.sections:
        for pin in section.pins:
            labels.extend([pin.name, pin.type])

    unique = []
    for label in labels:
        if label and label not in unique:
            unique.append(label)
    return unique


def _squash(text: str) -> str:
    return _WHITESPACE.sub('', text)


def match_labels(labels: Iterable[str], strings: Iterable[str]) -> VerificationResult:
    """A label is found only if some painted string equals it, whitespace aside."""
    painted = {_squash(s) for s in strings}
    painted.discard('')

    result = VerificationResult()
    for label in labels:
        if _squash(label) in painted:
            result.found.append(label)
        else:
            result.missing.append(label)
    return result


def verify_symbol_pdf(symbol: Symbol, pdf_path: str, report_path: Optional[str] = None) -> VerificationResult:
    print(f"Verifying {pdf_path} against symbol {symbol.name!r}...")
    result = match_labels(expected_labels(symbol), extract_strings_from_pdf(pdf_path))
    logger.debug("found %d labels, missing %d", len(result.found), len(result.missing))

    if report_path:
        write_report(symbol, pdf_path, result, report_path)
    return result


def write_report(symbol: Symbol, pdf_path: str, result: VerificationResult, report_path: str) -> None:
    total = len(result.found) + len(result.missing)
    with open(report_path, 'w', encoding='utf-8') as f:
        f.write("# Symbol Render Verification Report\n\n")
        f.write(f"**Symbol:** `{symbol.name}`\n")
        f.write(f"**PDF:** `{pdf_path}`\n\n")

        f.write("## Summary\n")
        f.write(f"- **Sections:** {len(symbol.sections)}\n")
        f.write(f"- **Pins:** {sum(len(s.pins) for s in symbol.sections)}\n")
        f.write(f"- **Labels Expected:** {total}\n")
        f.write(f"- **Labels Found:** {len(result.found)}\n")
        if total:
            f.write(f"- **Match Rate:** {len(result.found)/total*100:.1f}%\n")
        f.write("\n")

        if result.missing:
            f.write("## Missing Labels\n")
            f.write(f"`{', '.join(result.missing)}`\n")
        else:
            f.write("✅ **All labels found in the PDF text layer.**\n")

    print(f"Report generated at {report_path}")


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    input_path = args[0] if len(args) > 0 else DEFAULT_INPUT
    pdf_path = args[1] if len(args) > 1 else DEFAULT_OUTPUT
    report_path = args[2] if len(args) > 2 else None

    try:
        symbol, _ = load_input(input_path)
        result = verify_symbol_pdf(symbol, pdf_path, report_path)
    except FileNotFoundError as e:
        print(f"Error: {e.filename} not found.")
        return 1
    except SymbolDescriptionError as e:
        print(f"Error: invalid symbol description: {e}")
        return 1
    except PdfReadError as e:
        print(f"Error: could not read {pdf_path}: {e}")
        return 1

    print(f"Labels found: {len(result.found)}")
    for label in result.missing:
        print(f"  [MISSING] {label}")
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
