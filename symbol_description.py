"""
Build symbols from JSON descriptions.

Description format:

    {
      "name": "My symbol",
      "page": {"width": 320, "height": 320},          (optional)
      "sections": [
        {"name": "", "pins": [
          {"name": "i_foo", "direction": "in", "bus": true, "type": "logic [15:0]"},
          {"name": "o_bar", "direction": "out", "type": "logic"}
        ]}
      ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from symbol_layout import Symbol
from symbol_pin import Pin, PinDirection
from symbol_section import Section

logger = logging.getLogger(__name__)

DEFAULT_PIN_TYPE = "cc"


class SymbolDescriptionError(ValueError):
    """Raised for malformed symbol descriptions."""


def _require_list(value: Any, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise SymbolDescriptionError(f"{where}: expected a list, got {type(value).__name__}")
    return value


def _require_name(entry: Dict, where: str) -> str:
    name = entry.get('name')
    if not isinstance(name, str):
        raise SymbolDescriptionError(f"{where}: missing 'name'")
    return name


def parse_direction(value: Any, where: str = "pin") -> PinDirection:
    """Map 'in' / 'out' / 'inout' (any case) to a PinDirection."""
    try:
        return PinDirection(str(value).lower())
    except ValueError:
        choices = ", ".join(d.value for d in PinDirection)
        raise SymbolDescriptionError(f"{where}: unknown direction {value!r} (expected one of {choices})") from None


def pin_from_dict(entry: Dict, where: str = "pin") -> Pin:
    if not isinstance(entry, dict):
        raise SymbolDescriptionError(f"{where}: expected an object")
    is_bus = entry.get('bus', False)
    if not isinstance(is_bus, bool):
        raise SymbolDescriptionError(f"{where}: 'bus' must be true or false")
    return Pin(
        name=_require_name(entry, where),
        direction=parse_direction(entry.get('direction'), where),
        is_bus=is_bus,
        type=str(entry.get('type', DEFAULT_PIN_TYPE)),
    )


def section_from_dict(entry: Dict, where: str = "section") -> Section:
    if not isinstance(entry, dict):
        raise SymbolDescriptionError(f"{where}: expected an object")
    section = Section(str(entry.get('name', '')))
    for i, pin_entry in enumerate(_require_list(entry.get('pins'), f"{where}.pins")):
        section.add_pin(pin_from_dict(pin_entry, f"{where}.pins[{i}]"))
    return section


def symbol_from_dict(data: Dict) -> Symbol:
    """Build a Symbol from a parsed description."""
    if not isinstance(data, dict):
        raise SymbolDescriptionError("symbol: expected an object")
    symbol = Symbol(_require_name(data, "symbol"))
    for i, entry in enumerate(_require_list(data.get('sections'), "symbol.sections")):
        symbol.add_section(section_from_dict(entry, f"symbol.sections[{i}]"))
    logger.debug("loaded symbol %r with %d sections", symbol.name, len(symbol.sections))
    return symbol


def page_size_from_dict(data: Dict) -> Optional[Tuple[float, float]]:
    """Optional (width, height) page size from a description."""
    page = data.get('page') if isinstance(data, dict) else None
    if not page:
        return None
    try:
        width, height = float(page['width']), float(page['height'])
    except (KeyError, TypeError, ValueError):
        raise SymbolDescriptionError("symbol.page: expected numeric 'width' and 'height'") from None
    if width <= 0 or height <= 0:
        raise SymbolDescriptionError(f"symbol.page: width and height must be positive, got {width:g} x {height:g}")
    return width, height


def load_description(path: Union[str, Path]) -> Dict:
    with open(path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SymbolDescriptionError(f"{path}: invalid JSON ({e})") from e


def load_symbol(path: Union[str, Path]) -> Symbol:
    return symbol_from_dict(load_description(path))


def demo_symbol() -> Symbol:
    """The example symbol: one section, three inputs and one output."""
    pins = Section()
    pins.add_pin(Pin("i_foo", PinDirection.IN, True, "logic [15:0]"))
    pins.add_pin(Pin("o_bar", PinDirection.OUT, False, "logic"))
    pins.add_pin(Pin("i_foobar", PinDirection.IN, False, "logic"))
    pins.add_pin(Pin("i_barfoo", PinDirection.IN, True, "logic [15:0]"))
    symbol = Symbol("My symbol")
    symbol.add_section(pins)
    return symbol
