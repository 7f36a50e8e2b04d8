"""Color extraction from declaration values.

Only literal hex colors and the numeric arguments of a function call are
understood. Named colors and variables are never resolved, so they produce
an invalid ColorValue rather than an error.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from a11ylint.model.nodes import Color, FunctionCall, Number, Value, first_of

# Properties whose value sets the block's foreground / background color.
FOREGROUND_PROPERTIES = frozenset({"color"})
BACKGROUND_PROPERTIES = frozenset({"background-color", "background"})

_HEX6_RE = re.compile(r"^([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
_HEX3_RE = re.compile(r"^([0-9a-f])([0-9a-f])([0-9a-f])$", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ColorValue:
    """An RGB triple; a channel is None when it could not be determined."""

    red: Optional[int] = None
    green: Optional[int] = None
    blue: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return self.red is not None and self.green is not None and self.blue is not None


INVALID = ColorValue()


def is_valid_color(color: Optional[ColorValue]) -> bool:
    """True when *color* is present and all three channels are known."""
    return color is not None and color.is_valid


def parse_hex(digits: str) -> ColorValue:
    """Parse 6- or 3-digit hex (no ``#``); anything else is invalid."""
    match = _HEX6_RE.match(digits)
    if match is None:
        match = _HEX3_RE.match(digits)
        if match is None:
            return INVALID
        groups = [g * 2 for g in match.groups()]
    else:
        groups = list(match.groups())
    red, green, blue = (int(g, 16) for g in groups)
    return ColorValue(red=red, green=green, blue=blue)


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1), 10) if match else None


def parse_function_channels(call: FunctionCall) -> ColorValue:
    """Assign the first three numeric arguments of *call* to red, green, blue.

    Keywords, percentages, dimensions and variables are skipped without
    taking a slot. Later numeric arguments (alpha) are ignored.
    """
    numbers = [arg for arg in call.arguments if isinstance(arg, Number)][:3]
    channels = [_leading_int(n.text) for n in numbers]
    channels += [None] * (3 - len(channels))
    return ColorValue(red=channels[0], green=channels[1], blue=channels[2])


def extract_color(value: Value) -> ColorValue:
    """Extract the color a declaration value describes.

    A hex literal wins over a function call; when a hex literal is present
    but malformed the result is invalid.
    """
    color = first_of(value, Color)
    if color is not None:
        return parse_hex(color.hex)
    call = first_of(value, FunctionCall)
    if call is not None:
        return parse_function_channels(call)
    return INVALID
