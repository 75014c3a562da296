"""
Parser for CSS color strings.

Understands hex literals (``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``),
``rgb()``/``rgba()`` and ``hsl()``/``hsla()`` in both the comma and the
space separated syntax, and the named colors including ``transparent``.
"""
from __future__ import annotations
import math
import re
from typing import NamedTuple, Optional

from ..types.color_types import ColorShape
from .named_colors import with_known_color

_HEX = re.compile(r'^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$', re.IGNORECASE)
_FUNCTION = re.compile(r'^(rgba?|hsla?)\((.*)\)$', re.IGNORECASE | re.DOTALL)
_NUMBER = r'[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?'
_TOKEN = re.compile(rf'^({_NUMBER})(%|deg)?$', re.IGNORECASE)


class ParsedColor(NamedTuple):
    """Channels of a parsed CSS color, RGB on 0..255 or HSL with s, l in 0..1."""
    shape: ColorShape
    channels: tuple[float, float, float]
    opacity: float


def _split_arguments(body: str) -> Optional[tuple[list[str], Optional[str]]]:
    body = body.strip()
    if ',' in body:
        parts = [p.strip() for p in body.split(',')]
        if len(parts) == 4:
            return parts[:3], parts[3]
        if len(parts) == 3:
            return parts, None
        return None
    alpha = None
    if '/' in body:
        body, alpha = body.split('/', 1)
        alpha = alpha.strip()
        if not alpha or '/' in alpha:
            return None
    parts = body.split()
    if len(parts) != 3:
        return None
    return parts, alpha


def _token(text: str) -> Optional[tuple[float, str]]:
    match = _TOKEN.match(text)
    if match is None:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value, (match.group(2) or '').lower()


def _alpha(text: Optional[str]) -> Optional[float]:
    if text is None:
        return 1.0
    token = _token(text)
    if token is None or token[1] == 'deg':
        return None
    value, unit = token
    if unit == '%':
        value /= 100
    return min(1.0, max(0.0, value))


def _rgb(args: list[str]) -> Optional[tuple[float, float, float]]:
    out = []
    for arg in args:
        token = _token(arg)
        if token is None or token[1] == 'deg':
            return None
        value, unit = token
        value = value * 255 / 100 if unit == '%' else value
        if not math.isfinite(value):
            return None
        out.append(value)
    return out[0], out[1], out[2]


def _hsl(args: list[str]) -> Optional[tuple[float, float, float]]:
    hue = _token(args[0])
    if hue is None or hue[1] == '%':
        return None
    out = [hue[0] % 360]
    for arg in args[1:]:
        token = _token(arg)
        if token is None or token[1] == 'deg':
            return None
        value = token[0] / 100
        if not math.isfinite(value):
            return None
        out.append(value)
    return out[0], out[1], out[2]


def parse_hex(value: str) -> Optional[ParsedColor]:
    match = _HEX.match(value)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) <= 4:
        digits = ''.join(ch * 2 for ch in digits)
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return ParsedColor(
        ColorShape.RGB,
        (float(int(digits[0:2], 16)), float(int(digits[2:4], 16)), float(int(digits[4:6], 16))),
        alpha,
    )


def parse_css_color(value: str) -> Optional[ParsedColor]:
    """
    Parse a CSS color string.

    Args:
        value: the CSS text, surrounding whitespace and case are ignored.

    Returns:
        ParsedColor, or None if ``value`` is not a color this parser knows.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    text = with_known_color(text)
    if text.startswith('#'):
        return parse_hex(text)

    match = _FUNCTION.match(text)
    if match is None:
        return None
    name = match.group(1).lower()
    split = _split_arguments(match.group(2))
    if split is None:
        return None
    args, alpha_text = split
    opacity = _alpha(alpha_text)
    if opacity is None:
        return None

    if name.startswith('rgb'):
        channels = _rgb(args)
        shape = ColorShape.RGB
    else:
        channels = _hsl(args)
        shape = ColorShape.HSL
    if channels is None:
        return None
    return ParsedColor(shape, channels, opacity)
