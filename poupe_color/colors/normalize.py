"""
Normalise any supported color input to :class:`Hct`, ARGB or hex.

Accepted inputs: :class:`Hct`, :class:`ColorValue`, packed ARGB numbers,
hex literals and other CSS color strings, ``{h, c, t, a?}`` mappings, the
other plain color mappings and native colors.
"""
from __future__ import annotations
from collections.abc import Mapping
from numbers import Real
from typing import Any, Union

from materialyoucolor.hct import Hct

from ..conversions.argb import (
    argb_from_hex,
    hex_from_argb,
    hex_from_string,
    is_hex_color,
)
from ..errors import InvalidColorValue
from ..utils.num_utils import finite, round_half_up, uint32, uint8
from .adapters import color
from .color_base import ColorBase
from .color_value import ColorValue

AnyColor = Union[Hct, ColorValue, ColorBase, int, float, str, Mapping[str, Any]]


def argb_from_hct_color(c: Mapping[str, float]) -> int:
    """
    Pack a ``{h, c, t, a?}`` mapping.

    ``a`` replaces the alpha byte; values above 1 are taken as 0..255,
    others as 0..1.
    """
    argb = Hct.from_hct(finite(c['h'], 'h'), finite(c['c'], 'c'), finite(c['t'], 't')).to_int()
    a = c.get('a')
    if a is None:
        return argb
    a = finite(a, 'a')
    a255 = uint8(a if a > 1 else round_half_up(a * 255))
    return uint32(a255 << 24 | (argb & 0xFF_FF_FF))


def _looks_like_hex(value: str) -> bool:
    return is_hex_color(value) or is_hex_color('#' + value)


def argb(value: AnyColor) -> int:
    """
    Packed ARGB of any supported color input.

    Raises:
        InvalidColorValue: if the input is not a color.
    """
    if isinstance(value, Hct):
        return value.to_int()
    if isinstance(value, ColorValue):
        return value.packed
    if isinstance(value, Real) and not isinstance(value, bool):
        return uint32(value)
    if isinstance(value, str) and _looks_like_hex(value):
        return argb_from_hex(value)
    if isinstance(value, Mapping) and 't' in value:
        return argb_from_hct_color(value)

    native = color(value)
    if native is None:
        raise InvalidColorValue(value)
    return native.rgb().to_argb()


def hct(value: AnyColor) -> Hct:
    """:class:`Hct` of any supported color input; an Hct is returned as is."""
    if isinstance(value, Hct):
        return value
    if isinstance(value, ColorValue):
        return value.perceptual
    return Hct.from_int(argb(value))


def hex(value: AnyColor) -> str:
    """
    Hex literal of any supported color input.

    Hex strings are returned as given (with ``#`` added if missing);
    everything else becomes ``#rrggbb``.
    """
    if isinstance(value, str) and _looks_like_hex(value):
        return hex_from_string(value)
    if isinstance(value, ColorValue):
        return value.hex
    return hex_from_argb(argb(value))
