"""
Packed ARGB integers: alpha in bits 24-31, red 16-23, green 8-15, blue 0-7.

All inputs go through :func:`uint32`/:func:`uint8`, so any finite number is
accepted and wraps like 32-bit unsigned arithmetic. Non-finite input raises
:class:`InvalidColorValue`.
"""
from __future__ import annotations
import re
from typing import Mapping

import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidHexColor
from .to_hsl import unit_rgb_to_hsl
from ..types.color_types import RGBShape
from ..utils.num_utils import finite, np_uint32, round_half_up, uint32, uint8

HEX_COLOR_PATTERN = re.compile(r'^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$', re.IGNORECASE)


def alpha_from_argb(argb) -> float:
    """Alpha channel in [0, 1]."""
    return uint8(uint32(argb) >> 24) / 255


def red_from_argb(argb) -> int:
    return uint8(uint32(argb) >> 16)


def green_from_argb(argb) -> int:
    return uint8(uint32(argb) >> 8)


def blue_from_argb(argb) -> int:
    return uint8(argb)


def rgba_from_argb(argb, force_opacity: bool = False) -> RGBShape:
    """
    Unpack an ARGB integer to an ``{r, g, b}`` dict.

    ``opacity`` is included only when ``force_opacity`` is set or the alpha
    byte is below 255. An alpha byte of 0 gives ``opacity == 0``.

    Args:
        argb: packed color.
        force_opacity: always include ``opacity``.

    Returns:
        RGBShape: ``{'r', 'g', 'b'}`` plus optional ``'opacity'``.
    """
    out: RGBShape = {
        'r': red_from_argb(argb),
        'g': green_from_argb(argb),
        'b': blue_from_argb(argb),
    }
    alpha = alpha_from_argb(argb)
    if force_opacity or alpha < 1:
        out['opacity'] = alpha
    return out


def split_argb(argb) -> dict[str, int]:
    """All four channels as integers in 0..255, keyed ``a``, ``r``, ``g``, ``b``."""
    argb = uint32(argb)
    return {
        'a': uint8(argb >> 24),
        'r': uint8(argb >> 16),
        'g': uint8(argb >> 8),
        'b': uint8(argb),
    }


def np_split_argb(argb: NDArray) -> NDArray:
    """
    Vectorized :func:`split_argb`.

    Args:
        argb: array-like of packed colors

    Returns:
        array of shape (..., 4): (a, r, g, b) as uint8
    """
    packed = np_uint32(argb).astype(np.uint32)
    shifts = np.array([24, 16, 8, 0], dtype=np.uint32)
    return ((packed[..., np.newaxis] >> shifts) & 0xFF).astype(np.uint8)


def argb_from_rgb(r, g, b, a=255) -> int:
    """Pack 0..255 channels. Each channel wraps modulo 256."""
    return uint32(uint8(a) << 24 | uint8(r) << 16 | uint8(g) << 8 | uint8(b))


def argb_from_rgba_color(color: Mapping[str, float]) -> int:
    """
    Pack an ``{r, g, b, a?}`` mapping.

    ``a`` may be given in 0..1 or in 0..255; values above 1 are taken as the
    latter. A missing ``a`` is opaque.
    """
    a = color.get('a')
    if a is None:
        a = 1.0
    else:
        a = finite(a, 'a')
        if a > 1:
            a = a / 255
    a255 = uint8(round_half_up(a * 255))
    return argb_from_rgb(color['r'], color['g'], color['b'], a255)


def np_argb_from_rgb(r: NDArray, g: NDArray, b: NDArray, a: NDArray | int = 255) -> NDArray:
    """Vectorized :func:`argb_from_rgb`, returns uint32."""
    channels = [np.mod(np.trunc(np.asarray(c, dtype=float)).astype(np.int64), 256) for c in (a, r, g, b)]
    a_, r_, g_, b_ = np.broadcast_arrays(*channels)
    return ((a_ << 24) | (r_ << 16) | (g_ << 8) | b_).astype(np.uint32)


def rgb_from_argb(argb) -> str:
    """``rgb(r g b)`` with space separated channels, alpha ignored."""
    c = split_argb(argb)
    return f"rgb({c['r']} {c['g']} {c['b']})"


def hex_from_argb(argb) -> str:
    """``#rrggbb`` in lowercase; alpha is dropped."""
    return f"#{uint32(argb) & 0xFF_FF_FF:06x}"


def is_hex_color(value) -> bool:
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def hex_from_string(value: str) -> str:
    """
    Return ``value`` as a hex color literal, adding the leading ``#`` if needed.

    Raises:
        InvalidHexColor: if neither ``value`` nor ``'#' + value`` is a
            3, 6 or 8 digit hex color.
    """
    if is_hex_color(value):
        return value
    if isinstance(value, str) and is_hex_color('#' + value):
        return '#' + value
    raise InvalidHexColor(value)


def argb_from_hex(value: str) -> int:
    """
    Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional).

    Raises:
        InvalidHexColor: on anything else.
    """
    digits = hex_from_string(value)[1:]
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    alpha = 0xFF
    if len(digits) == 8:
        alpha = int(digits[6:], 16)
        digits = digits[:6]
    return uint32(alpha << 24 | int(digits, 16))


def hsl_from_argb(argb) -> dict[str, float]:
    """
    HSL of a packed color, CSS style.

    Returns:
        dict with ``h`` in degrees and ``s``, ``l``, ``a`` in percent.
    """
    c = split_argb(argb)
    h, s, l = unit_rgb_to_hsl(c['r'] / 255, c['g'] / 255, c['b'] / 255)
    return {
        'h': h,
        's': s * 100,
        'l': l * 100,
        'a': c['a'] / 255 * 100,
    }

