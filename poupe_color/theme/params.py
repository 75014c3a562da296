"""
Normalisation of request parameters (query strings, form fields) naming a
theme color or scheme.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

import numpy as np

from ..colors.adapters import color
from ..colors.normalize import hex as hex_string
from ..conversions.argb import hex_from_argb
from ..types.scheme_key import SchemeKey

HEX_VALUE_PATTERN = re.compile(r'^#?(?:[0-9a-f]{3}|[0-9a-f]{6})$', re.IGNORECASE)

Param = Union[str, Sequence[str], None]
ParamFilter = Callable[[Optional[str]], Optional[str]]


@dataclass(frozen=True)
class ColorParam:
    param: Optional[str]
    color: Optional[str] = None


@dataclass(frozen=True)
class SchemeParam:
    param: Optional[str]
    scheme: Optional[SchemeKey] = None


def is_hex_value(s: str) -> bool:
    """``rgb`` or ``rrggbb``, with or without ``#``."""
    return HEX_VALUE_PATTERN.match(s) is not None


def get_param(param: Param) -> Optional[str]:
    """First value of a parameter that may be repeated."""
    if param is None or isinstance(param, str):
        return param
    if len(param) > 0:
        return param[0]
    return None


def get_color_param(param: Param, filter: Optional[ParamFilter] = None) -> ColorParam:
    """
    Read a color parameter.

    Hex values are lowercased and get a leading ``#``; any other CSS color
    is converted to ``#rrggbb``, or ``#rrggbbaa`` if translucent.

    Args:
        param: raw parameter value.
        filter: applied to the value before parsing.

    Returns:
        The (filtered) parameter and the color, None if it is not one.
    """
    s = get_param(param)
    if filter is not None:
        s = filter(s)
    if not isinstance(s, str):
        return ColorParam(param=None)
    if not s:
        return ColorParam(param=s)

    if is_hex_value(s):
        return ColorParam(param=s, color=(s if s.startswith('#') else f"#{s}").lower())

    native = color(s)
    if native is None:
        return ColorParam(param=s)

    argb = native.rgb().to_argb()
    alpha = argb >> 24
    value = hex_from_argb(argb)
    if alpha < 0xFF:
        value = f"{value}{alpha:02x}"
    return ColorParam(param=s, color=value)


def get_theme_scheme_param(param: Param, filter: Optional[ParamFilter] = None) -> SchemeParam:
    """Read a scheme parameter; ``scheme`` is None for unknown names."""
    s = get_param(param)
    if filter is not None:
        s = filter(s)
    return SchemeParam(param=s, scheme=SchemeKey.parse(s) if s else None)


def get_random_color(rng: Optional[np.random.Generator] = None) -> str:
    """
    A random opaque ``#rrggbb``.

    Args:
        rng: numpy random generator, a fresh unseeded one if None.
    """
    if rng is None:
        rng = np.random.default_rng()
    r, g, b = (int(x) for x in rng.integers(0, 256, size=3))
    return hex_from_argb(0xFF << 24 | r << 16 | g << 8 | b)


def color_to_url(c=None, rng: Optional[np.random.Generator] = None) -> str:
    """Hex of ``c`` without ``#``, a random color if ``c`` is not given."""
    s = hex_string(c) if c is not None else get_random_color(rng)
    return s[1:]
