"""
Adapters between plain color mappings and the native color classes.

``as_*`` build a native color from a mapping of the matching shape,
defaulting a missing ``opacity`` to 1. ``is_*`` test for native instances
only; plain mappings never satisfy them. :func:`color` is the lenient entry
point and returns None rather than raising.
"""
from __future__ import annotations
import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional, Union

from ..conversions.argb import rgba_from_argb
from ..conversions.css import parse_css_color
from ..conversions.to_hsl import hsv_to_hsl
from ..errors import ColorError
from ..types.color_types import (
    ColorShape,
    HCLShape,
    HCTShape,
    HSLShape,
    HSVShape,
    LabShape,
    RGBShape,
    SHAPE_FIELDS,
    SHAPE_PRIORITY,
)
from .color_base import ColorBase
from .hsl import HSLColor
from .lab import HCLColor, LabColor
from .rgb import RGBColor

logger = logging.getLogger(__name__)

NativeColor = Union[RGBColor, HSLColor, LabColor, HCLColor]


def _opacity(c: Mapping[str, Any]) -> float:
    opacity = c.get('opacity')
    return 1.0 if opacity is None else opacity


def as_rgb(c: RGBShape) -> RGBColor:
    return RGBColor(c['r'], c['g'], c['b'], _opacity(c))


def as_lab(c: LabShape) -> LabColor:
    return LabColor(c['l'], c['a'], c['b'], _opacity(c))


def as_hcl(c: HCLShape) -> HCLColor:
    return HCLColor(c['h'], c['c'], c['l'], _opacity(c))


def as_hct(c: HCTShape) -> HCLColor:
    """HCT as HCL: tone is used as the luminance."""
    return HCLColor(c['h'], c['c'], c['t'], _opacity(c))


def as_hsl(c: HSLShape) -> HSLColor:
    return HSLColor(c['h'], c['s'], c['l'], _opacity(c))


def as_hsv(c: HSVShape) -> HSLColor:
    """HSV as HSL; see :func:`poupe_color.conversions.hsv_to_hsl`."""
    h, s, l = hsv_to_hsl(c['h'], c['s'], c['v'])
    return HSLColor(h, s, l, _opacity(c))


def is_rgb(value: Any) -> bool:
    return isinstance(value, RGBColor)


def is_lab(value: Any) -> bool:
    return isinstance(value, LabColor)


def is_hcl(value: Any) -> bool:
    return isinstance(value, HCLColor)


def is_hsl(value: Any) -> bool:
    return isinstance(value, HSLColor)


def is_color(value: Any) -> bool:
    """True for any native color instance."""
    return isinstance(value, ColorBase)


shape_adapters = {
    ColorShape.LAB: as_lab,
    ColorShape.RGB: as_rgb,
    ColorShape.HCL: as_hcl,
    ColorShape.HSL: as_hsl,
    ColorShape.HSV: as_hsv,
}


def parse_color_shape(value: Any) -> Optional[ColorShape]:
    """
    Identify the shape of a plain color mapping by the keys it has.

    Shapes are tried in a fixed order (Lab, RGB, HCL, HSL, HSV) since HSL
    and HCL share ``h`` and ``l``. ``{h, c, t}`` is not sniffed; use
    :func:`as_hct` for it.

    Returns:
        The first matching :class:`ColorShape`, or None.
    """
    if not isinstance(value, Mapping):
        return None
    for shape in SHAPE_PRIORITY:
        if all(key in value for key in SHAPE_FIELDS[shape]):
            return shape
    return None


def color(value: Any) -> Optional[NativeColor]:
    """
    Convert anything color-like to a native color.

    Args:
        value: a CSS color string, a packed ARGB number, a native color
            (returned as is), or a mapping in one of the five sniffed shapes.

    Returns:
        The native color, or None when ``value`` is not recognized.
    """
    if value is None:
        return None

    if isinstance(value, str):
        parsed = parse_css_color(value)
        if parsed is None:
            return None
        try:
            if parsed.shape is ColorShape.HSL:
                return HSLColor(*parsed.channels, opacity=parsed.opacity)
            return RGBColor(*parsed.channels, opacity=parsed.opacity)
        except ColorError as e:
            logger.debug("rejected color string %r: %s", value, e)
            return None

    if isinstance(value, Real) and not isinstance(value, bool):
        if not math.isfinite(value):
            return None
        return as_rgb(rgba_from_argb(value))

    if isinstance(value, ColorBase):
        return value

    if not isinstance(value, Mapping):
        return None

    shape = parse_color_shape(value)
    if shape is None:
        return None
    try:
        return shape_adapters[shape](value)
    except ColorError as e:
        logger.debug("rejected %s color %r: %s", shape.value, value, e)
        return None
