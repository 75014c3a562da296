from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_unit_rgb
from ..types.color_types import ColorShape
from .color_base import ColorBase
from .rgb import RGBColor


class HSLColor(ColorBase):
    """Hue in degrees, saturation and lightness in [0, 1]."""
    __slots__ = ()
    shape: ClassVar[ColorShape] = ColorShape.HSL
    channels: ClassVar[Tuple[str, str, str]] = ('h', 's', 'l')

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]

    def rgb(self) -> RGBColor:
        r, g, b = hsl_to_unit_rgb(*self._value)
        return RGBColor(r * 255, g * 255, b * 255, self._opacity)

    @classmethod
    def from_rgb(cls, color: RGBColor) -> HSLColor:
        h, s, l = unit_rgb_to_hsl(color.r / 255, color.g / 255, color.b / 255)
        return cls(h, s, l, color.opacity)
