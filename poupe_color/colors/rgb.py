from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.argb import argb_from_rgb, hex_from_argb, rgba_from_argb
from ..types.color_types import ColorShape
from ..utils.num_utils import round_half_up
from .color_base import ColorBase


def _channel(value: float) -> int:
    return max(0, min(255, round_half_up(value)))


class RGBColor(ColorBase):
    """sRGB with channels on the 0..255 scale."""
    __slots__ = ()
    shape: ClassVar[ColorShape] = ColorShape.RGB
    channels: ClassVar[Tuple[str, str, str]] = ('r', 'g', 'b')

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    def rgb(self) -> RGBColor:
        return self

    @classmethod
    def from_rgb(cls, color: RGBColor) -> RGBColor:
        return color

    @classmethod
    def from_argb(cls, argb: int) -> RGBColor:
        c = rgba_from_argb(argb, True)
        return cls(c['r'], c['g'], c['b'], c['opacity'])

    def displayable(self) -> bool:
        return all(-0.5 <= v < 255.5 for v in self._value) and 0 <= self._opacity <= 1

    def clamp(self) -> RGBColor:
        """Rounded to integers and clamped to the displayable range."""
        return RGBColor(*(_channel(v) for v in self._value), opacity=min(1.0, max(0.0, self._opacity)))

    def to_argb(self) -> int:
        alpha = _channel(self._opacity * 255)
        return argb_from_rgb(*(_channel(v) for v in self._value), a=alpha)

    def hex(self) -> str:
        return hex_from_argb(self.to_argb())
