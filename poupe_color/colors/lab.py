from __future__ import annotations
from typing import ClassVar, Tuple

from ..conversions.lab import hcl_to_lab, lab_to_hcl, lab_to_rgb, rgb_to_lab
from ..types.color_types import ColorShape
from .color_base import ColorBase
from .rgb import RGBColor


class LabColor(ColorBase):
    """CIE L*a*b* relative to D50."""
    __slots__ = ()
    shape: ClassVar[ColorShape] = ColorShape.LAB
    channels: ClassVar[Tuple[str, str, str]] = ('l', 'a', 'b')

    @property
    def l(self) -> float:
        return self._value[0]

    @property
    def a(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]

    def rgb(self) -> RGBColor:
        return RGBColor(*lab_to_rgb(*self._value), opacity=self._opacity)

    @classmethod
    def from_rgb(cls, color: RGBColor) -> LabColor:
        return cls(*rgb_to_lab(*color.value), opacity=color.opacity)


class HCLColor(ColorBase):
    """Cylindrical L*a*b*: hue in degrees, chroma, luminance."""
    __slots__ = ()
    shape: ClassVar[ColorShape] = ColorShape.HCL
    channels: ClassVar[Tuple[str, str, str]] = ('h', 'c', 'l')

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def c(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]

    def lab(self) -> LabColor:
        return LabColor(*hcl_to_lab(*self._value), opacity=self._opacity)

    def rgb(self) -> RGBColor:
        return self.lab().rgb()

    @classmethod
    def from_lab(cls, color: LabColor) -> HCLColor:
        return cls(*lab_to_hcl(*color.value), opacity=color.opacity)

    @classmethod
    def from_rgb(cls, color: RGBColor) -> HCLColor:
        return cls.from_lab(LabColor.from_rgb(color))
