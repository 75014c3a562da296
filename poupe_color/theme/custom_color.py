"""
Custom colors: four roles per mode derived from one named color.
"""
from __future__ import annotations
from dataclasses import dataclass

from materialyoucolor.blend import Blend
from materialyoucolor.hct import Hct
from materialyoucolor.palettes.tonal_palette import TonalPalette


@dataclass(frozen=True)
class CustomColor:
    """
    A named color to add to a theme.

    ``blend`` harmonizes ``value`` with the theme's source color.
    """
    name: str
    value: int
    blend: bool = True


@dataclass(frozen=True)
class ColorGroup:
    """ARGB of the four roles derived from a custom color, for one mode."""
    color: int
    on_color: int
    color_container: int
    on_color_container: int


@dataclass(frozen=True)
class CustomColorGroup:
    color: CustomColor
    value: int
    light: ColorGroup
    dark: ColorGroup


def harmonize(design_color: int, source_color: int) -> int:
    """Rotate the hue of ``design_color`` towards ``source_color``."""
    return Blend.harmonize(design_color, source_color)


def custom_color(source: int, color: CustomColor) -> CustomColorGroup:
    """
    Derive light and dark role groups for a custom color.

    Args:
        source: ARGB of the theme's source color.
        color: the custom color.

    Returns:
        The (possibly harmonized) value and its light and dark groups.
    """
    value = color.value
    if color.blend:
        value = harmonize(value, source)
    hct = Hct.from_int(value)
    tones = TonalPalette.from_hue_and_chroma(hct.hue, max(48.0, hct.chroma))
    return CustomColorGroup(
        color=color,
        value=value,
        light=ColorGroup(
            color=tones.tone(40),
            on_color=tones.tone(100),
            color_container=tones.tone(90),
            on_color_container=tones.tone(10),
        ),
        dark=ColorGroup(
            color=tones.tone(80),
            on_color=tones.tone(20),
            color_container=tones.tone(30),
            on_color_container=tones.tone(90),
        ),
    )
