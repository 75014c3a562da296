from .color_base import ColorBase, build_registry, color_registry
from .rgb import RGBColor
from .hsl import HSLColor
from .lab import LabColor, HCLColor
from .adapters import (
    NativeColor,
    as_rgb,
    as_lab,
    as_hcl,
    as_hct,
    as_hsl,
    as_hsv,
    is_rgb,
    is_lab,
    is_hcl,
    is_hsl,
    is_color,
    parse_color_shape,
    color,
)
from .color_value import ColorValue
from .normalize import AnyColor, argb, argb_from_hct_color, hct, hex

native_classes = build_registry(
    RGBColor,
    HSLColor,
    LabColor,
    HCLColor,
)

__all__ = [
    'ColorBase',
    'RGBColor',
    'HSLColor',
    'LabColor',
    'HCLColor',
    'NativeColor',
    'native_classes',
    'color_registry',
    'as_rgb',
    'as_lab',
    'as_hcl',
    'as_hct',
    'as_hsl',
    'as_hsv',
    'is_rgb',
    'is_lab',
    'is_hcl',
    'is_hsl',
    'is_color',
    'parse_color_shape',
    'color',
    'ColorValue',
    'AnyColor',
    'argb',
    'argb_from_hct_color',
    'hct',
    'hex',
]
