"""
Poupe Color Conversions
=======================

Numeric conversions between packed ARGB integers, hex strings and the RGB,
HSL, HSV, Lab and HCL color spaces, with both scalar and vectorized (numpy)
implementations.

Features
--------
- Exact 32-bit ARGB packing and unpacking with wraparound semantics
- Hex literal validation and parsing (3, 6 and 8 digits)
- CSS Color 4 compatible RGB <-> HSL algorithms
- HSV -> HSL
- CIE Lab (D50) and HCL
- CSS color string parser (hex, rgb(), hsl(), named colors)

ARGB codec
----------
    alpha_from_argb, red_from_argb, green_from_argb, blue_from_argb
        Channel extraction
    rgba_from_argb(argb, force_opacity=False)
        ``{r, g, b, opacity?}`` dict
    argb_from_rgb(r, g, b, a=255), argb_from_rgba_color(color)
        Packing
    split_argb(argb), np_split_argb(argb)
        All four channels
    hex_from_argb, argb_from_hex, hex_from_string, is_hex_color
        Hex literals
    rgb_from_argb, hsl_from_argb
        CSS oriented forms

Color spaces
------------
    unit_rgb_to_hsl / np_unit_rgb_to_hsl
    hsl_to_unit_rgb / np_hsl_to_unit_rgb
    hsv_to_hsl / np_hsv_to_hsl
    hsv_to_unit_rgb
    rgb_to_lab / np_rgb_to_lab, lab_to_rgb / np_lab_to_rgb
    lab_to_hcl, hcl_to_lab

Examples
--------
>>> from poupe_color.conversions import rgba_from_argb, hsv_to_hsl
>>> rgba_from_argb(0x80_00_FF_00)
{'r': 0, 'g': 255, 'b': 0, 'opacity': 0.5019607843137255}
>>> hsv_to_hsl(0, 1, 1)
(0, 1.0, 0.5)
"""

from .argb import (
    HEX_COLOR_PATTERN,
    alpha_from_argb,
    red_from_argb,
    green_from_argb,
    blue_from_argb,
    rgba_from_argb,
    split_argb,
    np_split_argb,
    argb_from_rgb,
    np_argb_from_rgb,
    argb_from_rgba_color,
    rgb_from_argb,
    hex_from_argb,
    is_hex_color,
    hex_from_string,
    argb_from_hex,
    hsl_from_argb,
)
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb, hsv_to_unit_rgb
from .lab import (
    rgb_to_lab,
    lab_to_rgb,
    lab_to_hcl,
    hcl_to_lab,
    np_rgb_to_lab,
    np_lab_to_rgb,
)
from .css import ParsedColor, parse_css_color, parse_hex
from .named_colors import NAMED_COLORS, with_known_color

__all__ = [
    # ARGB
    'HEX_COLOR_PATTERN',
    'alpha_from_argb',
    'red_from_argb',
    'green_from_argb',
    'blue_from_argb',
    'rgba_from_argb',
    'split_argb',
    'np_split_argb',
    'argb_from_rgb',
    'np_argb_from_rgb',
    'argb_from_rgba_color',
    'rgb_from_argb',
    'hex_from_argb',
    'is_hex_color',
    'hex_from_string',
    'argb_from_hex',
    'hsl_from_argb',

    # HSL / HSV / RGB
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsv_to_hsl',
    'np_hsv_to_hsl',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hsv_to_unit_rgb',

    # Lab / HCL
    'rgb_to_lab',
    'lab_to_rgb',
    'lab_to_hcl',
    'hcl_to_lab',
    'np_rgb_to_lab',
    'np_lab_to_rgb',

    # CSS strings
    'ParsedColor',
    'parse_css_color',
    'parse_hex',
    'NAMED_COLORS',
    'with_known_color',
]
