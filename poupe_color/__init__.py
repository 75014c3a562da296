"""Poupe Color: color conversions and Material dynamic themes."""

from materialyoucolor.hct import Hct
from materialyoucolor.palettes.tonal_palette import TonalPalette
from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors

from .errors import (
    ColorError,
    InvalidHexColor,
    InvalidColorValue,
    MissingOnColor,
    UnknownSchemeVariant,
    UnreachableState,
)
from .utils import uint32, uint8, np_uint32, np_uint8, kebab_case
from .types import ColorShape, SchemeKey
from .conversions import (
    rgba_from_argb,
    split_argb,
    np_split_argb,
    argb_from_rgb,
    argb_from_rgba_color,
    rgb_from_argb,
    hex_from_argb,
    argb_from_hex,
    hex_from_string,
    is_hex_color,
    hsl_from_argb,
    hsv_to_hsl,
    np_hsv_to_hsl,
    parse_css_color,
)
from .colors import (
    ColorBase,
    RGBColor,
    HSLColor,
    LabColor,
    HCLColor,
    ColorValue,
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
    argb,
    argb_from_hct_color,
    hct,
    hex,
)
from .theme import (
    CustomColor,
    ColorGroup,
    CustomColorGroup,
    custom_color,
    harmonize,
    ColorOptions,
    Theme,
    make_theme,
    make_theme_keys,
    make_custom_colors,
    make_shades,
    with_shades,
    with_hex_shades,
    CSSThemeOptions,
    MakeCSSThemeOptions,
    default_css_theme_options,
    generate_css_color_variables,
    assemble_css_colors,
    assemble_css_rules,
    make_css_theme,
    format_css_rule_objects,
    color_formatter,
    rgb_from_hct,
    numbers_from_hct,
    get_color_param,
    get_theme_scheme_param,
    get_random_color,
    make_color_mix,
    mix_color,
    get_state_color_mix_params,
    make_state_layer_colors,
    make_state_variants,
    make_standard_state_variants,
    make_custom_state_variants,
)

__version__ = "0.1.0"

__all__ = [
    # errors
    "ColorError",
    "InvalidHexColor",
    "InvalidColorValue",
    "MissingOnColor",
    "UnknownSchemeVariant",
    "UnreachableState",
    # utils
    "uint32",
    "uint8",
    "np_uint32",
    "np_uint8",
    "kebab_case",
    # types
    "ColorShape",
    "SchemeKey",
    # ARGB codec
    "rgba_from_argb",
    "split_argb",
    "np_split_argb",
    "argb_from_rgb",
    "argb_from_rgba_color",
    "rgb_from_argb",
    "hex_from_argb",
    "argb_from_hex",
    "hex_from_string",
    "is_hex_color",
    "hsl_from_argb",
    "hsv_to_hsl",
    "np_hsv_to_hsl",
    "parse_css_color",
    # native colors
    "ColorBase",
    "RGBColor",
    "HSLColor",
    "LabColor",
    "HCLColor",
    "ColorValue",
    "as_rgb",
    "as_lab",
    "as_hcl",
    "as_hct",
    "as_hsl",
    "as_hsv",
    "is_rgb",
    "is_lab",
    "is_hcl",
    "is_hsl",
    "is_color",
    "parse_color_shape",
    "color",
    "argb",
    "argb_from_hct_color",
    "hct",
    "hex",
    # perceptual engine
    "Hct",
    "TonalPalette",
    "MaterialDynamicColors",
    "CustomColor",
    "ColorGroup",
    "CustomColorGroup",
    "custom_color",
    "harmonize",
    # themes
    "ColorOptions",
    "Theme",
    "make_theme",
    "make_theme_keys",
    "make_custom_colors",
    "make_shades",
    "with_shades",
    "with_hex_shades",
    "CSSThemeOptions",
    "MakeCSSThemeOptions",
    "default_css_theme_options",
    "generate_css_color_variables",
    "assemble_css_colors",
    "assemble_css_rules",
    "make_css_theme",
    "format_css_rule_objects",
    "color_formatter",
    "rgb_from_hct",
    "numbers_from_hct",
    "get_color_param",
    "get_theme_scheme_param",
    "get_random_color",
    "make_color_mix",
    "mix_color",
    "get_state_color_mix_params",
    "make_state_layer_colors",
    "make_state_variants",
    "make_standard_state_variants",
    "make_custom_state_variants",
]
