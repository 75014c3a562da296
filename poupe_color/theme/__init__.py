"""
Poupe Color Themes
==================

Material dynamic themes from a table of colors, and their CSS variables.

Pipeline
--------
    make_theme(colors, scheme='content', contrast_level=0.0)
        Dark and light role maps: palette key colors, standard roles and
        four roles per custom color
    make_css_theme(colors, options=None, **overrides)
        The theme, its palette shades and the CSS variables and rules
    format_css_rule_objects(rules, indent='\\t', new_line='\\n')
        CSS text of the rules

Building blocks
---------------
    make_schemes, resolve_scheme_key
        Scheme variant selection
    make_custom_colors, make_standard_colors_from_scheme,
    make_standard_palette_from_scheme, make_theme_keys
        Role extraction
    make_shades, with_shades, with_hex_shades
        Tonal shade ladders
    generate_css_color_variables, assemble_css_colors, assemble_css_rules
        CSS variables
    color_formatter, rgb_from_hct, numbers_from_hct, rgba_string,
    hsl_string, hex_string
        Color rendering
    get_param, get_color_param, get_theme_scheme_param, get_random_color
        Request parameter helpers
    make_color_mix, mix_color
        Mixing colors in Lab
    make_state_variants, make_standard_state_variants,
    make_custom_state_variants, get_state_color_mix_params
        Interaction state layers
"""
from .custom_color import ColorGroup, CustomColor, CustomColorGroup, custom_color, harmonize
from .data import (
    CUSTOM_DYNAMIC_COLORS,
    PALETTE_KEY_SUFFIX,
    STANDARD_DYNAMIC_COLORS,
    STANDARD_PALETTE_KEY_COLORS,
    STANDARD_PALETTES,
    ColorOptions,
    is_standard_key,
)
from .scheme import SPEC_VERSION, STANDARD_DYNAMIC_SCHEMES, get_scheme_factory, make_schemes, resolve_scheme_key
from .theme import (
    CustomColors,
    Theme,
    ThemeColors,
    ThemeKeys,
    flatten_color_options,
    flatten_theme_colors,
    make_custom_colors,
    make_standard_colors_from_scheme,
    make_standard_palette_from_scheme,
    make_standard_palette_key_colors_from_scheme,
    make_theme,
    make_theme_keys,
)
from .format import (
    ColorFormat,
    color_formatter,
    format_css_rule_objects,
    format_css_rules,
    hex_string,
    hsl_string,
    numbers_from_argb,
    numbers_from_hct,
    rgb_from_hct,
    rgba_string,
)
from .shades import DEFAULT_SHADES, make_hex_shades, make_shades, shade_list, with_hex_shades, with_shades
from .css import (
    CSSColors,
    CSSColorVariables,
    CSSThemeOptions,
    MakeCSSThemeOptions,
    assemble_css_colors,
    assemble_css_rules,
    default_css_theme_options,
    default_dark_selector,
    default_light_selector,
    default_root_light_selector,
    generate_css_color_variables,
    make_css_theme,
)
from .params import (
    ColorParam,
    SchemeParam,
    color_to_url,
    get_color_param,
    get_param,
    get_random_color,
    get_theme_scheme_param,
    is_hex_value,
)
from .mix import make_color_mix, mix_color
from .states import (
    STANDARD_INTERACTIVE_COLORS,
    STATE_LAYER_OPACITIES,
    State,
    StateColorMixParams,
    get_state_color_mix_params,
    make_custom_state_variants,
    make_standard_state_variants,
    make_state_layer_colors,
    make_state_variants,
)

__all__ = [
    'ColorGroup',
    'CustomColor',
    'CustomColorGroup',
    'custom_color',
    'harmonize',
    'CUSTOM_DYNAMIC_COLORS',
    'PALETTE_KEY_SUFFIX',
    'STANDARD_DYNAMIC_COLORS',
    'STANDARD_PALETTE_KEY_COLORS',
    'STANDARD_PALETTES',
    'ColorOptions',
    'is_standard_key',
    'SPEC_VERSION',
    'STANDARD_DYNAMIC_SCHEMES',
    'get_scheme_factory',
    'make_schemes',
    'resolve_scheme_key',
    'CustomColors',
    'Theme',
    'ThemeColors',
    'ThemeKeys',
    'flatten_color_options',
    'flatten_theme_colors',
    'make_custom_colors',
    'make_standard_colors_from_scheme',
    'make_standard_palette_from_scheme',
    'make_standard_palette_key_colors_from_scheme',
    'make_theme',
    'make_theme_keys',
    'ColorFormat',
    'color_formatter',
    'format_css_rule_objects',
    'format_css_rules',
    'hex_string',
    'hsl_string',
    'numbers_from_argb',
    'numbers_from_hct',
    'rgb_from_hct',
    'rgba_string',
    'DEFAULT_SHADES',
    'make_hex_shades',
    'make_shades',
    'shade_list',
    'with_hex_shades',
    'with_shades',
    'CSSColors',
    'CSSColorVariables',
    'CSSThemeOptions',
    'MakeCSSThemeOptions',
    'assemble_css_colors',
    'assemble_css_rules',
    'default_css_theme_options',
    'default_dark_selector',
    'default_light_selector',
    'default_root_light_selector',
    'generate_css_color_variables',
    'make_css_theme',
    'ColorParam',
    'SchemeParam',
    'color_to_url',
    'get_color_param',
    'get_param',
    'get_random_color',
    'get_theme_scheme_param',
    'is_hex_value',
    'make_color_mix',
    'mix_color',
    'STANDARD_INTERACTIVE_COLORS',
    'STATE_LAYER_OPACITIES',
    'State',
    'StateColorMixParams',
    'get_state_color_mix_params',
    'make_custom_state_variants',
    'make_standard_state_variants',
    'make_state_layer_colors',
    'make_state_variants',
]
