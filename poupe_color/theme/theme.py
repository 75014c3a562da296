"""
Dark and light role maps of a theme.

A theme is described by a table of colors. ``primary`` is mandatory and seeds
the dynamic schemes; every other entry becomes a custom color with four
roles (``{name}``, ``{name}-container``, ``on-{name}``,
``on-{name}-container``), harmonized with the primary color unless the entry
says otherwise.

Examples
--------
>>> theme = make_theme({'primary': '#6750a4', 'brandColor': '#ff5722'})
>>> theme.dark['on-brand-color-container'].to_int()
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from materialyoucolor.hct import Hct

from ..colors.normalize import argb, hct
from ..errors import InvalidColorValue
from ..types.scheme_key import DEFAULT_SCHEME, SchemeKey
from ..utils.strings import kebab_case
from .data import (
    CUSTOM_DYNAMIC_COLORS,
    STANDARD_DYNAMIC_COLORS,
    STANDARD_PALETTE_KEY_COLORS,
    STANDARD_PALETTES,
    ColorOptions,
    is_standard_key,
)
from .custom_color import CustomColor, custom_color
from .scheme import make_schemes, resolve_scheme_key

if TYPE_CHECKING:
    from materialyoucolor.scheme.dynamic_scheme import DynamicScheme

logger = logging.getLogger(__name__)

ThemeColors = Mapping[str, Union[ColorOptions, Mapping[str, Any], Any]]


def flatten_color_options(c: Any) -> ColorOptions:
    """
    Normalise one entry of a theme color table.

    Accepts a :class:`ColorOptions`, a ``{value, harmonize?, shades?}``
    mapping or a bare color.
    """
    if isinstance(c, ColorOptions):
        return c
    if isinstance(c, Mapping) and 'value' in c:
        return ColorOptions(value=c['value'], harmonize=c.get('harmonize'), shades=c.get('shades'))
    return ColorOptions(value=c)


def flatten_theme_colors(colors: ThemeColors) -> tuple[ColorOptions, dict[str, ColorOptions]]:
    """
    Split a theme color table into the primary color and the custom colors.

    Raises:
        InvalidColorValue: if ``primary`` is missing.
    """
    if 'primary' not in colors or colors['primary'] is None:
        raise InvalidColorValue(None, 'primary')

    primary = flatten_color_options(colors['primary'])
    rest = {
        name: flatten_color_options(value)
        for name, value in colors.items()
        if name != 'primary'
    }
    return primary, rest


@dataclass(frozen=True)
class CustomColors:
    """Roles of the custom colors, keyed by their CSS names."""
    colors: tuple[str, ...]
    color_options: dict[str, ColorOptions]
    values: dict[str, Hct]
    dark: dict[str, Hct]
    light: dict[str, Hct]


def make_custom_colors(source: Any, colors: Mapping[str, Any]) -> CustomColors:
    """
    Derive the dark and light roles of each custom color.

    Names are converted to kebab-case. Colors are harmonized with ``source``
    unless their options set ``harmonize=False``.

    Args:
        source: the theme's primary color.
        colors: table of custom colors.
    """
    source_argb = argb(source)

    color_options: dict[str, ColorOptions] = {}
    values: dict[str, Hct] = {}
    dark: dict[str, Hct] = {}
    light: dict[str, Hct] = {}

    for name, options in colors.items():
        options = flatten_color_options(options)
        kebab_name = kebab_case(name)
        blend = True if options.harmonize is None else bool(options.harmonize)

        group = custom_color(source_argb, CustomColor(name=kebab_name, value=argb(options.value), blend=blend))

        color_options[kebab_name] = options
        values[kebab_name] = Hct.from_int(group.value)
        for pattern, fn in CUSTOM_DYNAMIC_COLORS.items():
            key = pattern.replace('{}', kebab_name)
            dark[key] = Hct.from_int(fn(group.dark))
            light[key] = Hct.from_int(fn(group.light))

    return CustomColors(
        colors=tuple(color_options),
        color_options=color_options,
        values=values,
        dark=dark,
        light=light,
    )


def make_standard_colors_from_scheme(scheme: DynamicScheme) -> dict[str, Hct]:
    """Every standard role of ``scheme``."""
    return {name: dc.get_hct(scheme) for name, dc in STANDARD_DYNAMIC_COLORS.items()}


def make_standard_palette_key_colors_from_scheme(scheme: DynamicScheme) -> dict[str, Hct]:
    """The ``*-palette-key`` roles of ``scheme``."""
    return {name: dc.get_hct(scheme) for name, dc in STANDARD_PALETTE_KEY_COLORS.items()}


def make_standard_palette_from_scheme(scheme: DynamicScheme) -> dict[str, Hct]:
    """Key color of each core palette of ``scheme``, by palette name."""
    return {name: fn(scheme).key_color for name, fn in STANDARD_PALETTES.items()}


@dataclass(frozen=True)
class Theme:
    """
    A derived theme.

    ``dark`` and ``light`` map every role key (palette key colors, standard
    roles and custom roles) to its color. ``dark_palette`` and
    ``light_palette`` map each palette name, standard or custom, to the
    color its tonal shades are derived from.
    """
    source: Hct
    scheme: SchemeKey
    contrast_level: float
    color_options: dict[str, ColorOptions]
    dark_scheme: DynamicScheme
    light_scheme: DynamicScheme
    dark_palette: dict[str, Hct]
    light_palette: dict[str, Hct]
    dark: dict[str, Hct]
    light: dict[str, Hct]


def make_theme(
    colors: ThemeColors,
    scheme: Union[SchemeKey, str, None] = DEFAULT_SCHEME,
    contrast_level: float = 0.0,
    *,
    strict: bool = False,
) -> Theme:
    """
    Derive the dark and light role maps of a theme.

    The result depends only on the arguments.

    Args:
        colors: theme color table; ``primary`` is required.
        scheme: Material scheme variant. Unknown names fall back to
            ``content``.
        contrast_level: -1 (minimum) to 1 (maximum), 0 is standard.
        strict: raise :class:`UnknownSchemeVariant` on unknown scheme names.

    Returns:
        The :class:`Theme`.

    Raises:
        InvalidColorValue: if ``primary`` is missing or a color is invalid.
        InvalidHexColor: if a hex literal is malformed.
    """
    primary, rest = flatten_theme_colors(colors)
    source = hct(primary.value)

    for name in [n for n in rest if is_standard_key(n)]:
        logger.warning("%r is a standard role name, ignored as custom color", name)
        del rest[name]

    key = resolve_scheme_key(scheme, strict)
    dark_scheme, light_scheme = make_schemes(source, key, contrast_level)

    custom = make_custom_colors(source, rest)

    dark_palette = {**make_standard_palette_from_scheme(dark_scheme), **custom.values}
    light_palette = {**make_standard_palette_from_scheme(light_scheme), **custom.values}

    dark = {
        **make_standard_palette_key_colors_from_scheme(dark_scheme),
        **make_standard_colors_from_scheme(dark_scheme),
        **custom.dark,
    }
    light = {
        **make_standard_palette_key_colors_from_scheme(light_scheme),
        **make_standard_colors_from_scheme(light_scheme),
        **custom.light,
    }

    logger.debug("theme %s: %d roles, %d palettes", key.value, len(dark), len(dark_palette))
    return Theme(
        source=source,
        scheme=key,
        contrast_level=contrast_level,
        color_options={'primary': primary, **custom.color_options},
        dark_scheme=dark_scheme,
        light_scheme=light_scheme,
        dark_palette=dark_palette,
        light_palette=light_palette,
        dark=dark,
        light=light,
    )


@dataclass(frozen=True)
class ThemeKeys:
    keys: tuple[str, ...]
    palette_keys: tuple[str, ...]
    color_options: dict[str, ColorOptions]


def make_theme_keys(colors: Mapping[str, Any]) -> ThemeKeys:
    """
    Keys :func:`make_theme` would produce for ``colors``, without computing
    any color.

    Entries whose kebab-case name is already a standard role are not
    treated as custom colors.
    """
    keys = list(STANDARD_PALETTE_KEY_COLORS) + list(STANDARD_DYNAMIC_COLORS)
    palette_keys = list(STANDARD_PALETTES)
    color_options: dict[str, ColorOptions] = {}

    for name, value in colors.items():
        kebab_name = kebab_case(name)
        if value is not None:
            color_options[kebab_name] = flatten_color_options(value)
        if is_standard_key(kebab_name):
            continue
        palette_keys.append(kebab_name)
        for pattern in CUSTOM_DYNAMIC_COLORS:
            keys.append(pattern.replace('{}', kebab_name))

    return ThemeKeys(keys=tuple(keys), palette_keys=tuple(palette_keys), color_options=color_options)
