"""
CSS custom properties of a dark/light theme.

Every role ``k`` gets a base variable ``--{prefix}{k}``. With non-empty
suffixes the values live in ``--{prefix}{k}{suffix}`` and the base variable
is aliased with ``var()`` under the active mode's selector; with an empty
suffix the value is written directly to the base variable.

=============  =============  ==============================================
dark_suffix    light_suffix   result
=============  =============  ==============================================
``''``         ``''``         light values at ``:root``, dark values
                              override them under the dark selector
``'-dark'``    ``'-light'``   both value sets at ``:root``, base variables
                              alias one of them per mode
``''``         ``'-light'``   dark values direct, light aliased
``'-dark'``    ``''``         light values direct, dark aliased
=============  =============  ==============================================
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Optional, Union

from materialyoucolor.hct import Hct

from ..types.scheme_key import DEFAULT_SCHEME, SchemeKey
from .data import PALETTE_KEY_SUFFIX
from .format import rgb_from_hct
from .shades import Shades, make_shades, shade_list
from .theme import ThemeColors, make_theme

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ':root'
DARK_MEDIA_QUERY = '@media not print and (prefers-color-scheme: dark)'

CSSRuleObject = dict[str, Any]


@dataclass(frozen=True)
class CSSThemeOptions:
    """
    Options of the CSS variables of a theme.

    Attributes:
        dark_mode: dark selector; True or ``'.dark'`` for the class,
            False, ``''`` or ``'media'`` for the ``prefers-color-scheme``
            media query, any other string is used as is.
        light_mode: light selector; True or ``'.light'`` for the class,
            False or ``''`` for none.
        prefix: prepended to every variable name, after ``--``.
        dark_suffix: suffix of the dark value variables.
        light_suffix: suffix of the light value variables.
        stringify: renders a color as a CSS value, ``rgb(r g b)`` by
            default.
    """
    dark_mode: Union[bool, str] = '.dark'
    light_mode: Union[bool, str] = '.light'
    prefix: str = 'md-'
    dark_suffix: str = '-dark'
    light_suffix: str = '-light'
    stringify: Callable[[Hct], str] = rgb_from_hct


@dataclass(frozen=True)
class MakeCSSThemeOptions(CSSThemeOptions):
    """:class:`CSSThemeOptions` plus the theme derivation options."""
    scheme: Union[SchemeKey, str] = DEFAULT_SCHEME
    contrast_level: float = 0.0
    shades: Shades = True


def default_css_theme_options(
    options: Union[CSSThemeOptions, Mapping[str, Any], None] = None,
    cls: type = CSSThemeOptions,
    **overrides,
):
    """
    Build ``cls`` from partial options.

    Fields missing from ``options`` and ``overrides``, or set to None, take
    their defaults. Unknown keys are ignored.

    Args:
        options: a :class:`CSSThemeOptions` or a mapping of field values.
        cls: options class to build.
        **overrides: field values taking precedence over ``options``.
    """
    names = {f.name for f in fields(cls)}
    if isinstance(options, CSSThemeOptions):
        given = {f.name: getattr(options, f.name) for f in fields(options)}
    else:
        given = dict(options or {})
    given.update(overrides)
    values = {k: v for k, v in given.items() if k in names and v is not None}
    return cls(**values)


def default_dark_selector(options: CSSThemeOptions) -> str:
    """Dark mode selector or media rule."""
    dark_mode = options.dark_mode
    if dark_mode is True or dark_mode == '.dark':
        return '.dark'
    if dark_mode is False or dark_mode == '' or dark_mode == 'media':
        return DARK_MEDIA_QUERY
    return dark_mode


def default_light_selector(options: CSSThemeOptions) -> Optional[str]:
    """Light mode selector, or None if disabled."""
    light_mode = options.light_mode
    if light_mode is True or light_mode == '.light':
        return '.light'
    if light_mode is False or light_mode == '':
        return None
    return light_mode


def default_root_light_selector(options: CSSThemeOptions) -> str:
    light_selector = default_light_selector(options)
    if light_selector:
        return f"{ROOT_SELECTOR}, {light_selector}"
    return ROOT_SELECTOR


@dataclass
class CSSColorVariables:
    """
    Variables of a theme.

    Attributes:
        vars: role key to base variable name.
        dark_values: dark value declarations.
        light_values: light value declarations.
        dark_vars: base variable aliases for dark mode, None if not needed.
        light_vars: base variable aliases for light mode, None if not needed.
    """
    vars: dict[str, str]
    dark_values: CSSRuleObject
    light_values: CSSRuleObject
    dark_vars: Optional[CSSRuleObject]
    light_vars: Optional[CSSRuleObject]


@dataclass
class CSSColors(CSSColorVariables):
    """:class:`CSSColorVariables` plus the assembled rule objects."""
    styles: list[CSSRuleObject] = field(default_factory=list)
    options: Optional[CSSThemeOptions] = None


def generate_css_color_variables(
    dark: Mapping[str, Hct],
    light: Mapping[str, Hct],
    options: CSSThemeOptions,
) -> CSSColorVariables:
    """
    Variable names and declarations of the roles in ``dark`` and ``light``.

    ``*-palette-key`` roles are skipped. When both suffixes are equal,
    declarations identical in both modes are kept only on the light side.
    """
    dark_vars: CSSRuleObject = {}
    light_vars: CSSRuleObject = {}
    dark_values: CSSRuleObject = {}
    light_values: CSSRuleObject = {}
    names: dict[str, str] = {}

    for k in dark:
        if k.endswith(PALETTE_KEY_SUFFIX):
            continue

        k0 = f"--{options.prefix}{k}"
        k1 = f"{k0}{options.dark_suffix}"
        k2 = f"{k0}{options.light_suffix}"

        dark_values[k1] = options.stringify(dark[k])
        light_values[k2] = options.stringify(light[k])
        names[k] = k0

        if k1 != k0:
            dark_vars[k0] = f"var({k1})"
        if k2 != k0:
            light_vars[k0] = f"var({k2})"

    if options.dark_suffix == options.light_suffix:
        for key in list(dark_values):
            if key in light_values and dark_values[key] == light_values[key]:
                del dark_values[key]
        for key in list(dark_vars):
            if key in light_vars and dark_vars[key] == light_vars[key]:
                del dark_vars[key]

    return CSSColorVariables(
        vars=names,
        dark_values=dark_values,
        light_values=light_values,
        dark_vars=dark_vars or None,
        light_vars=light_vars or None,
    )


def assemble_css_rules(
    root: Optional[CSSRuleObject],
    light: CSSRuleObject,
    dark: CSSRuleObject,
    options: CSSThemeOptions,
) -> list[CSSRuleObject]:
    """
    Rule objects of a theme: ``:root`` with ``root`` if given, then the
    light declarations under ``:root`` and the light selector, and the dark
    declarations under the dark selector.
    """
    styles: list[CSSRuleObject] = []
    if root:
        styles.append({ROOT_SELECTOR: root})
    styles.append({
        default_root_light_selector(options): light,
        default_dark_selector(options): dark,
    })
    return styles


def assemble_css_colors(
    dark: Mapping[str, Hct],
    light: Mapping[str, Hct],
    options: Union[CSSThemeOptions, Mapping[str, Any], None] = None,
    **overrides,
) -> CSSColors:
    """
    CSS variables and rule objects of dark and light role maps.

    Args:
        dark: role key to dark color.
        light: role key to light color, same keys as ``dark``.
        options: partial :class:`CSSThemeOptions`.
        **overrides: option fields taking precedence over ``options``.
    """
    opts = default_css_theme_options(options, **overrides)
    v = generate_css_color_variables(dark, light, opts)

    root: Optional[CSSRuleObject] = None
    if v.dark_vars:
        root = dict(v.dark_values)
        dark_styles = v.dark_vars
    else:
        dark_styles = v.dark_values

    if v.light_vars:
        root = {**(root or {}), **v.light_values}
        light_styles = v.light_vars
    else:
        light_styles = v.light_values

    return CSSColors(
        vars=v.vars,
        dark_values=v.dark_values,
        light_values=v.light_values,
        dark_vars=v.dark_vars,
        light_vars=v.light_vars,
        styles=assemble_css_rules(root, light_styles, dark_styles, opts),
        options=opts,
    )


def make_css_theme(
    colors: ThemeColors,
    options: Union[MakeCSSThemeOptions, Mapping[str, Any], None] = None,
    **overrides,
) -> CSSColors:
    """
    Derive a theme and assemble its CSS variables, shades included.

    Every palette, standard or custom, gets a ``{name}-{shade}`` role per
    shade. A color's own ``shades`` option takes precedence over the
    ``shades`` option of the theme.

    >>> css = make_css_theme({'primary': '#6750a4'}, dark_suffix='', light_suffix='')
    >>> css.vars['primary-500']
    '--md-primary-500'
    """
    opts = default_css_theme_options(options, cls=MakeCSSThemeOptions, **overrides)
    theme = make_theme(colors, opts.scheme, opts.contrast_level)

    dark: dict[str, Hct] = dict(theme.dark)
    light: dict[str, Hct] = dict(theme.light)

    for key, base in theme.dark_palette.items():
        color_options = theme.color_options.get(key)
        shades = opts.shades
        if color_options is not None and color_options.shades is not None:
            shades = color_options.shades

        dark_shades = make_shades(base, shade_list(shades))
        light_shades = make_shades(theme.light_palette[key], shade_list(shades))
        for shade, c in dark_shades.items():
            if shade != 'DEFAULT':
                dark[f"{key}-{shade}"] = c
                light[f"{key}-{shade}"] = light_shades[shade]
            elif key not in theme.dark:
                dark[key] = c
                light[key] = light_shades[shade]

    logger.debug("css theme: %d variables", len(dark))
    return assemble_css_colors(dark, light, opts)
