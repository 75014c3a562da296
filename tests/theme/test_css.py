import pytest
from materialyoucolor.hct import Hct

from poupe_color.theme import (
    DEFAULT_SHADES,
    CSSThemeOptions,
    MakeCSSThemeOptions,
    assemble_css_colors,
    assemble_css_rules,
    color_formatter,
    default_css_theme_options,
    default_dark_selector,
    default_light_selector,
    default_root_light_selector,
    generate_css_color_variables,
    make_css_theme,
    make_theme,
    rgb_from_hct,
)
from poupe_color.theme.css import DARK_MEDIA_QUERY
from poupe_color.types import SchemeKey
from tests.samples import SEED

GRAY = Hct.from_int(0xFF0A0A0A)
DARK = {
    'primary-palette-key': Hct.from_int(0xFF777777),
    'primary': Hct.from_int(0xFF010203),
    'surface': GRAY,
}
LIGHT = {
    'primary-palette-key': Hct.from_int(0xFF777777),
    'primary': Hct.from_int(0xFF040506),
    'surface': GRAY,
}


def test_default_options():
    opts = default_css_theme_options()
    assert opts == CSSThemeOptions()
    assert (opts.dark_mode, opts.light_mode, opts.prefix) == ('.dark', '.light', 'md-')
    assert (opts.dark_suffix, opts.light_suffix) == ('-dark', '-light')


def test_partial_options():
    opts = default_css_theme_options({'prefix': 'x-', 'dark_suffix': None, 'unknown': 1}, light_suffix='')
    assert opts.prefix == 'x-'
    assert opts.dark_suffix == '-dark'
    assert opts.light_suffix == ''

    base = CSSThemeOptions(prefix='p-')
    assert default_css_theme_options(base, prefix='q-').prefix == 'q-'

    make = default_css_theme_options({'scheme': 'vibrant'}, cls=MakeCSSThemeOptions)
    assert make.scheme == 'vibrant'
    assert make.shades is True


@pytest.mark.parametrize("dark_mode, expected", [
    (True, '.dark'),
    ('.dark', '.dark'),
    (False, DARK_MEDIA_QUERY),
    ('', DARK_MEDIA_QUERY),
    ('media', DARK_MEDIA_QUERY),
    ('[data-theme=dark]', '[data-theme=dark]'),
])
def test_dark_selector(dark_mode, expected):
    assert default_dark_selector(CSSThemeOptions(dark_mode=dark_mode)) == expected


@pytest.mark.parametrize("light_mode, light, root_light", [
    (True, '.light', ':root, .light'),
    ('.light', '.light', ':root, .light'),
    (False, None, ':root'),
    ('', None, ':root'),
    ('.day', '.day', ':root, .day'),
])
def test_light_selector(light_mode, light, root_light):
    opts = CSSThemeOptions(light_mode=light_mode)
    assert default_light_selector(opts) == light
    assert default_root_light_selector(opts) == root_light


def test_both_suffixes():
    css = assemble_css_colors(DARK, LIGHT)
    assert css.vars == {'primary': '--md-primary', 'surface': '--md-surface'}
    assert css.dark_values == {'--md-primary-dark': 'rgb(1 2 3)', '--md-surface-dark': 'rgb(10 10 10)'}
    assert css.light_values == {'--md-primary-light': 'rgb(4 5 6)', '--md-surface-light': 'rgb(10 10 10)'}
    assert css.dark_vars == {
        '--md-primary': 'var(--md-primary-dark)',
        '--md-surface': 'var(--md-surface-dark)',
    }
    assert css.light_vars == {
        '--md-primary': 'var(--md-primary-light)',
        '--md-surface': 'var(--md-surface-light)',
    }
    assert css.styles == [
        {':root': {**css.dark_values, **css.light_values}},
        {':root, .light': css.light_vars, '.dark': css.dark_vars},
    ]


def test_no_suffixes():
    css = assemble_css_colors(DARK, LIGHT, dark_suffix='', light_suffix='')
    assert css.light_values == {'--md-primary': 'rgb(4 5 6)', '--md-surface': 'rgb(10 10 10)'}
    # declarations equal in both modes are only written once
    assert css.dark_values == {'--md-primary': 'rgb(1 2 3)'}
    assert css.dark_vars is None and css.light_vars is None
    assert css.styles == [{':root, .light': css.light_values, '.dark': css.dark_values}]


def test_light_suffix_only():
    css = assemble_css_colors(DARK, LIGHT, {'dark_suffix': '', 'light_suffix': '-light'})
    assert css.dark_vars is None
    assert css.light_vars == {
        '--md-primary': 'var(--md-primary-light)',
        '--md-surface': 'var(--md-surface-light)',
    }
    assert css.styles == [
        {':root': css.light_values},
        {':root, .light': css.light_vars, '.dark': {'--md-primary': 'rgb(1 2 3)', '--md-surface': 'rgb(10 10 10)'}},
    ]


def test_dark_suffix_only():
    css = assemble_css_colors(DARK, LIGHT, dark_suffix='-dark', light_suffix='')
    assert css.light_vars is None
    assert css.styles == [
        {':root': {'--md-primary-dark': 'rgb(1 2 3)', '--md-surface-dark': 'rgb(10 10 10)'}},
        {':root, .light': {'--md-primary': 'rgb(4 5 6)', '--md-surface': 'rgb(10 10 10)'}, '.dark': css.dark_vars},
    ]


def test_selectors_and_prefix():
    css = assemble_css_colors(DARK, LIGHT, dark_mode=False, light_mode=False, prefix='')
    assert css.vars['primary'] == '--primary'
    assert list(css.styles[-1]) == [':root', DARK_MEDIA_QUERY]


def test_palette_keys_are_not_variables():
    v = generate_css_color_variables(DARK, LIGHT, CSSThemeOptions())
    assert 'primary-palette-key' not in v.vars
    assert not any('palette-key' in k for k in v.dark_values)


def test_custom_stringify():
    css = assemble_css_colors(DARK, LIGHT, stringify=lambda c: f"#{c.to_int() & 0xFFFFFF:06x}")
    assert css.dark_values['--md-primary-dark'] == '#010203'
    numbers = assemble_css_colors(DARK, LIGHT, stringify=color_formatter('numbers'))
    assert numbers.light_values['--md-primary-light'] == '4 5 6'


def test_default_stringify_is_rgb():
    assert CSSThemeOptions().stringify is rgb_from_hct
    css = make_css_theme({'primary': '#6750a4'}, shades=False)
    assert all(v.startswith('rgb(') for v in css.dark_values.values())


def test_assemble_css_rules_without_root():
    opts = CSSThemeOptions()
    assert assemble_css_rules(None, {'a': '1'}, {'a': '2'}, opts) == [
        {':root, .light': {'a': '1'}, '.dark': {'a': '2'}},
    ]
    assert assemble_css_rules({'b': '3'}, {}, {}, opts)[0] == {':root': {'b': '3'}}


def test_make_css_theme():
    css = make_css_theme({'primary': SEED, 'brandColor': '#ff5722'})
    theme = make_theme({'primary': SEED, 'brandColor': '#ff5722'})
    for key in theme.dark:
        if not key.endswith('-palette-key'):
            assert key in css.vars
    for palette in ('primary', 'neutral-variant', 'brand-color'):
        for shade in DEFAULT_SHADES:
            assert css.vars[f"{palette}-{shade}"] == f"--md-{palette}-{shade}"
    # palettes without a role of their own get one
    assert css.vars['neutral'] == '--md-neutral'
    assert isinstance(css.options, MakeCSSThemeOptions)
    assert css.options.scheme is SchemeKey.CONTENT


def test_make_css_theme_shades():
    css = make_css_theme(
        {'primary': SEED, 'accent': {'value': '#00aaff', 'shades': [100, 900]}},
        shades=False,
        dark_suffix='',
        light_suffix='',
    )
    assert 'primary-500' not in css.vars
    assert 'accent-100' in css.vars and 'accent-900' in css.vars
    assert 'accent-500' not in css.vars
    # custom palettes are the same in both modes
    assert '--md-accent-100' in css.light_values
    assert '--md-accent-100' not in css.dark_values
