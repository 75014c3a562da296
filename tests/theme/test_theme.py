import logging

import pytest
from materialyoucolor.dynamiccolor.material_dynamic_colors import MaterialDynamicColors as MDC
from materialyoucolor.hct import Hct
from materialyoucolor.scheme.scheme_content import SchemeContent

from poupe_color.errors import InvalidColorValue, UnknownSchemeVariant
from poupe_color.theme import (
    STANDARD_DYNAMIC_COLORS,
    STANDARD_PALETTE_KEY_COLORS,
    STANDARD_PALETTES,
    ColorOptions,
    flatten_color_options,
    flatten_theme_colors,
    make_custom_colors,
    make_theme,
    make_theme_keys,
)
from poupe_color.types import SchemeKey
from tests.samples import SEED

BRAND = '#ff5722'


def ints(colors):
    return {k: v.to_int() for k, v in colors.items()}


def y_from_tone(tone):
    return 100 * (((tone + 16) / 116) ** 3 if tone > 8 else tone / 903.2962962)


def contrast_ratio(a, b):
    ya, yb = y_from_tone(a.tone), y_from_tone(b.tone)
    return (max(ya, yb) + 5) / (min(ya, yb) + 5)


def test_standard_roles():
    theme = make_theme({'primary': SEED})
    assert theme.scheme is SchemeKey.CONTENT
    assert list(theme.dark) == list(theme.light)
    assert set(theme.dark) == set(STANDARD_PALETTE_KEY_COLORS) | set(STANDARD_DYNAMIC_COLORS)

    scheme = SchemeContent(Hct.from_int(0xFF6750A4), True, 0.0, spec_version="2021")
    assert theme.dark['primary'].to_int() == MDC.primary.get_hct(scheme).to_int()
    assert theme.dark['on-surface-container'].to_int() == theme.dark['on-surface'].to_int()
    assert theme.light['on-inverse-surface'].to_int() == MDC.inverseOnSurface.get_hct(theme.light_scheme).to_int()


def test_is_deterministic():
    colors = {'primary': SEED, 'brandColor': BRAND}
    a = make_theme(colors, 'vibrant', 0.5)
    b = make_theme(dict(colors), SchemeKey.VIBRANT, 0.5)
    assert ints(a.dark) == ints(b.dark)
    assert ints(a.light) == ints(b.light)
    assert ints(a.dark_palette) == ints(b.dark_palette)


def test_unknown_scheme_falls_back(caplog):
    colors = {'primary': SEED}
    with caplog.at_level(logging.WARNING, logger='poupe_color'):
        fallback = make_theme(colors, 'bogus')
    assert 'bogus' in caplog.text
    assert fallback.scheme is SchemeKey.CONTENT
    assert ints(fallback.dark) == ints(make_theme(colors, 'content').dark)


def test_unknown_scheme_strict():
    with pytest.raises(UnknownSchemeVariant):
        make_theme({'primary': SEED}, 'bogus', strict=True)


@pytest.mark.parametrize("colors", [{}, {'primary': None}, {'secondary': SEED}])
def test_primary_is_required(colors):
    with pytest.raises(InvalidColorValue):
        make_theme(colors)


def test_invalid_color():
    with pytest.raises(InvalidColorValue):
        make_theme({'primary': 'not a color'})


def test_custom_colors():
    theme = make_theme({'primary': SEED, 'brandColor': BRAND})
    keys = ['brand-color', 'brand-color-container', 'on-brand-color', 'on-brand-color-container']
    for key in keys:
        assert key in theme.dark
        assert key in theme.light
    assert list(theme.dark)[-4:] == keys
    assert 'brand-color' in theme.dark_palette
    assert theme.dark_palette['brand-color'].to_int() == theme.light_palette['brand-color'].to_int()
    assert theme.light['brand-color'].tone == pytest.approx(40, abs=0.5)
    assert theme.dark['brand-color'].tone == pytest.approx(80, abs=0.5)


def test_custom_color_harmonize_option():
    theme = make_theme({
        'primary': SEED,
        'plain': {'value': BRAND, 'harmonize': False},
        'blended': ColorOptions(BRAND),
    })
    assert theme.dark_palette['plain'].to_int() == 0xFFFF5722
    assert theme.dark_palette['blended'].to_int() != 0xFFFF5722
    assert theme.color_options['plain'].harmonize is False
    assert theme.color_options['primary'].value == SEED


def test_standard_name_is_not_a_custom_color(caplog):
    with caplog.at_level(logging.WARNING, logger='poupe_color'):
        theme = make_theme({'primary': SEED, 'onPrimary': '#ffffff'})
    assert 'onPrimary' in caplog.text
    assert theme.dark['on-primary'].to_int() == make_theme({'primary': SEED}).dark['on-primary'].to_int()
    assert 'on-primary-container' in theme.dark
    assert 'on-on-primary' not in theme.dark


def test_palette_key_name_is_not_a_custom_color(caplog):
    colors = {'primary': SEED, 'primaryPaletteKey': BRAND}
    with caplog.at_level(logging.WARNING, logger='poupe_color'):
        theme = make_theme(colors)
    assert 'primaryPaletteKey' in caplog.text
    assert 'primary-palette-key-container' not in theme.dark
    assert 'primary-palette-key' not in theme.dark_palette
    keys = make_theme_keys(colors)
    assert keys.keys == tuple(theme.dark)
    assert keys.palette_keys == tuple(theme.dark_palette)


@pytest.mark.parametrize("mode", ['dark', 'light'])
@pytest.mark.parametrize("bg", ['primary', 'secondary', 'tertiary', 'error', 'primary-container', 'surface'])
def test_foreground_contrast(mode, bg):
    roles = getattr(make_theme({'primary': SEED}, 'tonalSpot'), mode)
    assert contrast_ratio(roles[bg], roles['on-' + bg]) >= 4.4


def test_palettes():
    theme = make_theme({'primary': SEED})
    assert list(theme.dark_palette) == list(STANDARD_PALETTES)
    assert theme.dark_palette['primary'].to_int() == theme.dark_scheme.primary_palette.key_color.to_int()
    palette = theme.light_scheme.neutral_variant_palette
    assert theme.light_palette['neutral-variant'].to_int() == palette.key_color.to_int()


def test_contrast_level():
    low = make_theme({'primary': SEED}, 'tonalSpot', -1.0)
    high = make_theme({'primary': SEED}, 'tonalSpot', 1.0)
    assert low.contrast_level == -1.0
    assert low.light['on-primary-container'].to_int() != high.light['on-primary-container'].to_int()


def test_theme_keys_match_theme():
    colors = {'primary': SEED, 'brandColor': BRAND, 'onPrimary': '#fff', 'accent': {'value': '#0af'}}
    keys = make_theme_keys(colors)
    theme = make_theme(colors)
    assert keys.keys == tuple(theme.dark)
    assert keys.palette_keys == tuple(theme.dark_palette)
    assert keys.color_options['accent'] == ColorOptions('#0af')
    assert 'primary' in keys.color_options


def test_flatten_color_options():
    assert flatten_color_options('#fff') == ColorOptions('#fff')
    assert flatten_color_options({'value': '#fff', 'shades': False}) == ColorOptions('#fff', shades=False)
    opts = ColorOptions('#000', harmonize=False)
    assert flatten_color_options(opts) is opts
    # a color mapping without ``value`` is a bare color
    assert flatten_color_options({'r': 1, 'g': 2, 'b': 3}).value == {'r': 1, 'g': 2, 'b': 3}


def test_flatten_theme_colors():
    primary, rest = flatten_theme_colors({'primary': SEED, 'x': '#000'})
    assert primary == ColorOptions(SEED)
    assert rest == {'x': ColorOptions('#000')}


def test_make_custom_colors():
    custom = make_custom_colors(SEED, {'myColor': {'value': BRAND, 'harmonize': False}})
    assert custom.colors == ('my-color',)
    assert custom.values['my-color'].to_int() == 0xFFFF5722
    assert set(custom.dark) == set(custom.light) == {
        'my-color', 'my-color-container', 'on-my-color', 'on-my-color-container',
    }
