import re

import numpy as np
import pytest

from poupe_color.theme import (
    ColorParam,
    SchemeParam,
    color_to_url,
    get_color_param,
    get_param,
    get_random_color,
    get_theme_scheme_param,
    is_hex_value,
)
from poupe_color.types import SchemeKey

HEX6 = re.compile(r'^#[0-9a-f]{6}$')


@pytest.mark.parametrize("value, expected", [
    (None, None),
    ('a', 'a'),
    (['x', 'y'], 'x'),
    ([], None),
])
def test_get_param(value, expected):
    assert get_param(value) == expected


@pytest.mark.parametrize("value, expected", [
    ('abc', True),
    ('#ABCDEF', True),
    ('#abcd', False),
    ('red', False),
])
def test_is_hex_value(value, expected):
    assert is_hex_value(value) is expected


@pytest.mark.parametrize("value, expected", [
    ('ABC', '#abc'),
    ('#6750A4', '#6750a4'),
    (['6750a4', 'ffffff'], '#6750a4'),
    ('red', '#ff0000'),
    ('rgb(0 128 255)', '#0080ff'),
    ('transparent', '#00000000'),
    ('nope', None),
])
def test_get_color_param(value, expected):
    assert get_color_param(value).color == expected


def test_get_color_param_empty():
    assert get_color_param(None) == ColorParam(None)
    assert get_color_param('') == ColorParam('')


@pytest.mark.parametrize("value", [[42], (None,), [b'#fff']])
def test_get_color_param_not_a_string(value):
    assert get_color_param(value) == ColorParam(None)
    assert get_color_param('#fff', filter=lambda s: 0xFFF) == ColorParam(None)


def test_get_color_param_out_of_range():
    assert get_color_param('rgb(1e308% 0 0)') == ColorParam('rgb(1e308% 0 0)')


def test_get_color_param_filter():
    p = get_color_param('  Red ', filter=lambda s: s.strip().lower())
    assert p == ColorParam('red', '#ff0000')


def test_get_theme_scheme_param():
    assert get_theme_scheme_param('tonalSpot') == SchemeParam('tonalSpot', SchemeKey.TONAL_SPOT)
    assert get_theme_scheme_param(['vibrant']).scheme is SchemeKey.VIBRANT
    assert get_theme_scheme_param('nope') == SchemeParam('nope')
    assert get_theme_scheme_param([]) == SchemeParam(None)


def test_get_random_color():
    assert HEX6.match(get_random_color())
    a = get_random_color(np.random.default_rng(42))
    b = get_random_color(np.random.default_rng(42))
    assert a == b


def test_color_to_url():
    assert color_to_url('#6750A4') == '6750A4'
    assert color_to_url(0xFF6750A4) == '6750a4'
    assert color_to_url(rng=np.random.default_rng(1)) == get_random_color(np.random.default_rng(1))[1:]
