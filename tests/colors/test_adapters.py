import math

import numpy as np
import pytest

from poupe_color.colors import (
    HCLColor,
    HSLColor,
    LabColor,
    RGBColor,
    as_hct,
    as_hsv,
    as_rgb,
    color,
    is_color,
    is_hcl,
    is_hsl,
    is_lab,
    is_rgb,
    parse_color_shape,
)
from poupe_color.colors import adapters
from poupe_color.conversions.css import ParsedColor
from poupe_color.types import ColorShape


@pytest.mark.parametrize("value", [
    None, {}, [], (), set(), object(), '', 'not-a-color', 'rgb(1 2)', False, True, math.nan, math.inf,
    np.array([255, 0, 0]), np.zeros(0), 'rgb(1e308% 0 0)', {'h': 10, 'c': 20, 't': 30},
])
def test_color_returns_none(value):
    assert color(value) is None


def test_color_rejects_bad_mapping_channels():
    assert color({'r': 'x', 'g': 0, 'b': 0}) is None
    assert color({'x': 1, 'y': 2}) is None


@pytest.mark.parametrize("native", [
    RGBColor(1, 2, 3),
    HSLColor(10, 0.5, 0.5),
    LabColor(50, 10, -10),
    HCLColor(200, 30, 60, opacity=0.4),
])
def test_color_keeps_native_instances(native):
    assert color(native) is native


def test_color_from_argb_number():
    c = color(0x80FF0000)
    assert is_rgb(c)
    assert (c.r, c.g, c.b) == (255, 0, 0)
    assert c.opacity == pytest.approx(128 / 255)


def test_color_from_css_strings():
    assert color('#00ff00') == RGBColor(0, 255, 0)
    assert is_hsl(color('hsl(10 50% 50%)'))
    assert color('transparent').opacity == 0


@pytest.mark.parametrize("value, shape, cls", [
    ({'l': 50, 'a': 1, 'b': 2}, ColorShape.LAB, LabColor),
    ({'r': 1, 'g': 2, 'b': 3}, ColorShape.RGB, RGBColor),
    ({'h': 1, 'c': 2, 'l': 3}, ColorShape.HCL, HCLColor),
    ({'h': 1, 's': 0.5, 'l': 0.5}, ColorShape.HSL, HSLColor),
    ({'h': 1, 's': 0.5, 'v': 0.5}, ColorShape.HSV, HSLColor),
])
def test_shape_sniffing(value, shape, cls):
    assert parse_color_shape(value) is shape
    assert isinstance(color(value), cls)


def test_shape_priority():
    # l, a, b wins over r, g, b
    assert parse_color_shape({'l': 1, 'a': 2, 'b': 3, 'r': 4, 'g': 5}) is ColorShape.LAB
    # h, c, l wins over h, s, l
    assert parse_color_shape({'h': 1, 'c': 2, 's': 3, 'l': 4}) is ColorShape.HCL
    assert parse_color_shape({'h': 1}) is None
    assert parse_color_shape({'h': 1, 'c': 2, 't': 3}) is None
    assert parse_color_shape('rgb') is None


def test_opacity_defaults_to_one():
    assert as_rgb({'r': 1, 'g': 2, 'b': 3}).opacity == 1
    assert as_rgb({'r': 1, 'g': 2, 'b': 3, 'opacity': None}).opacity == 1
    assert as_rgb({'r': 1, 'g': 2, 'b': 3, 'opacity': 0}).opacity == 0


def test_as_hct_uses_tone_as_luminance():
    c = as_hct({'h': 10, 'c': 20, 't': 30, 'opacity': 0.5})
    assert c.value == (10, 20, 30)
    assert c.opacity == 0.5


@pytest.mark.parametrize("h", [0, 120, 300])
@pytest.mark.parametrize("v", [0.0, 0.3, 1.0])
def test_as_hsv_grayscale(h, v):
    c = as_hsv({'h': h, 's': 0, 'v': v})
    assert c.s == 0
    assert c.l == v


@pytest.mark.parametrize("h", [0, 120, 300])
def test_as_hsv_black(h):
    c = as_hsv({'h': h, 's': 1, 'v': 0})
    assert c.s == 0
    assert c.l == 0


def test_is_predicates():
    rgb, lab, hcl, hsl = RGBColor(0, 0, 0), LabColor(0, 0, 0), HCLColor(0, 0, 0), HSLColor(0, 0, 0)
    assert is_rgb(rgb) and not is_rgb({'r': 0, 'g': 0, 'b': 0})
    assert is_lab(lab) and not is_lab(hcl)
    assert is_hcl(hcl) and not is_hcl(hsl)
    assert is_hsl(hsl) and not is_hsl(rgb)
    assert all(is_color(c) for c in (rgb, lab, hcl, hsl))
    assert not is_color('#fff')


def test_color_string_out_of_range_is_kept():
    c = color('rgb(300 0 0)')
    assert c.r == 300
    assert not c.displayable()


def test_color_string_rejected_by_color_class(monkeypatch):
    monkeypatch.setattr(adapters, 'parse_css_color', lambda s: ParsedColor(ColorShape.RGB, (math.inf, 0, 0), 1.0))
    assert color('rgb(1 2 3)') is None
