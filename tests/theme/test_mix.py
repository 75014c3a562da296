import math

import pytest
from materialyoucolor.hct import Hct

from poupe_color.theme import make_color_mix, mix_color

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF


def test_mix_endpoints():
    assert mix_color('#6750a4', WHITE, 0).to_int() == 0xFF6750A4
    assert mix_color('#6750a4', WHITE, 1).to_int() == WHITE


def test_mix_black_and_white_is_mid_gray():
    gray = mix_color(BLACK, WHITE)
    r, g, b = (gray.to_int() >> 16) & 0xFF, (gray.to_int() >> 8) & 0xFF, gray.to_int() & 0xFF
    assert max(r, g, b) - min(r, g, b) <= 1
    # L* 50 is about 119 in sRGB
    assert g == pytest.approx(119, abs=2)
    assert gray.tone == pytest.approx(50, abs=1)


def test_mix_is_monotonic_in_tone():
    tones = [c.tone for c in make_color_mix(BLACK, WHITE, [0.1, 0.3, 0.6, 0.9])]
    assert tones == sorted(tones)


def test_mix_shapes():
    base, other = Hct.from_int(0xFF6750A4), '#ffffff'
    single = make_color_mix(base, other, 0.25)
    listed = make_color_mix(base, other, [0.25, 0.5])
    named = make_color_mix(base, other, {'hover': 0.25, 'half': 0.5})
    assert isinstance(single, Hct)
    assert [c.to_int() for c in listed] == [single.to_int(), mix_color(base, other).to_int()]
    assert list(named) == ['hover', 'half']
    assert named['hover'].to_int() == single.to_int()
    assert make_color_mix(base, other, []) == []


@pytest.mark.parametrize("ratio", [-0.1, 1.5, math.nan, math.inf, '0.5', True])
def test_mix_rejects_bad_ratios(ratio):
    with pytest.raises(ValueError):
        mix_color(BLACK, WHITE, ratio)
    with pytest.raises(ValueError):
        make_color_mix(BLACK, WHITE, {'x': ratio})
