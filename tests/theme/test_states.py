import pytest
from materialyoucolor.hct import Hct

from poupe_color.errors import MissingOnColor
from poupe_color.theme import (
    STATE_LAYER_OPACITIES,
    State,
    StateColorMixParams,
    get_state_color_mix_params,
    make_color_mix,
    make_custom_state_variants,
    make_custom_colors,
    make_standard_state_variants,
    make_state_layer_colors,
    make_state_variants,
    make_theme,
)
from tests.samples import SEED

STATES = ('hover', 'focus', 'pressed', 'dragged', 'disabled')


def test_opacities():
    assert STATE_LAYER_OPACITIES == {
        'hover': 0.08,
        'focus': 0.12,
        'pressed': 0.12,
        'dragged': 0.16,
        'disabled': 0.12,
        'on-disabled': 0.38,
    }


@pytest.mark.parametrize("name, state, prefix, expected", [
    ('primary', 'hover', '', StateColorMixParams(State.HOVER, 'primary', 'on-primary', 8)),
    ('primary', State.DRAGGED, '--md-', StateColorMixParams(State.DRAGGED, '--md-primary', '--md-on-primary', 16)),
    ('on-primary', 'disabled', '', StateColorMixParams(State.DISABLED, 'primary', 'on-primary', 38)),
    ('on-primary', 'focus', 'x-', StateColorMixParams(State.FOCUS, 'x-primary', 'x-on-primary', 12)),
    ('primary', 'disabled', '', StateColorMixParams(State.DISABLED, 'primary', 'on-primary', 12)),
])
def test_get_state_color_mix_params(name, state, prefix, expected):
    assert get_state_color_mix_params(name, state, prefix) == expected


def test_get_state_color_mix_params_unknown_state():
    with pytest.raises(ValueError):
        get_state_color_mix_params('primary', 'on-disabled')


def test_state_layer_colors():
    states = make_state_layer_colors('#6750a4', '#ffffff')
    assert list(states) == list(STATE_LAYER_OPACITIES)
    expected = make_color_mix('#6750a4', '#ffffff', STATE_LAYER_OPACITIES)
    assert {k: v.to_int() for k, v in states.items()} == {k: v.to_int() for k, v in expected.items()}
    # a stronger layer moves further towards the on-color
    assert states['hover'].tone < states['dragged'].tone < states['on-disabled'].tone


def test_state_variants():
    variants = make_state_variants(
        {'primary': '#6750a4', 'brand': Hct.from_int(0xFF00AA00)},
        {'on-primary': '#ffffff', 'on-brand': '#000000'},
    )
    for name in ('primary', 'brand'):
        for state in STATES:
            assert isinstance(variants[f"{name}-{state}"], Hct)
        assert f"on-{name}-disabled" in variants
    assert len(variants) == 12


def test_state_variants_missing_on_color():
    with pytest.raises(MissingOnColor) as e:
        make_state_variants({'primary': '#6750a4'}, {'on-secondary': '#ffffff'})
    assert e.value.key == 'on-primary'
    assert isinstance(e.value, ValueError)


def test_standard_state_variants():
    theme = make_theme({'primary': SEED}, 'vibrant')
    variants = make_standard_state_variants(theme.light)
    for name in ('primary', 'secondary', 'tertiary', 'error', 'surface', 'surface-variant',
                 'primary-container', 'secondary-container', 'tertiary-container', 'error-container'):
        for state in STATES:
            assert isinstance(variants[f"{name}-{state}"], Hct)
    assert len(variants) == 50
    assert make_standard_state_variants({'primary': '#6750a4'}) == {}


def test_custom_state_variants():
    custom = make_custom_colors(SEED, {'brand': '#00ff00', 'accent': {'value': '#ff0000', 'harmonize': False}})
    for roles in (custom.dark, custom.light):
        variants = make_custom_state_variants(roles)
        for name in ('brand', 'brand-container', 'accent', 'accent-container'):
            for state in STATES:
                assert isinstance(variants[f"{name}-{state}"], Hct)
        assert len(variants) == 20


def test_custom_state_variants_without_container():
    variants = make_custom_state_variants({
        'simple': Hct.from_int(0xFF00FF00),
        'on-simple': Hct.from_int(0xFF000000),
    })
    assert set(variants) == {f"simple-{state}" for state in STATES}
