"""
Interaction state layers.

A state layer is the ``on-`` color of a role laid over the role itself at
a fixed opacity. The colors here are the result of that overlay, computed
with :func:`make_color_mix`; :func:`get_state_color_mix_params` gives the
same recipe for a CSS ``color-mix()``.

Examples
--------
>>> variants = make_state_variants({'primary': '#6750a4'}, {'on-primary': '#ffffff'})
>>> sorted(variants)[:2]
['on-primary-disabled', 'primary-disabled']
"""
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from materialyoucolor.hct import Hct

from ..colors.normalize import hct
from ..errors import MissingOnColor
from ..utils.num_utils import round_half_up
from .mix import make_color_mix


class State(str, Enum):
    HOVER = "hover"
    FOCUS = "focus"
    PRESSED = "pressed"
    DRAGGED = "dragged"
    DISABLED = "disabled"


# Opacity of the on-color over its base color, per state.
STATE_LAYER_OPACITIES: dict[str, float] = {
    'hover': 0.08,
    'focus': 0.12,
    'pressed': 0.12,
    'dragged': 0.16,
    'disabled': 0.12,
    'on-disabled': 0.38,
}

STANDARD_INTERACTIVE_COLORS: tuple[str, ...] = (
    'primary',
    'secondary',
    'tertiary',
    'error',
    'surface',
    'surface-variant',
    'primary-container',
    'secondary-container',
    'tertiary-container',
    'error-container',
)


@dataclass(frozen=True)
class StateColorMixParams:
    """Operands of a CSS ``color-mix()`` producing one state color."""
    state: State
    base_color: str
    on_color: str
    opacity_percent: int


def get_state_color_mix_params(
    color_name: str,
    state: Union[State, str],
    prefix: str = '',
) -> StateColorMixParams:
    """
    ``color-mix()`` operands for a role in a state.

    For an ``on-`` role the base is the role without ``on-``, and its
    disabled state uses the stronger on-disabled opacity.

    Args:
        color_name: kebab-case role, e.g. ``primary`` or ``on-primary``.
        state: interaction state.
        prefix: prepended to both color names, e.g. ``--md-``.

    Raises:
        ValueError: if ``state`` is not a known state.
    """
    state = State(state)
    is_on_color = color_name.startswith('on-')

    opacity = STATE_LAYER_OPACITIES[state.value]
    if state is State.DISABLED and is_on_color:
        opacity = STATE_LAYER_OPACITIES['on-disabled']

    if is_on_color:
        base_color, on_color = color_name.removeprefix('on-'), color_name
    else:
        base_color, on_color = color_name, f"on-{color_name}"

    return StateColorMixParams(
        state=state,
        base_color=f"{prefix}{base_color}",
        on_color=f"{prefix}{on_color}",
        opacity_percent=round_half_up(opacity * 100),
    )


def make_state_layer_colors(base_color: Any, on_color: Any) -> dict[str, Hct]:
    """
    ``on_color`` over ``base_color`` at each state layer opacity.

    Returns:
        ``{state: color}`` for every key of :data:`STATE_LAYER_OPACITIES`.
    """
    return make_color_mix(hct(base_color), hct(on_color), STATE_LAYER_OPACITIES)


def _add_states(out: dict[str, Hct], name: str, states: Mapping[str, Hct]) -> None:
    for state in State:
        out[f"{name}-{state.value}"] = states[state.value]


def make_state_variants(colors: Mapping[str, Any], on_colors: Mapping[str, Any]) -> dict[str, Hct]:
    """
    State variants of each color in ``colors``.

    Args:
        colors: base colors by kebab-case name.
        on_colors: their ``on-{name}`` colors.

    Returns:
        ``{name}-hover``, ``-focus``, ``-pressed``, ``-dragged`` and
        ``-disabled`` for every name, plus ``on-{name}-disabled``.

    Raises:
        MissingOnColor: if a name has no ``on-{name}`` entry.
    """
    out: dict[str, Hct] = {}
    for name, value in colors.items():
        key = f"on-{name}"
        if on_colors.get(key) is None:
            raise MissingOnColor(name, key)
        states = make_state_layer_colors(value, on_colors[key])
        _add_states(out, name, states)
        out[f"on-{name}-disabled"] = states['on-disabled']
    return out


def make_standard_state_variants(colors: Mapping[str, Any]) -> dict[str, Hct]:
    """
    State variants of the interactive standard roles.

    Roles missing from ``colors``, or whose ``on-`` role is missing, are
    skipped.
    """
    out: dict[str, Hct] = {}
    for name in STANDARD_INTERACTIVE_COLORS:
        base, on = colors.get(name), colors.get(f"on-{name}")
        if base is not None and on is not None:
            _add_states(out, name, make_state_layer_colors(base, on))
    return out


def make_custom_state_variants(colors: Mapping[str, Any]) -> dict[str, Hct]:
    """
    State variants of custom colors, given their four roles.

    Names are recovered from the keys (``x``, ``x-container``, ``on-x``,
    ``on-x-container``); each pair that is complete gets its states.
    """
    names: dict[str, None] = {}
    for key in colors:
        names[key.removeprefix('on-').removesuffix('-container')] = None

    out: dict[str, Hct] = {}
    for name in names:
        for role in (name, f"{name}-container"):
            base, on = colors.get(role), colors.get(f"on-{role}")
            if base is not None and on is not None:
                _add_states(out, role, make_state_layer_colors(base, on))
    return out
