"""
Tonal shade ladders.

A shade is a number between 0 (full brightness) and 1000 (full darkness).
Each shade keeps the hue and chroma of the base color and sets
``tone = (1000 - shade) / 10``.
"""
from __future__ import annotations
import warnings
from numbers import Real
from typing import Any, Callable, Sequence, TypeVar, Union

from materialyoucolor.hct import Hct

from ..colors.normalize import hct
from .format import hex_string

T = TypeVar('T')

DEFAULT_SHADES: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

Shades = Union[bool, Sequence[float]]
Shade = Union[float, str]


def shade_list(shades: Shades = True) -> tuple[float, ...]:
    """Expand a shades option: True is :data:`DEFAULT_SHADES`, False none."""
    if shades is True:
        return DEFAULT_SHADES
    if shades is False or shades is None:
        return ()
    return tuple(shades)


def make_shades(color: Any, shades: Shades = True) -> dict[Shade, Hct]:
    """
    Shade ladder of ``color``.

    Args:
        color: base color, any input accepted by :func:`hct`.
        shades: list of shades, True for :data:`DEFAULT_SHADES` or False
            for none.

    Returns:
        ``{'DEFAULT': base, shade: Hct, ...}``; shades outside 0..1000 are
        skipped.
    """
    c = hct(color)
    out: dict[Shade, Hct] = {'DEFAULT': c}
    for shade in shade_list(shades):
        if isinstance(shade, Real) and not isinstance(shade, bool) and 0 <= shade <= 1000:
            out[shade] = Hct.from_hct(c.hue, c.chroma, (1000 - shade) / 10)
    return out


def with_shades(color: Any, shades: Shades, stringify: Callable[[Hct], T]) -> dict[Shade, T]:
    """:func:`make_shades`, with each color passed through ``stringify``."""
    return {shade: stringify(c) for shade, c in make_shades(color, shades).items()}


def with_hex_shades(color: Any, shades: Shades = True) -> dict[Shade, str]:
    """:func:`with_shades` rendering ``#rrggbb`` strings."""
    return with_shades(color, shades, hex_string)


def make_hex_shades(color: Any, shades: Shades = True) -> dict[Shade, str]:
    """Deprecated alias of :func:`with_hex_shades`."""
    warnings.warn(
        "make_hex_shades is deprecated, use with_hex_shades instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return with_hex_shades(color, shades)
