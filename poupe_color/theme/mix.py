"""
Mixing two colors in CIE L*a*b*.
"""
from __future__ import annotations
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Sequence, TypeVar, Union

from materialyoucolor.hct import Hct

from ..colors.lab import LabColor
from ..colors.normalize import argb
from ..colors.rgb import RGBColor

K = TypeVar('K')


def _lab(c: Any) -> LabColor:
    return LabColor.from_rgb(RGBColor.from_argb(argb(c)))


def _ratio(ratio: Any) -> float:
    if isinstance(ratio, bool) or not isinstance(ratio, Real) or not math.isfinite(ratio):
        raise ValueError(f"mix ratio must be a finite number, got {ratio!r}")
    if not 0 <= ratio <= 1:
        raise ValueError(f"mix ratio must be within [0, 1], got {ratio!r}")
    return float(ratio)


def _mix(c0: LabColor, c1: LabColor, ratio: float) -> Hct:
    l, a, b = (v0 * (1 - ratio) + v1 * ratio for v0, v1 in zip(c0.value, c1.value))
    opacity = c0.opacity * (1 - ratio) + c1.opacity * ratio
    return Hct.from_int(LabColor(l, a, b, opacity).rgb().to_argb())


def mix_color(base: Any, other: Any, ratio: float = 0.5) -> Hct:
    """
    Mix ``other`` into ``base``.

    Args:
        base: any color input.
        other: any color input.
        ratio: share of ``other``, 0 keeps ``base`` and 1 gives ``other``.

    Raises:
        ValueError: if ``ratio`` is not a number within [0, 1].
    """
    return _mix(_lab(base), _lab(other), _ratio(ratio))


def make_color_mix(
    base: Any,
    other: Any,
    ratios: Union[float, Sequence[float], Mapping[K, float]],
) -> Union[Hct, list[Hct], dict[K, Hct]]:
    """
    Mix two colors at one or more ratios.

    The result follows the shape of ``ratios``: a single color for a
    number, a list for a sequence and a dict with the same keys for a
    mapping.
    """
    c0, c1 = _lab(base), _lab(other)
    if isinstance(ratios, Mapping):
        return {k: _mix(c0, c1, _ratio(r)) for k, r in ratios.items()}
    if isinstance(ratios, Sequence) and not isinstance(ratios, str):
        return [_mix(c0, c1, _ratio(r)) for r in ratios]
    return _mix(c0, c1, _ratio(ratios))
