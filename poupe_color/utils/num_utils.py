import math
from numbers import Real

import numpy as np
from numpy import ndarray as NDArray

from ..errors import InvalidColorValue

_U32 = 0x1_0000_0000
_U8 = 0x100


def finite(value, channel: str | None = None) -> float:
    """Return ``value`` unchanged if it is a finite real number, raise otherwise."""
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise InvalidColorValue(value, channel)
    if not math.isfinite(value):
        raise InvalidColorValue(value, channel)
    return value


def uint32(n) -> int:
    """``n`` modulo 2**32. Floats are truncated toward zero first, like ``n >>> 0``."""
    return int(finite(n)) % _U32


def uint8(n) -> int:
    """``n`` modulo 2**8."""
    return int(finite(n)) % _U8


def np_uint32(n: NDArray) -> NDArray:
    """Vectorized :func:`uint32`."""
    arr = np.asarray(n)
    if not np.all(np.isfinite(arr)):
        raise InvalidColorValue(n)
    return np.mod(np.trunc(arr).astype(np.int64), _U32).astype(np.uint32)


def np_uint8(n: NDArray) -> NDArray:
    """Vectorized :func:`uint8`."""
    arr = np.asarray(n)
    if not np.all(np.isfinite(arr)):
        raise InvalidColorValue(n)
    return np.mod(np.trunc(arr).astype(np.int64), _U8).astype(np.uint8)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf (not banker's rounding)."""
    return math.floor(value + 0.5)

