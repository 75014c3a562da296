"""
CIE L*a*b* (D50, Bradford adapted) and its cylindrical HCL form.

RGB channels are on the 0..255 scale and are not rounded or clamped, so
out-of-gamut Lab values survive a round trip.
"""
import math

import numpy as np
from numpy import ndarray as NDArray

XN = 0.96422
YN = 1.0
ZN = 0.82521

T0 = 4 / 29
T1 = 6 / 29
T2 = 3 * T1 * T1
T3 = T1 * T1 * T1

LRGB_TO_XYZ_D50 = np.array([
    [0.4360747, 0.3850649, 0.1430804],
    [0.2225045, 0.7168786, 0.0606169],
    [0.0139322, 0.0971045, 0.7141733],
])

XYZ_D50_TO_LRGB = np.array([
    [3.1338561, -1.6168667, -0.4906146],
    [-0.9787684, 1.9161415, 0.0334540],
    [0.0719453, -0.2289914, 1.4052427],
])

WHITE_D50 = np.array([XN, YN, ZN])


def _rgb2lrgb(x: float) -> float:
    x /= 255
    return x / 12.92 if x <= 0.04045 else math.pow((x + 0.055) / 1.055, 2.4)


def _lrgb2rgb(x: float) -> float:
    if x <= 0.0031308:
        return 255 * 12.92 * x
    return 255 * (1.055 * math.pow(x, 1 / 2.4) - 0.055)


def _xyz2lab(t: float) -> float:
    return math.pow(t, 1 / 3) if t > T3 else t / T2 + T0


def _lab2xyz(t: float) -> float:
    return t * t * t if t > T1 else T2 * (t - T0)


def rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert 0..255 RGB to L*a*b*.

    Returns:
        Tuple[float, float, float]: (l [0,100], a, b)
    """
    lr, lg, lb = _rgb2lrgb(r), _rgb2lrgb(g), _rgb2lrgb(b)
    y = _xyz2lab((0.2225045 * lr + 0.7168786 * lg + 0.0606169 * lb) / YN)
    if lr == lg == lb:
        x = z = y
    else:
        x = _xyz2lab((0.4360747 * lr + 0.3850649 * lg + 0.1430804 * lb) / XN)
        z = _xyz2lab((0.0139322 * lr + 0.0971045 * lg + 0.7141733 * lb) / ZN)
    return 116 * y - 16, 500 * (x - y), 200 * (y - z)


def lab_to_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Convert L*a*b* to unclamped 0..255 RGB.
    """
    y = (l + 16) / 116
    x = y + a / 500
    z = y - b / 200
    x = XN * _lab2xyz(x)
    y = YN * _lab2xyz(y)
    z = ZN * _lab2xyz(z)
    return (
        _lrgb2rgb(3.1338561 * x - 1.6168667 * y - 0.4906146 * z),
        _lrgb2rgb(-0.9787684 * x + 1.9161415 * y + 0.0334540 * z),
        _lrgb2rgb(0.0719453 * x - 0.2289914 * y + 1.4052427 * z),
    )


def lab_to_hcl(l: float, a: float, b: float) -> tuple[float, float, float]:
    """
    Returns:
        Tuple[float, float, float]: (h [0,360), c, l). Achromatic colors get h = 0.
    """
    if a == 0 and b == 0:
        return 0.0, 0.0, l
    h = math.degrees(math.atan2(b, a))
    return (h + 360 if h < 0 else h), math.hypot(a, b), l


def hcl_to_lab(h: float, c: float, l: float) -> tuple[float, float, float]:
    rad = math.radians(h)
    return l, math.cos(rad) * c, math.sin(rad) * c


def np_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized :func:`rgb_to_lab`.

    Returns:
        lab: array of shape (..., 3)
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1) / 255
    lrgb = np.where(rgb <= 0.04045, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)
    xyz = lrgb @ LRGB_TO_XYZ_D50.T / WHITE_D50
    f = np.where(xyz > T3, np.cbrt(xyz), xyz / T2 + T0)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    # Grays map to exactly a = b = 0.
    gray = (lrgb[..., 0] == lrgb[..., 1]) & (lrgb[..., 1] == lrgb[..., 2])
    fx = np.where(gray, fy, fx)
    fz = np.where(gray, fy, fz)
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized :func:`lab_to_rgb`.

    Returns:
        rgb: array of shape (..., 3), unclamped 0..255
    """
    l, a, b = np.broadcast_arrays(
        np.asarray(l, dtype=float),
        np.asarray(a, dtype=float),
        np.asarray(b, dtype=float),
    )
    fy = (l + 16) / 116
    f = np.stack([fy + a / 500, fy, fy - b / 200], axis=-1)
    xyz = np.where(f > T1, f ** 3, T2 * (f - T0)) * WHITE_D50
    lrgb = xyz @ XYZ_D50_TO_LRGB.T
    positive = np.where(lrgb > 0, lrgb, 0.0)
    return 255 * np.where(
        lrgb <= 0.0031308,
        12.92 * lrgb,
        1.055 * positive ** (1 / 2.4) - 0.055,
    )
