import numpy as np
from numpy import ndarray as NDArray

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))

    if delta == 0:
        hue = 0.0
    elif max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % 360
    else:
        hue = (60 * ((r - g) / delta) + 240) % 360

    return hue, saturation, lightness

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask_delta = delta > 0
    saturation[mask_delta] = delta[mask_delta] / (1 - np.abs(2 * lightness[mask_delta] - 1))

    # max_c may equal several channels; red wins, then green.
    hue = np.zeros_like(max_c)
    mask_r = mask_delta & (max_c == r)
    mask_g = mask_delta & (max_c == g) & ~mask_r
    mask_b = mask_delta & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % 360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % 360

    return np.stack([hue, saturation, lightness], axis=-1)

## HSV to HSL conversions

def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to HSL. Hue passes through unchanged.

    ``l = v * (1 - s/2)``; saturation is 0 when ``l`` is 0 or 1, so black and
    white never carry a hue-dependent saturation.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l)
    """
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        s_hsl = 0.0
    else:
        s_hsl = (v - l) / min(l, 1 - l)
    return h, s_hsl, l

def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to HSL.

    Returns:
        hsl: array of shape (..., 3)
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)
    h, s, v = np.broadcast_arrays(h, s, v)

    l = v * (1 - s / 2)
    denom = np.minimum(l, 1 - l)
    edge = (l == 0) | (l == 1)
    s_hsl = np.zeros_like(l)
    np.divide(v - l, denom, out=s_hsl, where=~edge)
    return np.stack([h, s_hsl, l], axis=-1)
