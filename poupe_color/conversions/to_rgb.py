import math
import numpy as np
from numpy import ndarray as NDArray
from .to_hsl import hsv_to_hsl

def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, any value (wrapped to [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h if h is not None else 0)
    s = s if s is not None else 0
    l = l if l is not None else 0

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, 2 * l - m1
    elif hue_section == 1:
        r, g, b = m2, m1, 2 * l - m1
    elif hue_section == 2:
        r, g, b = 2 * l - m1, m1, m2
    elif hue_section == 3:
        r, g, b = 2 * l - m1, m2, m1
    elif hue_section == 4:
        r, g, b = m2, 2 * l - m1, m1
    else:
        r, g, b = m1, 2 * l - m1, m2

    return r, g, b

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    h, s, l = np.broadcast_arrays(h, s, l)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    m0 = 2 * l - m1

    hue_section = np.clip(np.floor(h / 60).astype(int), 0, 5)

    # Rows are hue sections, columns are (r, g, b); 0 -> m0, 1 -> m1, 2 -> m2.
    selectors = np.array([
        [1, 2, 0],
        [2, 1, 0],
        [0, 1, 2],
        [0, 2, 1],
        [2, 0, 1],
        [1, 0, 2],
    ])
    candidates = np.stack([m0, m1, m2], axis=-1)
    picks = selectors[hue_section]
    return np.take_along_axis(candidates, picks, axis=-1)

## HSV to RGB

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """Convert HSV to RGB through HSL."""
    return hsl_to_unit_rgb(*hsv_to_hsl(h, s, v))
