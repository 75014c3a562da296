from __future__ import annotations
from enum import Enum
from typing import Mapping, NotRequired, Tuple, TypedDict, Any

Scalar = int | float


class RGBShape(TypedDict):
    r: int
    g: int
    b: int
    opacity: NotRequired[float]


class LabShape(TypedDict):
    l: float
    a: float
    b: float
    opacity: NotRequired[float]


class HCLShape(TypedDict):
    h: float
    c: float
    l: float
    opacity: NotRequired[float]


class HCTShape(TypedDict):
    h: float
    c: float
    t: float
    opacity: NotRequired[float]


class HSLShape(TypedDict):
    h: float
    s: float
    l: float
    opacity: NotRequired[float]


class HSVShape(TypedDict):
    h: float
    s: float
    v: float
    opacity: NotRequired[float]


ShapeMapping = Mapping[str, Any]


class ColorShape(str, Enum):
    LAB = "lab"
    RGB = "rgb"
    HCL = "hcl"
    HCT = "hct"
    HSL = "hsl"
    HSV = "hsv"


SHAPE_FIELDS: dict[ColorShape, Tuple[str, str, str]] = {
    ColorShape.LAB: ("l", "a", "b"),
    ColorShape.RGB: ("r", "g", "b"),
    ColorShape.HCL: ("h", "c", "l"),
    ColorShape.HCT: ("h", "c", "t"),
    ColorShape.HSL: ("h", "s", "l"),
    ColorShape.HSV: ("h", "s", "v"),
}

# HSL and HCL share {h, l}; the order below is the one that never collides.
# HCT mappings are only accepted where a caller asks for them.
SHAPE_PRIORITY: Tuple[ColorShape, ...] = (
    ColorShape.LAB,
    ColorShape.RGB,
    ColorShape.HCL,
    ColorShape.HSL,
    ColorShape.HSV,
)
