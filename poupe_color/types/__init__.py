from .color_types import (
    Scalar,
    RGBShape,
    LabShape,
    HCLShape,
    HCTShape,
    HSLShape,
    HSVShape,
    ShapeMapping,
    ColorShape,
    SHAPE_FIELDS,
    SHAPE_PRIORITY,
)
from .scheme_key import DEFAULT_SCHEME, SchemeKey

__all__ = [
    'Scalar',
    'RGBShape',
    'LabShape',
    'HCLShape',
    'HCTShape',
    'HSLShape',
    'HSVShape',
    'ShapeMapping',
    'ColorShape',
    'SHAPE_FIELDS',
    'SHAPE_PRIORITY',
    'SchemeKey',
    'DEFAULT_SCHEME',
]
