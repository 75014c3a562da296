from __future__ import annotations
from typing import Any, ClassVar, Dict, Tuple, Self

from ..types.color_types import ColorShape
from ..utils.num_utils import finite


class ColorBase:
    """
    Immutable three channel color with an opacity in [0, 1].

    Channel values are stored as given (not clamped) so conversions between
    spaces stay reversible; only :meth:`RGBColor.to_argb` rounds and clamps.
    """
    __slots__ = ('_value', '_opacity', '_is_frozen')

    num_channels: ClassVar[int] = 3
    shape: ClassVar[ColorShape]
    channels: ClassVar[Tuple[str, str, str]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, c0: float, c1: float, c2: float, opacity: float = 1.0) -> None:
        value = tuple(
            float(finite(v, name)) for v, name in zip((c0, c1, c2), self.channels)
        )
        self._value = value
        self._opacity = float(finite(opacity, 'opacity'))
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, float, float]:
        return self._value

    @property
    def opacity(self) -> float:
        return self._opacity

    def to_dict(self) -> Dict[str, float]:
        """Plain mapping in this color's shape, ``opacity`` included."""
        out = dict(zip(self.channels, self._value))
        out['opacity'] = self._opacity
        return out

    def with_opacity(self, opacity: float) -> Self:
        return self.__class__(*self._value, opacity=opacity)

    # ------------------ CONVERSIONS ------------------
    def rgb(self):
        raise NotImplementedError

    @classmethod
    def from_rgb(cls, color) -> Self:
        raise NotImplementedError

    def convert(self, shape: ColorShape) -> ColorBase:
        """This color in another native space; returns ``self`` if already there."""
        shape = ColorShape(shape)
        target = color_registry.get(shape)
        if target is None:
            raise ValueError(f"no native color class for shape {shape.value!r}")
        if isinstance(self, target):
            return self
        return target.from_rgb(self.rgb())

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value and self._opacity == other._opacity

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value, self._opacity))

    def __repr__(self) -> str:
        fields = ', '.join(f"{name}={v:g}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields}, opacity={self._opacity:g})"


color_registry: Dict[ColorShape, type[ColorBase]] = {}


def build_registry(*classes: type[ColorBase]) -> Dict[ColorShape, type[ColorBase]]:
    registry = {cls.shape: cls for cls in classes}
    color_registry.update(registry)
    return registry
