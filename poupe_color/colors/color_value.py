from __future__ import annotations
from typing import Union

from materialyoucolor.hct import Hct

from ..conversions.argb import argb_from_hex, hex_from_argb, hex_from_string
from ..errors import UnreachableState
from ..utils.num_utils import uint32


class ColorValue:
    """
    A color held as an :class:`Hct`, a packed ARGB integer or a hex string.

    Only the form given at construction is stored; the other two are derived
    on first access and cached. :meth:`set` replaces the color and drops
    every cached form.
    """
    __slots__ = ('_hct', '_argb', '_hex')

    def __init__(self, value: Union[Hct, int, str]) -> None:
        self.set(value)

    def set(self, value: Union[Hct, int, str]) -> ColorValue:
        self._hct: Hct | None = None
        self._argb: int | None = None
        self._hex: str | None = None
        if isinstance(value, ColorValue):
            value = value.packed
        if isinstance(value, Hct):
            self._hct = value
        elif isinstance(value, str):
            self._hex = hex_from_string(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            self._argb = uint32(value)
        else:
            raise TypeError(f"ColorValue expects Hct, int or hex str, got {type(value).__name__}")
        return self

    @property
    def perceptual(self) -> Hct:
        if self._hct is None:
            if self._argb is None and self._hex is None:
                raise UnreachableState("ColorValue has no source color")
            self._hct = Hct.from_int(self.packed)
        return self._hct

    @property
    def packed(self) -> int:
        if self._argb is None:
            if self._hct is not None:
                self._argb = self._hct.to_int()
            elif self._hex is not None:
                self._argb = argb_from_hex(self._hex)
            else:
                raise UnreachableState("ColorValue has no source color")
        return self._argb

    @property
    def hex(self) -> str:
        if self._hex is None:
            self._hex = hex_from_argb(self.packed)
        return self._hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.packed == other.packed

    def __repr__(self) -> str:
        return f"ColorValue({self.hex!r})"
