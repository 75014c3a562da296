"""Exceptions raised by poupe_color.

Bad input is reported with :class:`ColorError`, a :class:`ValueError`
subclass, so code that already guards conversions with ``except ValueError``
keeps working.
"""
from __future__ import annotations
from typing import Any


class ColorError(ValueError):
    """Base class for invalid color input."""


class InvalidHexColor(ColorError):
    """A string is not a ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` literal."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"not a hex color string: {value!r}")


class InvalidColorValue(ColorError):
    """A channel value is not a finite number."""

    def __init__(self, value: Any, channel: str | None = None):
        self.value = value
        self.channel = channel
        where = f" for channel {channel!r}" if channel else ""
        super().__init__(f"invalid color value{where}: {value!r}")


class UnknownSchemeVariant(ColorError):
    """A scheme key is not one of the known dynamic scheme variants."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"unknown dynamic scheme variant: {key!r}")


class UnreachableState(RuntimeError):
    """Internal invariant violation. Never caught by the library."""


class MissingOnColor(ColorError):
    """A base color has no matching ``on-`` color to build state layers with."""

    def __init__(self, name: str, key: str):
        self.name = name
        self.key = key
        super().__init__(f"missing on-color for {name!r}, expected key {key!r}")
