# No dependencies
from enum import Enum


class SchemeKey(str, Enum):
    CONTENT = "content"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonalSpot"
    VIBRANT = "vibrant"

    @classmethod
    def parse(cls, value) -> "SchemeKey | None":
        """Return the member for ``value``, or None if it names no scheme."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


DEFAULT_SCHEME = SchemeKey.CONTENT
