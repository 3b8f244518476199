"""8-bit RGB colours and the arithmetic used when shading."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _MAX:
                raise ValueError(f"colour channel {name} must be an int in 0..255, got {value!r}")

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: Color) -> Color:
        """Channel-wise sum, saturated at 255."""
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(min(_MAX, a + b) for a, b in zip(self, other)))

    def __mul__(self, other: Color) -> Color:
        """Channel-wise product of the colours taken as fractions of 255."""
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(int((a / 255.0) * (b / 255.0) * 255.0) for a, b in zip(self, other)))

    def scaled(self, factor: float) -> Color:
        """Multiply each channel by ``factor``, truncating and saturating at 255."""
        channels = []
        for c in self:
            value = c * factor
            whole = int(value) if math.isfinite(value) else (_MAX if value > 0 else 0)
            channels.append(min(_MAX, whole) & 0xFF)
        return Color(*channels)

    def clamped(self) -> Color:
        """Colour with every channel limited to 0..255."""
        return Color(*(min(_MAX, max(0, c)) for c in self))

    def to_rgb_int(self) -> int:
        """Pack as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b