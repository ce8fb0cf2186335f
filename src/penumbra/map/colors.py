from __future__ import annotations

from typing import NamedTuple


class RGB(NamedTuple):
    """Linear RGB colour with float channels in [0.0, 1.0]."""

    r: float
    g: float
    b: float

    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> "RGB":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def to_greyscale(self) -> "RGB":
        """Luma-weighted grey of the same brightness."""
        linear = self.r * 0.2126 + self.g * 0.7152 + self.b * 0.0722
        return RGB(linear, linear, linear)


# Named palette used by the biome tables
BLACK = RGB.from_u8(0, 0, 0)
WHITE = RGB.from_u8(255, 255, 255)
DARK_GRAY = RGB.from_u8(169, 169, 169)
LIGHT_GRAY = RGB.from_u8(211, 211, 211)
CHOCOLATE = RGB.from_u8(210, 105, 30)
RED = RGB.from_u8(255, 0, 0)
GREEN = RGB.from_u8(0, 255, 0)
DARK_GREEN = RGB.from_u8(0, 100, 0)
BROWN1 = RGB.from_u8(255, 64, 64)
BLUE = RGB.from_u8(0, 0, 255)
DARK_BLUE = RGB.from_u8(0, 0, 139)
PURPLE = RGB.from_u8(128, 0, 128)
ORANGE = RGB.from_u8(255, 165, 0)
LIGHT_CYAN = RGB.from_u8(224, 255, 255)
YELLOW = RGB.from_u8(255, 255, 0)
