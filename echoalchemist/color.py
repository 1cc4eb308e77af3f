"""Linear RGBA colour with HSV conversion and HSV interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass

_SWIZZLE = ((0, 3, 1), (2, 0, 1), (1, 0, 3), (1, 2, 0), (3, 1, 0), (0, 1, 2))


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass(frozen=True)
class LinearColor:
    """An RGBA colour in linear space. In HSV form r, g, b hold hue, saturation, value."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def linear_rgb_to_hsv(self) -> LinearColor:
        """Convert to HSV: hue in degrees [0, 360), saturation and value in r/g/b slots."""
        low = min(self.r, self.g, self.b)
        high = max(self.r, self.g, self.b)
        spread = high - low
        if high == low:
            hue = 0.0
        elif high == self.r:
            hue = math.fmod((self.g - self.b) / spread * 60.0 + 360.0, 360.0)
        elif high == self.g:
            hue = (self.b - self.r) / spread * 60.0 + 120.0
        else:
            hue = (self.r - self.g) / spread * 60.0 + 240.0
        saturation = 0.0 if high == 0.0 else spread / high
        return LinearColor(hue, saturation, high, self.a)

    def hsv_to_linear_rgb(self) -> LinearColor:
        """Convert an HSV colour (hue, saturation, value in r/g/b) back to RGB."""
        hue, saturation, value = self.r, self.g, self.b
        sector = hue / 60.0
        sector_floor = math.floor(sector)
        fraction = sector - sector_floor
        candidates = (
            value,
            value * (1.0 - saturation),
            value * (1.0 - fraction * saturation),
            value * (1.0 - (1.0 - fraction) * saturation),
        )
        ri, gi, bi = _SWIZZLE[int(sector_floor) % 6]
        return LinearColor(candidates[ri], candidates[gi], candidates[bi], self.a)

    @staticmethod
    def lerp_using_hsv(start: LinearColor, end: LinearColor, alpha: float) -> LinearColor:
        """Interpolate two RGB colours through HSV space along the shortest hue arc."""
        start_hsv = start.linear_rgb_to_hsv()
        end_hsv = end.linear_rgb_to_hsv()
        start_hue, end_hue = start_hsv.r, end_hsv.r
        if abs(start_hue - end_hue) > 180.0:
            if end_hue > start_hue:
                start_hue += 360.0
            else:
                end_hue += 360.0
        hue = math.fmod(_lerp(start_hue, end_hue, alpha), 360.0)
        if hue < 0.0:
            hue += 360.0
        saturation = _lerp(start_hsv.g, end_hsv.g, alpha)
        value = _lerp(start_hsv.b, end_hsv.b, alpha)
        rgb = LinearColor(hue, saturation, value).hsv_to_linear_rgb()
        return LinearColor(rgb.r, rgb.g, rgb.b, _lerp(start.a, end.a, alpha))


WHITE = LinearColor(1.0, 1.0, 1.0, 1.0)
GRAY = LinearColor(0.5, 0.5, 0.5, 1.0)
BLACK = LinearColor(0.0, 0.0, 0.0, 1.0)