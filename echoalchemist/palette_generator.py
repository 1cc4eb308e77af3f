"""Procedural colour palette generation."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from echoalchemist.color import LinearColor


@dataclass
class Palette:
    """An ordered list of colours."""

    colors: list[LinearColor] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[LinearColor]:
        return iter(self.colors)


def generate_palette_from_spectrum(spectrum: Sequence[LinearColor], num_colors: int) -> Palette:
    """Sample num_colors evenly across a spectrum, blending neighbours in HSV."""
    if not spectrum or num_colors <= 0:
        return Palette()
    last = len(spectrum) - 1
    colors = []
    for i in range(num_colors):
        alpha = 0.0 if num_colors == 1 else i / (num_colors - 1)
        position = alpha * last
        index = math.floor(position)
        blend = position - index
        colors.append(
            LinearColor.lerp_using_hsv(spectrum[index], spectrum[min(index + 1, last)], blend)
        )
    return Palette(colors)


def generate_monochromatic_palette(
    base_color: LinearColor,
    num_colors: int,
    saturation_range: tuple[float, float] = (0.2, 1.0),
    value_range: tuple[float, float] = (0.3, 1.0),
) -> Palette:
    """Build a palette sharing base_color's hue, stepping saturation and value."""
    if num_colors <= 0:
        return Palette()
    hue = base_color.linear_rgb_to_hsv().r
    sat_low, sat_high = saturation_range
    val_low, val_high = value_range
    colors = []
    for i in range(num_colors):
        alpha = 0.5 if num_colors == 1 else i / (num_colors - 1)
        saturation = sat_low + (sat_high - sat_low) * alpha
        value = val_low + (val_high - val_low) * alpha
        colors.append(LinearColor(hue, saturation, value).hsv_to_linear_rgb())
    return Palette(colors)