"""A simple coloured preview of a monster built from its attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from echoalchemist.appearance import ONE_VECTOR, ZERO_VECTOR, Vector
from echoalchemist.attributes import HabitatType, MonsterAttributes, Rarity, SizeClass
from echoalchemist.color import WHITE, LinearColor

ATTRIBUTES_PROPERTY = "attributes"

_HABITAT_COLORS: dict[HabitatType, LinearColor] = {
    HabitatType.FOREST: LinearColor(0.2, 0.8, 0.2, 1.0),
    HabitatType.DESERT: LinearColor(0.9, 0.7, 0.3, 1.0),
    HabitatType.TUNDRA: LinearColor(0.7, 0.9, 1.0, 1.0),
    HabitatType.CAVE: LinearColor(0.4, 0.4, 0.5, 1.0),
    HabitatType.VOLCANO: LinearColor(1.0, 0.3, 0.1, 1.0),
    HabitatType.SWAMP: LinearColor(0.4, 0.6, 0.3, 1.0),
}

_SIZE_SCALES: dict[SizeClass, float] = {
    SizeClass.TINY: 0.5,
    SizeClass.SMALL: 0.75,
    SizeClass.MEDIUM: 1.0,
    SizeClass.LARGE: 1.5,
    SizeClass.GIANT: 2.5,
}

_RARITY_COLORS: dict[Rarity, LinearColor] = {
    Rarity.COMMON: LinearColor(0.8, 0.8, 0.8, 1.0),
    Rarity.RARE: LinearColor(0.3, 0.5, 1.0, 1.0),
    Rarity.EPIC: LinearColor(0.8, 0.2, 1.0, 1.0),
}

_PART_SPACING = 20.0
_PART_HEIGHT = 50.0
_PART_SCALE: Vector = (0.5, 0.5, 1.0)


def habitat_color(habitat: HabitatType) -> LinearColor:
    """Preview colour for a habitat; white if unknown."""
    return _HABITAT_COLORS.get(habitat, WHITE)


def size_scale(size_class: SizeClass) -> float:
    """Scale multiplier for a size class; 1.0 if unknown."""
    return _SIZE_SCALES.get(size_class, 1.0)


def rarity_color(rarity: Rarity) -> LinearColor:
    """Preview colour for a trait rarity; white if unknown."""
    return _RARITY_COLORS.get(rarity, WHITE)


@dataclass
class PartSprite:
    """A coloured marker sprite standing for one combat trait."""

    name: str
    color: LinearColor = WHITE
    relative_location: Vector = ZERO_VECTOR
    relative_scale: Vector = ONE_VECTOR
    destroyed: bool = False

    def destroy(self) -> None:
        self.destroyed = True


class MonsterVisualizer:
    """Shows a monster as a coloured, scaled body with one marker per combat trait."""

    def __init__(
        self,
        attributes: Optional[MonsterAttributes] = None,
        auto_regenerate_on_change: bool = True,
    ) -> None:
        self.attributes = attributes if attributes is not None else MonsterAttributes()
        self.auto_regenerate_on_change = auto_regenerate_on_change
        self.body_sprite: Any = None
        self.body_color: LinearColor = WHITE
        self.body_scale: Vector = ONE_VECTOR
        self.part_sprites: list[PartSprite] = []

    def begin_play(self) -> None:
        """Build the visual when play starts."""
        self.regenerate_visual()

    def on_property_changed(self, property_name: str) -> None:
        """Rebuild when the attributes property was edited and auto-regeneration is on."""
        if self.auto_regenerate_on_change and property_name == ATTRIBUTES_PROPERTY:
            self.regenerate_visual()

    def set_monster_attributes(self, attributes: MonsterAttributes) -> None:
        """Replace the attributes and rebuild the visual."""
        self.attributes = attributes
        self.regenerate_visual()

    def regenerate_visual(self) -> None:
        """Clear and rebuild body and part sprites."""
        self.clear_visual()
        self._create_body_sprite()
        self._create_part_sprites()

    def clear_visual(self) -> None:
        """Reset the body sprite and destroy all part sprites."""
        self.body_sprite = None
        self.body_color = WHITE
        for sprite in self.part_sprites:
            sprite.destroy()
        self.part_sprites = []

    def _create_body_sprite(self) -> None:
        ecology = self.attributes.ecology
        scale = size_scale(ecology.size_class)
        self.body_color = habitat_color(ecology.habitat)
        self.body_scale = (scale, scale, 1.0)

    def _create_part_sprites(self) -> None:
        traits = self.attributes.combat.traits
        half = len(traits) / 2.0
        for index, trait in enumerate(traits):
            offset_x = (index - half) * _PART_SPACING
            self.part_sprites.append(
                PartSprite(
                    name=f"PartSprite_{index}",
                    color=rarity_color(trait.rarity),
                    relative_location=(offset_x, 0.0, _PART_HEIGHT),
                    relative_scale=_PART_SCALE,
                )
            )