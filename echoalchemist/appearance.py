"""Assembling monster appearance: skeletons, parts, palettes and scale."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from echoalchemist.attributes import (
    CombatAttributes,
    EcologyAttributes,
    HabitatType,
    SizeClass,
)
from echoalchemist.color import GRAY, WHITE, LinearColor

Vector = tuple[float, float, float]

ZERO_VECTOR: Vector = (0.0, 0.0, 0.0)
ONE_VECTOR: Vector = (1.0, 1.0, 1.0)

PRIMARY_COLOR_PARAMETER = "PrimaryColor"
SECONDARY_COLOR_PARAMETER = "SecondaryColor"
ACCENT_COLOR_PARAMETER = "AccentColor"


@dataclass
class SkeletonData:
    """A base skeleton with its animations, chosen by habitat and size class."""

    skeleton_id: str = ""
    habitat: HabitatType = HabitatType.FOREST
    size_class: SizeClass = SizeClass.MEDIUM
    idle_flipbook: Optional[Any] = None
    walk_flipbook: Optional[Any] = None
    attack_flipbook: Optional[Any] = None
    death_flipbook: Optional[Any] = None
    base_scale: float = 1.0


@dataclass
class PartData:
    """A visual part attached to a skeleton anchor point."""

    part_id: str = ""
    name: str = ""
    sprite: Optional[Any] = None
    anchor_point: str = ""
    relative_location: Vector = ZERO_VECTOR
    relative_rotation: Vector = ZERO_VECTOR
    relative_scale: Vector = ONE_VECTOR
    z_order: int = 0


@dataclass
class PaletteData:
    """Primary, secondary and accent colours for a habitat."""

    habitat: HabitatType = HabitatType.FOREST
    primary_color: LinearColor = WHITE
    secondary_color: LinearColor = GRAY
    accent_color: LinearColor = WHITE


@dataclass
class AnchorPoint:
    """A named attachment point on a skeleton."""

    anchor_name: str = ""
    relative_location: Vector = ZERO_VECTOR


@dataclass
class PaletteSwapMaterial:
    """A material instance carrying palette colours as vector parameters."""

    base_material: Any
    vector_parameters: dict[str, LinearColor] = field(default_factory=dict)


_DEFAULT_PALETTES: dict[HabitatType, tuple[LinearColor, LinearColor, LinearColor]] = {
    HabitatType.FOREST: (
        LinearColor(0.2, 0.8, 0.2, 1.0),
        LinearColor(0.4, 0.6, 0.3, 1.0),
        LinearColor(0.8, 0.7, 0.3, 1.0),
    ),
    HabitatType.DESERT: (
        LinearColor(0.9, 0.7, 0.3, 1.0),
        LinearColor(0.7, 0.5, 0.2, 1.0),
        LinearColor(1.0, 0.9, 0.7, 1.0),
    ),
    HabitatType.TUNDRA: (
        LinearColor(0.7, 0.9, 1.0, 1.0),
        LinearColor(0.5, 0.7, 0.9, 1.0),
        LinearColor(0.9, 0.95, 1.0, 1.0),
    ),
    HabitatType.CAVE: (
        LinearColor(0.4, 0.4, 0.5, 1.0),
        LinearColor(0.3, 0.3, 0.4, 1.0),
        LinearColor(0.6, 0.6, 0.7, 1.0),
    ),
    HabitatType.VOLCANO: (
        LinearColor(1.0, 0.3, 0.1, 1.0),
        LinearColor(0.8, 0.2, 0.0, 1.0),
        LinearColor(1.0, 0.7, 0.2, 1.0),
    ),
    HabitatType.SWAMP: (
        LinearColor(0.4, 0.6, 0.3, 1.0),
        LinearColor(0.3, 0.5, 0.2, 1.0),
        LinearColor(0.6, 0.7, 0.4, 1.0),
    ),
}

_SIZE_SCALE: dict[SizeClass, float] = {
    SizeClass.TINY: 0.5,
    SizeClass.SMALL: 0.75,
    SizeClass.MEDIUM: 1.0,
    SizeClass.LARGE: 1.5,
    SizeClass.GIANT: 2.5,
}

_DEFAULT_ANCHORS: dict[str, Vector] = {
    "Head": (0.0, 0.0, 50.0),
    "Back": (0.0, 0.0, 30.0),
    "Tail": (-30.0, 0.0, 10.0),
    "FrontLeft": (20.0, -15.0, 0.0),
    "FrontRight": (20.0, 15.0, 0.0),
    "BackLeft": (-20.0, -15.0, 0.0),
    "BackRight": (-20.0, 15.0, 0.0),
}


def select_skeleton(
    ecology: EcologyAttributes, skeletons: Optional[Iterable[Optional[SkeletonData]]]
) -> Optional[SkeletonData]:
    """Choose a skeleton matching habitat and size, then habitat only, then any.

    Returns None when there is no table or no usable row.
    """
    if skeletons is None:
        return None
    rows = list(skeletons)
    matches = [
        s
        for s in rows
        if s is not None and s.habitat == ecology.habitat and s.size_class == ecology.size_class
    ]
    if not matches:
        matches = [s for s in rows if s is not None and s.habitat == ecology.habitat]
    if not matches:
        matches = rows
    if matches and matches[0] is not None:
        return replace(matches[0])
    return None


def select_parts(
    combat: CombatAttributes, parts: Optional[Iterable[Optional[PartData]]]
) -> list[PartData]:
    """Return the parts named by each trait's part IDs, in trait order."""
    if parts is None:
        return []
    rows = [p for p in parts if p is not None]
    selected: list[PartData] = []
    for trait in combat.traits:
        for part_id in trait.associated_part_ids:
            found = next((p for p in rows if p.part_id == part_id), None)
            if found is not None:
                selected.append(replace(found))
    return selected


def get_palette_for_habitat(
    habitat: HabitatType, palettes: Optional[Iterable[Optional[PaletteData]]]
) -> Optional[PaletteData]:
    """Find the habitat's palette, falling back to a built-in default.

    Returns None only when no palette table is given.
    """
    if palettes is None:
        return None
    for palette in palettes:
        if palette is not None and palette.habitat == habitat:
            return replace(palette)
    default = _DEFAULT_PALETTES.get(habitat)
    if default is None:
        return PaletteData(habitat=habitat, primary_color=WHITE, secondary_color=GRAY, accent_color=WHITE)
    primary, secondary, accent = default
    return PaletteData(
        habitat=habitat, primary_color=primary, secondary_color=secondary, accent_color=accent
    )


def create_palette_swap_material(
    base_material: Any, palette: PaletteData
) -> Optional[PaletteSwapMaterial]:
    """Create a material instance with the palette's colours; None without a base material."""
    if not base_material:
        return None
    return PaletteSwapMaterial(
        base_material=base_material,
        vector_parameters={
            PRIMARY_COLOR_PARAMETER: palette.primary_color,
            SECONDARY_COLOR_PARAMETER: palette.secondary_color,
            ACCENT_COLOR_PARAMETER: palette.accent_color,
        },
    )


def get_anchor_point_location(anchor_name: str, skeleton: SkeletonData) -> Vector:
    """Return the relative location of a named anchor point, or the zero vector."""
    return _DEFAULT_ANCHORS.get(anchor_name, ZERO_VECTOR)


def calculate_monster_scale(size_class: SizeClass, base_scale: float = 1.0) -> float:
    """Scale base_scale by the size class multiplier."""
    return base_scale * _SIZE_SCALE.get(size_class, 1.0)