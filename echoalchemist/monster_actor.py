"""A monster assembled from its attributes: skeleton, parts, palette and scale."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from echoalchemist.appearance import (
    ONE_VECTOR,
    ZERO_VECTOR,
    PaletteData,
    PaletteSwapMaterial,
    PartData,
    SkeletonData,
    Vector,
    calculate_monster_scale,
    create_palette_swap_material,
    get_palette_for_habitat,
    select_parts,
    select_skeleton,
)
from echoalchemist.attributes import HabitatType, MonsterAttributes


class AnimationType(Enum):
    """Animations a monster skeleton provides."""

    IDLE = "Idle"
    WALK = "Walk"
    ATTACK = "Attack"
    DEATH = "Death"


@dataclass
class PartComponent:
    """A sprite attached to the monster's body for one visual part."""

    part_id: str
    sprite: Any
    relative_location: Vector = ZERO_VECTOR
    relative_rotation: Vector = ZERO_VECTOR
    relative_scale: Vector = ONE_VECTOR
    sort_priority: int = 0
    destroyed: bool = False

    def destroy(self) -> None:
        self.destroyed = True


class MonsterActor:
    """Builds and holds a monster's appearance from its attributes and data tables."""

    def __init__(
        self,
        attributes: Optional[MonsterAttributes] = None,
        skeleton_table: Optional[Sequence[Optional[SkeletonData]]] = None,
        part_table: Optional[Sequence[Optional[PartData]]] = None,
        palette_table: Optional[Sequence[Optional[PaletteData]]] = None,
        palette_swap_material: Any = None,
    ) -> None:
        self.attributes = attributes if attributes is not None else MonsterAttributes()
        self.skeleton_table = skeleton_table
        self.part_table = part_table
        self.palette_table = palette_table
        self.palette_swap_material = palette_swap_material

        self.flipbook: Any = None
        self.is_playing = False
        self.material: Optional[PaletteSwapMaterial] = None
        self.scale: Vector = ONE_VECTOR
        self.part_components: list[PartComponent] = []
        self.current_skeleton = SkeletonData()
        self.current_palette = PaletteData()

    def begin_play(self) -> None:
        """Build the appearance if attributes differ from the defaults."""
        if (
            self.attributes.ecology.habitat != HabitatType.FOREST
            or self.attributes.combat.traits
        ):
            self.reconstruct_appearance()

    def set_monster_attributes(self, attributes: MonsterAttributes) -> None:
        """Replace the attributes and rebuild the appearance."""
        self.attributes = attributes
        self.reconstruct_appearance()

    def reconstruct_appearance(self) -> None:
        """Clear and rebuild skeleton, parts, palette and scale."""
        self.clear_appearance()
        self._construct_base_skeleton()
        self._attach_parts()
        self._apply_palette_swapping()
        self._apply_scale()

    def play_animation(self, animation_type: AnimationType) -> None:
        """Switch to the skeleton's flipbook for the given animation, if it has one."""
        skeleton = self.current_skeleton
        if not skeleton.idle_flipbook:
            return
        flipbook = {
            AnimationType.IDLE: skeleton.idle_flipbook,
            AnimationType.WALK: skeleton.walk_flipbook,
            AnimationType.ATTACK: skeleton.attack_flipbook,
            AnimationType.DEATH: skeleton.death_flipbook,
        }.get(animation_type)
        if flipbook:
            self._play(flipbook)

    def clear_appearance(self) -> None:
        """Destroy all part components and remove the body flipbook."""
        for component in self.part_components:
            component.destroy()
        self.part_components = []
        self.flipbook = None

    def _play(self, flipbook: Any) -> None:
        self.flipbook = flipbook
        self.is_playing = True

    def _construct_base_skeleton(self) -> None:
        if self.skeleton_table is None:
            return
        skeleton = select_skeleton(self.attributes.ecology, self.skeleton_table)
        if skeleton is None:
            return
        self.current_skeleton = skeleton
        if skeleton.idle_flipbook:
            self._play(skeleton.idle_flipbook)

    def _attach_parts(self) -> None:
        if self.part_table is None:
            return
        for part in select_parts(self.attributes.combat, self.part_table):
            if not part.sprite:
                continue
            self.part_components.append(
                PartComponent(
                    part_id=part.part_id,
                    sprite=part.sprite,
                    relative_location=part.relative_location,
                    relative_rotation=part.relative_rotation,
                    relative_scale=part.relative_scale,
                    sort_priority=part.z_order,
                )
            )

    def _apply_palette_swapping(self) -> None:
        if self.palette_table is None or not self.palette_swap_material:
            return
        palette = get_palette_for_habitat(self.attributes.ecology.habitat, self.palette_table)
        if palette is None:
            return
        self.current_palette = palette
        material = create_palette_swap_material(self.palette_swap_material, palette)
        if material is not None:
            self.material = material

    def _apply_scale(self) -> None:
        factor = calculate_monster_scale(
            self.attributes.ecology.size_class, self.current_skeleton.base_scale
        )
        self.scale = (factor, factor, factor)