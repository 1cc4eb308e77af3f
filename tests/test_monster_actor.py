import pytest

from echoalchemist.appearance import (
    PaletteData,
    PartData,
    SkeletonData,
    calculate_monster_scale,
)
from echoalchemist.attributes import (
    CombatAttributes,
    CombatTrait,
    EcologyAttributes,
    HabitatType,
    MonsterAttributes,
    SizeClass,
)
from echoalchemist.color import LinearColor
from echoalchemist.monster_actor import AnimationType, MonsterActor


def _skeletons():
    return [
        SkeletonData(
            skeleton_id="ForestMedium",
            habitat=HabitatType.FOREST,
            size_class=SizeClass.MEDIUM,
            idle_flipbook="fm_idle",
            walk_flipbook="fm_walk",
            attack_flipbook="fm_attack",
            death_flipbook="fm_death",
            base_scale=1.0,
        ),
        SkeletonData(
            skeleton_id="DesertLarge",
            habitat=HabitatType.DESERT,
            size_class=SizeClass.LARGE,
            idle_flipbook="dl_idle",
            walk_flipbook=None,
            base_scale=2.0,
        ),
    ]


def _parts():
    return [
        PartData(part_id="FireWings", sprite="wings", relative_location=(0.0, 0.0, 20.0), z_order=1),
        PartData(part_id="FireTail", sprite=None),
        PartData(part_id="RockArmor", sprite="armor", z_order=2),
    ]


def _attributes(habitat=HabitatType.FOREST, size=SizeClass.MEDIUM, parts=()):
    traits = [CombatTrait(trait_id="T", associated_part_ids=list(parts))] if parts else []
    return MonsterAttributes(
        ecology=EcologyAttributes(habitat=habitat, size_class=size),
        combat=CombatAttributes(traits=traits),
    )


def _actor(**kwargs):
    return MonsterActor(
        skeleton_table=_skeletons(),
        part_table=_parts(),
        palette_table=[],
        palette_swap_material="M_PaletteSwap",
        **kwargs,
    )


def test_set_attributes_selects_skeleton_and_plays_idle():
    actor = _actor()
    actor.set_monster_attributes(_attributes(HabitatType.DESERT, SizeClass.LARGE))
    assert actor.current_skeleton.skeleton_id == "DesertLarge"
    assert actor.flipbook == "dl_idle"
    assert actor.is_playing


@pytest.mark.parametrize(
    "animation, expected",
    [
        (AnimationType.IDLE, "fm_idle"),
        (AnimationType.WALK, "fm_walk"),
        (AnimationType.ATTACK, "fm_attack"),
        (AnimationType.DEATH, "fm_death"),
    ],
)
def test_play_animation_selects_flipbook(animation, expected):
    actor = _actor()
    actor.set_monster_attributes(_attributes())
    actor.play_animation(animation)
    assert actor.flipbook == expected


def test_play_animation_missing_flipbook_keeps_current():
    actor = _actor()
    actor.set_monster_attributes(_attributes(HabitatType.DESERT, SizeClass.LARGE))
    actor.play_animation(AnimationType.WALK)
    assert actor.flipbook == "dl_idle"


def test_play_animation_without_skeleton_does_nothing():
    actor = MonsterActor()
    actor.play_animation(AnimationType.WALK)
    assert actor.flipbook is None
    assert actor.is_playing is False


def test_parts_attached_only_with_sprite():
    actor = _actor()
    actor.set_monster_attributes(_attributes(parts=("FireWings", "FireTail", "RockArmor")))
    assert [c.part_id for c in actor.part_components] == ["FireWings", "RockArmor"]
    wings = actor.part_components[0]
    assert wings.sprite == "wings"
    assert wings.relative_location == (0.0, 0.0, 20.0)
    assert wings.sort_priority == 1


def test_reconstruct_destroys_previous_parts():
    actor = _actor()
    actor.set_monster_attributes(_attributes(parts=("FireWings",)))
    old = list(actor.part_components)
    actor.reconstruct_appearance()
    assert all(c.destroyed for c in old)
    assert len(actor.part_components) == 1
    assert actor.part_components[0] is not old[0]
    assert actor.part_components[0].destroyed is False


def test_palette_swapping_uses_habitat_default():
    actor = _actor()
    actor.set_monster_attributes(_attributes(HabitatType.VOLCANO))
    assert actor.current_palette.habitat == HabitatType.VOLCANO
    assert actor.material is not None
    assert actor.material.base_material == "M_PaletteSwap"
    assert actor.material.vector_parameters["PrimaryColor"] == LinearColor(1.0, 0.3, 0.1, 1.0)


def test_palette_swapping_prefers_table_row():
    custom = PaletteData(habitat=HabitatType.CAVE, primary_color=LinearColor(0.1, 0.2, 0.3, 1.0))
    actor = MonsterActor(palette_table=[custom], palette_swap_material="M")
    actor.set_monster_attributes(_attributes(HabitatType.CAVE))
    assert actor.material.vector_parameters["PrimaryColor"] == custom.primary_color


def test_palette_swapping_skipped_without_material():
    actor = MonsterActor(skeleton_table=_skeletons(), palette_table=[])
    actor.set_monster_attributes(_attributes(HabitatType.DESERT))
    assert actor.material is None


def test_scale_follows_size_class_and_skeleton():
    actor = _actor()
    actor.set_monster_attributes(_attributes(HabitatType.DESERT, SizeClass.LARGE))
    expected = calculate_monster_scale(SizeClass.LARGE, 2.0)
    assert actor.scale == (expected, expected, expected)


def test_begin_play_with_defaults_builds_nothing():
    actor = _actor()
    actor.begin_play()
    assert actor.flipbook is None
    assert actor.current_skeleton.skeleton_id == ""


def test_begin_play_with_non_default_habitat_builds():
    actor = _actor(attributes=_attributes(HabitatType.DESERT, SizeClass.LARGE))
    actor.begin_play()
    assert actor.flipbook == "dl_idle"


def test_clear_appearance_removes_everything():
    actor = _actor()
    actor.set_monster_attributes(_attributes(parts=("RockArmor",)))
    component = actor.part_components[0]
    actor.clear_appearance()
    assert actor.part_components == []
    assert actor.flipbook is None
    assert component.destroyed