"""Procedural generation of monster ecology and combat attributes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from echoalchemist.attributes import (
    CombatAttributes,
    CombatTrait,
    EcologyAttributes,
    HabitatType,
    MonsterAttributes,
    Rarity,
    SizeClass,
)
from echoalchemist.random_stream import RandomStream

_T = TypeVar("_T")

MIN_TRAITS = 1
MAX_TRAITS = 3
_MIN_HABITAT_WEIGHT = 0.1
_COMBAT_SEED_OFFSET = 1000


@dataclass(frozen=True)
class BaseStats:
    """Base combat stats derived from a monster's ecology."""

    hp: float
    attack: float
    defense: float
    speed: float


@dataclass(frozen=True)
class _TraitTemplate:
    trait_id: str
    name: str
    description: str
    rarity: Rarity
    parts: tuple[str, ...]


_TRAIT_LIBRARY: tuple[_TraitTemplate, ...] = (
    _TraitTemplate("BerserkLeap", "狂暴跳跃", "跳跃攻击，造成额外伤害", Rarity.COMMON, ("StrongLegs",)),
    _TraitTemplate(
        "FireAffinity", "火属性亲和", "火焰攻击，有燃烧效果", Rarity.RARE, ("FireWings", "FireTail")
    ),
    _TraitTemplate("StoneShell", "金石外壳", "高防御，减少受到的伤害", Rarity.RARE, ("RockArmor",)),
    _TraitTemplate("PoisonSting", "剧毒之刺", "攻击附带毒素效果", Rarity.COMMON, ("PoisonStinger",)),
    _TraitTemplate(
        "IceBreath", "冰霜吐息", "冰冻敌人，降低移动速度", Rarity.EPIC, ("IceHorns", "FrostAura")
    ),
    _TraitTemplate("Regeneration", "快速再生", "持续恢复生命值", Rarity.EPIC, ("HealingGlow",)),
    _TraitTemplate("SwiftStrike", "疾风连击", "快速连续攻击", Rarity.COMMON, ("SharpClaws",)),
    _TraitTemplate("ThunderRoar", "雷鸣咆哮", "范围震慑，造成眩晕", Rarity.RARE, ("ThunderMane",)),
)

_SIZE_DISTRIBUTIONS: dict[HabitatType, tuple[tuple[SizeClass, float], ...]] = {
    HabitatType.FOREST: (
        (SizeClass.TINY, 0.1),
        (SizeClass.SMALL, 0.2),
        (SizeClass.MEDIUM, 0.3),
        (SizeClass.LARGE, 0.3),
        (SizeClass.GIANT, 0.1),
    ),
    HabitatType.DESERT: (
        (SizeClass.TINY, 0.2),
        (SizeClass.SMALL, 0.4),
        (SizeClass.MEDIUM, 0.3),
        (SizeClass.LARGE, 0.1),
    ),
    HabitatType.TUNDRA: (
        (SizeClass.SMALL, 0.1),
        (SizeClass.MEDIUM, 0.3),
        (SizeClass.LARGE, 0.4),
        (SizeClass.GIANT, 0.2),
    ),
    HabitatType.CAVE: (
        (SizeClass.TINY, 0.3),
        (SizeClass.SMALL, 0.5),
        (SizeClass.MEDIUM, 0.2),
    ),
    HabitatType.VOLCANO: (
        (SizeClass.MEDIUM, 0.3),
        (SizeClass.LARGE, 0.4),
        (SizeClass.GIANT, 0.3),
    ),
    HabitatType.SWAMP: (
        (SizeClass.TINY, 0.2),
        (SizeClass.SMALL, 0.3),
        (SizeClass.MEDIUM, 0.3),
        (SizeClass.LARGE, 0.2),
    ),
}

_FECUNDITY_BONUS = {
    HabitatType.FOREST: 10.0,
    HabitatType.SWAMP: 10.0,
    HabitatType.DESERT: -10.0,
    HabitatType.TUNDRA: -10.0,
}

# (hp, attack, defense, speed) multipliers
_SIZE_MULTIPLIERS: dict[SizeClass, tuple[float, float, float, float]] = {
    SizeClass.TINY: (0.5, 0.7, 0.6, 1.5),
    SizeClass.SMALL: (0.8, 0.9, 0.8, 1.2),
    SizeClass.MEDIUM: (1.0, 1.0, 1.0, 1.0),
    SizeClass.LARGE: (1.4, 1.2, 1.3, 0.8),
    SizeClass.GIANT: (2.0, 1.5, 1.6, 0.6),
}

_HABITAT_MULTIPLIERS: dict[HabitatType, tuple[float, float, float, float]] = {
    HabitatType.FOREST: (1.1, 1.0, 1.0, 1.1),
    HabitatType.DESERT: (1.2, 1.0, 1.1, 1.0),
    HabitatType.TUNDRA: (0.9, 1.0, 1.0, 1.3),
    HabitatType.CAVE: (1.0, 1.0, 1.2, 0.9),
    HabitatType.VOLCANO: (1.0, 1.3, 1.1, 1.0),
    HabitatType.SWAMP: (1.1, 1.1, 1.0, 1.0),
}

_BASE_STATS = (100.0, 20.0, 10.0, 100.0)
_NEUTRAL = (1.0, 1.0, 1.0, 1.0)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _weighted_choice(
    stream: RandomStream, options: Sequence[tuple[_T, float]], fallback: _T
) -> _T:
    total = sum(weight for _, weight in options)
    roll = stream.frand_range(0.0, total)
    accumulated = 0.0
    for option, weight in options:
        accumulated += weight
        if roll <= accumulated:
            return option
    return fallback


def generate_habitat_type(seed: int, climate_value: float, terrain_value: float) -> HabitatType:
    """Pick a habitat weighted by climate (0 cold .. 1 hot) and terrain (0 flat .. 1 mountainous)."""
    stream = RandomStream(seed)
    moderate = 1.0 - abs(climate_value - 0.5) * 2.0
    flat = 1.0 - terrain_value
    raw = (
        (HabitatType.FOREST, moderate),
        (HabitatType.DESERT, climate_value * flat),
        (HabitatType.TUNDRA, (1.0 - climate_value) * flat),
        (HabitatType.CAVE, terrain_value),
        (HabitatType.VOLCANO, climate_value * terrain_value),
        (HabitatType.SWAMP, moderate * flat),
    )
    options = [(habitat, max(_MIN_HABITAT_WEIGHT, weight)) for habitat, weight in raw]
    return _weighted_choice(stream, options, HabitatType.FOREST)


def generate_size_class(seed: int, habitat: HabitatType) -> SizeClass:
    """Pick a size class from the habitat's size distribution."""
    stream = RandomStream(seed)
    options = _SIZE_DISTRIBUTIONS.get(habitat, ((SizeClass.MEDIUM, 1.0),))
    return _weighted_choice(stream, options, SizeClass.MEDIUM)


def generate_ecology_attributes(
    seed: int, climate_value: float, terrain_value: float
) -> EcologyAttributes:
    """Generate ecology attributes influenced by climate and terrain."""
    stream = RandomStream(seed)
    habitat = generate_habitat_type(seed, climate_value, terrain_value)
    size_class = generate_size_class(seed + 1, habitat)

    extremity = abs(climate_value - 0.5) * 2.0
    tolerance = _clamp(50.0 + extremity * 30.0 + stream.frand_range(-10.0, 10.0), 0.0, 100.0)
    migration = _clamp(
        30.0 + terrain_value * 40.0 + stream.frand_range(-15.0, 15.0), 0.0, 100.0
    )
    bonus = _FECUNDITY_BONUS.get(habitat, 0.0)
    fecundity = _clamp(50.0 + bonus + stream.frand_range(-20.0, 20.0), 0.0, 100.0)

    return EcologyAttributes(
        habitat=habitat,
        tolerance=tolerance,
        size_class=size_class,
        migration_rate=migration,
        fecundity=fecundity,
    )


def generate_combat_trait(seed: int, min_rarity: Rarity = Rarity.COMMON) -> CombatTrait:
    """Pick a trait of at least min_rarity from the built-in trait library."""
    stream = RandomStream(seed)
    candidates = [t for t in _TRAIT_LIBRARY if t.rarity >= min_rarity] or list(_TRAIT_LIBRARY)
    chosen = candidates[stream.rand_range(0, len(candidates) - 1)]
    power = 1.0 + int(chosen.rarity) * 0.5
    return CombatTrait(
        trait_id=chosen.trait_id,
        name=chosen.name,
        description=chosen.description,
        rarity=chosen.rarity,
        associated_part_ids=list(chosen.parts),
        effect_parameters={"DamageBonus": power, "EffectChance": 0.3 * power},
    )


def generate_combat_attributes(
    seed: int, num_traits: int = 2, min_rarity: Rarity = Rarity.COMMON
) -> CombatAttributes:
    """Generate between one and three combat traits (num_traits is clamped)."""
    count = int(_clamp(num_traits, MIN_TRAITS, MAX_TRAITS))
    return CombatAttributes(
        traits=[generate_combat_trait(seed + i, min_rarity) for i in range(count)]
    )


def generate_monster_attributes(
    seed: int, climate_value: float, terrain_value: float, num_traits: int = 2
) -> MonsterAttributes:
    """Generate complete ecology and combat attributes for a monster."""
    return MonsterAttributes(
        ecology=generate_ecology_attributes(seed, climate_value, terrain_value),
        combat=generate_combat_attributes(seed + _COMBAT_SEED_OFFSET, num_traits),
    )


def calculate_base_stats_from_ecology(ecology: EcologyAttributes) -> BaseStats:
    """Derive HP, attack, defense and speed from size class and habitat."""
    size = _SIZE_MULTIPLIERS.get(ecology.size_class, _NEUTRAL)
    habitat = _HABITAT_MULTIPLIERS.get(ecology.habitat, _NEUTRAL)
    hp, attack, defense, speed = (
        base * s * h for base, s, h in zip(_BASE_STATS, size, habitat)
    )
    return BaseStats(hp=hp, attack=attack, defense=defense, speed=speed)