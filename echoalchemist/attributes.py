"""Monster attribute types: habitats, sizes, rarities and attribute records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class HabitatType(IntEnum):
    """Habitat a monster lives in; drives skeleton, palette and base stats."""

    FOREST = 0
    DESERT = 1
    TUNDRA = 2
    CAVE = 3
    VOLCANO = 4
    SWAMP = 5

    @property
    def display_name(self) -> str:
        return _HABITAT_NAMES[self]


class SizeClass(IntEnum):
    """Body size of a monster; affects scale and stats."""

    TINY = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    GIANT = 4

    @property
    def display_name(self) -> str:
        return _SIZE_NAMES[self]


class Rarity(IntEnum):
    """Rarity of a combat trait; higher values are rarer and stronger."""

    COMMON = 0
    RARE = 1
    EPIC = 2

    @property
    def display_name(self) -> str:
        return _RARITY_NAMES[self]


_HABITAT_NAMES = {
    HabitatType.FOREST: "森林",
    HabitatType.DESERT: "沙漠",
    HabitatType.TUNDRA: "冰原",
    HabitatType.CAVE: "洞穴",
    HabitatType.VOLCANO: "火山",
    HabitatType.SWAMP: "沼泽",
}

_SIZE_NAMES = {
    SizeClass.TINY: "微小",
    SizeClass.SMALL: "小型",
    SizeClass.MEDIUM: "中型",
    SizeClass.LARGE: "大型",
    SizeClass.GIANT: "巨型",
}

_RARITY_NAMES = {
    Rarity.COMMON: "普通",
    Rarity.RARE: "稀有",
    Rarity.EPIC: "史诗",
}


@dataclass
class EcologyAttributes:
    """Stable survival traits of a monster. Numeric values range over 0-100."""

    habitat: HabitatType = HabitatType.FOREST
    tolerance: float = 50.0
    size_class: SizeClass = SizeClass.MEDIUM
    migration_rate: float = 30.0
    fecundity: float = 50.0


@dataclass
class CombatTrait:
    """A single combat trait with its visual parts and effect parameters."""

    trait_id: str = ""
    name: str = ""
    description: str = ""
    rarity: Rarity = Rarity.COMMON
    associated_part_ids: list[str] = field(default_factory=list)
    effect_parameters: dict[str, float] = field(default_factory=dict)


@dataclass
class CombatAttributes:
    """The combat traits of a monster (normally one to three)."""

    traits: list[CombatTrait] = field(default_factory=list)


@dataclass
class MonsterAttributes:
    """Ecology and combat attributes that together define a monster."""

    ecology: EcologyAttributes = field(default_factory=EcologyAttributes)
    combat: CombatAttributes = field(default_factory=CombatAttributes)