# echoalchemist

Procedural content generation for monster-collecting games. Generation is
deterministic: the same seed always gives the same result. The package has no
dependencies beyond the standard library.

## Modules

- `echoalchemist.attributes`: the enums `HabitatType`, `SizeClass` and
  `Rarity` (each with a `display_name`), and the dataclasses
  `EcologyAttributes`, `CombatTrait`, `CombatAttributes` and
  `MonsterAttributes` (with fields `ecology` and `combat`).
- `echoalchemist.random_stream`: `RandomStream(seed)`, a seeded linear
  congruential generator with `frand()`, `frand_range(low, high)` and
  `rand_range(low, high)`.
- `echoalchemist.attribute_generator`: `generate_habitat_type`,
  `generate_size_class`, `generate_ecology_attributes`,
  `generate_combat_trait`, `generate_combat_attributes` (trait count clamped
  to 1–3) and `generate_monster_attributes`, driven by a seed and climate and
  terrain values between 0 and 1. `calculate_base_stats_from_ecology` returns
  a `BaseStats` with `hp`, `attack`, `defense` and `speed`.
- `echoalchemist.color`: `LinearColor` (RGBA) with `linear_rgb_to_hsv`,
  `hsv_to_linear_rgb` and `LinearColor.lerp_using_hsv`, plus the constants
  `WHITE`, `GRAY` and `BLACK`.
- `echoalchemist.palette_generator`: `Palette`,
  `generate_palette_from_spectrum` and `generate_monochromatic_palette`.
- `echoalchemist.appearance`: `SkeletonData`, `PartData`, `PaletteData`,
  `AnchorPoint` and `PaletteSwapMaterial`, with `select_skeleton`,
  `select_parts`, `get_palette_for_habitat` (falls back to a built-in palette
  per habitat), `create_palette_swap_material`, `get_anchor_point_location`
  and `calculate_monster_scale`. Data tables are plain lists of these records.
- `echoalchemist.monster_actor`: `MonsterActor`, which builds a monster's
  skeleton flipbook, `PartComponent`s, palette material and scale from its
  attributes and data tables, and `AnimationType` for `play_animation`.
- `echoalchemist.monster_visualizer`: `MonsterVisualizer`, a preview that
  colours and scales a body by habitat and size and adds one `PartSprite` per
  combat trait; `habitat_color`, `size_scale` and `rarity_color` give the
  values it uses.
- `echoalchemist.shape_generator`: `ShapeData` boolean grids (read cells with
  `cell(x, y)`) from `generate_shape_with_cellular_automata`,
  `generate_shape_with_simplex_noise` (a fixed Perlin field; the seed has no
  effect), `generate_shape_with_voronoi` and
  `generate_shape_with_crystal_growth`.
- `echoalchemist.animator`: `Transform`, `Bone` and `Skeleton`;
  `generate_walk_animation` returns 30 frames of sine-wave sway, one
  transform per bone per frame.
- `echoalchemist.wfc`: `WFCConnector`, `WFCModule` and `WFCAssembly`;
  `assemble_with_wfc` places modules on a grid so that facing connectors
  match, backtracking on contradictions. Cells that could not be filled are
  `None`.

## Example

```python
from echoalchemist.attribute_generator import (
    calculate_base_stats_from_ecology,
    generate_monster_attributes,
)
from echoalchemist.color import LinearColor
from echoalchemist.palette_generator import generate_monochromatic_palette

monster = generate_monster_attributes(12345, 0.7, 0.5, 2)
print(monster.ecology.habitat, monster.ecology.size_class)
for trait in monster.combat.traits:
    print(trait.trait_id, trait.rarity, trait.associated_part_ids)

stats = calculate_base_stats_from_ecology(monster.ecology)
print(stats.hp, stats.attack, stats.defense, stats.speed)

palette = generate_monochromatic_palette(LinearColor(0.2, 0.8, 0.2), 5, (0.2, 1.0), (0.3, 1.0))
for color in palette:
    print(color)
```

## What it does not do

The package draws nothing. `MonsterActor` and `MonsterVisualizer` only record
which flipbook, sprites, colours, material parameters and scales a monster
should have; sprites, flipbooks and materials are opaque values you supply and
hand to your own renderer. There is no physics, no command-line tool and no
loading of data tables from files.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```