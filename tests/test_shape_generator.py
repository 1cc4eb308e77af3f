import pytest

from echoalchemist.shape_generator import (
    ShapeData,
    generate_shape_with_cellular_automata,
    generate_shape_with_crystal_growth,
    generate_shape_with_simplex_noise,
    generate_shape_with_voronoi,
)


def test_cellular_automata_dimensions():
    shape = generate_shape_with_cellular_automata(7, 5, seed=3)
    assert shape.width == 7
    assert shape.height == 5
    assert len(shape.grid) == 35


def test_cellular_automata_is_deterministic():
    first = generate_shape_with_cellular_automata(12, 9, seed=42)
    second = generate_shape_with_cellular_automata(12, 9, seed=42)
    assert first.grid == second.grid


def test_cellular_automata_inert_rules_keep_initial_grid():
    initial = generate_shape_with_cellular_automata(10, 10, seed=5, iterations=0)
    inert = generate_shape_with_cellular_automata(
        10, 10, seed=5, iterations=3, birth_threshold=8, survival_threshold=0
    )
    assert inert.grid == initial.grid


def test_cellular_automata_initial_fill_is_mixed():
    shape = generate_shape_with_cellular_automata(20, 20, seed=11, iterations=0)
    solid = sum(shape.grid)
    assert 80 < solid < 320


def test_cellular_automata_kill_all():
    shape = generate_shape_with_cellular_automata(
        8, 8, seed=1, iterations=1, birth_threshold=8, survival_threshold=9
    )
    assert shape.grid == [False] * 64


def test_cellular_automata_fill_all():
    shape = generate_shape_with_cellular_automata(
        8, 8, seed=1, iterations=1, birth_threshold=-1, survival_threshold=0
    )
    assert shape.grid == [True] * 64


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        generate_shape_with_cellular_automata(-1, 4, seed=0)


def test_cell_accessor_matches_grid():
    shape = generate_shape_with_cellular_automata(6, 4, seed=9, iterations=0)
    assert shape.cell(2, 3) == shape.grid[3 * 6 + 2]
    assert [shape.cell(x, 0) for x in range(6)] == shape.grid[:6]


def test_cell_accessor_out_of_range():
    shape = ShapeData(2, 2, [True, False, False, True])
    with pytest.raises(IndexError):
        shape.cell(2, 0)


def test_noise_ignores_seed():
    first = generate_shape_with_simplex_noise(16, 16, seed=1, scale=5.0, threshold=0.0)
    second = generate_shape_with_simplex_noise(16, 16, seed=999, scale=5.0, threshold=0.0)
    assert first.grid == second.grid


def test_noise_is_zero_on_lattice_points():
    below = generate_shape_with_simplex_noise(6, 6, seed=0, scale=1.0, threshold=0.0)
    above = generate_shape_with_simplex_noise(6, 6, seed=0, scale=1.0, threshold=-0.5)
    assert below.grid == [False] * 36
    assert above.grid == [True] * 36


def test_noise_has_both_regions():
    shape = generate_shape_with_simplex_noise(32, 32, seed=0, scale=7.3, threshold=0.0)
    assert 0 < sum(shape.grid) < 32 * 32


def test_noise_high_threshold_is_empty():
    shape = generate_shape_with_simplex_noise(16, 16, seed=0, scale=3.7, threshold=2.0)
    assert shape.grid == [False] * 256


def test_voronoi_without_points_is_empty():
    shape = generate_shape_with_voronoi(5, 5, seed=0, num_points=0)
    assert shape.grid == [False] * 25


def test_voronoi_single_point_fills_grid():
    shape = generate_shape_with_voronoi(5, 4, seed=3, num_points=1)
    assert all(shape.grid)
    assert len(shape.grid) == 20


def test_voronoi_is_deterministic_and_partial():
    first = generate_shape_with_voronoi(20, 20, seed=8, num_points=10)
    second = generate_shape_with_voronoi(20, 20, seed=8, num_points=10)
    assert first.grid == second.grid
    assert sum(first.grid) < 400


def test_crystal_without_iterations_is_single_seed():
    shape = generate_shape_with_crystal_growth(9, 7, seed=0, iterations=0)
    assert sum(shape.grid) == 1
    assert shape.cell(4, 3)


def test_crystal_certain_growth_makes_diamond():
    shape = generate_shape_with_crystal_growth(9, 9, seed=0, iterations=2, growth_chance=1.0)
    expected = [abs(x - 4) + abs(y - 4) <= 2 for y in range(9) for x in range(9)]
    assert shape.grid == expected


def test_crystal_zero_chance_never_grows():
    shape = generate_shape_with_crystal_growth(9, 9, seed=4, iterations=5, growth_chance=0.0)
    assert sum(shape.grid) == 1


def test_crystal_growth_only_adds_and_stays_connected():
    earlier = generate_shape_with_crystal_growth(15, 15, seed=21, iterations=3)
    later = generate_shape_with_crystal_growth(15, 15, seed=21, iterations=4)
    assert all(later.grid[i] for i, solid in enumerate(earlier.grid) if solid)
    for y in range(15):
        for x in range(15):
            if later.cell(x, y) and (x, y) != (7, 7):
                neighbours = [
                    later.cell(x + dx, y + dy)
                    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1))
                    if 0 <= x + dx < 15 and 0 <= y + dy < 15
                ]
                assert any(neighbours)


def test_crystal_empty_grid_rejected():
    with pytest.raises(ValueError):
        generate_shape_with_crystal_growth(0, 5, seed=0)