"""Procedural 2D shapes on boolean grids: automata, noise, Voronoi and crystal growth."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from echoalchemist.random_stream import RandomStream

_MOORE = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0))
_ORTHOGONAL = ((0, -1), (-1, 0), (1, 0), (0, 1))

_PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
) * 2


@dataclass
class ShapeData:
    """A width x height grid of solid (True) and empty (False) cells, row-major."""

    width: int
    height: int
    grid: list[bool] = field(default_factory=list)

    def cell(self, x: int, y: int) -> bool:
        """Return whether the cell at column x, row y is solid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.grid[y * self.width + x]


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"grid size must not be negative: {width}x{height}")


def _count_neighbours(grid: list[bool], width: int, height: int, x: int, y: int, offsets) -> int:
    return sum(
        1
        for dx, dy in offsets
        if 0 <= x + dx < width and 0 <= y + dy < height and grid[(y + dy) * width + x + dx]
    )


def generate_shape_with_cellular_automata(
    width: int,
    height: int,
    seed: int,
    iterations: int = 5,
    birth_threshold: int = 4,
    survival_threshold: int = 4,
) -> ShapeData:
    """Seed a random grid, then smooth it with a birth/survival automaton.

    A live cell dies with fewer than survival_threshold live neighbours; a dead
    cell is born with more than birth_threshold.
    """
    _check_size(width, height)
    stream = RandomStream(seed)
    grid = [stream.frand() < 0.5 for _ in range(width * height)]
    for _ in range(iterations):
        following = list(grid)
        for y in range(height):
            for x in range(width):
                neighbours = _count_neighbours(grid, width, height, x, y, _MOORE)
                index = y * width + x
                if grid[index] and neighbours < survival_threshold:
                    following[index] = False
                elif not grid[index] and neighbours > birth_threshold:
                    following[index] = True
        grid = following
    return ShapeData(width, height, grid)


def _smooth_curve(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _gradient(hash_value: int, x: float, y: float) -> float:
    return (
        x,
        x + y,
        y,
        -x + y,
        -x,
        -x - y,
        -y,
        x - y,
    )[hash_value & 7]


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _perlin_noise_2d(px: float, py: float) -> float:
    x_floor = math.floor(px)
    y_floor = math.floor(py)
    xi = x_floor & 255
    yi = y_floor & 255
    x = px - x_floor
    y = py - y_floor
    aa = _PERMUTATION[xi] + yi
    ab = aa + 1
    ba = _PERMUTATION[xi + 1] + yi
    bb = ba + 1
    u = _smooth_curve(x)
    v = _smooth_curve(y)
    return _lerp(
        _lerp(_gradient(_PERMUTATION[aa], x, y), _gradient(_PERMUTATION[ba], x - 1.0, y), u),
        _lerp(
            _gradient(_PERMUTATION[ab], x, y - 1.0),
            _gradient(_PERMUTATION[bb], x - 1.0, y - 1.0),
            u,
        ),
        v,
    )


def generate_shape_with_simplex_noise(
    width: int, height: int, seed: int, scale: float = 20.0, threshold: float = 0.5
) -> ShapeData:
    """Mark cells whose 2D Perlin noise at (x/scale, y/scale) exceeds threshold.

    The noise field is fixed, so the seed does not change the result.
    """
    _check_size(width, height)
    grid = [
        _perlin_noise_2d(x / scale, y / scale) > threshold
        for y in range(height)
        for x in range(width)
    ]
    return ShapeData(width, height, grid)


def generate_shape_with_voronoi(
    width: int, height: int, seed: int, num_points: int = 10
) -> ShapeData:
    """Scatter num_points sites and fill the Voronoi region of the first one."""
    _check_size(width, height)
    if num_points <= 0:
        return ShapeData(width, height, [False] * (width * height))
    stream = RandomStream(seed)
    points = []
    for _ in range(num_points):
        px = stream.frand_range(0.0, width)
        py = stream.frand_range(0.0, height)
        points.append((px, py))

    def closest(x: int, y: int) -> int:
        return min(
            range(len(points)),
            key=lambda i: (x - points[i][0]) ** 2 + (y - points[i][1]) ** 2,
        )

    grid = [closest(x, y) == 0 for y in range(height) for x in range(width)]
    return ShapeData(width, height, grid)


def generate_shape_with_crystal_growth(
    width: int, height: int, seed: int, iterations: int = 5, growth_chance: float = 0.3
) -> ShapeData:
    """Grow a crystal from the centre cell into orthogonal neighbours by chance."""
    _check_size(width, height)
    if width == 0 or height == 0:
        raise ValueError("crystal growth needs a grid with at least one cell")
    stream = RandomStream(seed)
    grid = [False] * (width * height)
    grid[(height // 2) * width + width // 2] = True
    for _ in range(iterations):
        following = list(grid)
        for y in range(height):
            for x in range(width):
                index = y * width + x
                if grid[index]:
                    continue
                neighbours = _count_neighbours(grid, width, height, x, y, _ORTHOGONAL)
                if neighbours > 0 and stream.frand() < growth_chance:
                    following[index] = True
        grid = following
    return ShapeData(width, height, grid)