"""Wave Function Collapse assembly of modules on a grid, with backtracking."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from echoalchemist.random_stream import RandomStream

NORTH = "North"
SOUTH = "South"
EAST = "East"
WEST = "West"

# North is the row above (smaller y), East the column to the right.
_OFFSETS = {NORTH: (0, -1), SOUTH: (0, 1), EAST: (1, 0), WEST: (-1, 0)}
_OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

_Faces = dict[str, frozenset[str]]


@dataclass
class WFCConnector:
    """A connection point of a given type on one side of a module."""

    connector_type: str = ""
    direction: str = ""


@dataclass
class WFCModule:
    """A module that can be placed in one grid cell."""

    module_id: str = ""
    connectors: list[WFCConnector] = field(default_factory=list)


@dataclass
class WFCAssembly:
    """Placed module IDs in a row-major grid; None where no module was placed."""

    width: int
    height: int
    placed_modules: list[Optional[str]] = field(default_factory=list)


@dataclass
class _Cell:
    options: list[int]
    collapsed: bool = False


@dataclass
class _State:
    grid: list[_Cell]
    cell_index: int
    module_index: int


def _copy_grid(grid: Sequence[_Cell]) -> list[_Cell]:
    return [_Cell(list(cell.options), cell.collapsed) for cell in grid]


def _faces(module: WFCModule) -> _Faces:
    sides: dict[str, set[str]] = {}
    for connector in module.connectors:
        sides.setdefault(connector.direction, set()).add(connector.connector_type)
    return {direction: frozenset(types) for direction, types in sides.items()}


def _compatible(source: _Faces, target: _Faces, direction: str) -> bool:
    """Modules fit when neither exposes connectors to the other or they share a type."""
    outward = source.get(direction, frozenset())
    inward = target.get(_OPPOSITE[direction], frozenset())
    if not outward and not inward:
        return True
    return bool(outward & inward)


def _propagate(
    grid: list[_Cell], start: int, faces: Sequence[_Faces], width: int, height: int
) -> bool:
    """Narrow neighbouring cells; return False on a contradiction."""
    pending = [start]
    while pending:
        index = pending.pop()
        x, y = index % width, index // width
        sources = [faces[option] for option in grid[index].options]
        for direction, (dx, dy) in _OFFSETS.items():
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            neighbour_index = ny * width + nx
            neighbour = grid[neighbour_index]
            allowed = [
                option
                for option in neighbour.options
                if any(_compatible(source, faces[option], direction) for source in sources)
            ]
            if len(allowed) != len(neighbour.options):
                if not allowed:
                    return False
                neighbour.options = allowed
                pending.append(neighbour_index)
    return True


def _backtrack(history: list[_State]) -> Optional[list[_Cell]]:
    if not history:
        return None
    state = history.pop()
    grid = state.grid
    grid[state.cell_index].options.remove(state.module_index)
    return grid


def assemble_with_wfc(
    modules: Iterable[WFCModule], width: int, height: int, seed: int
) -> WFCAssembly:
    """Fill a width x height grid with modules whose facing connectors fit.

    Cells of lowest entropy are collapsed first; contradictions undo the last
    choice. If the search runs out of choices, cells left open stay None.
    """
    if width < 0 or height < 0:
        raise ValueError(f"grid size must not be negative: {width}x{height}")
    library = list(modules)
    placed: list[Optional[str]] = [None] * (width * height)
    if not library:
        return WFCAssembly(width, height, placed)

    faces = [_faces(module) for module in library]
    grid = [_Cell(list(range(len(library)))) for _ in range(width * height)]
    stream = RandomStream(seed)
    history: list[_State] = []

    while True:
        open_cells = [index for index, cell in enumerate(grid) if not cell.collapsed]
        if not open_cells:
            break
        lowest = min(len(grid[index].options) for index in open_cells)
        candidates = [index for index in open_cells if len(grid[index].options) == lowest]
        cell_index = candidates[stream.rand_range(0, len(candidates) - 1)]
        cell = grid[cell_index]

        if not cell.options:
            restored = _backtrack(history)
            if restored is None:
                break
            grid = restored
            continue

        module_index = cell.options[stream.rand_range(0, len(cell.options) - 1)]
        history.append(_State(_copy_grid(grid), cell_index, module_index))
        cell.options = [module_index]
        cell.collapsed = True

        if not _propagate(grid, cell_index, faces, width, height):
            restored = _backtrack(history)
            if restored is None:
                break
            grid = restored

    for index, cell in enumerate(grid):
        if cell.collapsed:
            placed[index] = library[cell.options[0]].module_id
    return WFCAssembly(width, height, placed)