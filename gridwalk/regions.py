# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from collections import deque
from dataclasses import dataclass
from typing import Generic, List, Optional, Set, TypeVar

from gridwalk.grid import Grid
from gridwalk.models import CARDINALS, Coordinate, Direction

T = TypeVar("T")


@dataclass(frozen=True)
class Region(Generic[T]):
    value: T
    cells: frozenset[Coordinate]
    perimeter: int
    sides: int

    @property
    def area(self) -> int:
        return len(self.cells)

    @property
    def price(self) -> int:
        return self.area * self.perimeter

    @property
    def bulk_price(self) -> int:
        return self.area * self.sides


def flood_fill(grid: Grid[T], seed: Coordinate) -> Set[Coordinate]:
    """Returns the 4-connected cells around ``seed`` holding the same value as ``seed``."""
    value = grid.get(seed)
    visited = {seed}
    queue = deque([seed])
    while queue:
        current = queue.popleft()
        for neighbour, _ in grid.neighbours(current):
            if neighbour not in visited and grid.get(neighbour) == value:
                visited.add(neighbour)
                queue.append(neighbour)
    return visited


def _faces(cells: Set[Coordinate]) -> dict[Direction, Set[Coordinate]]:
    """For every outward direction, the cells whose edge on that side is a boundary."""
    return {
        direction: {cell for cell in cells if cell.move(direction) not in cells} for direction in CARDINALS
    }


def count_perimeter(cells: Set[Coordinate]) -> int:
    return sum(len(facing) for facing in _faces(cells).values())


def count_sides(cells: Set[Coordinate]) -> int:
    """
    Counts straight fence segments: boundary edges facing the same way are
    merged while they are contiguous along the perpendicular axis.
    """
    sides = 0
    for direction, facing in _faces(cells).items():
        along = (direction.turn_left(), direction.turn_right())
        consumed: Set[Coordinate] = set()
        for cell in sorted(facing, key=lambda c: (c.y, c.x)):
            if cell in consumed:
                continue
            sides += 1
            consumed.add(cell)
            for step in along:
                current = cell.move(step)
                while current in facing:
                    consumed.add(current)
                    current = current.move(step)
    return sides


def extract_regions(grid: Grid[T], background: Optional[T] = None) -> List[Region[T]]:
    """
    Partitions the grid into maximal same-valued 4-connected regions, seeded in
    row-major order. Cells holding ``background`` belong to no region.
    """
    regions: List[Region[T]] = []
    assigned: Set[Coordinate] = set()

    for coord, value in grid.items():
        if coord in assigned or (background is not None and value == background):
            continue
        cells = flood_fill(grid, coord)
        assigned |= cells
        regions.append(
            Region(
                value=value,
                cells=frozenset(cells),
                perimeter=count_perimeter(cells),
                sides=count_sides(cells),
            )
        )
    return regions
