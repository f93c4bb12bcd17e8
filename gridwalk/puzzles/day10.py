# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Hoof It: score and rate the hiking trails from every trailhead."""

from typing import Iterator, Optional

from gridwalk.config import Settings
from gridwalk.errors import MalformedInput
from gridwalk.grid import Grid
from gridwalk.models import Coordinate
from gridwalk.traversal import breadth_first

TRAILHEAD = 0
SUMMIT = 9


def _height(ch: str) -> int:
    if not ch.isdigit():
        raise MalformedInput(f"Invalid height: '{ch}'")
    return int(ch)


def _uphill(grid: Grid[int], coord: Coordinate) -> Iterator[Coordinate]:
    height = grid.get(coord)
    for neighbour, _ in grid.neighbours(coord):
        if height is not None and grid.get(neighbour) == height + 1:
            yield neighbour


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    grid = Grid.from_string(text, _height)
    total = 0
    for trailhead in grid.find_all(TRAILHEAD):
        result = breadth_first(trailhead, lambda c: _uphill(grid, c))
        total += sum(1 for coord in result.distances if grid.get(coord) == SUMMIT)
    return total


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    grid = Grid.from_string(text, _height)

    # trails[c] = number of distinct uphill trails from c to a summit, filled from the top down
    trails: dict[Coordinate, int] = {}
    for height in range(SUMMIT, TRAILHEAD - 1, -1):
        for coord in grid.find_all(height):
            if height == SUMMIT:
                trails[coord] = 1
            else:
                trails[coord] = sum(trails[nxt] for nxt in _uphill(grid, coord))

    return sum(trails[coord] for coord in grid.find_all(TRAILHEAD))
