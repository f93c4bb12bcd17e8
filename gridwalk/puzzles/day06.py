# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Guard Gallivant: walk the guard's patrol and look for obstructions that trap it."""

from typing import Optional, Set

from gridwalk.config import Settings
from gridwalk.errors import MalformedInput
from gridwalk.grid import Grid
from gridwalk.models import Coordinate, Direction, Pose

OBSTACLE = "#"
GUARD_MARKS = "^>v<"


def _parse(text: str) -> tuple[Grid[str], Pose]:
    grid = Grid.from_string(text)
    guard: Optional[Pose] = None
    for coord, value in grid.items():
        if value in GUARD_MARKS:
            if guard is not None:
                raise MalformedInput(f"Second guard at {coord}")
            guard = Pose(coord, Direction.from_arrow(value))
        elif value not in ".#":
            raise MalformedInput(f"Unexpected character '{value}' at {coord}")
    if guard is None:
        raise MalformedInput("No guard found")
    grid.set(guard.position, ".")
    return grid, guard


def _step(grid: Grid[str], guard: Pose) -> Pose:
    if grid.get(guard.ahead()) == OBSTACLE:
        return guard.turned_right()
    return guard.advance()


def patrol(grid: Grid[str], guard: Pose) -> Optional[Set[Coordinate]]:
    """
    Returns the cells the guard covers before walking off the grid, or None
    when the guard ends up walking in a loop.
    """
    seen: Set[Pose] = set()
    while guard.position in grid:
        if guard in seen:
            return None
        seen.add(guard)
        guard = _step(grid, guard)
    return {pose.position for pose in seen}


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    grid, guard = _parse(text)
    visited = patrol(grid, guard)
    return None if visited is None else len(visited)


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    grid, guard = _parse(text)
    visited = patrol(grid, guard)
    if visited is None:
        return None

    # An obstruction only matters somewhere on the original route.
    loops = 0
    for candidate in visited - {guard.position}:
        blocked = grid.copy()
        blocked.set(candidate, OBSTACLE)
        if patrol(blocked, guard) is None:
            loops += 1
    return loops
