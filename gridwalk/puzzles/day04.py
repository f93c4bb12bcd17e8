# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Ceres Search: find XMAS in every direction, then MAS crosses."""

from typing import Optional

from gridwalk.config import Settings
from gridwalk.grid import Grid
from gridwalk.models import COMPASS, Coordinate, Direction

WORD = "XMAS"


def _spells(grid: Grid[str], start: Coordinate, direction: Direction, word: str) -> bool:
    return all(grid.get(start.move(direction, i)) == ch for i, ch in enumerate(word))


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    grid = Grid.from_string(text)
    return sum(
        1 for start in grid.find_all(WORD[0]) for direction in COMPASS if _spells(grid, start, direction, WORD)
    )


def _is_cross(grid: Grid[str], centre: Coordinate) -> bool:
    for diagonal in (Direction.NORTH_WEST, Direction.NORTH_EAST):
        ends = {grid.get(centre.move(diagonal)), grid.get(centre.move(diagonal.opposite()))}
        if ends != {"M", "S"}:
            return False
    return True


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    grid = Grid.from_string(text)
    return sum(1 for centre in grid.find_all("A") if _is_cross(grid, centre))
