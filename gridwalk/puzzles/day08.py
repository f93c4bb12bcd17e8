# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Resonant Collinearity: antinodes of same-frequency antenna pairs."""

import itertools
from collections import defaultdict
from typing import Iterator, List, Optional, Set

from gridwalk.config import Settings
from gridwalk.grid import Grid
from gridwalk.models import Coordinate

EMPTY = "."


def _antennas(grid: Grid[str]) -> dict[str, List[Coordinate]]:
    groups: dict[str, List[Coordinate]] = defaultdict(list)
    for coord, value in grid.items():
        if value != EMPTY:
            groups[value].append(coord)
    return groups


def _ray(grid: Grid[str], start: Coordinate, dx: int, dy: int) -> Iterator[Coordinate]:
    current = start
    while current in grid:
        yield current
        current = current.shift(dx, dy)


def _antinodes(grid: Grid[str], resonant: bool) -> Set[Coordinate]:
    found: Set[Coordinate] = set()
    for positions in _antennas(grid).values():
        for left, right in itertools.combinations(positions, 2):
            dx, dy = left.delta(right)
            if resonant:
                found.update(_ray(grid, right, dx, dy))
                found.update(_ray(grid, left, -dx, -dy))
            else:
                for candidate in (right.shift(dx, dy), left.shift(-dx, -dy)):
                    if candidate in grid:
                        found.add(candidate)
    return found


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    return len(_antinodes(Grid.from_string(text), resonant=False))


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    return len(_antinodes(Grid.from_string(text), resonant=True))
