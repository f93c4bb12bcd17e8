# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Race Condition: count the cheats that shorten the single race track."""

from typing import Optional

from gridwalk.config import Settings, default_settings
from gridwalk.errors import MalformedInput
from gridwalk.grid import Grid
from gridwalk.models import Coordinate
from gridwalk.traversal import DistanceMap, breadth_first

WALL = "#"


def _distances_to_end(grid: Grid[str]) -> DistanceMap[Coordinate]:
    start = grid.find("S")
    end = grid.find("E")
    if start is None or end is None:
        raise MalformedInput("Race track needs both a start 'S' and an end 'E'")

    result = breadth_first(
        start,
        lambda c: (nxt for nxt, _ in grid.neighbours(c) if grid.get(nxt) != WALL),
        is_goal=lambda c: c == end,
    )
    if result.best_cost is None:
        raise MalformedInput("Race track has no path from start to end")
    return result.distances.inverted(result.best_cost)


def count_cheats(grid: Grid[str], max_cheat: int, min_saving: int) -> int:
    """
    Counts cheats, identified by their start and end cell, that skip through
    walls for at most ``max_cheat`` steps and save at least ``min_saving``.
    """
    remaining = _distances_to_end(grid)
    cheats = 0
    for origin, left in remaining.items():
        for dy in range(-max_cheat, max_cheat + 1):
            span = max_cheat - abs(dy)
            for dx in range(-span, span + 1):
                target = Coordinate(origin.x + dx, origin.y + dy)
                after = remaining.get(target)
                if after is None:
                    continue
                if left - after - abs(dx) - abs(dy) >= min_saving:
                    cheats += 1
    return cheats


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    settings = settings or default_settings()
    return count_cheats(Grid.from_string(text), settings.race.short_cheat, settings.race.min_saving)


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    settings = settings or default_settings()
    return count_cheats(Grid.from_string(text), settings.race.long_cheat, settings.race.min_saving)
