# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""RAM Run: escape a memory space that is being corrupted byte by byte."""

from typing import List, Optional

from gridwalk.config import Settings, default_settings
from gridwalk.grid import Grid
from gridwalk.models import Coordinate
from gridwalk.traversal import SearchResult, breadth_first

SAFE = "."
CORRUPTED = "#"


def parse_bytes(text: str) -> List[Coordinate]:
    return [Coordinate.from_string(line) for line in text.strip().splitlines()]


def _escape(memory: Grid[str]) -> SearchResult[Coordinate]:
    exit_ = Coordinate(memory.width - 1, memory.height - 1)
    return breadth_first(
        Coordinate(0, 0),
        lambda c: (nxt for nxt, _ in memory.neighbours(c) if memory.get(nxt) == SAFE),
        is_goal=lambda c: c == exit_,
    )


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    settings = settings or default_settings()
    size = settings.memory_space.size
    memory = Grid.filled(size, size, SAFE)
    for coord in parse_bytes(text)[: settings.memory_space.fallen_bytes]:
        memory.set(coord, CORRUPTED)
    return _escape(memory).best_cost


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[str]:
    settings = settings or default_settings()
    size = settings.memory_space.size
    memory = Grid.filled(size, size, SAFE)

    route = set(_escape(memory).path())
    for coord in parse_bytes(text):
        memory.set(coord, CORRUPTED)
        if coord not in route:
            continue
        result = _escape(memory)
        if not result.reached:
            return str(coord)
        route = set(result.path())
    return None
