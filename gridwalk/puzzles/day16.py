# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Reindeer Maze: lowest score through the maze, and the tiles on any best path."""

from typing import Optional

from gridwalk.config import Settings, default_settings
from gridwalk.errors import MalformedInput
from gridwalk.grid import Grid
from gridwalk.models import Direction, Pose
from gridwalk.traversal import SearchResult, TieBreak, backtrack_positions, shortest_path, turning_steps

WALL = "#"
START = "S"
END = "E"


def _search(text: str, settings: Optional[Settings], tie_break: TieBreak) -> SearchResult[Pose]:
    settings = settings or default_settings()
    grid = Grid.from_string(text)
    start = grid.find(START)
    end = grid.find(END)
    if start is None or end is None:
        raise MalformedInput("Maze needs both a start 'S' and an end 'E'")

    neighbours = turning_steps(
        grid,
        lambda cell: cell != WALL,
        forward_cost=settings.maze.forward_cost,
        turn_cost=settings.maze.turn_cost,
    )
    return shortest_path(
        Pose(start, Direction.EAST),
        neighbours,
        is_goal=lambda pose: pose.position == end,
        tie_break=tie_break,
    )


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    return _search(text, settings, TieBreak.FIRST).best_cost


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    result = _search(text, settings, TieBreak.ALL)
    if not result.reached:
        return None
    return len(backtrack_positions(result, lambda pose: pose.position))
