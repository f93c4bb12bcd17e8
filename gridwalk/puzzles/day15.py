# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Warehouse Woes: a robot shoves boxes around, then does it again in a warehouse twice as wide."""

from collections import deque
from typing import List, Optional, Tuple

from gridwalk.config import Settings
from gridwalk.errors import MalformedInput
from gridwalk.grid import Grid
from gridwalk.models import Coordinate, Direction

WALL = "#"
EMPTY = "."
BOX = "O"
ROBOT = "@"
BOX_LEFT = "["
BOX_RIGHT = "]"

WIDENED = {WALL: WALL * 2, BOX: BOX_LEFT + BOX_RIGHT, EMPTY: EMPTY * 2, ROBOT: ROBOT + EMPTY}


def _parse(text: str) -> Tuple[List[str], List[Direction]]:
    lines = text.strip("\n").splitlines()
    if "" not in lines:
        raise MalformedInput("Expected a blank line between the warehouse map and the moves")
    split = lines.index("")
    rows = lines[:split]
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch not in WIDENED:
                raise MalformedInput(f"Unexpected character '{ch}' at {Coordinate(x, y)}")
    moves = [Direction.from_arrow(ch) for line in lines[split + 1 :] for ch in line.strip()]
    return rows, moves


def _partner(value: str, coord: Coordinate) -> Optional[Coordinate]:
    if value == BOX_LEFT:
        return coord.move(Direction.EAST)
    if value == BOX_RIGHT:
        return coord.move(Direction.WEST)
    return None


def push(warehouse: Grid[str], robot: Coordinate, direction: Direction) -> Coordinate:
    """
    Moves the robot one step, shoving every box in its way along with it.

    The cells that would move are collected breadth-first. Pushing a wide box
    up or down drags its other half too, so one push can fan out over several
    columns. If any of them runs into a wall nothing moves at all. Returns the
    robot's position afterwards.
    """
    vertical = direction.delta[0] == 0
    moving = [robot]
    seen = {robot}
    queue = deque([robot])
    while queue:
        ahead = queue.popleft().move(direction)
        value = warehouse.get(ahead)
        if value is None or value == WALL:
            return robot
        if value == EMPTY:
            continue
        front = [ahead]
        partner = _partner(value, ahead)
        if vertical and partner is not None:
            front.append(partner)
        for cell in front:
            if cell not in seen:
                seen.add(cell)
                moving.append(cell)
                queue.append(cell)

    # cells further along the push were found later, so they move first
    for cell in reversed(moving):
        warehouse.set(cell.move(direction), warehouse.get(cell))
        warehouse.set(cell, EMPTY)
    return robot.move(direction)


def _run(rows: List[str], moves: List[Direction]) -> Grid[str]:
    warehouse = Grid.from_lines(rows)
    robots = warehouse.find_all(ROBOT)
    if len(robots) != 1:
        raise MalformedInput(f"Expected exactly one robot, found {len(robots)}")
    robot = robots[0]
    for direction in moves:
        robot = push(warehouse, robot, direction)
    return warehouse


def gps_total(warehouse: Grid[str], marker: str) -> int:
    return sum(100 * coord.y + coord.x for coord in warehouse.find_all(marker))


def part_one(text: str, settings: Optional[Settings] = None) -> int:
    rows, moves = _parse(text)
    return gps_total(_run(rows, moves), BOX)


def part_two(text: str, settings: Optional[Settings] = None) -> int:
    rows, moves = _parse(text)
    wide = ["".join(WIDENED[ch] for ch in row) for row in rows]
    return gps_total(_run(wide, moves), BOX_LEFT)
