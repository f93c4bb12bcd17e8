# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from typing import Callable, Iterable, Iterator, TypeVar

from gridwalk.grid import Grid
from gridwalk.models import CARDINALS, Coordinate, Direction, Pose

T = TypeVar("T")


def open_steps(
    grid: Grid[T],
    passable: Callable[[T], bool],
    directions: Iterable[Direction] = CARDINALS,
    cost: int = 1,
) -> Callable[[Coordinate], Iterator[tuple[Coordinate, int]]]:
    """Neighbour policy over plain coordinates: one step onto any passable in-bounds cell."""
    directions = tuple(directions)

    def neighbours(coord: Coordinate) -> Iterator[tuple[Coordinate, int]]:
        for nxt, _ in grid.neighbours(coord, directions):
            value = grid.get(nxt)
            if value is not None and passable(value):
                yield nxt, cost

    return neighbours


def turning_steps(
    grid: Grid[T],
    passable: Callable[[T], bool],
    forward_cost: int = 1,
    turn_cost: int = 1000,
) -> Callable[[Pose], Iterator[tuple[Pose, int]]]:
    """
    Neighbour policy over poses: step forward onto a passable cell, or turn
    90 degrees in place. Turns towards a blocked cell are not generated.
    """

    def neighbours(pose: Pose) -> Iterator[tuple[Pose, int]]:
        ahead = grid.get(pose.ahead())
        if ahead is not None and passable(ahead):
            yield pose.advance(), forward_cost

        for turned in (pose.turned_right(), pose.turned_left()):
            side = grid.get(turned.ahead())
            if side is not None and passable(side):
                yield turned, turn_cost

    return neighbours
