# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

from gridwalk.errors import MalformedInput


class Direction(str, Enum):
    """Compass directions, declared clockwise starting at north.

    Declaration order is the neighbour generation order used everywhere in
    the library, so it also decides which of several equal-cost entries is
    queued first.
    """

    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"

    @property
    def delta(self) -> Tuple[int, int]:
        # (dx, dy) with y growing downwards, i.e. along the row index
        mapping = {
            Direction.NORTH: (0, -1),
            Direction.NORTH_EAST: (1, -1),
            Direction.EAST: (1, 0),
            Direction.SOUTH_EAST: (1, 1),
            Direction.SOUTH: (0, 1),
            Direction.SOUTH_WEST: (-1, 1),
            Direction.WEST: (-1, 0),
            Direction.NORTH_WEST: (-1, -1),
        }
        return mapping[self]

    @property
    def is_diagonal(self) -> bool:
        dx, dy = self.delta
        return dx != 0 and dy != 0

    def rotate(self, eighths: int) -> "Direction":
        """Rotates clockwise by ``eighths`` * 45 degrees (negative for counter-clockwise)."""
        members = list(Direction)
        return members[(members.index(self) + eighths) % len(members)]

    def turn_right(self) -> "Direction":
        return self.rotate(2)

    def turn_left(self) -> "Direction":
        return self.rotate(-2)

    def opposite(self) -> "Direction":
        return self.rotate(4)

    @classmethod
    def from_arrow(cls, ch: str) -> "Direction":
        arrows = {"^": cls.NORTH, ">": cls.EAST, "v": cls.SOUTH, "<": cls.WEST}
        if ch not in arrows:
            raise MalformedInput(f"Invalid arrow character: '{ch}'")
        return arrows[ch]


CARDINALS: Tuple[Direction, ...] = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
COMPASS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

    def move(self, direction: Direction, steps: int = 1) -> "Coordinate":
        dx, dy = direction.delta
        return Coordinate(self.x + dx * steps, self.y + dy * steps)

    def shift(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def delta(self, other: "Coordinate") -> Tuple[int, int]:
        """Offset that moves this coordinate onto ``other``."""
        return other.x - self.x, other.y - self.y

    def manhattan(self, other: "Coordinate") -> int:
        dx, dy = self.delta(other)
        return abs(dx) + abs(dy)

    def neighbours(self, directions: Iterable[Direction] = CARDINALS) -> Iterator["Coordinate"]:
        for direction in directions:
            yield self.move(direction)

    @classmethod
    def from_string(cls, text: str) -> "Coordinate":
        parts = text.strip().split(",")
        if len(parts) != 2:
            raise MalformedInput(f"Invalid coordinate string: '{text}'")
        try:
            return cls(int(parts[0]), int(parts[1]))
        except ValueError as e:
            raise MalformedInput(f"Invalid coordinate string: '{text}'") from e


@dataclass(frozen=True)
class Pose:
    """A position together with the direction it is facing."""

    position: Coordinate
    heading: Direction

    def advance(self, steps: int = 1) -> "Pose":
        return Pose(self.position.move(self.heading, steps), self.heading)

    def turned_right(self) -> "Pose":
        return Pose(self.position, self.heading.turn_right())

    def turned_left(self) -> "Pose":
        return Pose(self.position, self.heading.turn_left())

    def ahead(self) -> Coordinate:
        return self.position.move(self.heading)
