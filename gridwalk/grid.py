# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from gridwalk.errors import MalformedInput, OutOfBounds
from gridwalk.models import CARDINALS, Coordinate, Direction

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Grid(Generic[T]):
    width: int
    height: int
    cells: List[List[T]]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise MalformedInput(f"Grid must not be empty, got {self.width}x{self.height}")
        if len(self.cells) != self.height:
            raise MalformedInput(f"Grid has {len(self.cells)} rows, expected {self.height}")
        for i, row in enumerate(self.cells):
            if len(row) != self.width:
                raise MalformedInput(f"Row {i} has {len(row)} cols, expected {self.width}")

    @classmethod
    def from_lines(cls, lines: Iterable[str], parse: Optional[Callable[[str], T]] = None) -> "Grid[T]":
        """
        Builds a grid with one row per line and one cell per character.
        ``parse`` converts each character into the cell value; without it the
        characters are stored as they are.
        """
        cells = []
        for line in lines:
            if parse is None:
                cells.append(list(line))
            else:
                cells.append([parse(ch) for ch in line])

        if not cells:
            raise MalformedInput("Grid input is empty")
        return cls(width=len(cells[0]), height=len(cells), cells=cells)  # type: ignore[arg-type]

    @classmethod
    def from_string(cls, text: str, parse: Optional[Callable[[str], T]] = None) -> "Grid[T]":
        return cls.from_lines(text.strip("\n").splitlines(), parse)

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> "Grid[T]":
        return cls(width=width, height=height, cells=[[value] * width for _ in range(height)])

    def in_bounds(self, coord: Coordinate) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, Coordinate) and self.in_bounds(coord)

    def get(self, coord: Coordinate) -> Optional[T]:
        if not self.in_bounds(coord):
            return None
        return self.cells[coord.y][coord.x]

    def set(self, coord: Coordinate, value: T) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(f"{coord} is outside the {self.width}x{self.height} grid")
        self.cells[coord.y][coord.x] = value

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def items(self) -> Iterator[Tuple[Coordinate, T]]:
        for y, row in enumerate(self.cells):
            for x, value in enumerate(row):
                yield Coordinate(x, y), value

    def neighbours(
        self, coord: Coordinate, directions: Iterable[Direction] = CARDINALS
    ) -> Iterator[Tuple[Coordinate, Direction]]:
        """Yields the in-bounds neighbours of ``coord`` in the order of ``directions``."""
        for direction in directions:
            neighbour = coord.move(direction)
            if self.in_bounds(neighbour):
                yield neighbour, direction

    def find(self, value: T) -> Optional[Coordinate]:
        return next((coord for coord, cell in self.items() if cell == value), None)

    def find_all(self, value: T) -> List[Coordinate]:
        return [coord for coord, cell in self.items() if cell == value]

    def copy(self) -> "Grid[T]":
        return Grid(width=self.width, height=self.height, cells=[row[:] for row in self.cells])

    def map(self, func: Callable[[T], U]) -> "Grid[U]":
        return Grid(width=self.width, height=self.height, cells=[[func(v) for v in row] for row in self.cells])

    def to_string(self, render: Callable[[T], str] = str) -> str:
        return "\n".join("".join(render(cell) for cell in row) for row in self.cells) + "\n"
