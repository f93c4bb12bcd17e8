# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path
from typing import Callable, Optional, TypeVar

from gridwalk.grid import Grid

T = TypeVar("T")


def input_path(day: int, input_dir: str | Path) -> Path:
    return Path(input_dir) / f"{day:02d}.txt"


def read_input(file_path: str | Path) -> str:
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def read_grid(file_path: str | Path, parse: Optional[Callable[[str], T]] = None) -> Grid[T]:
    return Grid.from_string(read_input(file_path), parse)


def write_grid(grid: Grid[T], file_path: str | Path, render: Callable[[T], str] = str) -> None:
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(grid.to_string(render))
