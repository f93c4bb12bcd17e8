# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from types import ModuleType

from . import day04, day06, day08, day10, day12, day15, day16, day18, day20

PUZZLES: dict[int, ModuleType] = {
    4: day04,
    6: day06,
    8: day08,
    10: day10,
    12: day12,
    15: day15,
    16: day16,
    18: day18,
    20: day20,
}

__all__ = ["PUZZLES"]
