# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .backtrack import backtrack, backtrack_positions
from .engine import (
    DistanceMap,
    SearchResult,
    TieBreak,
    breadth_first,
    shortest_path,
)
from .policies import open_steps, turning_steps

__all__ = [
    "shortest_path",
    "breadth_first",
    "SearchResult",
    "DistanceMap",
    "TieBreak",
    "backtrack",
    "backtrack_positions",
    "open_steps",
    "turning_steps",
]
