# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from .errors import InvalidCost, MalformedInput, OutOfBounds
from .grid import Grid
from .models import CARDINALS, COMPASS, Coordinate, Direction, Pose
from .regions import Region, extract_regions

__all__ = [
    "Coordinate",
    "Direction",
    "Pose",
    "CARDINALS",
    "COMPASS",
    "Grid",
    "Region",
    "extract_regions",
    "MalformedInput",
    "OutOfBounds",
    "InvalidCost",
]
