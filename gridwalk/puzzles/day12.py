# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Garden Groups: fence prices of the garden plot regions."""

from typing import Optional

from gridwalk.config import Settings
from gridwalk.grid import Grid
from gridwalk.regions import extract_regions


def part_one(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    return sum(region.price for region in extract_regions(Grid.from_string(text)))


def part_two(text: str, settings: Optional[Settings] = None) -> Optional[int]:
    return sum(region.bulk_price for region in extract_regions(Grid.from_string(text)))
