# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from gridwalk.grid import Grid
from gridwalk.models import Coordinate
from gridwalk.regions import count_perimeter, count_sides, extract_regions, flood_fill


def test_uniform_block_is_one_region() -> None:
    grid = Grid.from_string("AAAA\nAAAA\nAAAA\nAAAA")
    regions = extract_regions(grid)

    assert len(regions) == 1
    region = regions[0]
    assert region.value == "A"
    assert region.area == 16
    assert region.perimeter == 16
    assert region.sides == 4


def test_small_garden() -> None:
    grid = Grid.from_string("AAAA\nBBCD\nBBCC\nEEEC")
    regions = {region.value: region for region in extract_regions(grid)}

    assert regions["A"].area == 4
    assert regions["A"].perimeter == 10
    assert regions["A"].sides == 4
    assert regions["B"].area == 4
    assert regions["B"].perimeter == 8
    assert regions["C"].area == 4
    assert regions["C"].perimeter == 10
    assert regions["C"].sides == 8
    assert regions["D"].area == 1
    assert regions["D"].sides == 4
    assert regions["E"].area == 3
    assert regions["E"].sides == 4

    assert sum(r.price for r in regions.values()) == 140
    assert sum(r.bulk_price for r in regions.values()) == 80


def test_separate_regions_with_same_value() -> None:
    grid = Grid.from_string("OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO")
    regions = extract_regions(grid)

    xs = [r for r in regions if r.value == "X"]
    assert len(xs) == 4
    assert all(r.area == 1 and r.perimeter == 4 and r.sides == 4 for r in xs)

    (outer,) = [r for r in regions if r.value == "O"]
    assert outer.area == 21
    assert outer.perimeter == 36
    assert outer.sides == 20


def test_e_shape_sides() -> None:
    grid = Grid.from_string("EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE")
    regions = extract_regions(grid)
    (e,) = [r for r in regions if r.value == "E"]
    assert e.area == 17
    assert e.sides == 12
    assert sum(r.bulk_price for r in regions) == 236


def test_regions_seeded_in_row_major_order() -> None:
    grid = Grid.from_string("ab\nba")
    assert [r.value for r in extract_regions(grid)] == ["a", "b", "b", "a"]


def test_background_cells_are_skipped() -> None:
    grid = Grid.from_string("#.#\n...\n#.#")
    regions = extract_regions(grid, background=".")
    assert len(regions) == 4
    assert all(r.value == "#" for r in regions)
    assert sum(r.area for r in regions) == 4


def test_flood_fill_and_metrics() -> None:
    grid = Grid.from_string("AAB\nABB\nAAA")
    cells = flood_fill(grid, Coordinate(0, 0))
    assert cells == {
        Coordinate(0, 0),
        Coordinate(1, 0),
        Coordinate(0, 1),
        Coordinate(0, 2),
        Coordinate(1, 2),
        Coordinate(2, 2),
    }
    assert count_perimeter(cells) == 14
    assert count_sides(cells) == 8
