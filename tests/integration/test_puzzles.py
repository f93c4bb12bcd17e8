# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import pytest

from gridwalk.config import MemorySpaceSettings, RaceSettings, Settings
from gridwalk.errors import MalformedInput
from gridwalk.puzzles import day04, day06, day08, day10, day12, day15, day16, day18, day20

pytestmark = pytest.mark.integration

WORD_SEARCH = """\
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""

PATROL = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

ANTENNAS = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

TRAILS = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

GARDEN = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

MAZE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

BIGGER_MAZE = """\
#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################
"""

BYTES = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""

SMALL_WAREHOUSE = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

WAREHOUSE = """\
##########
#..O..O.O#
#......O.#
#.OO..O.O#
#..O@..O.#
#O#..O...#
#O..O..O.#
#.OO.O.OO#
#....O...#
##########

<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^
vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v
><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<
<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^
^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><
^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^
>^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^
<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>
^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>
v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^
"""

WIDE_BOXES = """\
#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""

RACE = """\
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


def test_day04_word_search() -> None:
    assert day04.part_one(WORD_SEARCH) == 18
    assert day04.part_two(WORD_SEARCH) == 9


def test_day06_guard_patrol() -> None:
    assert day06.part_one(PATROL) == 41
    assert day06.part_two(PATROL) == 6


def test_day06_rejects_missing_guard() -> None:
    with pytest.raises(MalformedInput, match="No guard found"):
        day06.part_one("...\n.#.\n...")


def test_day06_rejects_unexpected_character_after_guard() -> None:
    with pytest.raises(MalformedInput, match="Unexpected character 'x'"):
        day06.part_one("^.\n.x")


def test_day06_rejects_second_guard() -> None:
    with pytest.raises(MalformedInput, match="Second guard"):
        day06.part_two("^.\n.>")


def test_day08_antennas() -> None:
    assert day08.part_one(ANTENNAS) == 14
    assert day08.part_two(ANTENNAS) == 34


def test_day10_trails() -> None:
    assert day10.part_one(TRAILS) == 36
    assert day10.part_two(TRAILS) == 81


def test_day10_rejects_non_digits() -> None:
    with pytest.raises(MalformedInput, match="Invalid height"):
        day10.part_one("01\n2x")


def test_day12_garden() -> None:
    assert day12.part_one(GARDEN) == 1930
    assert day12.part_two(GARDEN) == 1206


def test_day15_small_warehouse() -> None:
    assert day15.part_one(SMALL_WAREHOUSE) == 2028


def test_day15_warehouse() -> None:
    assert day15.part_one(WAREHOUSE) == 10092
    assert day15.part_two(WAREHOUSE) == 9021


def test_day15_wide_boxes_move_together() -> None:
    assert day15.part_two(WIDE_BOXES) == 618


def test_day15_push_into_wall_moves_nothing() -> None:
    assert day15.part_one("#####\n#@OO#\n#####\n\n>>") == 205


def test_day15_rejects_missing_moves_section() -> None:
    with pytest.raises(MalformedInput, match="blank line"):
        day15.part_one("###\n#@#\n###")


def test_day15_rejects_unknown_move() -> None:
    with pytest.raises(MalformedInput, match="Invalid arrow"):
        day15.part_one("###\n#@#\n###\n\n^x")


def test_day16_reindeer_maze() -> None:
    assert day16.part_one(MAZE) == 7036
    assert day16.part_two(MAZE) == 45


def test_day16_bigger_maze() -> None:
    assert day16.part_one(BIGGER_MAZE) == 11048
    assert day16.part_two(BIGGER_MAZE) == 64


def test_day16_straight_corridor() -> None:
    corridor = "#####\n#S.E#\n#####"
    assert day16.part_one(corridor) == 2
    assert day16.part_two(corridor) == 3


def test_day16_walled_off_end() -> None:
    maze = "#####\n#S#E#\n#####"
    assert day16.part_one(maze) is None
    assert day16.part_two(maze) is None


def test_day18_memory_space() -> None:
    settings = Settings(memory_space=MemorySpaceSettings(size=7, fallen_bytes=12))
    assert day18.part_one(BYTES, settings) == 22
    assert day18.part_two(BYTES, settings) == "6,1"


def test_day18_never_blocked() -> None:
    settings = Settings(memory_space=MemorySpaceSettings(size=3, fallen_bytes=1))
    assert day18.part_two("1,1\n", settings) is None


def test_day20_short_cheats() -> None:
    assert day20.part_one(RACE, Settings(race=RaceSettings(min_saving=64))) == 1
    assert day20.part_one(RACE, Settings(race=RaceSettings(min_saving=20))) == 5
    assert day20.part_one(RACE) == 0


def test_day20_long_cheats() -> None:
    assert day20.part_two(RACE, Settings(race=RaceSettings(min_saving=76))) == 3
    assert day20.part_two(RACE, Settings(race=RaceSettings(min_saving=50))) == 285
