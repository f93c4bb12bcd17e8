# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import logging
import time
from pathlib import Path
from typing import Optional, Union

from gridwalk.config import Settings, default_settings
from gridwalk.io import input_path, read_input
from gridwalk.puzzles import PUZZLES

logger = logging.getLogger(__name__)

Answer = Optional[Union[int, str]]


def solve(
    day: int,
    part: int,
    text: Optional[str] = None,
    settings: Optional[Settings] = None,
    input_file: Optional[Union[str, Path]] = None,
) -> Answer:
    """
    Solves one part of one day's puzzle.

    The input is ``text`` when given, otherwise the contents of ``input_file``,
    otherwise ``<input_dir>/<day>.txt`` from the settings.
    """
    if day not in PUZZLES:
        raise KeyError(f"No solver for day {day}")
    if part not in (1, 2):
        raise ValueError(f"Part must be 1 or 2, got {part}")

    settings = settings or default_settings()
    if text is None:
        path = Path(input_file) if input_file is not None else input_path(day, settings.input_dir)
        text = read_input(path)

    puzzle = PUZZLES[day]
    solver = puzzle.part_one if part == 1 else puzzle.part_two

    start_time = time.perf_counter()
    answer = solver(text, settings)
    elapsed = time.perf_counter() - start_time

    logger.info("day %02d part %d: %s (%.3fs)", day, part, answer, elapsed)
    return answer
