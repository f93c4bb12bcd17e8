# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import argparse
import logging
import sys

from gridwalk.config import load_settings
from gridwalk.errors import MalformedInput
from gridwalk.puzzles import PUZZLES
from gridwalk.runner import solve


def main() -> None:
    parser = argparse.ArgumentParser(description="Solve a daily grid puzzle.")
    parser.add_argument("day", type=int, choices=sorted(PUZZLES), help="Puzzle day")
    parser.add_argument("--part", type=int, choices=[1, 2], help="Only solve this part")
    parser.add_argument("--input", help="Input file (default: <input_dir>/<day>.txt)")
    parser.add_argument("--settings", help="YAML file overriding the default settings")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search statistics")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    parts = [args.part] if args.part else [1, 2]

    try:
        for part in parts:
            answer = solve(args.day, part, settings=settings, input_file=args.input)
            print(f"Part {part}: {answer if answer is not None else '-'}")
    except (FileNotFoundError, MalformedInput) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
