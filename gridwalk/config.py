# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import dataclasses
import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gridwalk.errors import MalformedInput

DEFAULT_SETTINGS_FILE = Path(__file__).parent / "settings.yaml"


@dataclass
class MazeSettings:
    forward_cost: int = 1
    turn_cost: int = 1000


@dataclass
class MemorySpaceSettings:
    size: int = 71
    fallen_bytes: int = 1024


@dataclass
class RaceSettings:
    min_saving: int = 100
    short_cheat: int = 2
    long_cheat: int = 20


@dataclass
class Settings:
    input_dir: str = "inputs"
    maze: MazeSettings = field(default_factory=MazeSettings)
    memory_space: MemorySpaceSettings = field(default_factory=MemorySpaceSettings)
    race: RaceSettings = field(default_factory=RaceSettings)


def _merge(target: Any, data: dict[str, Any], where: str) -> None:
    names = {f.name: f for f in dataclasses.fields(target)}
    for key, value in data.items():
        if key not in names:
            raise MalformedInput(f"Unknown setting '{where}{key}'")
        current = getattr(target, key)
        if dataclasses.is_dataclass(current):
            if not isinstance(value, dict):
                raise MalformedInput(f"Setting '{where}{key}' must be a mapping, got {value!r}")
            _merge(current, value, f"{where}{key}.")
        elif isinstance(current, int) and (isinstance(value, bool) or not isinstance(value, int)):
            raise MalformedInput(f"Setting '{where}{key}' must be an integer, got {value!r}")
        else:
            setattr(target, key, value)


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load puzzle settings from a YAML file.

    Args:
        path: YAML file to read. If None, uses the settings.yaml shipped with
              the package. Keys missing from the file keep their defaults.

    Returns:
        The merged Settings
    """
    settings_file = DEFAULT_SETTINGS_FILE if path is None else Path(path)

    with open(settings_file, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    settings = Settings()
    if data is None:
        return settings
    if not isinstance(data, dict):
        raise MalformedInput(f"Settings file {settings_file} must contain a mapping")
    _merge(settings, data, "")
    return settings


@functools.lru_cache(maxsize=1)
def default_settings() -> Settings:
    return load_settings()
