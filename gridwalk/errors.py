# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

class MalformedInput(ValueError):
    """Raised when puzzle text or a settings file cannot be parsed."""


class OutOfBounds(IndexError):
    """Raised when a cell outside the grid is written."""


class InvalidCost(ValueError):
    """Raised when a neighbour policy yields a weight the engine cannot handle."""
