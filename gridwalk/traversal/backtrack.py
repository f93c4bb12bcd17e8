# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from collections import deque
from typing import Callable, Hashable, TypeVar

from gridwalk.models import Coordinate
from gridwalk.traversal.engine import SearchResult

S = TypeVar("S", bound=Hashable)


def backtrack(result: SearchResult[S]) -> set[S]:
    """
    Collects every state lying on some optimal path.

    Walks the predecessor sets breadth-first, starting from each goal settled
    at the optimal cost. Only ``TieBreak.ALL`` searches record every
    equal-cost predecessor; for a ``TieBreak.FIRST`` result this returns the
    states of a single optimal path.
    """
    if result.best_cost is None:
        return set()

    sources = [goal for goal in result.goals if result.distances[goal] == result.best_cost]
    on_path = set(sources)
    queue = deque(sources)
    while queue:
        state = queue.popleft()
        for previous in result.predecessors.get(state, ()):
            if previous not in on_path:
                on_path.add(previous)
                queue.append(previous)
    return on_path


def backtrack_positions(result: SearchResult[S], locate: Callable[[S], Coordinate]) -> set[Coordinate]:
    return {locate(state) for state in backtrack(result)}
