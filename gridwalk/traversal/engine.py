# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import heapq
import itertools
import logging
from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, Mapping, Optional, TypeVar

from gridwalk.errors import InvalidCost

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)

NeighbourPolicy = Callable[[S], Iterable[tuple[S, int]]]
GoalTest = Callable[[S], bool]


class TieBreak(Enum):
    FIRST = "first"
    ALL = "all"


class DistanceMap(Mapping[S, int]):
    """Read-only state -> cost mapping, iterated in the order states were settled."""

    def __init__(self, costs: dict[S, int]):
        self._costs = costs

    def __getitem__(self, state: S) -> int:
        return self._costs[state]

    def __iter__(self) -> Iterator[S]:
        return iter(self._costs)

    def __len__(self) -> int:
        return len(self._costs)

    def __repr__(self) -> str:
        return f"DistanceMap({self._costs!r})"

    def inverted(self, total: int) -> "DistanceMap[S]":
        """Distance to the far end of a path of length ``total`` for every settled state."""
        return DistanceMap({state: total - cost for state, cost in self._costs.items()})


@dataclass
class SearchResult(Generic[S]):
    start: S
    distances: DistanceMap[S]
    predecessors: dict[S, set[S]] = field(default_factory=dict)
    parents: dict[S, S] = field(default_factory=dict)
    goals: list[S] = field(default_factory=list)
    best_cost: Optional[int] = None

    @property
    def reached(self) -> bool:
        return self.best_cost is not None

    def cost(self, state: S) -> Optional[int]:
        return self.distances.get(state)

    def path(self, goal: Optional[S] = None) -> list[S]:
        """
        Returns one cheapest path from the start to ``goal`` (default: the first
        goal reached), start first. Returns an empty list for unreached states.
        """
        if goal is None:
            if not self.goals:
                return []
            goal = self.goals[0]
        if goal not in self.distances:
            return []

        # parents hold the arrival that settled each state, so the chain is acyclic
        path = [goal]
        current = goal
        while current != self.start:
            current = self.parents[current]
            path.append(current)
        path.reverse()
        return path


class _HeapFrontier(Generic[S]):
    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Any, Any]] = []
        self._counter = itertools.count()

    def push(self, cost: int, state: S, previous: Optional[S]) -> None:
        heapq.heappush(self._heap, (cost, next(self._counter), state, previous))

    def pop(self) -> tuple[int, S, Optional[S]]:
        cost, _, state, previous = heapq.heappop(self._heap)
        return cost, state, previous

    def __len__(self) -> int:
        return len(self._heap)


class _FifoFrontier(Generic[S]):
    def __init__(self) -> None:
        self._queue: deque[tuple[int, S, Optional[S]]] = deque()

    def push(self, cost: int, state: S, previous: Optional[S]) -> None:
        self._queue.append((cost, state, previous))

    def pop(self) -> tuple[int, S, Optional[S]]:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


def _check_cost(step: Any, unit_cost: bool) -> int:
    if isinstance(step, bool) or not isinstance(step, int):
        raise InvalidCost(f"Edge cost must be an integer, got {step!r}")
    if step < 0:
        raise InvalidCost(f"Edge cost must not be negative, got {step}")
    if unit_cost and step != 1:
        raise InvalidCost(f"Unit-cost search got an edge of cost {step}")
    return step


def shortest_path(
    start: S,
    neighbours: NeighbourPolicy[S],
    is_goal: Optional[GoalTest[S]] = None,
    tie_break: TieBreak = TieBreak.FIRST,
    unit_cost: bool = False,
) -> SearchResult[S]:
    """
    Cheapest-first search from ``start``.

    ``neighbours`` yields ``(state, cost)`` pairs with non-negative integer
    costs. With ``unit_cost`` the frontier is a FIFO queue (plain BFS) and every
    cost must be 1; otherwise it is a binary heap (Dijkstra). Entries of equal
    cost are popped in the order they were pushed.

    Without ``is_goal`` the whole reachable space is settled. With a goal test,
    ``TieBreak.FIRST`` stops at the first goal popped, while ``TieBreak.ALL``
    drains every entry at the optimal cost so that all optimal goals and all
    equal-cost predecessors are recorded.

    Goal states are settled but never expanded. An unreachable goal is
    reported as ``best_cost is None``, not as an error.
    """
    frontier: _HeapFrontier[S] | _FifoFrontier[S] = _FifoFrontier() if unit_cost else _HeapFrontier()
    frontier.push(0, start, None)

    costs: dict[S, int] = {}
    predecessors: dict[S, set[S]] = {}
    parents: dict[S, S] = {}
    goals: list[S] = []
    best_cost: Optional[int] = None
    collect_all = tie_break == TieBreak.ALL
    pops = 0

    while frontier:
        cost, state, previous = frontier.pop()
        pops += 1

        if best_cost is not None and cost > best_cost:
            break

        settled = costs.get(state)
        if settled is not None:
            # A repeat arrival never beats the settled cost; ties are alternative predecessors.
            if collect_all and cost == settled and previous is not None:
                predecessors[state].add(previous)
            continue

        costs[state] = cost
        predecessors[state] = set() if previous is None else {previous}
        if previous is not None:
            parents[state] = previous

        if is_goal is not None and is_goal(state):
            goals.append(state)
            if best_cost is None:
                best_cost = cost
            if not collect_all:
                break
            continue

        for nxt, step in neighbours(state):
            new_cost = cost + _check_cost(step, unit_cost)
            known = costs.get(nxt)
            if known is not None and known < new_cost:
                continue
            if known is not None and not collect_all:
                continue
            frontier.push(new_cost, nxt, state)

    logger.debug(
        "search from %s settled %d states in %d pops, best cost %s",
        start,
        len(costs),
        pops,
        best_cost,
    )
    return SearchResult(
        start=start,
        distances=DistanceMap(costs),
        predecessors=predecessors,
        parents=parents,
        goals=goals,
        best_cost=best_cost,
    )


def breadth_first(
    start: S,
    neighbours: Callable[[S], Iterable[S]],
    is_goal: Optional[GoalTest[S]] = None,
    tie_break: TieBreak = TieBreak.FIRST,
) -> SearchResult[S]:
    """Unit-cost search over a policy that yields bare states."""
    return shortest_path(
        start,
        lambda state: ((nxt, 1) for nxt in neighbours(state)),
        is_goal=is_goal,
        tie_break=tie_break,
        unit_cost=True,
    )
