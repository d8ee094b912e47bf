from __future__ import annotations

import enum
import math
from typing import Any, Iterable, List, Optional, Union, TYPE_CHECKING

from tqdm import tqdm

from .distances import DistanceTable
from .errors import EmptyProblem


__all__ = (
    "Objective",
    "RouteSearch",
    "best_total_distance",
    "shortest_route",
    "longest_route",
)


class Objective(enum.Enum):
    """Direction of a route search"""

    MINIMIZE = "min"
    MAXIMIZE = "max"

    @property
    def seed(self) -> Union[int, float]:
        """The best-known value before any route has been completed"""
        return math.inf if self is Objective.MINIMIZE else 0

    @property
    def prune_before_leaf(self) -> bool:
        """Whether a partial route can be discarded before it is complete

        Only valid when minimizing: extending a route never makes it shorter.
        """
        return self is Objective.MINIMIZE

    def better(self, first: Union[int, float], second: Union[int, float], /) -> bool:
        if self is Objective.MINIMIZE:
            return first < second

        return first > second


class RouteSearch:
    """Exhaustive depth-first search over all routes visiting every city exactly once

    Parameters
    -----
    table:
        The distance table, shared read-only by every branch of the search
    objective:
        Whether to search for the shortest or the longest route
    prune:
        Whether to skip a branch as soon as its partial length is not better than the best
        complete route found so far. Defaults to `objective.prune_before_leaf`.
    use_tqdm:
        Whether to display a progress bar over the first city of the route
    """

    __slots__ = (
        "objective",
        "prune",
        "table",
        "use_tqdm",
    )
    if TYPE_CHECKING:
        objective: Objective
        prune: bool
        table: DistanceTable
        use_tqdm: bool

    def __init__(self, table: DistanceTable, objective: Objective, *, prune: Optional[bool] = None, use_tqdm: bool = False) -> None:
        if prune is None:
            prune = objective.prune_before_leaf

        if prune and not objective.prune_before_leaf:
            raise ValueError(f"Cannot prune partial routes when searching with {objective}")

        self.table = table
        self.objective = objective
        self.prune = prune
        self.use_tqdm = use_tqdm

    def best_total_distance(
        self,
        path: List[int],
        path_distance: int,
        best_known: Union[int, float],
        unvisited: Optional[List[bool]] = None,
    ) -> Union[int, float]:
        """Find the best total length of a route starting with `path`

        Parameters
        -----
        path:
            The cities already visited, in order. The last one is the current position. It is
            empty at the root of the search.
        path_distance:
            The length of `path`
        best_known:
            The best total length among the routes already explored
        unvisited:
            `unvisited[city]` tells whether `city` is still to be visited. Built from `path` when
            omitted. The list is updated in place during the search and restored before returning.

        Returns
        -----
        The best total length of a route completing `path`, never worse than `best_known`.
        """
        assert all(city in self.table.cities() for city in path), f"Unknown city in {path}"
        if unvisited is None:
            visited = set(path)
            unvisited = [city not in visited for city in self.table.cities()]

        remaining = self.table.dimension - len(path)
        assert remaining > 0, "Call only if there is at least one city left to visit"
        assert len(set(path)) == len(path), f"A city is visited more than once: {path}"
        assert len(unvisited) == self.table.dimension
        assert not any(unvisited[city] for city in path)
        assert unvisited.count(True) == remaining

        current = path[-1] if path else None
        candidates: Union[Iterable[int], tqdm[int]] = [city for city in self.table.cities() if unvisited[city]]
        if current is None and self.use_tqdm:
            candidates = tqdm(candidates, desc=f"Search ({self.objective.value})", ascii=" █", colour="blue")

        for city in candidates:
            leg_distance = 0 if current is None else self.table[current, city]
            total = path_distance + leg_distance

            if remaining == 1:
                # The route is complete
                if self.objective.better(total, best_known):
                    best_known = total

                continue

            if self.prune and not self.objective.better(total, best_known):
                continue

            unvisited[city] = False
            path.append(city)
            try:
                result = self.best_total_distance(path, total, best_known, unvisited)
            finally:
                path.pop()
                unvisited[city] = True

            assert result == best_known or self.objective.better(result, best_known)
            best_known = result

        return best_known

    def solve(self) -> int:
        if self.table.dimension == 0:
            raise EmptyProblem

        result = self.best_total_distance([], 0, self.objective.seed, [True] * self.table.dimension)
        assert isinstance(result, int)
        return result


def best_total_distance(table: DistanceTable, objective: Objective, **kwargs: Any) -> int:
    """Search for the best route length in `table`

    Keyword arguments are passed to `RouteSearch`. Each call starts from a fresh search state.
    """
    return RouteSearch(table, objective, **kwargs).solve()


def shortest_route(table: DistanceTable, **kwargs: Any) -> int:
    return best_total_distance(table, Objective.MINIMIZE, **kwargs)


def longest_route(table: DistanceTable, **kwargs: Any) -> int:
    return best_total_distance(table, Objective.MAXIMIZE, **kwargs)
