from __future__ import annotations

import itertools
import re
from typing import Dict, Iterable, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np
from matplotlib import axes, pyplot

from .errors import (
    AsymmetricDistance,
    EmptyProblem,
    MalformedEdge,
    MissingDistance,
    ProblemNotFound,
    ProblemParsingException,
)
from .utils import dump, ngettext


__all__ = (
    "parse_edge",
    "DistanceTable",
)
_DISTANCE = re.compile(r"[0-9]+")


def parse_edge(line: str, *, line_number: Optional[int] = None) -> Tuple[str, str, int]:
    """Parse a single `<City> to <City> = <Distance>` line

    Parameters
    -----
    line:
        The line to parse
    line_number:
        The 1-based position of the line in its file, only used in error messages

    Returns
    -----
    The names of the 2 cities and the distance between them
    """
    tokens = line.split()
    if len(tokens) != 5 or tokens[1] != "to" or tokens[3] != "=" or _DISTANCE.fullmatch(tokens[4]) is None:
        raise MalformedEdge(line, line_number)

    first, _, second, _, distance = tokens
    if first == second:
        raise MalformedEdge(line, line_number)

    return first, second, int(distance)


class DistanceTable:
    """Symmetric distances between cities, addressed by dense city indices

    Instances are read-only after construction and can be shared by any number of searches.
    """

    __slots__ = (
        "distances",
        "indices",
        "names",
    )
    if TYPE_CHECKING:
        distances: Dict[Tuple[int, int], int]
        indices: Dict[str, int]
        names: Tuple[str, ...]

    def __init__(self, names: Sequence[str], distances: Dict[Tuple[int, int], int]) -> None:
        self.names = tuple(names)
        self.indices = {name: index for index, name in enumerate(self.names)}
        self.distances = distances

    @property
    def dimension(self) -> int:
        return len(self.names)

    def cities(self) -> range:
        return range(self.dimension)

    def name_of(self, index: int, /) -> str:
        return self.names[index]

    def index_of(self, name: str, /) -> int:
        return self.indices[name]

    def __getitem__(self, key: Tuple[int, int]) -> int:
        return self.distances[key]

    def route_length(self, route: Iterable[int], /) -> int:
        """The total length of the legs between consecutive cities of `route`"""
        result = 0
        for first, second in itertools.pairwise(route):
            result += self.distances[first, second]

        return result

    def check(self) -> None:
        """Ensure that every pair of distinct cities has the same distance in both directions"""
        for first, second in itertools.combinations(self.cities(), 2):
            try:
                forward = self.distances[first, second]
                backward = self.distances[second, first]
            except KeyError:
                raise MissingDistance(self.names[first], self.names[second]) from None

            if forward != backward:
                raise AsymmetricDistance(self.names[first], self.names[second])

    def to_matrix(self) -> np.ndarray:
        """The distances as an `N x N` matrix with zeros on the diagonal

        The matrix holds Python integers (`dtype=object`) when a distance does not fit in `np.int64`.
        """
        limit = np.iinfo(np.int64).max
        dtype = np.int64 if all(distance <= limit for distance in self.distances.values()) else object
        matrix = np.zeros((self.dimension, self.dimension), dtype=dtype)
        for (first, second), distance in self.distances.items():
            matrix[first, second] = distance

        return matrix

    def dump(self) -> None:
        dump("Cities", set(self.names))
        dump("Indices", self.indices)
        dump("Distances", self.distances)

    def plot(self) -> None:
        _, ax = pyplot.subplots()
        assert isinstance(ax, axes.Axes)

        matrix = self.to_matrix()
        image = ax.imshow(matrix.astype(np.float64), cmap="Blues")
        ax.set_xticks(self.cities())
        ax.set_xticklabels(self.names, rotation=45, ha="right")
        ax.set_yticks(self.cities())
        ax.set_yticklabels(self.names)

        for first, second in itertools.product(self.cities(), repeat=2):
            if first != second:
                ax.annotate(str(matrix[first, second]), (second, first), ha="center", va="center")

        ax.set_title(f"{self.dimension} " + ngettext(self.dimension == 1, "city", "cities"))
        pyplot.colorbar(image, ax=ax)
        pyplot.show()
        pyplot.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} dimension={self.dimension}>"

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> DistanceTable:
        """Build a distance table from `<City> to <City> = <Distance>` lines

        Blank lines are skipped. When the same pair of cities appears more than once, the last
        distance wins.
        """
        indices: Dict[str, int] = {}
        distances: Dict[Tuple[int, int], int] = {}
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            first_name, second_name, distance = parse_edge(line, line_number=line_number)
            first = indices.setdefault(first_name, len(indices))
            second = indices.setdefault(second_name, len(indices))
            distances[first, second] = distances[second, first] = distance

        if len(indices) == 0:
            raise EmptyProblem

        table = cls(list(indices), distances)
        table.check()
        return table

    @classmethod
    def import_problem(cls, problem: str) -> DistanceTable:
        try:
            with open(problem, "r", encoding="utf-8") as file:
                data = file.read()

        except OSError as exc:
            raise ProblemNotFound(problem) from exc

        except UnicodeDecodeError as exc:
            raise ProblemParsingException(problem, exc) from exc

        try:
            return cls.from_lines(data.splitlines())

        except Exception as exc:
            raise ProblemParsingException(problem, exc) from exc
