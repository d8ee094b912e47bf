from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING


__all__ = (
    "SalesmanException",
    "ProblemNotFound",
    "ProblemParsingException",
    "MalformedEdge",
    "EmptyProblem",
    "InvalidDistanceTable",
    "MissingDistance",
    "AsymmetricDistance",
)


class SalesmanException(Exception):
    """Base class for all exceptions from this library"""
    pass


class ProblemNotFound(SalesmanException):
    """Exception raised when the problem input file cannot be read"""

    def __init__(self, problem: Any, /) -> None:
        super().__init__(f"Cannot read the problem input file: {problem!r}")


class ProblemParsingException(SalesmanException):
    """Exception raised when parsing the problem input fails"""

    __slots__ = (
        "original",
    )
    if TYPE_CHECKING:
        original: BaseException

    def __init__(self, problem: Any, original: BaseException, /) -> None:
        super().__init__(f"Cannot parse input for problem {problem!r}: {original}")
        self.original = original


class MalformedEdge(SalesmanException):
    """Exception raised when a line does not match `<City> to <City> = <Distance>`"""

    __slots__ = (
        "line",
        "line_number",
    )
    if TYPE_CHECKING:
        line: str
        line_number: Optional[int]

    def __init__(self, line: str, line_number: Optional[int] = None, /) -> None:
        self.line = line
        self.line_number = line_number

        where = "" if line_number is None else f" at line {line_number}"
        super().__init__(f"Malformed edge{where}: {line!r}")


class EmptyProblem(SalesmanException):
    """Exception raised when there are no cities to visit"""

    def __init__(self) -> None:
        super().__init__("The problem does not contain any cities")


class InvalidDistanceTable(SalesmanException):
    """Base class for violations of the distance table invariants"""

    __slots__ = (
        "first",
        "second",
    )
    if TYPE_CHECKING:
        first: str
        second: str


class MissingDistance(InvalidDistanceTable):
    """Exception raised when the distance between 2 cities is unknown"""

    def __init__(self, first: str, second: str, /) -> None:
        self.first = first
        self.second = second
        super().__init__(f"No distance from {first!r} to {second!r}")


class AsymmetricDistance(InvalidDistanceTable):
    """Exception raised when the 2 directions of an edge have different distances"""

    def __init__(self, first: str, second: str, /) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Distances between {first!r} and {second!r} are not symmetric")
