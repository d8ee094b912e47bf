from __future__ import annotations

import argparse
from typing import Optional, Sequence, TYPE_CHECKING

from . import utils
from .distances import DistanceTable
from .search import longest_route, shortest_route


__all__ = (
    "Namespace",
    "main",
)


class Namespace(argparse.Namespace):
    if TYPE_CHECKING:
        input: str
        quiet: bool
        no_prune: bool
        verbose: bool
        plot: bool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shortest and longest routes visiting every city exactly once")
    parser.add_argument("input", nargs="?", default="input.txt", type=str, help="the file containing \"<City> to <City> = <Distance>\" lines (default: input.txt)")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the cities and the distance table")
    parser.add_argument("-n", "--no-prune", action="store_true", help="explore every route when searching for the shortest one")
    parser.add_argument("-v", "--verbose", action="store_true", help="display the platform information and the progress bars")
    parser.add_argument("-p", "--plot", action="store_true", help="plot the distance table after searching")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    namespace = Namespace()
    build_parser().parse_args(argv, namespace=namespace)

    if namespace.verbose:
        utils.display_platform()
        print(namespace)

    table = DistanceTable.import_problem(namespace.input)
    if not namespace.quiet:
        table.dump()

    print(f"MIN: {shortest_route(table, prune=not namespace.no_prune, use_tqdm=namespace.verbose)}")
    print(f"MAX: {longest_route(table, use_tqdm=namespace.verbose)}")

    if namespace.plot:
        table.plot()
