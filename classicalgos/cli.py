"""Command line demonstrations of the algorithms on fixed example data."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence

from classicalgos.dynamic import knapsack
from classicalgos.graphs import Edge, NegativeCycleError, bellman_ford, prim_mst
from classicalgos.greedy import Job, sequence_jobs
from classicalgos.matching import kmp_search

__all__ = ["main"]

KNAPSACK_VALUES = (60, 100, 120)
KNAPSACK_WEIGHTS = (10, 20, 30)
KNAPSACK_CAPACITY = 50

PRIM_GRAPH = (
    (0, 2, 0, 6, 0),
    (2, 0, 3, 8, 5),
    (0, 3, 0, 0, 7),
    (6, 8, 0, 0, 9),
    (0, 5, 7, 9, 0),
)

BELLMAN_EDGES = (
    Edge(0, 1, -1), Edge(0, 2, 4), Edge(1, 2, 3), Edge(1, 3, 2),
    Edge(1, 4, 2), Edge(3, 2, 5), Edge(3, 1, 1), Edge(4, 3, -3),
)
BELLMAN_VERTICES = 5

KMP_TEXT = "ABCCABABCA"
KMP_PATTERN = "ABCA"

JOBS = (
    Job("a", 2, 100), Job("b", 1, 19), Job("c", 2, 27),
    Job("d", 1, 25), Job("e", 3, 15),
)


def _run_knapsack(args: argparse.Namespace) -> int:
    best = knapsack(args.capacity, KNAPSACK_WEIGHTS, KNAPSACK_VALUES)
    print(f"Maximum profit: {best}")
    return 0


def _run_prim(args: argparse.Namespace) -> int:
    print("Edge   Weight")
    for edge in prim_mst(PRIM_GRAPH):
        print(f"{edge.u} - {edge.v}    {edge.weight}")
    return 0


def _run_bellman_ford(args: argparse.Namespace) -> int:
    try:
        distances = bellman_ford(BELLMAN_EDGES, BELLMAN_VERTICES, args.source)
    except NegativeCycleError:
        print("Graph contains negative weight cycle")
        return 0
    print("Vertex   Distance from Source")
    for vertex, distance in enumerate(distances):
        shown = "INF" if distance == math.inf else distance
        print(f"{vertex} \t\t {shown}")
    return 0


def _run_kmp(args: argparse.Namespace) -> int:
    for index in kmp_search(args.text, args.pattern):
        print(f"Pattern found at index {index}")
    return 0


def _parse_job(spec: str) -> Job:
    """Parse a job given as ``id:deadline:profit``."""
    parts = spec.split(":")
    if len(parts) != 3 or not parts[0]:
        raise ValueError(f"job must be given as id:deadline:profit, not {spec!r}")
    job_id, deadline, profit = parts
    try:
        return Job(job_id, int(deadline), int(profit))
    except ValueError:
        raise ValueError(f"deadline and profit must be integers in {spec!r}") from None


def _run_jobs(args: argparse.Namespace) -> int:
    specs = getattr(args, "job", None)
    jobs = [_parse_job(spec) for spec in specs] if specs else list(JOBS)
    sequence = sequence_jobs(jobs)
    print("Job sequence for maximum profit: " + " ".join(sequence))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classicalgos", description="Run a classic algorithm on example data."
    )
    commands = parser.add_subparsers(dest="command")

    knap = commands.add_parser("knapsack", help="0/1 knapsack")
    knap.add_argument("--capacity", type=int, default=KNAPSACK_CAPACITY)
    knap.set_defaults(handler=_run_knapsack)

    prim = commands.add_parser("prim", help="minimum spanning tree")
    prim.set_defaults(handler=_run_prim)

    bellman = commands.add_parser("bellman-ford", help="single-source shortest paths")
    bellman.add_argument("--source", type=int, default=0)
    bellman.set_defaults(handler=_run_bellman_ford)

    kmp = commands.add_parser("kmp", help="Knuth-Morris-Pratt search")
    kmp.add_argument("text", nargs="?", default=KMP_TEXT)
    kmp.add_argument("pattern", nargs="?", default=KMP_PATTERN)
    kmp.set_defaults(handler=_run_kmp)

    jobs = commands.add_parser("jobs", help="job sequencing with deadlines")
    jobs.add_argument(
        "--job",
        action="append",
        metavar="ID:DEADLINE:PROFIT",
        help="a job to schedule; may be repeated (defaults to the example jobs)",
    )
    jobs.set_defaults(handler=_run_jobs)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demonstration, or all of them when none is named."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler: Callable[[argparse.Namespace], int] | None = getattr(args, "handler", None)
    if handler is not None:
        try:
            return handler(args)
        except ValueError as error:
            parser.error(str(error))

    defaults = parser.parse_args
    status = 0
    for name in ("knapsack", "prim", "bellman-ford", "kmp", "jobs"):
        sub_args = defaults([name])
        status |= sub_args.handler(sub_args)
    return status


if __name__ == "__main__":
    raise SystemExit(main())