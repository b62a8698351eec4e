import argparse
import logging
import sys
import time
from enum import Enum

import pandas as pd

import constants
import file_reader
import render
from exceptions import InvalidEndpointError
from grid import Kind
from util import execute_with_metrics, metrics_line

# Import search strategies implemented in the `strategies` package
from strategies.dfs import run_dfs
from strategies.bfs import run_bfs
from strategies.gbfs import run_gbfs
from strategies.astar import run_astar

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """The closed set of search strategies."""

    BFS = "bfs"
    DFS = "dfs"
    GREEDY = "greedy"
    ASTAR = "astar"

    @classmethod
    def parse(cls, value):
        """Accept an Algorithm, its value, or a command-line method code (BFS, DFS, GBFS, AS)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        code = constants.METHOD_CODES.get(key.upper())
        try:
            return cls(code if code is not None else key.lower())
        except ValueError:
            raise ValueError(f"Unknown method: {value}") from None


RUNNERS = {
    Algorithm.BFS: run_bfs,
    Algorithm.DFS: run_dfs,
    Algorithm.GREEDY: run_gbfs,
    Algorithm.ASTAR: run_astar,
}


def search(grid, start_pos, target_pos, algorithm=constants.DEFAULT_ALGORITHM):
    """Run one search on the grid.

    Scratch state is reset first, so repeated calls on an unchanged grid give
    identical results. Classification is never modified.

    Raises:
        OutOfBoundsError: an endpoint lies outside the grid
        InvalidEndpointError: start_pos/target_pos are not classified start/target
    """
    algorithm = Algorithm.parse(algorithm)
    if grid.kind(start_pos) is not Kind.START:
        raise InvalidEndpointError("start", start_pos, grid.kind(start_pos).value)
    if grid.kind(target_pos) is not Kind.TARGET:
        raise InvalidEndpointError("target", target_pos, grid.kind(target_pos).value)

    grid.reset_scratch()
    result = RUNNERS[algorithm](grid, start_pos, target_pos)
    if not result.found:
        logger.debug("%s: no path from %s to %s", algorithm.value, tuple(start_pos), tuple(target_pos))
    return result


def compare(grid, start_pos, target_pos, algorithms=tuple(Algorithm)):
    """Run several algorithms on the same grid and tabulate the outcomes."""
    rows = []
    for algorithm in algorithms:
        algorithm = Algorithm.parse(algorithm)
        t0 = time.perf_counter()
        result = search(grid, start_pos, target_pos, algorithm)
        dt = time.perf_counter() - t0
        rows.append({
            "algorithm": algorithm.value,
            "found": result.found,
            "visited": result.visited_count,
            "path_length": result.path_length,
            "runtime_ms": dt * 1000,
        })
    return pd.DataFrame(rows, columns=["algorithm", "found", "visited", "path_length", "runtime_ms"])


def main(filename, method, metrics_mode="none", show_compare=False, html=None):
    """Main function to run the search algorithm on a grid file.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output
    Returns a process exit code: 0 path found, 1 no path, 2 bad input.
    """
    try:
        grid = file_reader.parse_grid_file(filename)
    except FileNotFoundError:
        print(f"Error: File not found: {filename}")
        return 2
    except ValueError as e:
        print(f"Error parsing grid file '{filename}': {e}")
        return 2

    print(f"Problem File: {filename}, Method: {method}")
    print(f"Start: {grid.start}")
    print(f"Target: {grid.target}")

    try:
        algorithm = Algorithm.parse(method)
    except ValueError:
        print(f"Unknown method: {method}")
        return 2

    if grid.start is None or grid.target is None:
        print("Error: grid needs both a start (S) and a target (T) cell")
        return 2

    result, runtime_s, peak_bytes, rss_after = execute_with_metrics(
        search, grid, grid.start, grid.target, algorithm)

    # Expected output:
    # <filename> <method>
    # <goal> <visited count> <path>
    print(f"{filename} {method}")
    if result.found:
        print(f"Goal node reached:{tuple(result.path[-1].position)}")
    else:
        print("No possible path found")
    print(f"Number of Nodes visited:{result.visited_count}")
    if result.found:
        print(" -> ".join(str(tuple(p)) for p in result.path_positions))
        print(f"Path length:{result.path_length}")

    grid.mark_result(result)
    print(file_reader.format_grid(grid))
    grid.clear_markers()

    if metrics_mode in ("stderr", "stdout"):
        line = metrics_line(algorithm.value, result, runtime_s, peak_bytes, rss_after)
        if metrics_mode == "stdout":
            print(line)
        else:
            print(line, file=sys.stderr)

    if html:
        render.save_figure(render.grid_figure(grid, result), html)
        print(f"Figure written to {html}")

    if show_compare:
        print(compare(grid, grid.start, grid.target).to_string(index=False))

    return 0 if result.found else 1


def build_parser():
    parser = argparse.ArgumentParser(description="Run a grid pathfinding search on a map file")
    parser.add_argument("filename", help="Grid map file ('.', 'S', 'T', '#')")
    parser.add_argument("method", help="Search method: BFS, DFS, GBFS, AS")
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const",
                         const="stderr", default="none", help="Print metrics to stderr")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const",
                         const="stdout", help="Print metrics to stdout")
    parser.add_argument("--compare", action="store_true", help="Also compare every method")
    parser.add_argument("--html", help="Write a plotly figure of the run to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    return main(args.filename, args.method, args.metrics_mode, args.compare, args.html)


if __name__ == "__main__":
    sys.exit(cli())
